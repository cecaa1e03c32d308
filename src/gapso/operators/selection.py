import numpy as np
from ..core.rng import RandomSource


def tournament_select(fitness: np.ndarray, rng: RandomSource, k: int = 3) -> int:
    """Index of the fittest of ``k`` members drawn with replacement.

    Draw order decides ties: a later draw must be strictly fitter to win.
    """
    n = fitness.shape[0]
    best = rng.index(n)
    for _ in range(k - 1):
        i = rng.index(n)
        if fitness[i] < fitness[best]:
            best = i
    return best
