import numpy as np
from ..core.rng import RandomSource
from .boundary import clamp


def gaussian_mutation(individual: np.ndarray, rate: float, lo: float, hi: float,
                      rng: RandomSource, scale: float = 0.05) -> np.ndarray:
    """Perturb each coordinate with probability ``rate`` by N(0, scale*(hi-lo)), then clamp it."""
    sigma = scale * (hi - lo)
    out = np.array(individual, dtype=float)
    for d in range(out.size):
        if rng.random() < rate:
            out[d] = clamp(out[d] + rng.gaussian(0.0, sigma), lo, hi)
    return out
