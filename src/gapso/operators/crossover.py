from typing import Tuple
import numpy as np
from ..core.rng import RandomSource


def blend_crossover(p1: np.ndarray, p2: np.ndarray, rate: float,
                    rng: RandomSource) -> Tuple[np.ndarray, np.ndarray]:
    if rng.random() < rate:
        alpha = rng.random()
        return alpha*p1 + (1 - alpha)*p2, alpha*p2 + (1 - alpha)*p1
    return p1.copy(), p2.copy()
