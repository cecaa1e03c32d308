from __future__ import annotations
from typing import Optional
import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


class RandomSource:
    """Uniform and Gaussian draws shared by both optimizers.

    Wraps a ``np.random.Generator`` so a run can be replayed bit-for-bit from
    its seed. Pass an existing generator to share a stream between components.
    """

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        self.seed = seed
        self.generator = generator if generator is not None else make_rng(seed)

    def random(self) -> float:
        return float(self.generator.random())

    def uniform(self, low: float, high: float, size=None):
        if size is None:
            return float(self.generator.uniform(low, high))
        return self.generator.uniform(low, high, size=size)

    def gaussian(self, mean: float = 0.0, stdev: float = 1.0) -> float:
        if stdev <= 0.0:
            return float(mean)
        return float(self.generator.normal(mean, stdev))

    def index(self, n: int) -> int:
        return int(self.generator.integers(0, n))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"
