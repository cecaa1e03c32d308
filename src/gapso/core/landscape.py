from __future__ import annotations
from typing import Tuple
import numpy as np

from .benchmarks import BenchmarkFunction


def sample_grid(fn: BenchmarkFunction, resolution: int = 100) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Evaluate ``fn`` on a ``resolution x resolution`` grid spanning its bounds.

    Returns ``(xs, ys, values)`` where ``values[i, j] = fn(xs[j], ys[i])``.
    """
    resolution = max(1, int(resolution))
    xs = np.linspace(fn.lo, fn.hi, resolution)
    ys = np.linspace(fn.lo, fn.hi, resolution)
    X, Y = np.meshgrid(xs, ys)
    values = np.asarray(fn.func(X, Y), dtype=float)
    return xs, ys, values


def normalize(values: np.ndarray, gamma: float = 0.3) -> np.ndarray:
    """Scale to [0, 1] and apply a gamma curve that stretches the low end.

    A flat surface has no range to scale by and maps to all zeros.
    """
    values = np.asarray(values, dtype=float)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return np.zeros_like(values)
    vmin, vmax = float(finite.min()), float(finite.max())
    if vmax - vmin == 0.0:
        return np.zeros_like(values)
    norm = np.clip((values - vmin) / (vmax - vmin), 0.0, 1.0)
    return norm ** gamma
