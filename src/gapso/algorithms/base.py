from __future__ import annotations
from typing import Any, Dict, Optional, Protocol, runtime_checkable
import math
import numpy as np

from ..core.benchmarks import BenchmarkFunction
from ..core.best import Candidate, GlobalBest
from ..core.errors import InvalidConfiguration


@runtime_checkable
class Optimizer(Protocol):
    """Contract shared by the GA and PSO.

    ``evaluate`` scores every member and returns the best of the pass; it never
    touches the run's ``GlobalBest``. ``step`` reads the run's best (PSO needs
    its position), advances one iteration and re-evaluates.
    """
    kind: str
    color: str
    function: BenchmarkFunction

    @property
    def size(self) -> int: ...
    @property
    def fitness(self) -> np.ndarray: ...
    def initialize(self, positions: Optional[np.ndarray] = None) -> None: ...
    def evaluate(self) -> Candidate: ...
    def step(self, best: GlobalBest) -> Candidate: ...
    def population(self) -> np.ndarray: ...
    def params(self) -> Dict[str, Any]: ...
    def describe(self) -> str: ...


def read_only(a: np.ndarray) -> np.ndarray:
    v = a.view()
    v.flags.writeable = False
    return v


def uniform_positions(fn: BenchmarkFunction, n: int, rng) -> np.ndarray:
    return rng.uniform(fn.lo, fn.hi, size=(n, 2))


def given_positions(positions, n: int, fn: BenchmarkFunction) -> np.ndarray:
    X = np.array(positions, dtype=float)
    if X.shape != (n, 2):
        raise InvalidConfiguration(f"expected positions of shape ({n}, 2), got {X.shape}")
    return np.clip(X, fn.lo, fn.hi)


def best_of(X: np.ndarray, fit: np.ndarray) -> Candidate:
    i = int(np.argmin(fit))
    return Candidate(float(fit[i]), (float(X[i, 0]), float(X[i, 1])))


def check_rate(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(f"{name} must be a number in [0, 1], got {value!r}")
    return float(value)


def check_size(name: str, value, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < minimum:
        raise InvalidConfiguration(f"{name} must be an integer >= {minimum}, got {value!r}")
    return int(value)


def check_finite(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidConfiguration(f"{name} must be a finite number, got {value!r}")
    return float(value)
