"""
Benchmark surfaces on the plane.

Every function takes ``x`` and ``y`` as floats or numpy arrays and is written
with numpy ufuncs, so the same definition scores one member or a whole grid.
Global minimum value is 0 for all of them.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple
import math
import numpy as np

from .errors import NotFound


def sphere(x, y):
    return x*x + y*y


def rastrigin(x, y):
    A = 10.0
    return 2*A + (x*x - A*np.cos(2*np.pi*x)) + (y*y - A*np.cos(2*np.pi*y))


def schwefel(x, y):
    return 418.9829*2 - (x*np.sin(np.sqrt(np.abs(x))) + y*np.sin(np.sqrt(np.abs(y))))


def rosenbrock(x, y):
    return (1 - x)**2 + 100*(y - x*x)**2


def ackley(x, y):
    return (-20*np.exp(-0.2*np.sqrt(0.5*(x*x + y*y)))
            - np.exp(0.5*(np.cos(2*np.pi*x) + np.cos(2*np.pi*y))) + math.e + 20)


@dataclass(frozen=True)
class BenchmarkFunction:
    key: str
    name: str
    func: Callable = field(repr=False, compare=False)
    bounds: Tuple[float, float]
    known_optimum: Tuple[float, float] = (0.0, 0.0)
    global_minimum: float = 0.0

    @property
    def lo(self) -> float:
        return self.bounds[0]

    @property
    def hi(self) -> float:
        return self.bounds[1]

    @property
    def span(self) -> float:
        return self.bounds[1] - self.bounds[0]

    def evaluate(self, x: float, y: float) -> float:
        return float(self.func(x, y))

    def evaluate_many(self, positions: np.ndarray) -> np.ndarray:
        positions = np.asarray(positions, dtype=float).reshape(-1, 2)
        return np.asarray(self.func(positions[:, 0], positions[:, 1]), dtype=float)

    def __call__(self, x: float, y: float) -> float:
        return self.evaluate(x, y)

    def describe(self) -> Dict[str, object]:
        return {"name": self.name, "key": self.key,
                "bounds": self.bounds, "known_optimum": self.known_optimum}


CATALOG: Dict[str, BenchmarkFunction] = {
    "sphere": BenchmarkFunction("sphere", "Sphere", sphere, (-5.12, 5.12)),
    "rastrigin": BenchmarkFunction("rastrigin", "Rastrigin", rastrigin, (-5.12, 5.12)),
    "schwefel": BenchmarkFunction("schwefel", "Schwefel", schwefel, (-500.0, 500.0),
                                  known_optimum=(420.9687, 420.9687)),
    # narrower than the textbook box so the valley stays visible
    "rosenbrock": BenchmarkFunction("rosenbrock", "Rosenbrock", rosenbrock, (-2.0, 2.0)),
    "ackley": BenchmarkFunction("ackley", "Ackley", ackley, (-32.768, 32.768)),
}


def get_function(name: str) -> BenchmarkFunction:
    """Look up a benchmark by key or display name, ignoring case."""
    needle = str(name).strip().lower()
    if needle in CATALOG:
        return CATALOG[needle]
    for fn in CATALOG.values():
        if fn.name.lower() == needle:
            return fn
    raise NotFound(f"unknown benchmark function {name!r}; expected one of {sorted(CATALOG)}")


def list_functions() -> List[Dict[str, object]]:
    return [fn.describe() for fn in CATALOG.values()]
