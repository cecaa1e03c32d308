from __future__ import annotations
from typing import Any, Dict, Optional
import numpy as np

from ..core.benchmarks import BenchmarkFunction
from ..core.best import Candidate, GlobalBest
from ..core.errors import InvalidConfiguration, InvalidState
from ..core.rng import RandomSource
from ..operators.boundary import clamp
from .base import best_of, check_finite, check_size, given_positions, read_only, uniform_positions


class ParticleSwarmOptimizer:
    """
    Global-best PSO with inertia ``w``, cognitive ``c1`` and social ``c2``.

    Positions are hard-clamped to the bounds after each move; velocities are
    left untouched, so a particle pushed past a wall stays pinned there while
    its velocity keeps pointing outward.
    """
    kind = "pso"
    color = "#3498db"

    def __init__(self, function: BenchmarkFunction, swarm_size: int = 30,
                 w: float = 0.7, c1: float = 1.5, c2: float = 1.5,
                 rng: Optional[RandomSource] = None):
        self.pop_size = check_size("swarm_size", swarm_size, 1)
        self.w = check_finite("w", w)
        self.c1 = check_finite("c1", c1)
        self.c2 = check_finite("c2", c2)
        self.function = function
        self.rng = rng if rng is not None else RandomSource()
        self.X = np.empty((0, 2), dtype=float)
        self.V = np.empty((0, 2), dtype=float)
        self.fit = np.empty(0, dtype=float)
        self.pbest = np.empty((0, 2), dtype=float)
        self.pf = np.empty(0, dtype=float)

    @property
    def size(self) -> int:
        return self.pop_size

    @property
    def fitness(self) -> np.ndarray:
        return read_only(self.fit)

    @property
    def velocities(self) -> np.ndarray:
        return read_only(self.V)

    @property
    def pbest_positions(self) -> np.ndarray:
        return read_only(self.pbest)

    @property
    def pbest_fitness(self) -> np.ndarray:
        return read_only(self.pf)

    def initialize(self, positions: Optional[np.ndarray] = None,
                   velocities: Optional[np.ndarray] = None) -> None:
        fn, N = self.function, self.pop_size
        if positions is None:
            X = uniform_positions(fn, N, self.rng)
        else:
            X = given_positions(positions, N, fn)
        if velocities is None:
            V = self.rng.uniform(-1.0, 1.0, size=(N, 2))
        else:
            V = np.array(velocities, dtype=float)
            if V.shape != (N, 2):
                raise InvalidConfiguration(f"expected velocities of shape ({N}, 2), got {V.shape}")
        self.X, self.V = X, V
        self.fit = np.full(N, np.inf)
        self.pbest = X.copy()
        self.pf = np.full(N, np.inf)

    def evaluate(self) -> Candidate:
        self.fit = self.function.evaluate_many(self.X)
        mask = self.fit < self.pf
        self.pbest[mask] = self.X[mask]
        self.pf[mask] = self.fit[mask]
        return best_of(self.X, self.fit)

    def step(self, best: GlobalBest) -> Candidate:
        if best is None or not best.defined:
            raise InvalidState("PSO step needs a defined global best; evaluate() first")
        if self.X.shape[0] != self.pop_size:
            raise InvalidState("initialize() must run before step()")
        lo, hi = self.function.bounds
        gx, gy = best.position
        for i in range(self.pop_size):
            r1, r2 = self.rng.random(), self.rng.random()
            x, y = self.X[i]
            vx, vy = self.V[i]
            vx = self.w*vx + self.c1*r1*(self.pbest[i, 0] - x) + self.c2*r2*(gx - x)
            vy = self.w*vy + self.c1*r1*(self.pbest[i, 1] - y) + self.c2*r2*(gy - y)
            self.V[i] = vx, vy
            self.X[i] = clamp(x + vx, lo, hi), clamp(y + vy, lo, hi)
        return self.evaluate()

    def population(self) -> np.ndarray:
        return read_only(self.X)

    def params(self) -> Dict[str, Any]:
        return {"swarm_size": self.pop_size, "w": self.w, "c1": self.c1, "c2": self.c2}

    def describe(self) -> str:
        return f"Swarm={self.pop_size}, w={self.w:g}"

    def __repr__(self) -> str:
        return f"ParticleSwarmOptimizer({self.function.name}, {self.describe()}, c1={self.c1:g}, c2={self.c2:g})"
