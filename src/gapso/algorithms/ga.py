from __future__ import annotations
from typing import Any, Dict, Optional
import numpy as np

from ..core.benchmarks import BenchmarkFunction
from ..core.best import Candidate, GlobalBest
from ..core.errors import InvalidConfiguration, InvalidState
from ..core.rng import RandomSource
from ..operators.crossover import blend_crossover
from ..operators.mutation import gaussian_mutation
from ..operators.selection import tournament_select
from .base import best_of, check_rate, check_size, given_positions, read_only, uniform_positions


class GeneticOptimizer:
    """
    Real-coded GA on the plane: tournament selection, blend crossover,
    Gaussian mutation and optional single-member elitism.

    After every ``evaluate()`` the population is sorted ascending by fitness,
    so index 0 is always the current best member.
    """
    kind = "ga"
    color = "#e74c3c"
    tournament_size = 3
    mutation_scale = 0.05

    def __init__(self, function: BenchmarkFunction, population_size: int = 50,
                 mutation_rate: float = 0.1, crossover_rate: float = 0.8,
                 elitism: bool = True, rng: Optional[RandomSource] = None):
        self.pop_size = check_size("population_size", population_size, 2)
        self.mr = check_rate("mutation_rate", mutation_rate)
        self.cr = check_rate("crossover_rate", crossover_rate)
        if not isinstance(elitism, (bool, np.bool_)):
            raise InvalidConfiguration(f"elitism must be a bool, got {elitism!r}")
        self.elitism = bool(elitism)
        self.function = function
        self.rng = rng if rng is not None else RandomSource()
        self.X = np.empty((0, 2), dtype=float)
        self.fit = np.empty(0, dtype=float)

    @property
    def size(self) -> int:
        return self.pop_size

    @property
    def fitness(self) -> np.ndarray:
        return read_only(self.fit)

    def initialize(self, positions: Optional[np.ndarray] = None) -> None:
        fn = self.function
        if positions is None:
            self.X = uniform_positions(fn, self.pop_size, self.rng)
        else:
            self.X = given_positions(positions, self.pop_size, fn)
        self.fit = np.full(self.pop_size, np.inf)

    def evaluate(self) -> Candidate:
        self.fit = self.function.evaluate_many(self.X)
        order = np.argsort(self.fit, kind="stable")
        self.X, self.fit = self.X[order], self.fit[order]
        return best_of(self.X, self.fit)

    def step(self, best: Optional[GlobalBest] = None) -> Candidate:
        if self.X.shape[0] != self.pop_size:
            raise InvalidState("initialize() must run before step()")
        lo, hi = self.function.bounds
        new_pop = []
        if self.elitism:
            new_pop.append(self.X[0].copy())
        while len(new_pop) < self.pop_size:
            p1 = self.X[tournament_select(self.fit, self.rng, self.tournament_size)]
            p2 = self.X[tournament_select(self.fit, self.rng, self.tournament_size)]
            c1, c2 = blend_crossover(p1, p2, self.cr, self.rng)
            c1 = gaussian_mutation(c1, self.mr, lo, hi, self.rng, self.mutation_scale)
            c2 = gaussian_mutation(c2, self.mr, lo, hi, self.rng, self.mutation_scale)
            new_pop.append(c1)
            if len(new_pop) < self.pop_size:
                new_pop.append(c2)
        self.X = np.array(new_pop, dtype=float)
        return self.evaluate()

    def population(self) -> np.ndarray:
        return read_only(self.X)

    def params(self) -> Dict[str, Any]:
        return {"population_size": self.pop_size, "mutation_rate": self.mr,
                "crossover_rate": self.cr, "elitism": self.elitism}

    def describe(self) -> str:
        return f"Pop={self.pop_size}, Mut={self.mr:g}"

    def __repr__(self) -> str:
        return f"GeneticOptimizer({self.function.name}, {self.describe()}, Cross={self.cr:g}, elitism={self.elitism})"
