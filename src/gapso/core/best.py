from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import math


@dataclass(frozen=True)
class Candidate:
    """Best member of one evaluation pass."""
    fitness: float
    position: Tuple[float, float]


@dataclass
class GlobalBest:
    """Best fitness/position seen by any member over a run.

    Owned by the run. Only a strictly lower fitness replaces the current value,
    so ``fitness`` never increases.
    """
    fitness: float = math.inf
    position: Optional[Tuple[float, float]] = None

    @property
    def defined(self) -> bool:
        return self.position is not None

    def offer(self, candidate: Candidate) -> bool:
        if candidate.fitness < self.fitness:
            self.fitness = float(candidate.fitness)
            self.position = (float(candidate.position[0]), float(candidate.position[1]))
            return True
        return False

    def reset(self) -> None:
        self.fitness, self.position = math.inf, None

    def copy(self) -> "GlobalBest":
        return GlobalBest(self.fitness, self.position)
