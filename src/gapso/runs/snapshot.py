from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import numpy as np


def frozen_copy(a) -> np.ndarray:
    out = np.array(a, dtype=float, copy=True)
    out.flags.writeable = False
    return out


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Positions of every member at one iteration plus the run's best so far.

    Live runs and archived replays both produce this shape; member order is
    not meaningful for display.
    """
    iteration: int
    positions: np.ndarray
    best_fitness: float
    best_position: Optional[Tuple[float, float]]

    def pairs(self) -> List[Tuple[float, float]]:
        return [(float(x), float(y)) for x, y in self.positions]

    def __len__(self) -> int:
        return int(self.positions.shape[0])
