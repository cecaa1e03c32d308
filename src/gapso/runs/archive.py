from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Tuple
import logging
import numpy as np
import pandas as pd

from ..core.errors import InvalidState, NotFound
from .run import OptimizationRun, RunSummary
from .snapshot import Snapshot, frozen_copy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ArchiveEntry:
    id: int
    history: Tuple[np.ndarray, ...]
    convergence: Tuple[float, ...]
    best_positions: Tuple[Optional[Tuple[float, float]], ...]
    color: str
    function_name: str
    summary: RunSummary

    def __len__(self) -> int:
        return len(self.history)

    def snapshot(self, i: int) -> Snapshot:
        return Snapshot(i, self.history[i], self.convergence[i], self.best_positions[i])


class RunArchive:
    """Finished runs kept by value under sequential ids starting at 1.

    Entries hold their own read-only copies of every position array, so they
    stay valid whatever the live optimizer does next.
    """

    def __init__(self):
        self._entries: Dict[int, ArchiveEntry] = {}
        self._next_id = 1

    def record(self, run: OptimizationRun) -> int:
        if not run.finished:
            raise InvalidState(f"only completed or stopped runs can be archived, state is {run.state.value}")
        summary = replace(run.summary())
        entry = ArchiveEntry(
            id=self._next_id,
            history=tuple(frozen_copy(h) for h in run.history),
            convergence=tuple(float(f) for f in run.convergence),
            best_positions=tuple(None if p is None else (float(p[0]), float(p[1])) for p in run.best_positions),
            color=summary.color,
            function_name=summary.function_name,
            summary=summary,
        )
        self._entries[entry.id] = entry
        self._next_id += 1
        logger.info("Archived run %d: %s on %s, %d iterations, best=%.4e",
                    entry.id, summary.algorithm.upper(), entry.function_name,
                    summary.iterations, summary.best_fitness)
        return entry.id

    def get(self, run_id: int) -> ArchiveEntry:
        try:
            return self._entries[run_id]
        except KeyError:
            raise NotFound(f"no archived run with id {run_id!r}") from None

    def replay(self, run_id: int) -> Iterator[Snapshot]:
        """Stored snapshots of ``run_id`` in iteration order; nothing is recomputed."""
        entry = self.get(run_id)
        for i in range(len(entry)):
            yield entry.snapshot(i)

    def ids(self) -> List[int]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ArchiveEntry]:
        return iter(list(self._entries.values()))

    def __contains__(self, run_id) -> bool:
        return run_id in self._entries

    def to_frame(self) -> pd.DataFrame:
        """Results table, newest run first."""
        cols = ["id", "algorithm", "function", "iterations", "best_fitness", "params", "seed", "state"]
        rows = []
        for e in reversed(list(self._entries.values())):
            s = e.summary
            rows.append({"id": e.id, "algorithm": s.algorithm.upper(), "function": e.function_name,
                         "iterations": s.iterations, "best_fitness": s.best_fitness,
                         "params": s.description, "seed": s.seed, "state": s.state.value})
        return pd.DataFrame(rows, columns=cols)
