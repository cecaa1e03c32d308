"""matplotlib figures: convergence curves and population snapshots over the landscape."""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional, Union
import numpy as np
import matplotlib.pyplot as plt

from .core.benchmarks import BenchmarkFunction
from .core.landscape import normalize, sample_grid
from .runs.archive import ArchiveEntry
from .runs.snapshot import Snapshot


def plot_convergence(entries: Iterable[ArchiveEntry], path: Union[str, Path], log_scale: bool = True) -> Path:
    """Best-so-far fitness per iteration, one line per archived run."""
    fig, ax = plt.subplots(figsize=(10, 6))
    for e in entries:
        s = e.summary
        y = np.asarray(e.convergence, dtype=float)
        if log_scale:
            # log axis cannot show the exact optimum
            y = np.maximum(y, 1e-16)
        ax.plot(y, color=e.color, label=f"#{e.id} {s.algorithm.upper()} ({s.description})")
    if log_scale:
        ax.set_yscale("log")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Best fitness")
    ax.grid(True)
    if ax.get_legend_handles_labels()[0]:
        ax.legend()
    fig.tight_layout()
    path = Path(path)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def plot_snapshot(fn: BenchmarkFunction, snapshot: Snapshot, path: Union[str, Path],
                  color: str = "red", resolution: int = 200, title: Optional[str] = None) -> Path:
    """Population positions on top of the normalized heatmap of ``fn``."""
    _, _, values = sample_grid(fn, resolution)
    fig, ax = plt.subplots(figsize=(7, 7))
    ax.imshow(normalize(values), origin="lower", extent=(fn.lo, fn.hi, fn.lo, fn.hi), cmap="viridis")
    P = snapshot.positions
    if len(P):
        ax.scatter(P[:, 0], P[:, 1], s=14, c=color, edgecolors="black", linewidths=0.5)
    ox, oy = fn.known_optimum
    ax.scatter([ox], [oy], s=60, c="white", edgecolors="black", zorder=3)
    if snapshot.best_position is not None:
        bx, by = snapshot.best_position
        ax.scatter([bx], [by], s=80, marker="x", c="white", zorder=4)
    ax.set_xlim(fn.lo, fn.hi)
    ax.set_ylim(fn.lo, fn.hi)
    ax.set_title(title or f"{fn.name}, iteration {snapshot.iteration}, best={snapshot.best_fitness:.4e}")
    fig.tight_layout()
    path = Path(path)
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path
