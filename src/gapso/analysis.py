from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable
import math
import numpy as np
import pandas as pd
from scipy.stats import wilcoxon

from .runs.archive import ArchiveEntry, RunArchive


def results_frame(entries: Iterable[ArchiveEntry]) -> pd.DataFrame:
    rows = [{"id": e.id, "algorithm": e.summary.algorithm, "function": e.function_name,
             "seed": e.summary.seed, "iterations": e.summary.iterations,
             "best_fitness": e.summary.best_fitness} for e in entries]
    return pd.DataFrame(rows, columns=["id", "algorithm", "function", "seed", "iterations", "best_fitness"])


def summarize(archive: RunArchive) -> pd.DataFrame:
    """mean/std/min/max of the final best fitness per (algorithm, function)."""
    df = results_frame(archive)
    if df.empty:
        return pd.DataFrame(columns=["algorithm", "function", "n_runs", "mean", "std", "min", "max"])
    g = df.groupby(["algorithm", "function"])["best_fitness"]
    out = g.agg(n_runs="count", mean="mean", std="std", min="min", max="max").reset_index()
    out["std"] = out["std"].fillna(0.0)
    return out


@dataclass(frozen=True)
class Comparison:
    a: str
    b: str
    n_pairs: int
    median_a: float
    median_b: float
    statistic: float
    p_value: float

    @property
    def winner(self) -> str:
        if self.n_pairs == 0 or self.median_a == self.median_b:
            return ""
        return self.a if self.median_a < self.median_b else self.b


def compare(archive: RunArchive, a: str = "ga", b: str = "pso") -> Comparison:
    """Paired Wilcoxon signed-rank test of final best fitness.

    Runs are paired on (function, seed); unmatched runs are ignored. Identical
    samples give p=1, fewer than two pairs give nan.
    """
    df = results_frame(archive)
    df = df[df["algorithm"].isin([a, b])]
    wide = df.pivot_table(index=["function", "seed"], columns="algorithm",
                          values="best_fitness", aggfunc="min")
    if a not in wide.columns or b not in wide.columns:
        return Comparison(a, b, 0, math.nan, math.nan, math.nan, math.nan)
    wide = wide[[a, b]].dropna()
    xa, xb = wide[a].to_numpy(dtype=float), wide[b].to_numpy(dtype=float)
    n = len(wide)
    med_a = float(np.median(xa)) if n else math.nan
    med_b = float(np.median(xb)) if n else math.nan
    if n < 2:
        return Comparison(a, b, n, med_a, med_b, math.nan, math.nan)
    if np.allclose(xa - xb, 0.0):
        return Comparison(a, b, n, med_a, med_b, 0.0, 1.0)
    res = wilcoxon(xa, xb)
    return Comparison(a, b, n, med_a, med_b, float(res.statistic), float(res.pvalue))
