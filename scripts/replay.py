#!/usr/bin/env python
"""Run once, archive, then render every stored snapshot from the archive alone."""
import argparse, logging
from pathlib import Path
import matplotlib
matplotlib.use("Agg")
from gapso.api import create_optimizer
from gapso.config import load_config
from gapso.core.benchmarks import get_function
from gapso.runs.run import OptimizationRun
from gapso.runs.archive import RunArchive
from gapso.plotting import plot_snapshot


def main(cfg_path: str, algo: str, out_dir: str, every: int, max_steps: int | None = None):
    cfg = load_config(cfg_path)
    if cfg.max_iterations == 0 and max_steps is None:
        raise SystemExit(f"{cfg_path}: max_iterations is 0 (unbounded), pass --max-steps")
    run = OptimizationRun(max_iterations=cfg.max_iterations)
    run.start(create_optimizer(algo, cfg.params_for(algo), cfg.function, rng=cfg.seed))
    run.run(max_steps=max_steps)
    archive = RunArchive()
    rid = archive.record(run)
    entry = archive.get(rid)
    fn = get_function(entry.function_name)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    n = 0
    for snap in archive.replay(rid):
        if snap.iteration % every == 0 or snap.iteration == len(entry) - 1:
            plot_snapshot(fn, snap, out / f"frame_{snap.iteration:04d}.png", color=entry.color)
            n += 1
    print(f"Replayed run {rid}: {n} frames in {out}")
    return n


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default="configs/main.yaml")
    ap.add_argument("--algo", default="pso", choices=["ga", "pso"])
    ap.add_argument("--out", default="frames")
    ap.add_argument("--every", type=int, default=10)
    ap.add_argument("--max-steps", type=int, default=None, help="stop after this many iterations")
    ap.add_argument("--log-level", default="INFO")
    a = ap.parse_args()
    logging.basicConfig(level=a.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main(a.config, a.algo, a.out, max(1, a.every), a.max_steps)
