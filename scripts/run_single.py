#!/usr/bin/env python
import argparse, logging
import matplotlib
matplotlib.use("Agg")
from gapso.api import create_optimizer
from gapso.config import load_config
from gapso.core.benchmarks import get_function
from gapso.runs.run import OptimizationRun
from gapso.runs.archive import RunArchive
from gapso.plotting import plot_convergence, plot_snapshot


def main(cfg_path: str, algo: str, plot: str | None, max_steps: int | None = None):
    cfg = load_config(cfg_path)
    if cfg.max_iterations == 0 and max_steps is None:
        raise SystemExit(f"{cfg_path}: max_iterations is 0 (unbounded), pass --max-steps")
    fn = get_function(cfg.function)
    opt = create_optimizer(algo, cfg.params_for(algo), fn.key, rng=cfg.seed)
    run = OptimizationRun(max_iterations=cfg.max_iterations)
    run.start(opt)
    summary = run.run(max_steps=max_steps)
    archive = RunArchive()
    rid = archive.record(run)
    print(f"{summary.algorithm.upper()} on {summary.function_name} ({summary.description}): "
          f"best={summary.best_fitness:.4e} at {summary.best_position} after {summary.iterations} iterations")
    if plot:
        entry = archive.get(rid)
        plot_convergence([entry], f"{plot}_convergence.png")
        plot_snapshot(fn, entry.snapshot(len(entry) - 1), f"{plot}_final.png", color=entry.color)
        print(f"Figures: {plot}_convergence.png, {plot}_final.png")
    return summary


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default="configs/main.yaml")
    ap.add_argument("--algo", default="ga", choices=["ga", "pso"])
    ap.add_argument("--plot", default=None, help="prefix for PNG output")
    ap.add_argument("--max-steps", type=int, default=None, help="stop after this many iterations")
    ap.add_argument("--log-level", default="INFO")
    a = ap.parse_args()
    logging.basicConfig(level=a.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main(a.config, a.algo, a.plot, a.max_steps)
