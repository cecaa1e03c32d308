#!/usr/bin/env python
import argparse, logging
from gapso.api import create_optimizer
from gapso.analysis import compare, summarize
from gapso.config import load_config
from gapso.runs.run import OptimizationRun
from gapso.runs.archive import RunArchive


def main(cfg_path: str, out_csv: str | None, max_steps: int | None = None):
    cfg = load_config(cfg_path)
    if cfg.max_iterations == 0 and max_steps is None:
        raise SystemExit(f"{cfg_path}: max_iterations is 0 (unbounded), pass --max-steps")
    archive = RunArchive()
    # same seeds for every algorithm so the comparison is paired
    seeds = [cfg.seed + r for r in range(cfg.runs)]
    for seed in seeds:
        for name in cfg.algorithms:
            opt = create_optimizer(name, cfg.params_for(name), cfg.function, rng=seed)
            run = OptimizationRun(max_iterations=cfg.max_iterations)
            run.start(opt)
            run.run(max_steps=max_steps)
            archive.record(run)
    print(f"Summary ({cfg.function}, {cfg.runs} runs x {cfg.max_iterations or max_steps} iterations):")
    for _, r in summarize(archive).iterrows():
        print(f"{r['algorithm'].upper():5s}: mean={r['mean']:.4e}, std={r['std']:.4e}, "
              f"min={r['min']:.4e}, max={r['max']:.4e}")
    if {"ga", "pso"} <= set(cfg.algorithms):
        c = compare(archive, "ga", "pso")
        print(f"Wilcoxon GA vs PSO: n={c.n_pairs}, p={c.p_value:.4g}, better median: {c.winner or '-'}")
    if out_csv:
        archive.to_frame().to_csv(out_csv, index=False)
        print(f"Results table: {out_csv}")
    return archive


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default="configs/main.yaml")
    ap.add_argument("--out", default=None, help="write the results table as CSV")
    ap.add_argument("--max-steps", type=int, default=None, help="stop each run after this many iterations")
    ap.add_argument("--log-level", default="WARNING")
    a = ap.parse_args()
    logging.basicConfig(level=a.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main(a.config, a.out, a.max_steps)
