import importlib.util
from pathlib import Path

import pandas as pd
import pytest
import yaml

from gapso.runs.run import RunState

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def load_script(name):
    spec = importlib.util.spec_from_file_location(f"script_{name}", SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def write_config(tmp_path, **overrides):
    cfg = {"seed": 7, "function": "sphere", "max_iterations": 4, "runs": 2,
           "algorithms": ["ga", "pso"], "ga": {"population_size": 8}, "pso": {"swarm_size": 8}}
    cfg.update(overrides)
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return str(path)


class TestRunSingle:

    def test_bounded_config(self, tmp_path, capsys):
        summary = load_script("run_single").main(write_config(tmp_path), "pso", None)
        assert summary.iterations == 4
        assert summary.state is RunState.COMPLETED
        assert "PSO on Sphere" in capsys.readouterr().out

    def test_unbounded_config_needs_max_steps(self, tmp_path):
        with pytest.raises(SystemExit, match="--max-steps"):
            load_script("run_single").main(write_config(tmp_path, max_iterations=0), "ga", None)

    def test_unbounded_config_with_max_steps(self, tmp_path):
        summary = load_script("run_single").main(write_config(tmp_path, max_iterations=0), "ga", None, max_steps=3)
        assert summary.iterations == 3
        assert summary.state is RunState.STOPPED

    def test_plot_output(self, tmp_path):
        prefix = str(tmp_path / "out")
        load_script("run_single").main(write_config(tmp_path), "ga", prefix)
        assert (tmp_path / "out_convergence.png").exists()
        assert (tmp_path / "out_final.png").exists()


class TestRunBenchmark:

    def test_results_table(self, tmp_path):
        out = tmp_path / "results.csv"
        archive = load_script("run_benchmark").main(write_config(tmp_path), str(out))
        assert len(archive) == 4
        df = pd.read_csv(out)
        assert sorted(df["algorithm"]) == ["GA", "GA", "PSO", "PSO"]
        assert sorted(set(df["seed"])) == [7, 8]

    def test_unbounded_config(self, tmp_path):
        mod = load_script("run_benchmark")
        with pytest.raises(SystemExit):
            mod.main(write_config(tmp_path, max_iterations=0), None)
        archive = mod.main(write_config(tmp_path, max_iterations=0), None, max_steps=2)
        assert all(e.summary.iterations == 2 for e in archive)


class TestReplay:

    def test_frames_written(self, tmp_path):
        out = tmp_path / "frames"
        n = load_script("replay").main(write_config(tmp_path), "pso", str(out), every=2)
        assert n == 3
        assert sorted(p.name for p in out.iterdir()) == ["frame_0000.png", "frame_0002.png", "frame_0004.png"]

    def test_unbounded_config_needs_max_steps(self, tmp_path):
        with pytest.raises(SystemExit):
            load_script("replay").main(write_config(tmp_path, max_iterations=0), "pso", str(tmp_path), 1)
