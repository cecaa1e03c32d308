import matplotlib
matplotlib.use("Agg")
from gapso.api import create_optimizer
from gapso.core.benchmarks import get_function
from gapso.plotting import plot_convergence, plot_snapshot
from gapso.runs.archive import RunArchive
from gapso.runs.run import OptimizationRun


def archived(kind="pso"):
    archive = RunArchive()
    run = OptimizationRun(max_iterations=5)
    run.start(create_optimizer(kind, {}, "sphere", rng=1))
    run.run()
    return archive, archive.record(run)


class TestFigures:

    def test_convergence_png(self, tmp_path):
        archive, rid = archived()
        out = plot_convergence(list(archive), tmp_path / "conv.png")
        assert out.exists() and out.stat().st_size > 0

    def test_snapshot_png_from_replay(self, tmp_path):
        archive, rid = archived("ga")
        entry = archive.get(rid)
        fn = get_function(entry.function_name)
        for snap in archive.replay(rid):
            out = plot_snapshot(fn, snap, tmp_path / f"f{snap.iteration}.png", color=entry.color, resolution=20)
            assert out.exists()
        assert len(list(tmp_path.glob("f*.png"))) == 6
