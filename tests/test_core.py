import math
import pytest

from gapso.core.best import Candidate, GlobalBest
from gapso.core.errors import InvalidConfiguration, InvalidState, NotFound, SandboxError
from gapso.core.rng import RandomSource


class TestGlobalBest:

    def test_starts_undefined(self):
        best = GlobalBest()
        assert best.fitness == math.inf and best.position is None
        assert not best.defined

    def test_only_strict_improvement_replaces(self):
        best = GlobalBest()
        assert best.offer(Candidate(3.0, (1.0, 1.0)))
        assert not best.offer(Candidate(3.0, (2.0, 2.0)))
        assert not best.offer(Candidate(4.0, (0.0, 0.0)))
        assert best.position == (1.0, 1.0)
        assert best.offer(Candidate(0.5, (0.1, 0.2)))
        assert (best.fitness, best.position) == (0.5, (0.1, 0.2))

    def test_copy_and_reset(self):
        best = GlobalBest()
        best.offer(Candidate(1.0, (0.0, 0.0)))
        snap = best.copy()
        best.reset()
        assert snap.fitness == 1.0 and not best.defined


class TestRandomSource:

    def test_seeded_streams_repeat(self):
        a, b = RandomSource(3), RandomSource(3)
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
        assert a.gaussian(0.0, 2.0) == b.gaussian(0.0, 2.0)
        assert a.index(7) == b.index(7)

    def test_ranges(self):
        src = RandomSource(0)
        for _ in range(200):
            assert 0.0 <= src.random() < 1.0
            assert -2.0 <= src.uniform(-2.0, 3.0) <= 3.0
            assert 0 <= src.index(4) < 4
        assert src.uniform(0.0, 1.0, size=(3, 2)).shape == (3, 2)

    def test_zero_stdev_gaussian(self):
        assert RandomSource(0).gaussian(1.5, 0.0) == 1.5


class TestErrors:

    def test_hierarchy(self):
        assert issubclass(InvalidConfiguration, ValueError)
        assert issubclass(InvalidState, RuntimeError)
        assert issubclass(NotFound, KeyError)
        for exc in (InvalidConfiguration, InvalidState, NotFound):
            assert issubclass(exc, SandboxError)

    def test_not_found_message(self):
        assert str(NotFound("no archived run with id 3")) == "no archived run with id 3"
