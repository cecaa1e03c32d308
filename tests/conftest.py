"""
Shared fixtures for the GA/PSO sandbox tests.
"""
import pytest

from gapso.core.benchmarks import get_function
from gapso.core.rng import RandomSource


class ScriptedSource(RandomSource):
    """RandomSource replaying fixed draws, for operator tests."""

    def __init__(self, indices=(), randoms=(), gaussians=()):
        super().__init__(0)
        self._indices = iter(indices)
        self._randoms = iter(randoms)
        self._gaussians = iter(gaussians)

    def index(self, n):
        return next(self._indices)

    def random(self):
        return next(self._randoms)

    def gaussian(self, mean=0.0, stdev=1.0):
        return mean + stdev * next(self._gaussians)


@pytest.fixture
def sphere():
    return get_function("sphere")


@pytest.fixture
def rastrigin():
    return get_function("rastrigin")


@pytest.fixture
def rng():
    return RandomSource(42)


@pytest.fixture
def scripted():
    return ScriptedSource
