import numpy as np
import pytest

from gapso.operators.boundary import clamp
from gapso.operators.crossover import blend_crossover
from gapso.operators.mutation import gaussian_mutation
from gapso.operators.selection import tournament_select


class TestTournament:

    def test_fittest_of_three_draws(self, scripted):
        fit = np.array([5.0, 1.0, 3.0, 0.0])
        assert tournament_select(fit, scripted(indices=[0, 2, 1])) == 1

    def test_draws_with_replacement(self, scripted):
        fit = np.array([5.0, 1.0, 3.0])
        assert tournament_select(fit, scripted(indices=[2, 2, 2])) == 2

    def test_tie_keeps_first_draw(self, scripted):
        fit = np.array([2.0, 2.0, 2.0])
        assert tournament_select(fit, scripted(indices=[1, 0, 2])) == 1


class TestBlendCrossover:

    def test_blend_when_triggered(self, scripted):
        p1, p2 = np.array([0.0, 0.0]), np.array([4.0, 8.0])
        c1, c2 = blend_crossover(p1, p2, 1.0, scripted(randoms=[0.0, 0.25]))
        np.testing.assert_allclose(c1, [3.0, 6.0])
        np.testing.assert_allclose(c2, [1.0, 2.0])

    def test_copies_when_not_triggered(self, scripted):
        p1, p2 = np.array([1.0, 2.0]), np.array([3.0, 4.0])
        c1, c2 = blend_crossover(p1, p2, 0.5, scripted(randoms=[0.9]))
        np.testing.assert_array_equal(c1, p1)
        np.testing.assert_array_equal(c2, p2)
        c1[0] = 99.0
        assert p1[0] == 1.0

    def test_children_stay_between_parents(self, rng):
        p1, p2 = np.array([-1.0, 2.0]), np.array([3.0, -4.0])
        for _ in range(50):
            c1, c2 = blend_crossover(p1, p2, 1.0, rng)
            np.testing.assert_allclose(c1 + c2, p1 + p2)
            assert -1.0 <= c1[0] <= 3.0 and -4.0 <= c1[1] <= 2.0


class TestGaussianMutation:

    def test_per_coordinate(self, scripted):
        out = gaussian_mutation(np.array([1.0, 1.0]), 0.5, -5.12, 5.12,
                                scripted(randoms=[0.1, 0.9], gaussians=[2.0]))
        assert out[0] == pytest.approx(1.0 + 2.0 * 0.05 * 10.24)
        assert out[1] == 1.0

    def test_clamps_into_bounds(self, scripted):
        out = gaussian_mutation(np.array([5.0, -5.0]), 1.0, -5.12, 5.12,
                                scripted(randoms=[0.0, 0.0], gaussians=[100.0, -100.0]))
        np.testing.assert_array_equal(out, [5.12, -5.12])

    def test_zero_rate_is_identity(self, rng):
        ind = np.array([0.3, -0.7])
        np.testing.assert_array_equal(gaussian_mutation(ind, 0.0, -1.0, 1.0, rng), ind)

    def test_zero_width_bounds(self, rng):
        out = gaussian_mutation(np.array([2.0, 2.0]), 1.0, 2.0, 2.0, rng)
        np.testing.assert_array_equal(out, [2.0, 2.0])


class TestClamp:

    def test_scalar(self):
        assert clamp(7.0, -1.0, 1.0) == 1.0
        assert clamp(-7.0, -1.0, 1.0) == -1.0
        assert clamp(0.5, -1.0, 1.0) == 0.5

    def test_array(self):
        np.testing.assert_array_equal(clamp(np.array([-3.0, 0.0, 3.0]), -1.0, 1.0), [-1.0, 0.0, 1.0])
