import pytest

import gapso
from gapso.api import create_optimizer, list_functions
from gapso.core.errors import InvalidConfiguration
from gapso.core.rng import RandomSource


class TestListFunctions:

    def test_shape(self):
        fns = list_functions()
        assert len(fns) == 5
        for f in fns:
            assert {"name", "bounds", "known_optimum"} <= set(f)

    def test_reexported(self):
        assert gapso.list_functions() == list_functions()


class TestCreateOptimizer:

    def test_population_of_one_rejected(self):
        with pytest.raises(InvalidConfiguration):
            create_optimizer("ga", {"population_size": 1}, "sphere")

    def test_camel_case_keys(self):
        with pytest.raises(InvalidConfiguration):
            create_optimizer("ga", {"populationSize": 1}, "sphere")
        opt = create_optimizer("ga", {"populationSize": 8, "mutationRate": 0.3}, "sphere")
        assert opt.size == 8 and opt.mr == 0.3

    def test_kinds(self):
        assert isinstance(create_optimizer("GA", {}, "Sphere"), gapso.GeneticOptimizer)
        assert isinstance(create_optimizer("pso", None, "ackley"), gapso.ParticleSwarmOptimizer)

    def test_unknown_kind(self):
        with pytest.raises(InvalidConfiguration):
            create_optimizer("de", {}, "sphere")

    def test_unknown_function(self):
        with pytest.raises(InvalidConfiguration):
            create_optimizer("ga", {}, "griewank")

    def test_parameter_of_the_other_algorithm(self):
        with pytest.raises(InvalidConfiguration):
            create_optimizer("pso", {"mutation_rate": 0.1}, "sphere")

    @pytest.mark.parametrize("params", [
        {"mutation_rate": 1.1}, {"crossover_rate": -0.5}, {"elitism": 1},
    ])
    def test_ga_out_of_range(self, params):
        with pytest.raises(InvalidConfiguration):
            create_optimizer("ga", params, "sphere")

    @pytest.mark.parametrize("params", [{"swarm_size": 0}, {"w": float("inf")}])
    def test_pso_out_of_range(self, params):
        with pytest.raises(InvalidConfiguration):
            create_optimizer("pso", params, "sphere")

    def test_rng_forms(self):
        assert create_optimizer("ga", {}, "sphere", rng=5).rng.seed == 5
        src = RandomSource(9)
        assert create_optimizer("pso", {}, "sphere", rng=src).rng is src
        with pytest.raises(InvalidConfiguration):
            create_optimizer("pso", {}, "sphere", rng="seed")

    def test_function_bound(self):
        opt = create_optimizer("pso", {}, "Schwefel")
        assert opt.function is gapso.get_function("schwefel")
