from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Union
import logging

from .algorithms import ALGORITHMS
from .algorithms.base import Optimizer
from .core import benchmarks
from .core.errors import InvalidConfiguration, NotFound
from .core.rng import RandomSource

logger = logging.getLogger(__name__)

PARAM_NAMES = {
    "ga": ("population_size", "mutation_rate", "crossover_rate", "elitism"),
    "pso": ("swarm_size", "w", "c1", "c2"),
}
# camelCase names used by form-driven callers
ALIASES = {
    "populationSize": "population_size", "popSize": "population_size",
    "mutationRate": "mutation_rate", "crossoverRate": "crossover_rate",
    "swarmSize": "swarm_size", "inertia": "w",
}


def list_functions() -> List[Dict[str, object]]:
    return benchmarks.list_functions()


def create_optimizer(kind: str, params: Optional[Mapping[str, Any]], function_name: str,
                     rng: Union[RandomSource, int, None] = None) -> Optimizer:
    """Build a GA (``"ga"``) or PSO (``"pso"``) bound to a catalog function.

    ``rng`` may be a ``RandomSource``, an integer seed or None for fresh entropy.
    Any bad input is reported as ``InvalidConfiguration``.
    """
    key = str(kind).strip().lower()
    if key not in ALGORITHMS:
        raise InvalidConfiguration(f"unknown algorithm {kind!r}; expected one of {sorted(ALGORITHMS)}")
    try:
        fn = benchmarks.get_function(function_name)
    except NotFound as exc:
        raise InvalidConfiguration(str(exc)) from exc
    kwargs = {}
    for name, value in dict(params or {}).items():
        name = ALIASES.get(name, name)
        if name not in PARAM_NAMES[key]:
            raise InvalidConfiguration(f"unknown {key} parameter {name!r}; expected {PARAM_NAMES[key]}")
        kwargs[name] = value
    if rng is None or isinstance(rng, int):
        rng = RandomSource(rng)
    elif not isinstance(rng, RandomSource):
        raise InvalidConfiguration(f"rng must be a RandomSource, a seed or None, got {rng!r}")
    opt = ALGORITHMS[key](fn, rng=rng, **kwargs)
    logger.debug("Created %r", opt)
    return opt
