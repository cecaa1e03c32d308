"""
YAML run configuration.

Example (``configs/main.yaml``)::

    seed: 123
    function: rastrigin
    max_iterations: 100
    runs: 10
    algorithms: [ga, pso]
    ga: {population_size: 30, mutation_rate: 0.1, crossover_rate: 0.8, elitism: true}
    pso: {swarm_size: 30, w: 0.7, c1: 1.5, c2: 1.5}
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union
import yaml

from .algorithms import ALGORITHMS
from .core.benchmarks import get_function
from .core.errors import InvalidConfiguration, NotFound

DEFAULT_PARAMS = {
    "ga": {"population_size": 30, "mutation_rate": 0.1, "crossover_rate": 0.8, "elitism": True},
    "pso": {"swarm_size": 30, "w": 0.7, "c1": 1.5, "c2": 1.5},
}


@dataclass(frozen=True)
class SandboxConfig:
    seed: int = 123
    function: str = "sphere"
    max_iterations: int = 100
    runs: int = 1
    algorithms: Tuple[str, ...] = ("ga", "pso")
    params: Dict[str, Dict[str, Any]] = field(default_factory=lambda: {k: dict(v) for k, v in DEFAULT_PARAMS.items()})

    def params_for(self, kind: str) -> Dict[str, Any]:
        return dict(self.params.get(kind, {}))


def _as_int(cfg: Mapping[str, Any], key: str, default: int, minimum: int) -> int:
    value = cfg.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidConfiguration(f"{key} must be an integer >= {minimum}, got {value!r}")
    return value


def parse_config(cfg: Mapping[str, Any]) -> SandboxConfig:
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, Mapping):
        raise InvalidConfiguration(f"configuration must be a mapping, got {type(cfg).__name__}")
    seed = _as_int(cfg, "seed", 123, 0)
    max_iter = _as_int(cfg, "max_iterations", 100, 0)
    runs = _as_int(cfg, "runs", 1, 1)
    function = str(cfg.get("function", "sphere"))
    try:
        function = get_function(function).key
    except NotFound as exc:
        raise InvalidConfiguration(str(exc)) from exc
    algos = cfg.get("algorithms", ["ga", "pso"])
    if isinstance(algos, str):
        algos = [algos]
    algos = tuple(str(a).lower() for a in algos)
    for a in algos:
        if a not in ALGORITHMS:
            raise InvalidConfiguration(f"unknown algorithm {a!r} in configuration")
    params = {}
    for kind, defaults in DEFAULT_PARAMS.items():
        block = cfg.get(kind) or {}
        if not isinstance(block, Mapping):
            raise InvalidConfiguration(f"{kind} block must be a mapping")
        params[kind] = {**defaults, **block}
    return SandboxConfig(seed=seed, function=function, max_iterations=max_iter,
                         runs=runs, algorithms=algos, params=params)


def load_config(path: Union[str, Path]) -> SandboxConfig:
    text = Path(path).read_text(encoding="utf-8")
    try:
        cfg = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidConfiguration(f"{path}: invalid YAML: {exc}") from exc
    return parse_config(cfg)
