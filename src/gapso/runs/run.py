"""
Run driver: owns the optimizer's schedule, the run-global best and the
per-iteration history that feeds replay.

State machine::

    IDLE --start--> RUNNING --advance (iteration >= max_iterations)--> COMPLETED
                    RUNNING --stop--> STOPPED --resume--> RUNNING

Every rejected call raises ``InvalidState`` before touching anything.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple
import inspect
import logging
import weakref

from ..algorithms.base import Optimizer
from ..core.best import GlobalBest
from ..core.errors import InvalidConfiguration, InvalidState
from .snapshot import Snapshot, frozen_copy

logger = logging.getLogger(__name__)

# optimizer -> the run driving it; an optimizer serves one unfinished run at a time
_owners: "weakref.WeakKeyDictionary[Any, OptimizationRun]" = weakref.WeakKeyDictionary()


class RunState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    STOPPED = "stopped"


@dataclass(frozen=True)
class RunSummary:
    algorithm: str
    function_name: str
    iterations: int
    best_fitness: float
    best_position: Optional[Tuple[float, float]]
    params: Mapping[str, Any] = field(default_factory=dict)
    description: str = ""
    color: str = ""
    seed: Optional[int] = None
    state: RunState = RunState.RUNNING

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "function": self.function_name,
            "iterations": self.iterations,
            "best_fitness": self.best_fitness,
            "best_position": self.best_position,
            "params": dict(self.params),
            "description": self.description,
            "color": self.color,
            "seed": self.seed,
            "state": self.state.value,
        }


class OptimizationRun:
    """Drives one optimizer one iteration per ``advance()`` call.

    ``max_iterations=0`` means unbounded: the caller has to ``stop()``.
    """

    def __init__(self, max_iterations: int = 0):
        if isinstance(max_iterations, bool) or not isinstance(max_iterations, int) or max_iterations < 0:
            raise InvalidConfiguration(f"max_iterations must be an integer >= 0, got {max_iterations!r}")
        self.max_iterations = max_iterations
        self.optimizer: Optional[Optimizer] = None
        self._state = RunState.IDLE
        self._iteration = 0
        self._best = GlobalBest()
        self._history: List = []
        self._convergence: List[float] = []
        self._best_positions: List[Optional[Tuple[float, float]]] = []
        self._summary: Optional[RunSummary] = None

    # -- state -----------------------------------------------------------
    @property
    def state(self) -> RunState:
        return self._state

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def finished(self) -> bool:
        return self._state in (RunState.COMPLETED, RunState.STOPPED)

    @property
    def best(self) -> GlobalBest:
        return self._best.copy()

    @property
    def history(self) -> Tuple:
        return tuple(self._history)

    @property
    def convergence(self) -> Tuple[float, ...]:
        return tuple(self._convergence)

    @property
    def best_positions(self) -> Tuple[Optional[Tuple[float, float]], ...]:
        return tuple(self._best_positions)

    # -- transitions -----------------------------------------------------
    def start(self, optimizer: Optimizer, **init: Any) -> Snapshot:
        """Initialize and evaluate ``optimizer``, then record snapshot 0.

        Keyword arguments (``positions``, ``velocities``) go to ``optimizer.initialize``.
        An optimizer still held by a running or stopped run cannot be started again.
        """
        if self._state is not RunState.IDLE:
            raise InvalidState(f"start() needs an idle run, state is {self._state.value}")
        if not isinstance(optimizer, Optimizer):
            raise InvalidConfiguration(f"{optimizer!r} does not implement the optimizer contract")
        try:
            inspect.signature(optimizer.initialize).bind(**init)
        except TypeError as exc:
            raise InvalidConfiguration(f"{optimizer.kind} initialize(): {exc}") from None
        owner = _owners.get(optimizer)
        if owner is not None and owner is not self and owner.state in (RunState.RUNNING, RunState.STOPPED):
            raise InvalidState(f"{optimizer!r} is already driven by a {owner.state.value} run")
        optimizer.initialize(**init)
        _owners[optimizer] = self
        best = GlobalBest()
        # PSO reads the global best position on its first step
        best.offer(optimizer.evaluate())
        self.optimizer, self._best = optimizer, best
        self._iteration = 0
        self._history, self._convergence, self._best_positions = [], [], []
        self._summary = None
        self._state = RunState.RUNNING
        self._record()
        logger.info("Run started: %s on %s (%s), best=%.4e",
                    optimizer.kind.upper(), optimizer.function.name, optimizer.describe(), best.fitness)
        return self.latest()

    def advance(self) -> Snapshot:
        if self._state is not RunState.RUNNING:
            raise InvalidState(f"advance() needs a running run, state is {self._state.value}")
        candidate = self.optimizer.step(self._best.copy())
        self._iteration += 1
        self._best.offer(candidate)
        self._record()
        logger.debug("iter %d: best=%.6e", self._iteration, self._best.fitness)
        if self.max_iterations > 0 and self._iteration >= self.max_iterations:
            self._finish(RunState.COMPLETED)
        return self.latest()

    def stop(self) -> RunSummary:
        if self._state is not RunState.RUNNING:
            raise InvalidState(f"stop() needs a running run, state is {self._state.value}")
        self._finish(RunState.STOPPED)
        return self._summary

    def resume(self) -> None:
        if self._state is not RunState.STOPPED:
            raise InvalidState(f"resume() needs a stopped run, state is {self._state.value}")
        self._summary = None
        self._state = RunState.RUNNING
        logger.info("Run resumed at iteration %d", self._iteration)

    def run(self, max_steps: Optional[int] = None) -> RunSummary:
        """Advance until completion, or stop after ``max_steps`` advances."""
        if self.max_iterations == 0 and max_steps is None:
            raise InvalidConfiguration("an unbounded run needs max_steps")
        steps = 0
        while self._state is RunState.RUNNING:
            if max_steps is not None and steps >= max_steps:
                return self.stop()
            self.advance()
            steps += 1
        return self.summary()

    def summary(self) -> RunSummary:
        if self._state is RunState.IDLE:
            raise InvalidState("summary() needs a started run")
        if self._summary is not None:
            return self._summary
        return self._build_summary()

    # -- snapshots -------------------------------------------------------
    def snapshot(self, i: int) -> Snapshot:
        if not 0 <= i < len(self._history):
            raise IndexError(f"no snapshot for iteration {i}")
        return Snapshot(i, self._history[i], self._convergence[i], self._best_positions[i])

    def latest(self) -> Snapshot:
        return self.snapshot(len(self._history) - 1)

    def snapshots(self) -> Iterator[Snapshot]:
        for i in range(len(self._history)):
            yield self.snapshot(i)

    # -- internals -------------------------------------------------------
    def _record(self) -> None:
        self._history.append(frozen_copy(self.optimizer.population()))
        self._convergence.append(self._best.fitness)
        self._best_positions.append(self._best.position)

    def _build_summary(self) -> RunSummary:
        opt = self.optimizer
        return RunSummary(
            algorithm=opt.kind,
            function_name=opt.function.name,
            iterations=self._iteration,
            best_fitness=self._best.fitness,
            best_position=self._best.position,
            params=dict(opt.params()),
            description=opt.describe(),
            color=opt.color,
            seed=getattr(getattr(opt, "rng", None), "seed", None),
            state=self._state,
        )

    def _finish(self, state: RunState) -> None:
        self._state = state
        self._summary = self._build_summary()
        logger.info("Run %s after %d iterations: best=%.4e at %s",
                    state.value, self._iteration, self._best.fitness, self._best.position)
