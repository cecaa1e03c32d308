"""GA / PSO sandbox engine on 2-D benchmark functions."""
from .api import create_optimizer, list_functions
from .algorithms import GeneticOptimizer, ParticleSwarmOptimizer
from .core.benchmarks import BenchmarkFunction, get_function
from .core.best import Candidate, GlobalBest
from .core.errors import InvalidConfiguration, InvalidState, NotFound, SandboxError
from .core.rng import RandomSource
from .runs.archive import ArchiveEntry, RunArchive
from .runs.run import OptimizationRun, RunState, RunSummary
from .runs.snapshot import Snapshot

__version__ = "0.1.0"
