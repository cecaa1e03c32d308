from .ga import GeneticOptimizer
from .pso import ParticleSwarmOptimizer

ALGORITHMS = {
    GeneticOptimizer.kind: GeneticOptimizer,
    ParticleSwarmOptimizer.kind: ParticleSwarmOptimizer,
}
