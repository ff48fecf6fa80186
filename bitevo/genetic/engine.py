"""
One evolutionary step of the genetic algorithm.

GeneticEngine owns the population and the random generator for the length of
a run. A run generates and evaluates a population, ranks it, replaces it with
children of its elite and mutates the children, handing a snapshot to the
renderer after each of those steps.
"""

import time
from dataclasses import asdict
from typing import Any, Dict, List, Optional

import numpy as np

from bitevo.core.config import EvolutionConfig
from bitevo.core.exceptions import PopulationError
from bitevo.core.logging import get_logger, log_with_correlation
from .fitness import FitnessEvaluator, FitnessFunction
from .genome import Genome
from .operators import mutate, reproduce
from .population import Population, SnapshotStats
from .render import NullRenderer, Renderer

logger = get_logger(__name__)

GENERATED = "generated"
SORTED = "sorted"
AFTER_CROSSOVER = "after crossover"
AFTER_MUTATION = "after mutation"


def time_seed() -> int:
    """Seed derived from the current time."""
    return time.time_ns() % 2**32


class GeneticEngine:
    """
    Runs one generate, rank, crossover and mutate cycle.

    Every random draw comes from a single numpy Generator. Pass ``seed`` for a
    reproducible run or ``rng`` to supply a generator directly; otherwise the
    seed is taken from the clock and logged.
    """

    def __init__(
        self,
        config: Optional[EvolutionConfig] = None,
        fitness_fn: Optional[FitnessFunction] = None,
        renderer: Optional[Renderer] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the engine.

        Args:
            config: Evolution parameters, validated on construction
            fitness_fn: Pure fitness function of the decoded value
            renderer: Receives a snapshot after each step
            seed: Seed for the random generator
            rng: Random generator to use instead of seeding a new one
        """
        self.config = config or EvolutionConfig()
        self.evaluator = FitnessEvaluator(fitness_fn)
        self.renderer = renderer or NullRenderer()

        if rng is not None:
            self.seed = seed
            self.rng = rng
        else:
            self.seed = seed if seed is not None else time_seed()
            self.rng = np.random.default_rng(self.seed)

        self.population: Optional[Population] = None
        self.history: List[SnapshotStats] = []
        self.mutated_count: int = 0

    def generate_population(self) -> Population:
        """Create and evaluate a population of random genomes."""
        logger.info(
            f"Generating population of {self.config.candidates} genomes "
            f"of {self.config.candidate_size} bits"
        )
        genomes = [
            Genome.random(self.config.candidate_size, self.rng)
            for _ in range(self.config.candidates)
        ]
        self.population = Population.from_genomes(genomes)
        self.evaluator.evaluate_batch(self.population)
        return self.population

    def rank(self) -> None:
        """Sort the population by descending fitness."""
        self._require_population().rank()

    def reproduce(self) -> None:
        """Replace the population with children of its elite."""
        population = self._require_population()
        logger.info(f"Crossing over {self.config.elite_count} elite individuals")
        reproduce(population, self.config, self.rng, self.evaluator)

    def mutate(self) -> int:
        """Mutate the population, returning the number of mutated individuals."""
        population = self._require_population()
        self.mutated_count = mutate(population, self.config, self.rng, self.evaluator)
        logger.info(f"Mutated {self.mutated_count}/{len(population)} individuals")
        return self.mutated_count

    @log_with_correlation
    def run(self) -> Population:
        """
        Run one evolutionary step.

        Returns:
            The population after mutation
        """
        logger.info(f"Starting genetic algorithm run (seed={self.seed})")
        self.history = []

        self.generate_population()
        self._snapshot(GENERATED)

        self.rank()
        self._snapshot(SORTED)

        self.reproduce()
        self._snapshot(AFTER_CROSSOVER)

        self.mutate()
        self._snapshot(AFTER_MUTATION)

        best = self.population.best()
        logger.info(f"Run completed: best genome {best.genome} (value={best.value}, fitness={best.fitness})")
        return self.population

    def _snapshot(self, label: str) -> None:
        """Record summary statistics and hand the population to the renderer."""
        population = self._require_population()
        if len(population) != self.config.candidates:
            raise PopulationError(
                f"Population size changed during '{label}'",
                details={"expected": self.config.candidates, "actual": len(population)}
            )

        stats = population.summary(label)
        self.history.append(stats)
        logger.info(
            f"Snapshot '{label}': "
            f"Best={stats.best_fitness}, "
            f"Mean={stats.mean_fitness:.2f}, "
            f"Worst={stats.worst_fitness}, "
            f"Diversity={stats.diversity:.2f}"
        )
        self.renderer.render(label, population)

    def _require_population(self) -> Population:
        if self.population is None:
            raise PopulationError("No population has been generated yet")
        return self.population

    def get_run_summary(self) -> Dict[str, Any]:
        """Get a summary of the last run."""
        best = self.population.best() if self.population is not None else None
        return {
            "seed": self.seed,
            "config": asdict(self.config),
            "snapshots": [asdict(stats) for stats in self.history],
            "mutated_count": self.mutated_count,
            "best_genome": str(best.genome) if best else None,
            "best_fitness": best.fitness if best else None,
            "fitness_cache": self.evaluator.get_cache_stats(),
        }
