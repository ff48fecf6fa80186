"""
Population of individuals evolved together.

An Individual pairs a genome with its cached decoded value and fitness. A
Population is an ordered, fixed-size list of individuals; its order only
carries meaning after rank().
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, List, Sequence

import numpy as np
import pandas as pd

from bitevo.core.exceptions import PopulationError
from .fitness import UNEVALUATED
from .genome import Genome


@dataclass
class Individual:
    """A genome plus its decoded value and fitness score."""

    genome: Genome
    value: int = 0
    fitness: int = UNEVALUATED

    @property
    def evaluated(self) -> bool:
        return self.fitness != UNEVALUATED


@dataclass
class SnapshotStats:
    """Summary of a population at one point of a run."""

    label: str
    size: int
    best_fitness: int
    mean_fitness: float
    worst_fitness: int
    diversity: float
    best_genome: str


class Population:
    """Ordered, fixed-size collection of individuals."""

    def __init__(self, individuals: Sequence[Individual]):
        self._individuals: List[Individual] = list(individuals)
        self.size = len(self._individuals)

    @classmethod
    def from_genomes(cls, genomes: Sequence[Genome]) -> "Population":
        """Create an unevaluated population from genomes."""
        return cls([Individual(genome) for genome in genomes])

    @property
    def individuals(self) -> List[Individual]:
        return list(self._individuals)

    def rank(self) -> None:
        """
        Sort the population in place by descending fitness.

        The sort is stable, so individuals with equal fitness keep their
        previous relative order.
        """
        self._individuals.sort(key=lambda individual: individual.fitness, reverse=True)

    def replace(self, individuals: Sequence[Individual]) -> None:
        """
        Replace every member of the population.

        Raises:
            PopulationError: If the replacement does not have the population's size
        """
        individuals = list(individuals)
        if len(individuals) != self.size:
            raise PopulationError(
                "Replacement must keep the population size",
                details={"expected": self.size, "actual": len(individuals)}
            )
        self._individuals = individuals

    def fitnesses(self) -> np.ndarray:
        return np.array([individual.fitness for individual in self._individuals], dtype=np.int64)

    def diversity(self) -> float:
        """Average pairwise Hamming distance between genomes."""
        distances = [
            a.genome.hamming(b.genome)
            for a, b in combinations(self._individuals, 2)
        ]
        return float(np.mean(distances)) if distances else 0.0

    def best(self) -> Individual:
        """Return the fittest individual (the first one on ties)."""
        if not self._individuals:
            raise PopulationError("Population is empty")
        return max(self._individuals, key=lambda individual: individual.fitness)

    def summary(self, label: str) -> SnapshotStats:
        """Summarize the population's fitness distribution."""
        fitnesses = self.fitnesses()
        if fitnesses.size == 0:
            raise PopulationError("Cannot summarize an empty population")

        return SnapshotStats(
            label=label,
            size=self.size,
            best_fitness=int(fitnesses.max()),
            mean_fitness=float(fitnesses.mean()),
            worst_fitness=int(fitnesses.min()),
            diversity=self.diversity(),
            best_genome=str(self.best().genome),
        )

    def to_frame(self) -> pd.DataFrame:
        """Tabulate genome, value and fitness of every individual."""
        return pd.DataFrame(
            {
                "genome": [str(individual.genome) for individual in self._individuals],
                "value": [individual.value for individual in self._individuals],
                "fitness": [individual.fitness for individual in self._individuals],
            }
        )

    def __len__(self) -> int:
        return len(self._individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    def __getitem__(self, index: int) -> Individual:
        return self._individuals[index]

    def __repr__(self) -> str:
        return f"Population({[str(individual.genome) for individual in self._individuals]})"
