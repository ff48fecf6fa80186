"""
Genetic operators: single-point crossover from the elite window and
single-bit mutation.

Both operators draw every random number from the generator they are given.
"""

from typing import List

import numpy as np

from bitevo.core.config import EvolutionConfig
from bitevo.core.logging import get_logger
from .fitness import FitnessEvaluator
from .population import Individual, Population

logger = get_logger(__name__)


def reproduce(
    population: Population,
    config: EvolutionConfig,
    rng: np.random.Generator,
    evaluator: FitnessEvaluator
) -> Population:
    """
    Replace a ranked population with children of its elite.

    Parents are drawn with replacement from the first ``config.elite_count``
    individuals; each draw of two parents and a cut point yields two children.

    Args:
        population: Population ranked by descending fitness
        config: Evolution parameters
        rng: Random generator
        evaluator: Evaluator used to score every child

    Returns:
        The same population object, with its members replaced
    """
    elite_count = config.elite_count
    children: List[Individual] = []

    for _ in range(elite_count):
        first_parent = population[int(rng.integers(0, elite_count))]
        second_parent = population[int(rng.integers(0, elite_count))]
        cut = int(rng.integers(0, config.candidate_size))

        for genome in first_parent.genome.crossover(second_parent.genome, cut):
            child = Individual(genome)
            evaluator.evaluate(child)
            children.append(child)

        logger.debug(
            f"Crossed {first_parent.genome} x {second_parent.genome} at {cut}: "
            f"{children[-2].genome}, {children[-1].genome}"
        )

    population.replace(children)
    return population


def mutate(
    population: Population,
    config: EvolutionConfig,
    rng: np.random.Generator,
    evaluator: FitnessEvaluator
) -> int:
    """
    Flip one random bit of each individual with probability ``mutate_rate``.

    Mutated individuals are re-evaluated; the others keep their cached
    value and fitness.

    Returns:
        Number of individuals mutated
    """
    mutated = 0

    for individual in population:
        if rng.random() < config.mutate_rate:
            index = int(rng.integers(0, len(individual.genome)))
            original = individual.genome
            individual.genome = original.flip(index)
            evaluator.evaluate(individual)
            mutated += 1
            logger.debug(f"Mutated {original} -> {individual.genome} at bit {index}")

    return mutated
