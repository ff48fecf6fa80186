"""
Fitness evaluation for the genetic algorithm.

A fitness function is any pure callable mapping a decoded genome value to an
integer score. FitnessEvaluator applies it to individuals and memoizes the
scores it has already computed.
"""

from typing import Callable, Dict, Iterable, Optional

from bitevo.core.logging import get_logger

logger = get_logger(__name__)

FitnessFunction = Callable[[int], int]

# Fitness of an individual that has not been evaluated yet
UNEVALUATED = -1


def square(value: int) -> int:
    """Default fitness: the square of the decoded value."""
    return value * value


class FitnessEvaluator:
    """Applies a fitness function to individuals."""

    def __init__(self, fitness_fn: Optional[FitnessFunction] = None, cache_results: bool = True):
        """
        Initialize fitness evaluator.

        Args:
            fitness_fn: Pure function of the decoded value (defaults to square)
            cache_results: Whether to cache scores by decoded value
        """
        self.fitness_fn = fitness_fn or square
        self.cache_results = cache_results
        self._cache: Dict[int, int] = {}
        self._cache_hits = 0
        self._cache_misses = 0

    def score(self, value: int) -> int:
        """Return the fitness of a decoded value."""
        if not self.cache_results:
            return self.fitness_fn(value)

        if value in self._cache:
            self._cache_hits += 1
            return self._cache[value]

        self._cache_misses += 1
        result = self.fitness_fn(value)
        self._cache[value] = result
        return result

    def evaluate(self, individual) -> None:
        """
        Recompute an individual's decoded value and fitness from its genome.

        The cached fields are reset to the unevaluated state first so a
        failing fitness function never leaves stale values behind.
        """
        individual.value = 0
        individual.fitness = UNEVALUATED
        individual.value = individual.genome.decode()
        individual.fitness = self.score(individual.value)
        logger.debug(f"Evaluated {individual.genome}: value={individual.value}, fitness={individual.fitness}")

    def evaluate_batch(self, individuals: Iterable) -> None:
        """Evaluate multiple individuals."""
        for individual in individuals:
            self.evaluate(individual)

    def clear_cache(self) -> None:
        """Clear the evaluation cache."""
        self._cache.clear()
        self._cache_hits = 0
        self._cache_misses = 0

    def get_cache_stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        return {
            "cached_results": len(self._cache),
            "cache_hits": self._cache_hits,
            "cache_misses": self._cache_misses
        }
