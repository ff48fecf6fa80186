"""
bitevo - Binary-string genetic algorithm engine

A small reference implementation of the canonical genetic algorithm step:
generate a population of bitstrings, evaluate, rank, cross over the elite and
mutate.
"""

__version__ = "0.1.0"

from .core.config import Config, EvolutionConfig
from .core.logging import setup_logging
from .genetic import Genome, GeneticEngine, FitnessEvaluator, Population

__all__ = [
    "Config",
    "EvolutionConfig",
    "setup_logging",
    "Genome",
    "GeneticEngine",
    "FitnessEvaluator",
    "Population"
]
