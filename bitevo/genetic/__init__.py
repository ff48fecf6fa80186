"""
Binary-string genetic algorithm: genomes, fitness, population, operators and
the engine that runs one evolutionary step.
"""

from .genome import Genome, decode
from .fitness import FitnessEvaluator, FitnessFunction, UNEVALUATED, square
from .population import Individual, Population, SnapshotStats
from .operators import reproduce, mutate
from .render import Renderer, ConsoleRenderer, LoggingRenderer, NullRenderer
from .engine import GeneticEngine

__all__ = [
    "Genome",
    "decode",
    "FitnessEvaluator",
    "FitnessFunction",
    "UNEVALUATED",
    "square",
    "Individual",
    "Population",
    "SnapshotStats",
    "reproduce",
    "mutate",
    "Renderer",
    "ConsoleRenderer",
    "LoggingRenderer",
    "NullRenderer",
    "GeneticEngine"
]
