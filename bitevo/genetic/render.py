"""
Renderers receive a population snapshot after each step of a run.

Rendering is presentation only: renderers must not modify the population.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from bitevo.core.logging import get_logger
from .population import Population

logger = get_logger(__name__)


class Renderer(ABC):
    """Abstract base class for snapshot renderers."""

    @abstractmethod
    def render(self, label: str, population: Population) -> None:
        """Present the population as it is after the step named by label."""
        pass


class ConsoleRenderer(Renderer):
    """Prints each snapshot as a table of genome, value and fitness."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def render(self, label: str, population: Population) -> None:
        stream = self.stream or sys.stdout
        print(f"\nSamples {label.upper()}...", file=stream)
        print(population.to_frame().to_string(), file=stream)


class LoggingRenderer(Renderer):
    """Logs one line per individual."""

    def render(self, label: str, population: Population) -> None:
        logger.info(f"Population {label}:")
        for i, individual in enumerate(population):
            logger.info(
                f"  sample-{i}: {individual.genome} | value={individual.value} | fitness={individual.fitness}"
            )


class NullRenderer(Renderer):
    """Discards snapshots."""

    def render(self, label: str, population: Population) -> None:
        pass
