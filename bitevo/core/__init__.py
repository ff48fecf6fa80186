"""
Core functionality for the bitevo engine.

This module contains configuration management, logging setup, and custom exceptions.
"""

from .config import Config, EvolutionConfig, RunConfig
from .exceptions import BitEvoException, ConfigurationError, ValidationError, PopulationError
from .logging import setup_logging, get_logger

__all__ = [
    "Config",
    "EvolutionConfig",
    "RunConfig",
    "BitEvoException",
    "ConfigurationError",
    "ValidationError",
    "PopulationError",
    "setup_logging",
    "get_logger"
]
