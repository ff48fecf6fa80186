"""
Custom exceptions for the bitevo genetic algorithm engine.

This module defines the small hierarchy of exceptions raised by the
configuration layer and the genetic operators.
"""

from typing import Optional, Any


class BitEvoException(Exception):
    """Base exception for errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(BitEvoException):
    """Raised when there are issues with configuration settings."""
    pass


class ValidationError(BitEvoException):
    """Raised when a genome or its bits fail validation."""
    pass


class PopulationError(BitEvoException):
    """Raised when a population would lose its fixed size."""
    pass
