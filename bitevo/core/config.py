"""
Configuration management for the bitevo engine.

This module provides the immutable evolution parameters, the per-run settings,
and a Config container that can be overridden from a JSON file and from
BITEVO_* environment variables (optionally loaded from a .env file).
"""

import os
import json
import math
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .logging import get_logger


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class EvolutionConfig:
    """Parameters of the genetic algorithm, validated on construction."""
    candidates: int = 6
    candidate_size: int = 5
    keep: float = 0.5
    mutate_rate: float = 0.2

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ConfigurationError("Evolution configuration validation failed", details=errors)

    @property
    def elite_count(self) -> int:
        """Number of top-ranked individuals eligible to parent children."""
        return math.floor(self.candidates * self.keep)

    def validate(self) -> List[str]:
        """Return the list of violated constraints (empty when valid)."""
        errors = []

        if not _is_integer(self.candidates) or self.candidates <= 0:
            errors.append("Candidates must be a positive integer")

        if not _is_integer(self.candidate_size) or self.candidate_size <= 0:
            errors.append("Candidate size must be a positive integer")

        if not _is_number(self.keep) or not 0 < self.keep <= 1:
            errors.append("Keep fraction must be in (0, 1]")

        if not _is_number(self.mutate_rate) or not 0 <= self.mutate_rate <= 1:
            errors.append("Mutation rate must be between 0 and 1")

        # Crossover emits two children per elite slot
        if not errors and 2 * self.elite_count != self.candidates:
            errors.append(
                f"Keep fraction {self.keep} gives {self.elite_count} elites, "
                f"which produce {2 * self.elite_count} children for a population of {self.candidates}"
            )

        return errors


@dataclass
class RunConfig:
    """Settings of a single run."""
    seed: Optional[int] = None
    log_level: str = "INFO"


class Config:
    """
    Main configuration class for bitevo.

    Defaults can be overridden by a JSON file with "evolution" and "run"
    sections; the BITEVO_SEED and BITEVO_LOG_LEVEL environment variables
    override the run section.
    """

    def __init__(
        self,
        config_file: Optional[Path] = None,
        env_file: Optional[Path] = None,
        seed: Optional[int] = None,
        log_level: Optional[str] = None
    ):
        """
        Initialize configuration.

        Args:
            config_file: Path to JSON configuration file
            env_file: Path to .env file with BITEVO_* variables
            seed: Seed override, applied after the file and environment
            log_level: Log level override, applied after the file and environment
        """
        self.logger = get_logger(__name__)

        if env_file:
            load_dotenv(env_file)

        evolution_overrides: Dict[str, Any] = {}
        self.run = RunConfig()

        if config_file:
            evolution_overrides = self._load_from_file(Path(config_file))

        self._load_env()

        if seed is not None:
            self.run.seed = seed
        if log_level is not None:
            self.run.log_level = log_level

        # EvolutionConfig validates itself; only the run section is checked here
        self.evolution = EvolutionConfig(**evolution_overrides)
        self._validate()

        self.logger.debug("Configuration loaded successfully")

    def _load_from_file(self, config_file: Path) -> Dict[str, Any]:
        """Load configuration from JSON file, returning the evolution overrides."""
        if not config_file.exists():
            raise ConfigurationError(f"Config file {config_file} does not exist")

        try:
            with open(config_file, 'r') as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load config file {config_file}: {str(e)}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a JSON object")

        sections = {}
        for section_name in ("evolution", "run"):
            section = config_data.get(section_name, {})
            if not isinstance(section, dict):
                raise ConfigurationError(
                    f"Section '{section_name}' of config file {config_file} must be a JSON object",
                    details=type(section).__name__
                )
            sections[section_name] = section

        evolution_names = {f.name for f in fields(EvolutionConfig)}
        evolution_overrides = {
            key: value
            for key, value in sections["evolution"].items()
            if key in evolution_names
        }

        for key, value in sections["run"].items():
            if hasattr(self.run, key):
                setattr(self.run, key, value)

        self.logger.info(f"Loaded configuration from {config_file}")
        return evolution_overrides

    def _load_env(self):
        """Apply BITEVO_* environment variable overrides."""
        seed = os.getenv("BITEVO_SEED")
        if seed:
            try:
                self.run.seed = int(seed)
            except ValueError:
                raise ConfigurationError(f"BITEVO_SEED must be an integer, got {seed!r}")

        log_level = os.getenv("BITEVO_LOG_LEVEL")
        if log_level:
            self.run.log_level = log_level

    def _validate(self):
        """Validate run settings."""
        errors = []

        if self.run.seed is not None and (not _is_integer(self.run.seed) or self.run.seed < 0):
            errors.append("Seed must be a non-negative integer")

        if str(self.run.log_level).upper() not in LOG_LEVELS:
            errors.append(f"Log level must be one of {', '.join(LOG_LEVELS)}")

        if errors:
            raise ConfigurationError("Configuration validation failed", details=errors)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "evolution": asdict(self.evolution),
            "run": asdict(self.run),
        }

    def __repr__(self) -> str:
        return f"Config(evolution={self.evolution}, seed={self.run.seed})"
