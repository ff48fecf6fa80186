"""
Pytest configuration and common fixtures for bitevo testing.
"""

import json
import logging
import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bitevo.core import EvolutionConfig
from bitevo.core.logging import CorrelationFilter
from bitevo.genetic import FitnessEvaluator, Genome, Population


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep BITEVO_* variables from the developer's shell out of tests."""
    monkeypatch.delenv("BITEVO_SEED", raising=False)
    monkeypatch.delenv("BITEVO_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Remove handlers installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if any(isinstance(f, CorrelationFilter) for f in handler.filters):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def evolution_config():
    return EvolutionConfig()


@pytest.fixture
def evaluator():
    return FitnessEvaluator()


@pytest.fixture
def sample_population(evaluator):
    """Evaluated population of six 5-bit genomes with distinct fitness."""
    population = Population.from_genomes(
        [Genome.from_string(text) for text in ["00011", "11000", "00001", "10101", "01111", "00110"]]
    )
    evaluator.evaluate_batch(population)
    return population


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "evolution": {
            "candidates": 8,
            "candidate_size": 6,
            "keep": 0.5,
            "mutate_rate": 0.3
        },
        "run": {
            "seed": 42,
            "log_level": "DEBUG"
        }
    }


@pytest.fixture
def config_file(tmp_path, sample_config_data):
    """Create a temporary config file for testing."""
    config_path = tmp_path / "test_config.json"
    with open(config_path, 'w') as f:
        json.dump(sample_config_data, f, indent=2)
    return config_path


def pytest_configure(config):
    """Configure custom pytest markers."""
    for marker, description in [
        ("unit", "mark test as a unit test"),
        ("integration", "mark test as an integration test"),
        ("core", "mark test as testing core functionality"),
        ("config", "mark test as testing configuration"),
        ("logging", "mark test as testing logging"),
        ("exceptions", "mark test as testing exceptions"),
        ("genetic", "mark test as testing the genetic algorithm"),
        ("cli", "mark test as testing the command line interface"),
    ]:
        config.addinivalue_line("markers", f"{marker}: {description}")
