"""
Command-line interface for running the genetic algorithm.

Runs one evolutionary step and prints the population after each stage. All
arguments are optional.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from ..core.config import Config
from ..core.exceptions import ConfigurationError
from ..core.logging import setup_logging, get_logger
from ..genetic import GeneticEngine, ConsoleRenderer, LoggingRenderer, NullRenderer


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitevo",
        description="Run one step of a binary-string genetic algorithm maximizing f(x) = x^2",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with the default six 5-bit candidates and a clock-based seed
  bitevo

  # Reproduce a previous run
  bitevo --seed 1234

  # Override population parameters from a JSON file
  bitevo --config config.json --log-level DEBUG
        """
    )

    # -- Configuration ------------------------------------
    config_group = parser.add_argument_group('Configuration')
    config_group.add_argument(
        '--config', '-c',
        type=Path,
        help='Path to configuration file (JSON)'
    )
    config_group.add_argument(
        '--env-file', '-e',
        type=Path,
        help='Path to .env file with BITEVO_* variables'
    )
    config_group.add_argument('--seed', type=int, help='Random seed (default: derived from the clock)')

    # -- Output ------------------------------------------
    output_group = parser.add_argument_group('Output')
    renderer_choice = output_group.add_mutually_exclusive_group()
    renderer_choice.add_argument('--quiet', '-q', action='store_true', help='Do not print population snapshots')
    renderer_choice.add_argument('--log-renderer', action='store_true', help='Write population snapshots to the log')
    output_group.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: INFO)'
    )
    output_group.add_argument(
        '--log-file',
        type=Path,
        help='Also write JSON log records to this file'
    )

    return parser


def _load_config(parsed_args: argparse.Namespace) -> Config:
    return Config(
        config_file=parsed_args.config,
        env_file=parsed_args.env_file,
        seed=parsed_args.seed,
        log_level=parsed_args.log_level
    )


def evolve_command(args: Optional[list] = None) -> int:
    """
    Parse arguments, run the engine and print the snapshots.

    Returns:
        Process exit status
    """
    parsed_args = _build_parser().parse_args(args)

    setup_logging(level=parsed_args.log_level or "INFO")
    logger = get_logger(__name__)

    try:
        config = _load_config(parsed_args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(
        level=config.run.log_level,
        log_file=parsed_args.log_file,
        enable_file=parsed_args.log_file is not None
    )
    logger.info(f"Configuration: {config}")

    if parsed_args.quiet:
        renderer = NullRenderer()
    elif parsed_args.log_renderer:
        renderer = LoggingRenderer()
    else:
        renderer = ConsoleRenderer()

    print("Genetic Algorithm")
    engine = GeneticEngine(
        config=config.evolution,
        renderer=renderer,
        seed=config.run.seed
    )
    population = engine.run()

    best = population.best()
    print(f"\nBest: {best.genome} (value={best.value}, fitness={best.fitness}, seed={engine.seed})")
    return 0


def main() -> None:
    sys.exit(evolve_command())


if __name__ == "__main__":
    main()
