#!/usr/bin/env python3
"""
Test runner for bitevo.

This script provides convenient ways to run different groups of tests.
"""

import sys
import subprocess
import argparse


def run_command(cmd, description):
    """Run a command and report whether it succeeded."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    try:
        subprocess.run(cmd, check=True, capture_output=False)
        print(f"\n{description} completed successfully!")
        return True
    except subprocess.CalledProcessError as e:
        print(f"\n{description} failed with exit code {e.returncode}")
        return False


def main():
    parser = argparse.ArgumentParser(description="Run bitevo tests")
    parser.add_argument(
        "--type",
        choices=["unit", "integration", "core", "genetic", "cli", "all"],
        default="all",
        help="Type of tests to run"
    )
    parser.add_argument(
        "--file",
        help="Run tests from specific file"
    )
    parser.add_argument(
        "--function",
        help="Run specific test function"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--coverage",
        action="store_true",
        help="Run with coverage reporting"
    )

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest"]

    if args.type != "all":
        cmd.extend(["-m", args.type])

    if args.file:
        cmd.append(args.file)

    if args.function:
        cmd.extend(["-k", args.function])

    if args.verbose:
        cmd.append("-vv")

    if args.coverage:
        cmd.extend(["--cov=bitevo", "--cov-report=html", "--cov-report=term-missing"])

    success = run_command(cmd, f"bitevo {args.type} tests")

    if success:
        print("\nAll tests passed!")
        sys.exit(0)
    else:
        print("\nSome tests failed. Please review the output above.")
        sys.exit(1)


if __name__ == "__main__":
    main()
