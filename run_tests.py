#!/usr/bin/env python3
"""
Test runner script for the blog API.
Provides convenient commands to run different groups of tests.
"""

import sys
import subprocess
import argparse
from pathlib import Path


def run_command(cmd: list[str], description: str) -> int:
    """Run a command and return the exit code."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run tests for the blog API")
    parser.add_argument(
        "test_type",
        choices=["all", "unit", "integration", "models", "repositories", "services", "mappers", "routes", "utils", "coverage"],
        help="Type of tests to run"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Run tests in verbose mode"
    )
    parser.add_argument(
        "--coverage", "-c",
        action="store_true",
        help="Run with coverage report"
    )

    args = parser.parse_args()

    # Base pytest command
    base_cmd = [sys.executable, "-m", "pytest"]

    if args.verbose:
        base_cmd.append("-v")

    if args.coverage or args.test_type == "coverage":
        base_cmd.extend(["--cov=blog", "--cov-report=term-missing"])

    # Test type specific commands
    test_commands = {
        "all": base_cmd + ["tests/"],
        "unit": base_cmd + [
            "tests/test_models.py",
            "tests/test_repositories.py",
            "tests/test_services.py",
            "tests/test_mappers.py",
            "tests/test_utils.py",
        ],
        "integration": base_cmd + ["tests/test_integration.py"],
        "models": base_cmd + ["tests/test_models.py"],
        "repositories": base_cmd + ["tests/test_repositories.py"],
        "services": base_cmd + ["tests/test_services.py"],
        "mappers": base_cmd + ["tests/test_mappers.py"],
        "routes": base_cmd + ["tests/test_routes.py"],
        "utils": base_cmd + ["tests/test_utils.py"],
        "coverage": base_cmd + ["tests/"],
    }

    cmd = test_commands[args.test_type]
    description = f"{args.test_type.title()} tests"

    exit_code = run_command(cmd, description)

    if exit_code == 0:
        print(f"\n{description} completed successfully!")
    else:
        print(f"\n{description} failed with exit code {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
