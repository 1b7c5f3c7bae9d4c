"""
Test runner script for the querydao test suite.
Provides short commands for the unit and functional suites and coverage reports.
"""

import os
import subprocess
import sys
from pathlib import Path

COMMANDS = {
    "all": ("python -m pytest tests/ -v", "Running all tests"),
    "unit": ("python -m pytest tests/unit/ -v", "Running unit tests"),
    "functional": ("python -m pytest tests/functional/ -v", "Running functional tests against SQLite"),
    "coverage": (
        "python -m pytest tests/ --cov=querydao --cov-report=term-missing",
        "Running tests with coverage report",
    ),
    "install": ('pip install -e ".[test]"', "Installing test dependencies"),
}


def run_command(command, description):
    """Run a command and echo its output"""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {command}")
    print(f"{'='*60}")

    result = subprocess.run(command, shell=True, capture_output=True, text=True)

    if result.stdout:
        print(result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr)

    return result.returncode == 0


def main():
    """Main test runner"""
    os.chdir(Path(__file__).parent.parent)

    if len(sys.argv) < 2 or sys.argv[1].lower() not in COMMANDS:
        print("Usage: python tests/run_tests.py [command]")
        print("\nAvailable commands:")
        for name, (_, description) in COMMANDS.items():
            print(f"  {name:<12} - {description}")
        sys.exit(1)

    command, description = COMMANDS[sys.argv[1].lower()]
    if not run_command(command, description):
        print(f"\n❌ {description} failed")
        sys.exit(1)
    print(f"\n✅ {description} finished")


if __name__ == "__main__":
    main()
