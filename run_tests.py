#!/usr/bin/env python
"""
Simple Test Runner for OrderViewLib
===================================

Runs the test suite through pytest.

Usage:
    python run_tests.py           # Run all tests
    python run_tests.py --cov     # Run with coverage report for orderviewlib
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(with_coverage=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "--tb=short",               # Short traceback format
        "--durations=10",           # Show 10 slowest tests
        "-v"                        # Verbose output
    ]

    if with_coverage:
        cmd.extend(["--cov=orderviewlib", "--cov-report=term-missing"])
        print("Running all tests with coverage...")
    else:
        print("Running all tests...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Test runner for OrderViewLib")
    parser.add_argument("--cov", action="store_true", help="Report coverage (needs pytest-cov)")

    args = parser.parse_args()
    return run_tests(with_coverage=args.cov)


if __name__ == "__main__":
    sys.exit(main())
