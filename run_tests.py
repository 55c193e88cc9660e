#!/usr/bin/env python3
"""
Test runner for the wordrank package.

Usage:
    python run_tests.py
    python -m pytest tests/ -v  # Equivalent direct pytest invocation
"""

import sys
from pathlib import Path

import pytest


def main() -> int:
    """Run the whole test suite and return pytest's exit status."""
    print("=" * 60)
    print("WORDRANK TEST RUNNER")
    print("=" * 60)

    tests_dir = Path(__file__).parent / "tests"
    exit_code = pytest.main([str(tests_dir), "-v"])

    if exit_code == 0:
        print("\n🎉 All tests completed successfully!")
    else:
        print("\n❌ Some tests failed!")
    return int(exit_code)


if __name__ == "__main__":
    sys.exit(main())
