#!/usr/bin/env python3
"""Run the redirect service test suite."""

import sys
from pathlib import Path

import pytest


if __name__ == "__main__":
    tests_dir = Path(__file__).resolve().parent / "tests"
    sys.exit(pytest.main([str(tests_dir), "-v", "--tb=short", *sys.argv[1:]]))
