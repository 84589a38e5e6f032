#!/usr/bin/env python3
import os
import sys
import unittest

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))


def run_tests() -> int:
    """Run the CLI tests in tests/ and the unit tests in tests/unit/."""
    # Make dirtools importable without installing it
    sys.path.insert(0, os.path.dirname(TESTS_DIR))

    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for start_dir in (TESTS_DIR, os.path.join(TESTS_DIR, "unit")):
        suite.addTests(loader.discover(start_dir, pattern="test_*.py", top_level_dir=start_dir))

    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(run_tests())
