"""
Run the weather_summary test suite.
Usage: python test.py [pattern], e.g. python test.py "test_loader*.py"
"""

import logging
import sys
import unittest

logging.disable(logging.CRITICAL)  # reports and diagnostics stay quiet during tests

TEST_DIR = "test"
DEFAULT_PATTERN = "test_*.py"


def run_all_tests(pattern: str = DEFAULT_PATTERN) -> int:
    """
    Discover and run the weather_summary tests in the 'test' directory.

    Args:
        pattern (str, optional): File pattern of the test modules to run.

    Returns:
        int: Exit code - 0 if all tests passed, 1 otherwise.
    """
    suite = unittest.defaultTestLoader.discover(TEST_DIR, pattern=pattern)
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(run_all_tests(*sys.argv[1:2]))
