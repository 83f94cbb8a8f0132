"""
Pytest configuration for the test suite.

This file is automatically loaded by pytest and applies configuration
to all tests in the tests/ directory.
"""

import os
import sys

# Set SDL_VIDEODRIVER before importing pygame to avoid display errors in CI
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class ScriptedRng:
    """
    Deterministic stand-in for numpy's Generator.

    uniform() returns the midpoint of the range unless a fraction is
    queued, in which case it returns low + fraction * (high - low).
    random() and integers() pop from their own queues.
    """

    def __init__(self, fractions=None, randoms=None, integers=None):
        self.fractions = list(fractions or [])
        self.randoms = list(randoms or [])
        self.ints = list(integers or [])
        self.uniform_calls = []

    def uniform(self, low, high):
        self.uniform_calls.append((low, high))
        fraction = self.fractions.pop(0) if self.fractions else 0.5
        return low + fraction * (high - low)

    def random(self):
        return self.randoms.pop(0) if self.randoms else 0.0

    def integers(self, high):
        value = self.ints.pop(0) if self.ints else 0
        assert 0 <= value < high
        return value


@pytest.fixture
def scripted_rng():
    """Midpoint-returning random source."""
    return ScriptedRng()
