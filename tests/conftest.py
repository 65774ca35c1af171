"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line_data():
    """y = 2x exactly, the canonical perfect-fit scenario."""
    x = np.array([1.0, 2.0, 3.0, 4.0])
    y = np.array([2.0, 4.0, 6.0, 8.0])
    return x, y


@pytest.fixture
def noisy_line_data(rng):
    """y = 1.5x - 3 plus small Gaussian noise."""
    n = 200
    x = rng.uniform(-10.0, 10.0, n)
    y = 1.5 * x - 3.0 + rng.standard_normal(n) * 0.1
    return x, y, 1.5, -3.0
