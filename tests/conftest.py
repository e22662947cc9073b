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
def linear_pair():
    """Noiseless linear data: y = 2x."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    return x, 2.0 * x


@pytest.fixture
def three_variables(rng):
    """Three correlated variables as rows, 40 observations each."""
    base = rng.standard_normal(40)
    return np.vstack([
        base,
        0.5 * base + rng.standard_normal(40),
        rng.standard_normal(40),
    ])
