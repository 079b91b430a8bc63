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
def grades():
    """Twenty course grades out of 20 (sum 297, mean 14.85; sample variance at n=20)."""
    return np.array([
        18.5, 14, 17, 12, 19, 20, 11.5, 15, 16, 13,
        17.5, 18, 10, 9, 14.5, 19.5, 12.5, 8, 16.5, 15.5,
    ])


@pytest.fixture
def grouped_table():
    """Contiguous grouped table with n = 30."""
    return [(0, 10, 4), (10, 20, 8), (20, 30, 12), (30, 40, 6)]
