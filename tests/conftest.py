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
def tall_matrix():
    """3 x 2 matrix of rank 2 whose third row is minus the second."""
    return [[1.0, 3.0], [2.0, 1.5], [-2.0, -1.5]]


@pytest.fixture
def rank_deficient_integers(rng):
    """5 x 4 integer-valued matrix built as a product of rank-2 factors."""
    left = rng.integers(-5, 6, size=(5, 2)).astype(np.float64)
    right = rng.integers(-5, 6, size=(2, 4)).astype(np.float64)
    return left @ right
