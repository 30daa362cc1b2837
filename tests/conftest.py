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
def spd_2x2():
    """Small SPD matrix with a hand-checkable inverse: A^-1 = [[3, -2], [-2, 4]] / 8."""
    return np.array([[4.0, 2.0], [2.0, 3.0]])


@pytest.fixture
def spd_matrix(rng):
    """Random well-conditioned SPD matrix (6 x 6), exactly symmetric."""
    n = 6
    M = rng.standard_normal((n, n))
    A = M @ M.T + n * np.eye(n)
    return (A + A.T) / 2


@pytest.fixture
def indefinite_2x2():
    """Symmetric with eigenvalues 3 and -1."""
    return np.array([[1.0, 2.0], [2.0, 1.0]])


@pytest.fixture
def asymmetric_2x2():
    """Positive pivots but A[0, 1] != A[1, 0]."""
    return np.array([[4.0, 2.0], [3.0, 3.0]])
