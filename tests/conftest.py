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
def magic_system():
    """3x3 magic square with a small right-hand side."""
    A = np.array([[8.0, 1.0, 6.0], [3.0, 5.0, 7.0], [4.0, 9.0, 2.0]])
    b = np.array([1.0, 4.0, 2.0])
    return A, b


@pytest.fixture
def upper_system():
    """System whose coefficient block is already upper triangular."""
    return np.array([
        [1.0, 2.5, -1.18],
        [0.0, -5.4837, 3.69],
    ])


@pytest.fixture
def random_system(rng):
    """Well-conditioned 8x8 system with known solution."""
    n = 8
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def augment():
    """Build a fresh float64 augmented matrix [A | b]."""
    def _augment(A, b):
        return np.column_stack([np.asarray(A, dtype=np.float64), np.asarray(b, dtype=np.float64)])
    return _augment
