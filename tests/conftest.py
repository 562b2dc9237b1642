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
def a_2x2():
    """Small integer-valued matrix used by the Kronecker tests."""
    return np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)


@pytest.fixture
def diag_123():
    """diag([1, 2, 3]) in single precision."""
    return np.diag(np.array([1.0, 2.0, 3.0], dtype=np.float32))
