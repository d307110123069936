"""
Pytest configuration and shared fixtures for tensor kernel tests.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add the parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mechTC.config import reset_tolerances


@pytest.fixture
def tolerance():
    """Default tolerance for floating point comparisons."""
    return 1e-12


@pytest.fixture
def loose_tolerance():
    """Looser tolerance for eigen-solver based results."""
    return 1e-10


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return np.random.default_rng(12345)


@pytest.fixture(autouse=True)
def default_tolerances():
    """Tests that change the process-wide tolerances must not leak."""
    reset_tolerances()
    yield
    reset_tolerances()


def random_symmetric(rng, dim):
    """Random symmetric dim x dim matrix."""
    A = rng.standard_normal((dim, dim))
    return 0.5 * (A + A.T)


def random_deformation(rng, dim):
    """Random deformation gradient with positive determinant."""
    F = np.eye(dim) + 0.3 * rng.standard_normal((dim, dim))
    while np.linalg.det(F) <= 0.1:
        F = np.eye(dim) + 0.3 * rng.standard_normal((dim, dim))
    return F
