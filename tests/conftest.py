"""
pytest configuration and shared fixtures.
"""

from dataclasses import asdict

import pytest
import numpy as np

from numerix import Matrix, ShapedArray, Vector
from numerix.core.config import set_bounds_check, set_printoptions, DEFAULT_PRINT_OPTIONS


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def restore_config():
    """Run every test with default configuration and restore it afterwards."""
    previous_bounds = set_bounds_check(True)
    set_printoptions(**asdict(DEFAULT_PRINT_OPTIONS))
    yield
    set_bounds_check(previous_bounds)
    set_printoptions(**asdict(DEFAULT_PRINT_OPTIONS))


@pytest.fixture
def mat_a():
    """2x3 matrix A from the reference matrix product example."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def mat_b():
    """3x2 matrix B from the reference matrix product example."""
    return Matrix([[7, 8], [9, 10], [11, 12]])


@pytest.fixture
def vec_f():
    return Vector([1, 2, 3, 4, 5], dtype='float32')


@pytest.fixture
def vec_d():
    return Vector([1, 2, 3, 4, 5])


@pytest.fixture
def arr_3d():
    """2x2x2 array holding 1..8."""
    return ShapedArray([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
