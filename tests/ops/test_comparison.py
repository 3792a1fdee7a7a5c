"""
Tests for tolerance-based comparison.
"""

import numpy as np
import pytest

from numerix import Matrix, ShapedArray, Vector
from numerix.core.exceptions import ShapeMismatchError, ValidationError
from numerix.ops import is_approx


class TestIsApprox:

    def test_identical(self, mat_a):
        assert is_approx(mat_a, mat_a.copy())

    def test_nested_sequence(self, mat_a):
        assert is_approx(mat_a, [[1, 2, 3], [4, 5, 6]])

    def test_within_default_tolerance(self):
        assert is_approx(Vector([1.0]), [1.0 + 1e-10])

    def test_outside_default_tolerance(self):
        assert not is_approx(Vector([1.0]), [1.0 + 1e-6])

    def test_float32_default_tolerance_is_looser(self):
        assert is_approx(Vector([1.0], dtype='float32'), [1.0 + 1e-5])

    def test_explicit_rtol(self):
        assert is_approx(Vector([100.0]), [100.5], rtol=1e-2)
        assert not is_approx(Vector([100.0]), [100.5], rtol=1e-3)

    def test_atol(self):
        assert is_approx(Vector([1e-12]), [0.0], atol=1e-9)

    def test_complex(self):
        assert is_approx(Vector([1 + 1j]), [1 + 1j + 1e-12])

    def test_complex_expected_against_real(self):
        assert not is_approx(Vector([1.0]), [1 + 1j])
        assert is_approx(Vector([1.0, 2.0]), [1 + 0j, 2])

    def test_complex_container_expected_against_real(self):
        assert not is_approx(Vector([1.0, 2.0]), Vector([1.0, 2 + 1e-3j]))

    def test_non_numeric_expected(self):
        with pytest.raises(ValidationError, match="expected"):
            is_approx(Vector([1.0]), ["one"])

    def test_shape_mismatch(self, mat_a):
        with pytest.raises(ShapeMismatchError):
            is_approx(mat_a, [1, 2, 3, 4, 5, 6])

    def test_container_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            is_approx(ShapedArray.zeros((2, 3)), ShapedArray.zeros((3, 2)))

    def test_numpy_expected(self, rng):
        data = rng.standard_normal((2, 2))
        assert is_approx(Matrix(data), data)

    def test_nan_never_close(self):
        assert not is_approx(Vector([np.nan]), [np.nan])

    def test_requires_container(self):
        with pytest.raises(ValidationError):
            is_approx([1.0], [1.0])
