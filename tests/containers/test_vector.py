"""
Tests for Vector construction, access, equality and operator syntax.
"""

import numpy as np
import pytest

from numerix import ElementType, Matrix, Vector
from numerix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    InvalidSizeError,
    RaggedShapeError,
    ShapeMismatchError,
    UnsupportedDTypeError,
    ValidationError,
)
from numerix.core.config import set_bounds_check


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_values(self):
        vec = Vector([1.0, 2.0, 3.0])
        assert vec.length == 3
        assert len(vec) == 3
        assert vec.shape == (3,)
        assert vec.ndim == 1
        assert vec.values == [1.0, 2.0, 3.0]

    def test_default_dtype_is_float64(self):
        assert Vector([1, 2, 3]).dtype is ElementType.FLOAT64

    def test_complex_values_infer_complex128(self):
        assert Vector([1, 2j]).dtype is ElementType.COMPLEX128

    @pytest.mark.parametrize("dtype", ['float32', np.float32, ElementType.FLOAT32])
    def test_explicit_dtype(self, dtype):
        vec = Vector([3, 5.8, 402.89, 1], dtype=dtype)
        assert vec.dtype is ElementType.FLOAT32

    def test_int32(self):
        vec = Vector([1, 2, 3], dtype=int)
        assert vec.dtype is ElementType.INT32
        assert vec.values == [1, 2, 3]

    def test_numpy_input_keeps_dtype(self):
        assert Vector(np.arange(4, dtype=np.int32)).dtype is ElementType.INT32

    def test_unsupported_dtype(self):
        with pytest.raises(UnsupportedDTypeError):
            Vector([1, 2], dtype='int64')

    def test_empty(self):
        vec = Vector([])
        assert vec.length == 0
        assert vec.values == []

    def test_nested_rejected(self):
        with pytest.raises(DimensionError):
            Vector([[1, 2], [3, 4]])

    def test_ragged_rejected(self):
        with pytest.raises(RaggedShapeError):
            Vector([1, [2, 3]])

    def test_not_a_sequence(self):
        with pytest.raises(ValidationError):
            Vector(3.0)

    def test_filled(self):
        vec = Vector.filled(4, fill=2.2)
        assert vec.values == [2.2, 2.2, 2.2, 2.2]
        assert vec.dtype is ElementType.FLOAT64

    def test_filled_defaults_to_zero(self):
        assert Vector.filled(3).values == [0.0, 0.0, 0.0]

    def test_zeros(self):
        vec = Vector.zeros(3, dtype='complex64')
        assert vec.dtype is ElementType.COMPLEX64
        assert vec.values == [0j, 0j, 0j]

    @pytest.mark.parametrize("length", [0, -3])
    def test_filled_non_positive_length(self, length):
        with pytest.raises(InvalidSizeError):
            Vector.filled(length)

    def test_filled_int32_rejects_fraction(self):
        with pytest.raises(ValidationError):
            Vector.filled(3, fill=0.5, dtype='int32')

    def test_int32_rejects_fractional_values(self):
        with pytest.raises(ValidationError, match="non-integral"):
            Vector([1.5, 2.7], dtype='int32')

    def test_int32_rejects_out_of_range_values(self):
        with pytest.raises(ValidationError, match="int32 range"):
            Vector([2**40], dtype='int32')

    def test_construction_copies_input(self):
        source = np.array([1.0, 2.0])
        vec = Vector(source)
        source[0] = 10.0
        assert vec[0] == 1.0

    def test_round_trip_through_values(self):
        vec = Vector([0.5, -1.25, 3.0], dtype='float32')
        assert Vector(vec.values, dtype=vec.dtype) == vec


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_getitem_returns_python_scalar(self):
        value = Vector([1.5, 2.5])[1]
        assert value == 2.5
        assert type(value) is float

    def test_setitem(self):
        vec = Vector([1.0, 2.0, 3.0])
        vec[1] = 9
        assert vec.values == [1.0, 9.0, 3.0]

    def test_setitem_validates_scalar(self):
        vec = Vector([1, 2], dtype='int32')
        with pytest.raises(ValidationError):
            vec[0] = 1.5

    def test_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            Vector([1.0, 2.0])[2]

    def test_negative_index_rejected(self):
        with pytest.raises(IndexError):
            Vector([1.0, 2.0])[-1]

    def test_wrong_arity(self):
        with pytest.raises(IndexOutOfRangeError):
            Vector([1.0, 2.0])[0, 0]

    def test_unchecked_access(self):
        set_bounds_check(False)
        vec = Vector([1.0, 2.0, 3.0])
        assert vec[2] == 3.0

    def test_iteration(self):
        assert list(Vector([1, 2, 3])) == [1.0, 2.0, 3.0]


# ═══════════════════════════════════════════════════════════════════════
# Equality and copying
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal(self):
        assert Vector([1, 2, 3]) == Vector([1, 2, 3])

    def test_different_values(self):
        assert Vector([1, 2, 3]) != Vector([1, 2, 4])

    def test_different_length(self):
        assert Vector([1, 2]) != Vector([1, 2, 3])

    def test_different_kind(self):
        assert Vector([1, 2, 3, 4]) != Matrix([[1, 2, 3, 4]])

    def test_not_equal_to_list(self):
        assert Vector([1, 2]) != [1.0, 2.0]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1.0]))

    def test_copy_is_independent(self):
        vec = Vector([1.0, 2.0])
        dup = vec.copy()
        dup[0] = 5.0
        assert vec[0] == 1.0
        assert dup == Vector([5.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Operator syntax
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_add(self):
        assert (Vector([1, 2]) + Vector([3, 4])).values == [4.0, 6.0]

    def test_scalar_on_either_side(self):
        vec = Vector([1.0, 2.0])
        assert (vec + 1).values == [2.0, 3.0]
        assert (1 + vec).values == [2.0, 3.0]
        assert (10 - vec).values == [9.0, 8.0]
        assert (vec - 1).values == [0.0, 1.0]
        assert (2 * vec).values == [2.0, 4.0]
        assert (vec / 2).values == [0.5, 1.0]
        assert (2 / vec).values == [2.0, 1.0]

    def test_elementwise_product(self):
        assert (Vector([1, 2, 3]) * Vector([4, 5, 6])).values == [4.0, 10.0, 18.0]

    def test_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            Vector([1, 2]) + Vector([1, 2, 3])

    def test_augmented_assignment_rebinds(self):
        original = Vector([1.0, 2.0])
        alias = original
        alias += 1
        assert original.values == [1.0, 2.0]
        assert alias.values == [2.0, 3.0]
        assert alias is not original

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Vector([1.0]) + "a"

    def test_negation(self):
        assert (-Vector([1.0, -2.0])).values == [-1.0, 2.0]

    def test_unary_plus_copies(self):
        vec = Vector([1.0])
        pos = +vec
        assert pos == vec
        assert pos.buffer is not vec.buffer

    def test_power(self):
        assert (Vector([1, 2, 3]) ** 2).values == [1.0, 4.0, 9.0]

    def test_norm_method(self):
        assert Vector([3, 4]).norm() == 5.0

    def test_dot_method(self):
        assert Vector([1, 2, 3]).dot(Vector([4, 5, 6])) == 32.0

    def test_max_abs_index_method(self):
        assert Vector([1, 2, 5, 3, 19, 0.2]).max_abs_index() == 4
