"""
Tests for Matrix construction, row-major layout, access and text output.
"""

import numpy as np
import pytest

from numerix import ElementType, Matrix
from numerix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    InvalidSizeError,
    LengthMismatchError,
    RaggedShapeError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_nested(self, mat_a):
        assert mat_a.rows == 2
        assert mat_a.columns == 3
        assert mat_a.shape == (2, 3)
        assert mat_a.count == 6
        assert mat_a.dtype is ElementType.FLOAT64

    def test_row_major_layout(self, mat_a):
        assert mat_a.values == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        for i in range(2):
            for j in range(3):
                assert mat_a[i, j] == mat_a.values[i * 3 + j]

    def test_from_flat(self):
        mat = Matrix.from_flat(2, 3, [3, 4, 8, 10, 11, 18.2])
        assert mat[1, 2] == 18.2
        assert mat == Matrix([[3, 4, 8], [10, 11, 18.2]])

    def test_from_flat_accepts_iterables(self):
        mat = Matrix.from_flat(2, 2, range(4), dtype='int32')
        assert mat.values == [0, 1, 2, 3]

    def test_from_flat_int32_out_of_range(self):
        with pytest.raises(ValidationError, match="int32 range"):
            Matrix.from_flat(1, 2, [2**40, 1], dtype='int32')

    def test_from_flat_length_mismatch(self):
        with pytest.raises(LengthMismatchError) as excinfo:
            Matrix.from_flat(2, 3, [1, 2, 3, 4, 5])
        assert excinfo.value.expected == 6
        assert excinfo.value.actual == 5

    def test_from_flat_empty_values(self):
        with pytest.raises(LengthMismatchError):
            Matrix.from_flat(1, 1, [])

    def test_from_flat_nested_values_rejected(self):
        with pytest.raises(DimensionError):
            Matrix.from_flat(2, 2, [[1, 2], [3, 4]])

    @pytest.mark.parametrize("rows, columns", [(0, 3), (2, 0), (-1, 2)])
    def test_non_positive_dims(self, rows, columns):
        with pytest.raises(InvalidSizeError):
            Matrix.filled(rows, columns)

    def test_filled(self):
        mat = Matrix.filled(2, 2, fill=1.5, dtype='float32')
        assert mat.dtype is ElementType.FLOAT32
        assert mat.values == [1.5] * 4

    def test_zeros(self):
        assert Matrix.zeros(2, 3).values == [0.0] * 6

    def test_ragged_rows(self):
        with pytest.raises(RaggedShapeError):
            Matrix([[1, 2, 3], [4, 5]])

    def test_empty_rejected(self):
        with pytest.raises(RaggedShapeError):
            Matrix([])

    def test_rank_one_rejected(self):
        with pytest.raises(DimensionError, match="2D"):
            Matrix([1, 2, 3])

    def test_rank_three_rejected(self):
        with pytest.raises(DimensionError):
            Matrix([[[1]]])

    def test_numpy_input(self, rng):
        data = rng.standard_normal((3, 4))
        mat = Matrix(data)
        np.testing.assert_array_equal(mat.to_numpy(), data)

    def test_to_numpy_is_a_copy(self, mat_a):
        arr = mat_a.to_numpy()
        arr[0, 0] = 100.0
        assert mat_a[0, 0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_setitem(self, mat_a):
        mat_a[1, 0] = -4
        assert mat_a.values[3] == -4.0

    def test_row_out_of_range(self, mat_a):
        with pytest.raises(IndexOutOfRangeError) as excinfo:
            mat_a[2, 0]
        assert excinfo.value.shape == (2, 3)

    def test_column_out_of_range(self, mat_a):
        with pytest.raises(IndexOutOfRangeError):
            mat_a[0, 3]

    def test_single_index_rejected(self, mat_a):
        with pytest.raises(IndexOutOfRangeError):
            mat_a[0]


# ═══════════════════════════════════════════════════════════════════════
# Equality, text
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_same_values_different_shape(self):
        assert Matrix([[1, 2, 3, 4]]) != Matrix([[1, 2], [3, 4]])

    def test_rebuild_from_flat_values(self, mat_a):
        rebuilt = Matrix.from_flat(mat_a.rows, mat_a.columns, mat_a.values, dtype=mat_a.dtype)
        assert rebuilt == mat_a

    def test_exact_comparison(self):
        assert Matrix([[0.1 + 0.2]]) != Matrix([[0.3]])


class TestText:

    def test_str(self):
        mat = Matrix.from_flat(2, 3, [3, 4, 8, 10, 11, 18.2])
        assert str(mat) == (
            "2x3 Matrix[float64]\n"
            "⎛  3.0000   4.0000   8.0000 ⎞\n"
            "⎝ 10.0000  11.0000  18.2000 ⎠"
        )

    def test_str_float32(self):
        mat = Matrix.from_flat(2, 3, [3, 4, 8, 10, 11, 18.2], dtype='float32')
        assert str(mat) == (
            "2x3 Matrix[float32]\n"
            "⎛  3.00   4.00   8.00 ⎞\n"
            "⎝ 10.00  11.00  18.20 ⎠"
        )

    def test_single_row_prints_flat(self):
        assert str(Matrix([[1, 2]])) == "1x2 Matrix[float64]\n( 1.0000  2.0000 )"

    def test_repr(self):
        assert repr(Matrix([[1, 2], [3, 4]], dtype='int32')) == (
            "Matrix([[1, 2], [3, 4]], dtype='int32')"
        )
