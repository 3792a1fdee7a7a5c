"""
Matrix: rank-2 container stored row-major.

Element (i, j) lives at flat index i * columns + j.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from numerix.containers.base import Container
from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType, infer_element_type, resolve_element_type
from numerix.core.validation import check_dims, check_nested, check_rank


class Matrix(Container):
    """
    Rank-2 container with `rows` x `columns` elements.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix.from_flat(2, 3, [3, 4, 8, 10, 11, 18.2])
        Matrix.filled(3, 4, fill=1.5)
        Matrix.zeros(3, 4)
        Matrix.random(3, 4, Distribution.NORMAL)

    Examples:
        >>> a = Matrix([[1, 2, 3], [4, 5, 6]])
        >>> a.rows, a.columns
        (2, 3)
        >>> a[1, 2]
        6.0
    """

    def __init__(self, values: Sequence[Sequence[Any]], dtype: Any = None):
        shape, flat = check_nested(values, "values")
        check_rank(shape, 2, "values")
        if dtype is None:
            element_type = infer_element_type(flat)
        else:
            element_type = resolve_element_type(dtype)
        self._buffer = Buffer.from_sequence(flat, element_type)
        self._shape = shape

    @classmethod
    def from_flat(
        cls,
        rows: int,
        columns: int,
        values: Sequence[Any],
        dtype: Any = None
    ) -> Matrix:
        """
        Matrix from row-major flat values.

        Raises:
            InvalidSizeError: If rows or columns is not a positive integer
            LengthMismatchError: If len(values) != rows * columns
        """
        shape = check_dims((rows, columns), "shape")
        if not isinstance(values, (list, tuple, np.ndarray)):
            values = list(values)
        flat_shape, flat = check_nested(values, "values", allow_empty=True)
        check_rank(flat_shape, 1, "values")
        return cls._from_flat(shape, flat, dtype)

    @classmethod
    def filled(cls, rows: int, columns: int, fill: Any = 0.0, dtype: Any = None) -> Matrix:
        """Matrix with every element set to fill."""
        return cls._filled((rows, columns), fill, dtype)

    @classmethod
    def zeros(cls, rows: int, columns: int, dtype: Any = ElementType.FLOAT64) -> Matrix:
        """Zero-filled matrix."""
        return cls._filled((rows, columns), 0, dtype)

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        dist: Any = 1,
        *,
        dtype: Any = ElementType.FLOAT64,
        seed: Sequence[int] | None = None
    ) -> Matrix:
        """
        Matrix of random values.

        Args:
            rows: Number of rows
            columns: Number of columns
            dist: Distribution of the values: 1 or Distribution.UNIFORM for
                uniform (0, 1), 2 or Distribution.UNIFORM_SYMMETRIC for
                uniform (-1, 1), 3 or Distribution.NORMAL for normal (0, 1)
            dtype: float32 or float64
            seed: Optional 4-word seed, each word in [0, 4095], last word odd.
                A fresh seed is drawn when omitted.
        """
        from numerix.ops.random import random_matrix
        return random_matrix(rows, columns, dist, dtype=dtype, seed=seed)

    @property
    def rows(self) -> int:
        return self._shape[0]

    @property
    def columns(self) -> int:
        return self._shape[1]
