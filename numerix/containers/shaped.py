"""
ShapedArray: rank-N container stored row-major (last dimension fastest).
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from numerix.containers.base import Container
from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType, infer_element_type, resolve_element_type
from numerix.core.validation import check_dims, check_nested, check_rank


class ShapedArray(Container):
    """
    N-dimensional container.

    Construction:
        ShapedArray([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
        ShapedArray.from_flat((2, 2, 2), range(8))
        ShapedArray.filled((2, 3, 4), fill=1.0)
        ShapedArray.zeros((2, 3, 4))
    """

    def __init__(self, values: Sequence[Any], dtype: Any = None):
        shape, flat = check_nested(values, "values")
        if dtype is None:
            element_type = infer_element_type(flat)
        else:
            element_type = resolve_element_type(dtype)
        self._buffer = Buffer.from_sequence(flat, element_type)
        self._shape = shape

    @classmethod
    def from_flat(
        cls,
        shape: Sequence[int],
        values: Sequence[Any],
        dtype: Any = None
    ) -> ShapedArray:
        """
        ShapedArray from row-major flat values.

        Raises:
            InvalidSizeError: If any dimension is not a positive integer
            LengthMismatchError: If len(values) != product(shape)
        """
        dims = check_dims(shape, "shape")
        if not isinstance(values, (list, tuple, np.ndarray)):
            values = list(values)
        flat_shape, flat = check_nested(values, "values", allow_empty=True)
        check_rank(flat_shape, 1, "values")
        return cls._from_flat(dims, flat, dtype)

    @classmethod
    def filled(cls, shape: Sequence[int], fill: Any = 0.0, dtype: Any = None) -> ShapedArray:
        """ShapedArray with every element set to fill."""
        return cls._filled(shape, fill, dtype)

    @classmethod
    def zeros(cls, shape: Sequence[int], dtype: Any = ElementType.FLOAT64) -> ShapedArray:
        """Zero-filled array."""
        return cls._filled(shape, 0, dtype)
