"""
Vector: rank-1 container.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from numerix.containers.base import Container
from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType, infer_element_type, resolve_element_type
from numerix.core.validation import check_nested, check_rank


class Vector(Container):
    """
    Rank-1 container of `length` elements.

    Construction:
        Vector([1.0, 2.0, 3.0])
        Vector([1, 2, 3], dtype='int32')
        Vector.filled(4, fill=2.2)
        Vector.zeros(5)

    Examples:
        >>> v = Vector([3, 4])
        >>> v.length
        2
        >>> v.norm()
        5.0
    """

    def __init__(self, values: Sequence[Any], dtype: Any = None):
        shape, flat = check_nested(values, "values", allow_empty=True)
        check_rank(shape, 1, "values")
        if dtype is None:
            element_type = infer_element_type(flat)
        else:
            element_type = resolve_element_type(dtype)
        self._buffer = Buffer.from_sequence(flat, element_type)
        self._shape = shape

    @classmethod
    def filled(cls, length: int, fill: Any = 0.0, dtype: Any = None) -> Vector:
        """
        Vector of the given length with every element set to fill.

        Raises:
            InvalidSizeError: If length is not a positive integer
        """
        return cls._filled((length,), fill, dtype)

    @classmethod
    def zeros(cls, length: int, dtype: Any = ElementType.FLOAT64) -> Vector:
        """Zero-filled vector."""
        return cls._filled((length,), 0, dtype)

    @property
    def length(self) -> int:
        return self._shape[0]

    def __len__(self) -> int:
        return self._shape[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._buffer.tolist())

    def _header(self) -> str:
        return f"{self.length}-element Vector[{self.dtype}]"

    def dot(self, other: Vector) -> Any:
        """Inner product with another vector of the same length."""
        from numerix.ops.linalg import dot
        return dot(self, other)
