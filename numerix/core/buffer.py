"""
Owned contiguous storage for container elements.

A Buffer holds exactly one 1-D, C-contiguous NumPy array that it allocated
itself. Construction from a sequence or from another Buffer always copies,
so no two Buffers ever share memory. The element count is fixed for the
lifetime of the Buffer; storage is released when the owning container is
garbage collected.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from numerix.core.dtypes import ElementType, resolve_element_type
from numerix.core.exceptions import ValidationError
from numerix.core.validation import check_size


class Buffer:
    """
    Exclusive owner of a block of same-typed elements.

    Construction:
        Buffer.allocate(count, element_type)
        Buffer.filled(count, fill, element_type)
        Buffer.from_sequence(values, element_type)
        Buffer.copy_of(other)

    Only the dispatch layer and kernels touch `data`; everything else goes
    through the owning container.
    """

    def __init__(self, data: NDArray[Any], element_type: ElementType):
        self._data = data
        self._element_type = element_type

    @classmethod
    def allocate(cls, count: int, element_type: Any = ElementType.FLOAT64) -> Buffer:
        """
        Allocate uninitialized storage.

        The caller must fill every element before reading it.

        Raises:
            InvalidSizeError: If count is negative or not an integer
        """
        n = check_size(count, "count")
        et = resolve_element_type(element_type)
        return cls(np.empty(n, dtype=et.dtype), et)

    @classmethod
    def filled(cls, count: int, fill: Any, element_type: Any = ElementType.FLOAT64) -> Buffer:
        """
        Allocate storage with every element set to fill.

        Raises:
            InvalidSizeError: If count is negative or not an integer
        """
        n = check_size(count, "count")
        et = resolve_element_type(element_type)
        return cls(np.full(n, fill, dtype=et.dtype), et)

    @classmethod
    def from_sequence(
        cls,
        values: Sequence[Any] | NDArray[Any],
        element_type: Any = ElementType.FLOAT64
    ) -> Buffer:
        """
        Allocate storage holding a copy of a flat sequence.

        Integer element types accept only integral values inside the type's
        range; NumPy's silent truncation and wraparound are not applied.

        Raises:
            ValidationError: If the values cannot be stored as the element type
        """
        et = resolve_element_type(element_type)
        try:
            source = np.asarray(values)
            if source.dtype.kind == 'c' and not et.is_complex:
                raise ValueError("complex values for a real element type")
            if et.is_integer:
                _check_integral(source, et)
            data = np.array(source, dtype=et.dtype, copy=True)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValidationError(f"values: cannot store as {et}: {e}") from e
        if data.ndim != 1:
            raise ValidationError(f"values: expected a flat sequence, got {data.ndim}D data")
        return cls(np.ascontiguousarray(data), et)

    @classmethod
    def copy_of(cls, other: Buffer) -> Buffer:
        """Deep copy of another Buffer."""
        return cls(other._data.copy(), other._element_type)

    @property
    def count(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    @property
    def element_type(self) -> ElementType:
        return self._element_type

    @property
    def data(self) -> NDArray[Any]:
        """The owned storage array."""
        return self._data

    def tolist(self) -> list[Any]:
        """Copy of the elements as Python scalars."""
        return self._data.tolist()

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"Buffer(count={self.count}, element_type={self._element_type.value})"


def _check_integral(source: NDArray[Any], et: ElementType) -> None:
    """Reject values an integer element type would truncate or wrap."""
    if source.dtype.kind in 'biu':
        staged = source
    else:
        staged = source.astype(np.float64)
        if not np.all(np.isfinite(staged)):
            raise ValueError("non-finite values")
        if np.any(staged != np.trunc(staged)):
            raise ValueError("non-integral values")
    info = np.iinfo(et.dtype)
    if staged.size and (staged.min() < info.min or staged.max() > info.max):
        raise OverflowError(f"values outside {et} range [{info.min}, {info.max}]")
