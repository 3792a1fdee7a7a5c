"""
Shared storage discipline for Vector, Matrix and ShapedArray.

A container is a Buffer plus a shape. It is the only holder of its Buffer:
every operation that produces a container allocates a new Buffer, and
augmented assignment (a += b) rebinds the name to that new container
instead of writing into the old one.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from numerix.core.buffer import Buffer
from numerix.core.config import bounds_check_enabled
from numerix.core.dtypes import ElementType, infer_element_type, resolve_element_type
from numerix.core.validation import check_dims, check_index, check_length, check_scalar
from numerix.formatting import array_description


def _is_operand(value: Any) -> bool:
    return isinstance(value, (Container, numbers.Number))


class Container:
    """
    Base class of all shaped containers.

    Subclasses fix the rank and provide the public constructors; this class
    provides shape queries, element access, equality, text rendering and
    operator syntax. Operators forward to the named functions in
    numerix.ops.
    """

    _buffer: Buffer
    _shape: tuple[int, ...]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, buffer: Buffer, shape: tuple[int, ...]):
        """Adopt a freshly allocated Buffer without copying it."""
        obj = cls.__new__(cls)
        obj._buffer = buffer
        obj._shape = tuple(shape)
        return obj

    @classmethod
    def _empty(cls, shape: tuple[int, ...], element_type: ElementType):
        """Container with uninitialized storage, to be filled by a kernel."""
        return cls._wrap(Buffer.allocate(int(np.prod(shape)), element_type), shape)

    @classmethod
    def _filled(cls, dims: Any, fill: Any, dtype: Any):
        shape = check_dims(dims, "shape")
        if dtype is None:
            element_type = infer_element_type([fill])
        else:
            element_type = resolve_element_type(dtype)
        value = check_scalar(fill, element_type, "fill")
        return cls._wrap(Buffer.filled(int(np.prod(shape)), value, element_type), shape)

    @classmethod
    def _from_flat(cls, shape: tuple[int, ...], flat: Any, dtype: Any):
        check_length(len(flat), int(np.prod(shape)), "values")
        if dtype is None:
            element_type = infer_element_type(flat)
        else:
            element_type = resolve_element_type(dtype)
        return cls._wrap(Buffer.from_sequence(flat, element_type), shape)

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def count(self) -> int:
        """Total number of elements."""
        return self._buffer.count

    @property
    def dtype(self) -> ElementType:
        return self._buffer.element_type

    @property
    def buffer(self) -> Buffer:
        """The Buffer owned by this container."""
        return self._buffer

    @property
    def values(self) -> list[Any]:
        """Copy of all elements, flat, in row-major order."""
        return self._buffer.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a NumPy array of this container's shape."""
        return self._buffer.data.reshape(self._shape).copy()

    def copy(self):
        """Deep copy with its own Buffer."""
        return type(self)._wrap(Buffer.copy_of(self._buffer), self._shape)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _flat_index(self, index: Any) -> int:
        if not isinstance(index, tuple):
            index = (index,)
        if bounds_check_enabled():
            check_index(index, self._shape)
        flat = 0
        for i, d in zip(index, self._shape):
            flat = flat * d + i
        return flat

    def __getitem__(self, index: Any) -> Any:
        return self._buffer.data[self._flat_index(index)].item()

    def __setitem__(self, index: Any, value: Any) -> None:
        flat = self._flat_index(index)
        self._buffer.data[flat] = check_scalar(value, self.dtype, "value")

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Container):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._shape == other._shape
            and bool(np.array_equal(self._buffer.data, other._buffer.data))
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Mutable through __setitem__
    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def _header(self) -> str:
        dims = "x".join(str(d) for d in self._shape)
        return f"{dims} {type(self).__name__}[{self.dtype}]"

    def __str__(self) -> str:
        return self._header() + "\n" + array_description(self._buffer, self._shape)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_numpy().tolist()!r}, dtype='{self.dtype}')"

    # ------------------------------------------------------------------
    # Operator syntax
    # ------------------------------------------------------------------

    def __add__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import subtract
        return subtract(other, self)

    def __mul__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import multiply
        return multiply(other, self)

    def __truediv__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other: Any):
        if not _is_operand(other):
            return NotImplemented
        from numerix.ops.arithmetic import divide
        return divide(other, self)

    def __matmul__(self, other: Any):
        if not isinstance(other, Container):
            return NotImplemented
        from numerix.ops.linalg import matmul
        return matmul(self, other)

    def __pow__(self, exponent: Any):
        from numerix.ops.power import power
        return power(self, exponent)

    def __neg__(self):
        from numerix.ops.arithmetic import negate
        return negate(self)

    def __pos__(self):
        return self.copy()

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------

    def norm(self) -> float:
        """Euclidean norm over all elements."""
        from numerix.ops.linalg import norm
        return norm(self)

    def max_abs_index(self) -> Any:
        """Index of the first element of greatest magnitude."""
        from numerix.ops.linalg import max_abs_index
        return max_abs_index(self)
