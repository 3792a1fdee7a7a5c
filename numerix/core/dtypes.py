"""
Element types and precision utilities.

The set of element types is closed: int32, float32, float64, complex64 and
complex128. Each type carries the prefix of the BLAS routines that serve it,
so kernel selection is a table lookup rather than generic numeric dispatch.
"""

from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray

from numerix.core.exceptions import UnsupportedDTypeError


class ElementType(Enum):
    """Element type of a Buffer and of the container wrapping it."""

    INT32 = 'int32'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    COMPLEX64 = 'complex64'
    COMPLEX128 = 'complex128'

    def __str__(self) -> str:
        return self.value

    @property
    def dtype(self) -> np.dtype:
        """NumPy dtype used for storage."""
        return np.dtype(self.value)

    @property
    def is_integer(self) -> bool:
        return self is ElementType.INT32

    @property
    def is_complex(self) -> bool:
        return self in (ElementType.COMPLEX64, ElementType.COMPLEX128)

    @property
    def working_type(self) -> 'ElementType':
        """
        Type the BLAS kernels compute in.

        Integers are promoted to float64; every other type is served by a
        kernel of its own precision.
        """
        if self is ElementType.INT32:
            return ElementType.FLOAT64
        return self

    @property
    def blas_prefix(self) -> str:
        """BLAS precision prefix ('s', 'd', 'c', 'z') of the working type."""
        return _BLAS_PREFIX[self.working_type]

    @property
    def real_type(self) -> 'ElementType':
        """Real type of the same precision (result type of a norm)."""
        return _REAL_TYPE[self]


_BLAS_PREFIX = {
    ElementType.FLOAT32: 's',
    ElementType.FLOAT64: 'd',
    ElementType.COMPLEX64: 'c',
    ElementType.COMPLEX128: 'z',
}

_REAL_TYPE = {
    ElementType.INT32: ElementType.FLOAT64,
    ElementType.FLOAT32: ElementType.FLOAT32,
    ElementType.FLOAT64: ElementType.FLOAT64,
    ElementType.COMPLEX64: ElementType.FLOAT32,
    ElementType.COMPLEX128: ElementType.FLOAT64,
}

_PYTHON_TYPES = {
    int: ElementType.INT32,
    float: ElementType.FLOAT64,
    complex: ElementType.COMPLEX128,
}


def resolve_element_type(dtype: Any) -> ElementType:
    """
    Map a user-facing dtype argument to an ElementType.

    Accepts an ElementType, its name ('float32'), a NumPy dtype or scalar
    type, or one of the Python scalar types int, float, complex.

    Raises:
        UnsupportedDTypeError: If the dtype is outside the supported set
    """
    if isinstance(dtype, ElementType):
        return dtype
    if isinstance(dtype, type) and dtype in _PYTHON_TYPES:
        return _PYTHON_TYPES[dtype]
    if dtype is None:
        raise UnsupportedDTypeError("dtype: None is not an element type", dtype=dtype)
    try:
        name = np.dtype(dtype).name
    except (TypeError, ValueError) as e:
        raise UnsupportedDTypeError(
            f"dtype: cannot interpret {dtype!r} as an element type", dtype=dtype
        ) from e
    try:
        return ElementType(name)
    except ValueError as e:
        supported = ", ".join(t.value for t in ElementType)
        raise UnsupportedDTypeError(
            f"dtype: {name} is not supported, expected one of {supported}",
            dtype=dtype,
        ) from e


def infer_element_type(flat: list[Any] | NDArray[Any]) -> ElementType:
    """
    Element type for data given without an explicit dtype.

    NumPy arrays keep their dtype when it is in the supported set. Plain
    Python data becomes complex128 if any value is complex, else float64.
    """
    if isinstance(flat, np.ndarray):
        if flat.dtype.name in {t.value for t in ElementType}:
            return ElementType(flat.dtype.name)
        if np.issubdtype(flat.dtype, np.complexfloating):
            return ElementType.COMPLEX128
        return ElementType.FLOAT64
    if any(isinstance(v, (complex, np.complexfloating)) for v in flat):
        return ElementType.COMPLEX128
    return ElementType.FLOAT64


def machine_epsilon(element_type: ElementType) -> float:
    """
    Get machine epsilon for the working precision of an element type.

    Args:
        element_type: Element type

    Returns:
        Machine epsilon of its real type
    """
    return float(np.finfo(element_type.real_type.dtype).eps)


def default_rtol(element_type: ElementType) -> float:
    """Default relative tolerance for approximate comparison: sqrt(eps)."""
    return float(np.sqrt(machine_epsilon(element_type)))


def is_close(
    a: NDArray[Any],
    b: NDArray[Any],
    rtol: float,
    atol: float = 0.0
) -> NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First values
        b: Second values
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
