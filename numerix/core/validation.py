"""
Input validation utilities for Numerix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion of scalars that lose information
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from numerix.core.dtypes import ElementType
from numerix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidSizeError,
    LengthMismatchError,
    RaggedShapeError,
    ShapeMismatchError,
    ValidationError,
)


_INT32_INFO = np.iinfo(np.int32)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def check_size(size: Any, name: str) -> int:
    """
    Verify an element count is a non-negative integer.

    Args:
        size: Count to check
        name: Parameter name for error messages

    Returns:
        The count as int

    Raises:
        InvalidSizeError: If size is not an integer or is negative
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise InvalidSizeError(f"{name}: expected an integer, got {size!r}", size=size)
    if size < 0:
        raise InvalidSizeError(f"{name}: must be >= 0, got {size}", size=size)
    return int(size)


def check_dims(dims: Sequence[Any], name: str) -> tuple[int, ...]:
    """
    Verify a shape is a non-empty sequence of positive integers.

    Args:
        dims: Dimension sizes
        name: Parameter name for error messages

    Returns:
        The shape as a tuple of ints

    Raises:
        InvalidSizeError: If the shape is empty or any size is not positive
    """
    if isinstance(dims, numbers.Integral) and not isinstance(dims, bool):
        dims = (dims,)
    if not _is_sequence(dims) or len(dims) == 0:
        raise InvalidSizeError(f"{name}: expected at least one dimension, got {dims!r}", size=dims)
    shape = []
    for axis, d in enumerate(dims):
        if isinstance(d, bool) or not isinstance(d, numbers.Integral):
            raise InvalidSizeError(
                f"{name}: dimension {axis} must be an integer, got {d!r}", size=d
            )
        if d < 1:
            raise InvalidSizeError(f"{name}: dimension {axis} must be >= 1, got {d}", size=d)
        shape.append(int(d))
    return tuple(shape)


def check_rank(shape: tuple[int, ...], rank: int, name: str) -> None:
    """
    Verify a shape has exactly the specified number of dimensions.

    Raises:
        DimensionError: If the rank differs
    """
    if len(shape) != rank:
        raise DimensionError(
            f"{name}: expected {rank}D data, got {len(shape)}D with shape {shape}"
        )


def check_nested(
    values: Any,
    name: str,
    allow_empty: bool = False
) -> tuple[tuple[int, ...], list[Any] | NDArray[Any]]:
    """
    Infer the shape of a (possibly nested) sequence and flatten it.

    Nesting must be rectangular: every sequence at the same depth has the
    same length and the same nesting below it. NumPy arrays are accepted
    as-is.

    Args:
        values: Flat or nested sequence, or NumPy array
        name: Parameter name for error messages
        allow_empty: Accept an empty flat sequence (shape (0,))

    Returns:
        (shape, flat values in row-major order)

    Raises:
        ValidationError: If values is not a sequence
        RaggedShapeError: If nesting is not rectangular, or is empty when
            allow_empty is False
    """
    if isinstance(values, np.ndarray):
        if values.ndim == 0:
            raise ValidationError(f"{name}: expected a sequence, got a 0-d array")
        shape = tuple(int(d) for d in values.shape)
        if 0 in shape and not (allow_empty and shape == (0,)):
            raise RaggedShapeError(f"{name}: empty sequence has no shape {shape}", depth=0)
        return shape, values.ravel()

    if not _is_sequence(values):
        raise ValidationError(f"{name}: expected a sequence, got {type(values).__name__}")

    dims = []
    head = values
    while _is_sequence(head):
        dims.append(len(head))
        if len(head) == 0:
            break
        head = head[0]
    shape = tuple(dims)

    if shape[0] == 0:
        if allow_empty:
            return (0,), []
        raise RaggedShapeError(f"{name}: outer sequence is empty", depth=0, actual=0)
    if 0 in shape:
        raise RaggedShapeError(
            f"{name}: empty inner sequence at depth {shape.index(0)}",
            depth=shape.index(0), actual=0,
        )

    flat: list[Any] = []
    _flatten(values, shape, 0, flat, name)
    return shape, flat


def _flatten(seq: Any, shape: tuple[int, ...], depth: int, out: list[Any], name: str) -> None:
    if len(seq) != shape[depth]:
        raise RaggedShapeError(
            f"{name}: sequences at depth {depth} have different lengths "
            f"({shape[depth]} and {len(seq)})",
            depth=depth, expected=shape[depth], actual=len(seq),
        )
    last = depth == len(shape) - 1
    for item in seq:
        if last:
            if _is_sequence(item):
                raise RaggedShapeError(
                    f"{name}: unexpected sequence at depth {depth + 1}, "
                    f"expected a scalar",
                    depth=depth + 1, actual=len(item),
                )
            out.append(item)
        else:
            if not _is_sequence(item):
                raise RaggedShapeError(
                    f"{name}: expected a sequence of length {shape[depth + 1]} "
                    f"at depth {depth + 1}, got scalar {item!r}",
                    depth=depth + 1, expected=shape[depth + 1],
                )
            _flatten(item, shape, depth + 1, out, name)


def check_same_shape(
    lhs_shape: tuple[int, ...],
    rhs_shape: tuple[int, ...],
    operation: str
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ in rank or any dimension
    """
    if lhs_shape != rhs_shape:
        raise ShapeMismatchError(
            f"{operation}: operands must have the same shape, "
            f"got {lhs_shape} and {rhs_shape}",
            lhs_shape=lhs_shape, rhs_shape=rhs_shape,
        )


def check_inner_dims(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
    operation: str
) -> None:
    """
    Verify the columns of the left matrix equal the rows of the right one.

    Raises:
        DimensionMismatchError: If the inner dimensions disagree
    """
    if lhs_shape[1] != rhs_shape[0]:
        raise DimensionMismatchError(
            f"{operation}: left matrix has {lhs_shape[1]} columns but right matrix "
            f"has {rhs_shape[0]} rows (shapes {lhs_shape} and {rhs_shape})",
            lhs_shape=lhs_shape, rhs_shape=rhs_shape,
        )


def check_length(actual: int, expected: int, name: str) -> None:
    """
    Verify a per-element parameter sequence has the required length.

    Raises:
        LengthMismatchError: If the lengths differ
    """
    if actual != expected:
        raise LengthMismatchError(
            f"{name}: expected {expected} values (one per element), got {actual}",
            expected=expected, actual=actual,
        )


def check_scalar(value: Any, element_type: ElementType, name: str) -> Any:
    """
    Convert a scalar operand to the element type without losing information.

    Args:
        value: Scalar to convert
        element_type: Element type of the container operand
        name: Parameter name for error messages

    Returns:
        NumPy scalar of the element type

    Raises:
        ValidationError: If value is not a number, is complex against a real
            type, or is non-integral or out of range against int32
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Number):
        raise ValidationError(f"{name}: expected a number, got {type(value).__name__}")
    if not isinstance(value, numbers.Real) and not element_type.is_complex:
        raise ValidationError(
            f"{name}: complex scalar {value!r} cannot combine with {element_type} elements"
        )
    if element_type.is_integer:
        if not float(value).is_integer():
            raise ValidationError(
                f"{name}: non-integral scalar {value!r} cannot combine with int32 elements"
            )
        if not _INT32_INFO.min <= value <= _INT32_INFO.max:
            raise ValidationError(f"{name}: {value!r} is outside the int32 range")
        return element_type.dtype.type(int(value))
    return element_type.dtype.type(value)


def has_complex(values: Any) -> bool:
    """True if a flat array or sequence holds any non-real number."""
    if isinstance(values, np.ndarray) and values.dtype != object:
        return values.dtype.kind == 'c'
    return any(
        isinstance(v, numbers.Complex) and not isinstance(v, numbers.Real) for v in values
    )


def check_index(index: tuple[Any, ...], shape: tuple[int, ...]) -> None:
    """
    Verify an index tuple addresses an element inside the shape.

    Raises:
        TypeError: If an index component is not an integer
        IndexOutOfRangeError: If the arity is wrong or a component is out of range
    """
    if len(index) != len(shape):
        raise IndexOutOfRangeError(
            f"index {index} has {len(index)} components, container has rank {len(shape)}",
            index=index, shape=shape,
        )
    for axis, (i, d) in enumerate(zip(index, shape)):
        if isinstance(i, bool) or not isinstance(i, numbers.Integral):
            raise TypeError(f"indices must be integers, got {type(i).__name__} on axis {axis}")
        if not 0 <= i < d:
            raise IndexOutOfRangeError(
                f"index {i} is out of range for axis {axis} with size {d}",
                index=index, shape=shape,
            )
