"""
Shared plumbing for the dispatch layer.

Every operation follows the same sequence: resolve operands, validate
shapes and element types, check the kernel supports the element type,
allocate a fresh output container, call the kernel. The helpers here
implement the steps that are common to several operations.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from numerix.containers.base import Container
from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType
from numerix.core.exceptions import (
    DTypeMismatchError,
    NumericalError,
    ShapeMismatchError,
    UnsupportedDTypeError,
    ValidationError,
)
from numerix.core.protocols import Kernel
from numerix.core.validation import check_same_shape, check_scalar


_INT32_INFO = np.iinfo(np.int32)


def check_container(value: Any, operation: str) -> Container:
    """
    Verify an operand is a container.

    Raises:
        ValidationError: If value is not a Vector, Matrix or ShapedArray
    """
    if not isinstance(value, Container):
        raise ValidationError(
            f"{operation}: expected a Vector, Matrix or ShapedArray, "
            f"got {type(value).__name__}"
        )
    return value


def check_same_kind(lhs: Container, rhs: Container, operation: str) -> None:
    """
    Verify two containers are of the same kind.

    Raises:
        ShapeMismatchError: If one is e.g. a Vector and the other a Matrix
    """
    if type(lhs) is not type(rhs):
        raise ShapeMismatchError(
            f"{operation}: cannot combine {type(lhs).__name__} {lhs.shape} "
            f"with {type(rhs).__name__} {rhs.shape}",
            lhs_shape=lhs.shape, rhs_shape=rhs.shape,
        )


def check_same_dtype(lhs: ElementType, rhs: ElementType, operation: str) -> None:
    """
    Verify two operands share an element type.

    Raises:
        DTypeMismatchError: If the element types differ
    """
    if lhs is not rhs:
        raise DTypeMismatchError(
            f"{operation}: operands must have the same element type, got {lhs} and {rhs}",
            lhs_dtype=lhs, rhs_dtype=rhs,
        )


def require_support(kernel: Kernel, operation: str, element_type: ElementType) -> None:
    """
    Verify the kernel defines an operation for an element type.

    Raises:
        UnsupportedDTypeError: If it does not
    """
    if not kernel.supports(operation, element_type):
        raise UnsupportedDTypeError(
            f"{operation}: not defined for {element_type} elements",
            dtype=element_type, operation=operation,
        )


def binary_operands(
    lhs: Any,
    rhs: Any,
    operation: str
) -> tuple[Container, Any, Any, ElementType]:
    """
    Resolve the operands of an elementwise binary operation.

    Either operand may be a scalar, which is converted to the element type
    of the container operand and broadcast by the kernel.

    Returns:
        (template container for the result, lhs operand, rhs operand, element type)

    Raises:
        ValidationError: If neither operand is a container or a scalar is invalid
        ShapeMismatchError: If two containers differ in kind or shape
        DTypeMismatchError: If two containers differ in element type
    """
    lhs_is_container = isinstance(lhs, Container)
    rhs_is_container = isinstance(rhs, Container)

    if lhs_is_container and rhs_is_container:
        check_same_kind(lhs, rhs, operation)
        check_same_shape(lhs.shape, rhs.shape, operation)
        check_same_dtype(lhs.dtype, rhs.dtype, operation)
        return lhs, lhs.buffer, rhs.buffer, lhs.dtype

    if lhs_is_container:
        scalar = check_scalar(rhs, lhs.dtype, f"{operation}: scalar")
        return lhs, lhs.buffer, scalar, lhs.dtype

    if rhs_is_container:
        scalar = check_scalar(lhs, rhs.dtype, f"{operation}: scalar")
        return rhs, scalar, rhs.buffer, rhs.dtype

    raise ValidationError(
        f"{operation}: expected at least one container operand, "
        f"got {type(lhs).__name__} and {type(rhs).__name__}"
    )


def allocate_like(template: Container, element_type: ElementType | None = None) -> Container:
    """New container of the template's kind and shape with uninitialized storage."""
    if element_type is None:
        element_type = template.dtype
    return type(template)._empty(template.shape, element_type)


def promote(buffer: Buffer) -> Buffer:
    """
    Buffer in the working precision of its element type.

    int32 data is copied into a new float64 Buffer; any other Buffer is
    returned unchanged.
    """
    working = buffer.element_type.working_type
    if working is buffer.element_type:
        return buffer
    return Buffer(buffer.data.astype(working.dtype), working)


def narrow_to_int32(buffer: Buffer, operation: str) -> Buffer:
    """
    Truncate a float64 Buffer toward zero into a new int32 Buffer.

    Raises:
        NumericalError: If any value is non-finite or outside the int32 range
    """
    truncated = np.trunc(buffer.data)
    if truncated.size and not (
        np.all(np.isfinite(truncated))
        and truncated.min() >= _INT32_INFO.min
        and truncated.max() <= _INT32_INFO.max
    ):
        raise NumericalError(
            f"{operation}: result does not fit in int32 "
            f"(range [{truncated.min()}, {truncated.max()}])"
        )
    return Buffer(truncated.astype(np.int32), ElementType.INT32)
