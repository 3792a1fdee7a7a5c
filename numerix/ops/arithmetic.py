"""
Elementwise arithmetic: add, subtract, multiply, hadamard, divide.

Container op Container requires identical kind, shape and element type.
Container op scalar (either side) broadcasts the scalar over every element.
The result is always a new container of the container operand's shape.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from numerix.containers.base import Container
from numerix.core.buffer import Buffer
from numerix.kernels import get_kernel
from numerix.ops._dispatch import (
    allocate_like,
    binary_operands,
    check_container,
    require_support,
)


def _elementwise(
    operation: str,
    kernel_op: str,
    lhs: Any,
    rhs: Any
) -> tuple[Container, Any]:
    kernel = get_kernel()
    template, x, y, element_type = binary_operands(lhs, rhs, operation)
    require_support(kernel, operation, element_type)
    out = allocate_like(template)
    kernel.elementwise(kernel_op, x, y, out.buffer)
    return out, y


def add(lhs: Any, rhs: Any) -> Container:
    """
    Elementwise sum.

    Examples:
        >>> add(Vector([1, 2, 3]), 2.0).values
        [3.0, 4.0, 5.0]
    """
    out, _ = _elementwise('add', 'add', lhs, rhs)
    return out


def subtract(lhs: Any, rhs: Any) -> Container:
    """Elementwise difference lhs - rhs."""
    out, _ = _elementwise('subtract', 'subtract', lhs, rhs)
    return out


def multiply(lhs: Any, rhs: Any) -> Container:
    """
    Elementwise product.

    With a scalar operand this scales the container; with two containers it
    is the Hadamard product. Use matmul() for the matrix product.
    """
    out, _ = _elementwise('multiply', 'multiply', lhs, rhs)
    return out


def hadamard(lhs: Container, rhs: Container) -> Container:
    """
    Hadamard (Schur) product of two containers of identical shape.

    Raises:
        ValidationError: If either operand is not a container
        ShapeMismatchError: If the shapes differ
    """
    check_container(lhs, 'hadamard')
    check_container(rhs, 'hadamard')
    out, _ = _elementwise('hadamard', 'multiply', lhs, rhs)
    return out


def divide(lhs: Any, rhs: Any) -> Container:
    """
    Elementwise quotient lhs / rhs.

    Not defined for int32. Division by zero yields inf or nan elements and
    emits a RuntimeWarning with the number of zero divisors.
    """
    out, divisor = _elementwise('divide', 'divide', lhs, rhs)
    if isinstance(divisor, Buffer):
        zeros = int(np.count_nonzero(divisor.data == 0))
    else:
        zeros = out.count if divisor == 0 else 0
    if zeros:
        warnings.warn(
            f"divide: {zeros} zero divisor(s) produced non-finite values",
            RuntimeWarning,
            stacklevel=2,
        )
    return out


def negate(operand: Container) -> Container:
    """Elementwise negation."""
    check_container(operand, 'negate')
    return multiply(operand, -1)

