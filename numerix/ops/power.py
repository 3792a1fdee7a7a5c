"""
Elementwise power and exponential functions.

Defined for float32, float64, complex64 and complex128 containers of any
rank. The result always has the shape and element type of the input.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from numerix.containers.base import Container
from numerix.core.buffer import Buffer
from numerix.core.exceptions import ValidationError
from numerix.core.validation import (
    check_length,
    check_nested,
    check_rank,
    check_scalar,
    has_complex,
)
from numerix.kernels import get_kernel
from numerix.ops._dispatch import allocate_like, check_container, require_support


def _exponents(exponent: Any, base: Container) -> Any:
    """Scalar exponent, or a Buffer of one exponent per element."""
    if isinstance(exponent, Container):
        check_length(exponent.count, base.count, 'exponent')
        values = exponent.buffer.data
    elif isinstance(exponent, (list, tuple, np.ndarray)):
        shape, values = check_nested(exponent, 'exponent', allow_empty=True)
        check_rank(shape, 1, 'exponent')
        check_length(len(values), base.count, 'exponent')
    else:
        return check_scalar(exponent, base.dtype, 'exponent')
    if not base.dtype.is_complex and has_complex(values):
        raise ValidationError(
            f"exponent: complex exponents cannot combine with {base.dtype} elements"
        )
    return Buffer.from_sequence(values, base.dtype)


def power(base: Container, exponent: Any) -> Container:
    """
    Raise every element to a power.

    Args:
        base: Container of bases
        exponent: One scalar exponent for every element, or a flat sequence
            (or container) holding one exponent per element in row-major order

    Returns:
        New container of the same kind and shape

    Raises:
        LengthMismatchError: If the exponent sequence length != base.count
        ValidationError: If complex exponents are given for a real base
        UnsupportedDTypeError: For int32 containers

    Examples:
        >>> power(Vector([1, 2, 3, 4, 5]), 2.0).values
        [1.0, 4.0, 9.0, 16.0, 25.0]
    """
    check_container(base, 'power')
    kernel = get_kernel()
    require_support(kernel, 'power', base.dtype)
    exponents = _exponents(exponent, base)
    out = allocate_like(base)
    kernel.power(base.buffer, exponents, out.buffer)
    return out


def _unary(operation: str, operand: Container) -> Container:
    check_container(operand, operation)
    kernel = get_kernel()
    require_support(kernel, operation, operand.dtype)
    out = allocate_like(operand)
    kernel.unary(operation, operand.buffer, out.buffer)
    return out


def exp(operand: Container) -> Container:
    """Elementwise e**x."""
    return _unary('exp', operand)


def exp2(operand: Container) -> Container:
    """Elementwise 2**x."""
    return _unary('exp2', operand)


def expm1(operand: Container) -> Container:
    """Elementwise e**x - 1, accurate for small x."""
    return _unary('expm1', operand)
