"""
Linear algebra dispatch: matrix product, norm, dot product, max-magnitude index.

Each operation validates shapes, picks the BLAS routine for the element type
(s/d/c/z), and wraps the kernel output in a new container or scalar.
Integer data takes its own path: it is promoted to float64, handed to the
double-precision routine, and narrowed back to int32 afterwards.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from numerix.containers.base import Container
from numerix.containers.matrix import Matrix
from numerix.containers.shaped import ShapedArray
from numerix.containers.vector import Vector
from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType
from numerix.core.exceptions import NumericalError, ValidationError
from numerix.core.validation import check_inner_dims, check_length
from numerix.kernels import get_kernel
from numerix.ops._dispatch import (
    check_container,
    check_same_dtype,
    narrow_to_int32,
    promote,
    require_support,
)


_INT32_INFO = np.iinfo(np.int32)


def matmul(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Matrix product C = A B.

    Computes C <- 1 * A B + 0 * C with the precision-specific ?gemm routine.
    Row-major operands are passed with leading dimensions equal to their
    column counts. int32 matrices are multiplied in float64 and the result
    truncated toward zero.

    Args:
        lhs: Matrix A (m x k)
        rhs: Matrix B (k x p)

    Returns:
        New Matrix (m x p)

    Raises:
        ValidationError: If either operand is not a Matrix
        DimensionMismatchError: If A.columns != B.rows
        DTypeMismatchError: If the element types differ
        NumericalError: If an int32 product does not fit in int32

    Examples:
        >>> a = Matrix([[1, 2, 3], [4, 5, 6]])
        >>> b = Matrix([[7, 8], [9, 10], [11, 12]])
        >>> matmul(a, b).values
        [58.0, 64.0, 139.0, 154.0]
    """
    for operand in (lhs, rhs):
        if not isinstance(operand, Matrix):
            raise ValidationError(f"matmul: expected two matrices, got {type(operand).__name__}")
    check_same_dtype(lhs.dtype, rhs.dtype, 'matmul')
    check_inner_dims(lhs.shape, rhs.shape, 'matmul')

    kernel = get_kernel()
    element_type = lhs.dtype
    require_support(kernel, 'matmul', element_type)

    m, k = lhs.shape
    n = rhs.columns
    product = Buffer.allocate(m * n, element_type.working_type)
    kernel.gemm(m, n, k, promote(lhs.buffer), promote(rhs.buffer), product)

    if element_type.is_integer:
        product = narrow_to_int32(product, 'matmul')
    return Matrix._wrap(product, (m, n))


def norm(operand: Container) -> float:
    """
    Euclidean (L2) norm over all elements.

    Matrices and shaped arrays are treated as one flat sequence. The result
    has the real precision of the element type (float32 for float32 and
    complex64) and is returned as a Python float.

    Examples:
        >>> norm(Vector([3, 4]))
        5.0
    """
    check_container(operand, 'norm')
    kernel = get_kernel()
    require_support(kernel, 'norm', operand.dtype)
    if operand.count == 0:
        return 0.0
    value = kernel.nrm2(promote(operand.buffer), incx=1)
    return float(operand.dtype.real_type.dtype.type(value))


def max_abs_index(operand: Container) -> Any:
    """
    Index of the first element of greatest magnitude.

    Follows BLAS i?amax: a strict '>' scan in storage order, so ties go to
    the first occurrence. Complex magnitude is |re| + |im|.

    Returns:
        int for a Vector, (row, column) for a Matrix, an index tuple for a
        ShapedArray

    Raises:
        ValidationError: If the container is empty
    """
    check_container(operand, 'max_abs_index')
    if operand.count == 0:
        raise ValidationError("max_abs_index: container is empty")
    kernel = get_kernel()
    require_support(kernel, 'max_abs_index', operand.dtype)
    index = kernel.iamax(promote(operand.buffer), incx=1)

    if isinstance(operand, Matrix):
        row, column = divmod(index, operand.columns)
        return row, column
    if isinstance(operand, ShapedArray):
        return tuple(int(i) for i in np.unravel_index(index, operand.shape))
    return index


def dot(lhs: Vector, rhs: Vector) -> Any:
    """
    Unconjugated inner product sum(lhs[i] * rhs[i]) of two vectors.

    Returns:
        int, float or complex matching the element type

    Raises:
        ValidationError: If either operand is not a Vector
        LengthMismatchError: If the lengths differ
        DTypeMismatchError: If the element types differ
        NumericalError: If an int32 result does not fit in int32
    """
    for operand in (lhs, rhs):
        if not isinstance(operand, Vector):
            raise ValidationError(f"dot: expected two vectors, got {type(operand).__name__}")
    check_same_dtype(lhs.dtype, rhs.dtype, 'dot')
    check_length(rhs.length, lhs.length, 'dot: rhs')

    kernel = get_kernel()
    element_type = lhs.dtype
    require_support(kernel, 'dot', element_type)
    if lhs.length == 0:
        return element_type.dtype.type(0).item()

    value = kernel.dot(promote(lhs.buffer), promote(rhs.buffer))
    if element_type is ElementType.INT32:
        value = np.trunc(value)
        if not _INT32_INFO.min <= value <= _INT32_INFO.max:
            raise NumericalError(f"dot: result {value} does not fit in int32")
        return int(value)
    return element_type.dtype.type(value).item()
