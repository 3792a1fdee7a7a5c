"""
CPU kernel backed by NumPy ufuncs and SciPy's BLAS wrappers.

Elementwise arithmetic, power and exponential functions run as NumPy ufuncs
writing straight into the output Buffer. Matrix product, norm, dot product
and max-magnitude search call the precision-specific BLAS routine
(s/d/c/z prefix) through scipy.linalg.blas. Random fill follows the LAPACK
?larnv contract (4-word seed, distribution codes 1-3) using a NumPy
Generator seeded from those four words.

Every routine here assumes its inputs were validated by the dispatch layer
and that integer data has already been promoted to the working precision.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from scipy.linalg import blas

from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType


_ELEMENTWISE = {
    'add': np.add,
    'subtract': np.subtract,
    'multiply': np.multiply,
    'divide': np.divide,
}

_UNARY = {
    'exp': np.exp,
    'exp2': np.exp2,
    'expm1': np.expm1,
}

# Real-valued norm routines; complex vectors use the mixed-prefix names
_NRM2 = {
    ElementType.FLOAT32: 'snrm2',
    ElementType.FLOAT64: 'dnrm2',
    ElementType.COMPLEX64: 'scnrm2',
    ElementType.COMPLEX128: 'dznrm2',
}

# Unconjugated dot products
_DOT = {
    ElementType.FLOAT32: 'sdot',
    ElementType.FLOAT64: 'ddot',
    ElementType.COMPLEX64: 'cdotu',
    ElementType.COMPLEX128: 'zdotu',
}

_ALL = frozenset(ElementType)
_INEXACT = _ALL - {ElementType.INT32}
_REAL_FLOAT = frozenset({ElementType.FLOAT32, ElementType.FLOAT64})

# Element types each operation is defined for. Integer types reach the BLAS
# routines only after promotion to float64 by the dispatch layer.
_SUPPORTED = {
    'add': _ALL,
    'subtract': _ALL,
    'multiply': _ALL,
    'hadamard': _ALL,
    'divide': _INEXACT,
    'matmul': _ALL,
    'norm': _ALL,
    'max_abs_index': _ALL,
    'dot': _ALL,
    'power': _INEXACT,
    'exp': _INEXACT,
    'exp2': _INEXACT,
    'expm1': _INEXACT,
    'random': _REAL_FLOAT,
}


def _blas_func(name: str):
    return getattr(blas, name)


def _operand(value: Any) -> Any:
    return value.data if isinstance(value, Buffer) else value


class CPUKernel:
    """CPU kernel: NumPy ufuncs plus reference/optimized BLAS via SciPy."""

    @property
    def name(self) -> str:
        return 'cpu_blas'

    def supports(self, operation: str, element_type: ElementType) -> bool:
        return element_type in _SUPPORTED.get(operation, ())

    def elementwise(self, op: str, x: Any, y: Any, out: Buffer) -> None:
        ufunc = _ELEMENTWISE[op]
        # Division by zero is reported by the dispatch layer, not by NumPy
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            ufunc(_operand(x), _operand(y), out=out.data)

    def gemm(self, m: int, n: int, k: int, a: Buffer, b: Buffer, out: Buffer) -> None:
        gemm = _blas_func(f'{a.element_type.blas_prefix}gemm')
        # A row-major (m x k) buffer is the column-major (k x m) matrix A^T with
        # leading dimension k, so C^T = B^T A^T needs no copy of either operand.
        a_t = a.data.reshape(m, k).T
        b_t = b.data.reshape(k, n).T
        c_t = gemm(1.0, b_t, a_t, beta=0.0)
        out.data[:] = c_t.T.ravel()

    def nrm2(self, x: Buffer, incx: int = 1) -> float:
        nrm2 = _blas_func(_NRM2[x.element_type])
        return nrm2(x.data, incx=incx)

    def iamax(self, x: Buffer, incx: int = 1) -> int:
        iamax = _blas_func(f'i{x.element_type.blas_prefix}amax')
        return int(iamax(x.data, incx=incx))

    def dot(self, x: Buffer, y: Buffer) -> Any:
        dot = _blas_func(_DOT[x.element_type])
        return dot(x.data, y.data)

    def power(self, x: Buffer, exponent: Any, out: Buffer) -> None:
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            np.power(x.data, _operand(exponent), out=out.data)

    def unary(self, op: str, x: Buffer, out: Buffer) -> None:
        with np.errstate(over='ignore', invalid='ignore'):
            _UNARY[op](x.data, out=out.data)

    def larnv(self, idist: int, iseed: list[int], out: Buffer) -> None:
        rng = np.random.default_rng(iseed)
        data = out.data
        if idist == 3:
            rng.standard_normal(dtype=data.dtype, out=data)
            return
        rng.random(dtype=data.dtype, out=data)
        if idist == 2:
            # [0, 1) -> [-1, 1), in place
            np.multiply(data, 2, out=data)
            np.subtract(data, 1, out=data)
