"""
Kernel protocol for Numerix.

The dispatch layer talks to the numerical kernel library only through this
structural interface. A kernel receives Buffers that have already been
shape-checked and allocated; it fills the output and never fails for valid
inputs.

Design Principles:
    - Minimal contract: only the primitives the dispatch layer needs
    - Stateless: kernels hold no data between calls and are re-entrant
    - Row-major everywhere: kernels marshal to their native layout themselves
"""

from typing import Any, Literal, Protocol, runtime_checkable

from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType

ElementwiseOp = Literal['add', 'subtract', 'multiply', 'divide']
UnaryOp = Literal['exp', 'exp2', 'expm1']

# An elementwise operand: a Buffer or a scalar already converted to the element type
Operand = Buffer | Any


@runtime_checkable
class Kernel(Protocol):
    """
    Protocol for numerical kernel libraries.

    Convention for `name`: '{device}_{library}', e.g. 'cpu_blas'.
    """

    @property
    def name(self) -> str:
        """Kernel identifier."""
        ...

    def elementwise(self, op: ElementwiseOp, x: Operand, y: Operand, out: Buffer) -> None:
        """
        out[i] = x[i] op y[i], where either operand may be a broadcast scalar.
        """
        ...

    def gemm(self, m: int, n: int, k: int, a: Buffer, b: Buffer, out: Buffer) -> None:
        """
        out <- 1 * A @ B + 0 * out for row-major A (m x k) and B (k x n).

        Leading dimensions are k for A and n for B and out.
        """
        ...

    def nrm2(self, x: Buffer, incx: int = 1) -> float:
        """Euclidean norm of every incx-th element."""
        ...

    def iamax(self, x: Buffer, incx: int = 1) -> int:
        """0-based position of the first element of greatest magnitude."""
        ...

    def dot(self, x: Buffer, y: Buffer) -> Any:
        """Unconjugated inner product of two equal-length buffers."""
        ...

    def power(self, x: Buffer, exponent: Operand, out: Buffer) -> None:
        """out[i] = x[i] ** e, for a scalar exponent or one exponent per element."""
        ...

    def unary(self, op: UnaryOp, x: Buffer, out: Buffer) -> None:
        """out[i] = op(x[i]) for an exponential function op."""
        ...

    def larnv(self, idist: int, iseed: list[int], out: Buffer) -> None:
        """
        Fill out with random numbers from distribution idist.

        idist: 1 = uniform (0, 1), 2 = uniform (-1, 1), 3 = normal (0, 1).
        iseed: four integers in [0, 4095], the last one odd.
        """
        ...

    def supports(self, operation: str, element_type: ElementType) -> bool:
        """
        Check whether an operation is defined for an element type.

        Note:
            Unknown operations MUST return False, never raise.
        """
        ...
