"""
Dispatch layer: one entry point per operation.

Each function validates its operands, selects the kernel routine for the
element type, allocates a new result container and fills it through the
kernel. Operands are never modified.

Public API:
    add, subtract, multiply, divide  - elementwise, scalar broadcast
    hadamard                         - elementwise product of two containers
    negate                           - elementwise negation
    matmul                           - matrix product (?gemm)
    norm                             - Euclidean norm (?nrm2)
    max_abs_index                    - first index of greatest magnitude (i?amax)
    dot                              - vector inner product (?dot / ?dotu)
    power, exp, exp2, expm1          - elementwise power and exponentials
    random_matrix, Distribution      - seeded random fill (?larnv contract)
    is_approx                        - tolerance comparison
"""

from numerix.ops.arithmetic import add, subtract, multiply, hadamard, divide, negate
from numerix.ops.linalg import matmul, norm, max_abs_index, dot
from numerix.ops.power import power, exp, exp2, expm1
from numerix.ops.random import Distribution, random_matrix, draw_seed, check_seed
from numerix.ops.comparison import is_approx

__all__ = [
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "hadamard",
    "divide",
    "negate",
    # Linear algebra
    "matmul",
    "norm",
    "max_abs_index",
    "dot",
    # Power / exponential
    "power",
    "exp",
    "exp2",
    "expm1",
    # Random
    "Distribution",
    "random_matrix",
    "draw_seed",
    "check_seed",
    # Comparison
    "is_approx",
]
