"""
Numerix: shaped numeric containers over BLAS-backed kernels.

Vectors, matrices and N-dimensional arrays of int32, float32, float64,
complex64 or complex128 elements, with arithmetic, linear algebra and
elementwise math dispatched to NumPy ufuncs and SciPy's BLAS wrappers.

Submodules:
    core: Buffers, element types, exceptions, validation, configuration
    containers: Vector, Matrix, ShapedArray
    ops: Dispatch layer (one function per operation)
    kernels: Kernel implementations
    formatting: Nested-bracket text rendering
"""

__version__ = "0.1.0"

from numerix.core.dtypes import ElementType
from numerix.core.config import (
    PrintOptions,
    get_printoptions,
    set_printoptions,
    printoptions,
    bounds_check_enabled,
    set_bounds_check,
)
from numerix.core.exceptions import (
    NumerixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    DimensionMismatchError,
    RaggedShapeError,
    InvalidSizeError,
    LengthMismatchError,
    DTypeError,
    UnsupportedDTypeError,
    DTypeMismatchError,
    IndexOutOfRangeError,
    NumericalError,
)
from numerix.containers import Vector, Matrix, ShapedArray
from numerix.ops import (
    add,
    subtract,
    multiply,
    hadamard,
    divide,
    negate,
    matmul,
    norm,
    max_abs_index,
    dot,
    power,
    exp,
    exp2,
    expm1,
    Distribution,
    is_approx,
)

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "Matrix",
    "ShapedArray",
    "ElementType",
    # Operations
    "add",
    "subtract",
    "multiply",
    "hadamard",
    "divide",
    "negate",
    "matmul",
    "norm",
    "max_abs_index",
    "dot",
    "power",
    "exp",
    "exp2",
    "expm1",
    "Distribution",
    "is_approx",
    # Configuration
    "PrintOptions",
    "get_printoptions",
    "set_printoptions",
    "printoptions",
    "bounds_check_enabled",
    "set_bounds_check",
    # Exceptions
    "NumerixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "RaggedShapeError",
    "InvalidSizeError",
    "LengthMismatchError",
    "DTypeError",
    "UnsupportedDTypeError",
    "DTypeMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
]
