"""
Core infrastructure for Numerix.

This module provides the storage and type abstractions shared by the
containers, the dispatch layer and the kernels.

Key components:
    buffer: Owned contiguous element storage
    dtypes: Closed set of element types and precision utilities
    protocols: Kernel protocol
    exceptions: Exception hierarchy
    validation: Input validators
    config: Print options and bounds checking
"""

from numerix.core.buffer import Buffer
from numerix.core.dtypes import ElementType
from numerix.core.protocols import Kernel
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

__all__ = [
    # Storage
    "Buffer",
    "ElementType",
    # Protocols
    "Kernel",
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
