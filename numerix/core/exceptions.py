"""
Exception hierarchy for Numerix.

All exceptions inherit from NumerixError to allow catching any
library-specific error. Every failure is a precondition violation raised at
the point of the offending call; no operation returns a partial result.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the violated invariant with actual vs expected values
    - Never catch and re-raise with less information
"""


class NumerixError(Exception):
    """Base exception for all Numerix errors."""
    pass


class ValidationError(NumerixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Container dimensions are incorrect or inconsistent.

    Raised when a shape has the wrong rank or when the shapes of several
    operands cannot be combined.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Elementwise operation on containers of different shapes.

    Attributes:
        lhs_shape: Shape of the left operand
        rhs_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        lhs_shape: tuple[int, ...] | None = None,
        rhs_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape


class DimensionMismatchError(ShapeMismatchError):
    """
    Matrix product whose inner dimensions disagree.

    Attributes:
        lhs_columns: Number of columns of the left matrix
        rhs_rows: Number of rows of the right matrix
    """

    def __init__(
        self,
        message: str,
        lhs_shape: tuple[int, ...] | None = None,
        rhs_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message, lhs_shape=lhs_shape, rhs_shape=rhs_shape)
        self.lhs_columns = lhs_shape[-1] if lhs_shape else None
        self.rhs_rows = rhs_shape[0] if rhs_shape else None


class RaggedShapeError(DimensionError):
    """
    Nested sequence is not rectangular.

    Attributes:
        depth: Nesting depth at which the irregularity was found (0 = outermost)
        expected: Length shared by the earlier sequences at that depth
        actual: Offending length (None when an element is not a sequence)
    """

    def __init__(
        self,
        message: str,
        depth: int | None = None,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.depth = depth
        self.expected = expected
        self.actual = actual


class InvalidSizeError(DimensionError):
    """
    Requested element count or dimension size is not allowed.

    Attributes:
        size: The rejected size
    """

    def __init__(self, message: str, size: object = None):
        super().__init__(message)
        self.size = size


class LengthMismatchError(ValidationError):
    """
    Per-element parameter sequence has the wrong length.

    Attributes:
        expected: Required length
        actual: Length that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DTypeError(ValidationError):
    """Element type is not usable for the requested operation."""
    pass


class UnsupportedDTypeError(DTypeError):
    """
    Element type outside the supported set, or not defined for an operation.

    Attributes:
        dtype: The rejected element type (as given)
        operation: Operation name, if the type is only unsupported there
    """

    def __init__(
        self,
        message: str,
        dtype: object = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.dtype = dtype
        self.operation = operation


class DTypeMismatchError(DTypeError):
    """
    Binary operation on containers of different element types.

    Attributes:
        lhs_dtype: Element type of the left operand
        rhs_dtype: Element type of the right operand
    """

    def __init__(self, message: str, lhs_dtype: object = None, rhs_dtype: object = None):
        super().__init__(message)
        self.lhs_dtype = lhs_dtype
        self.rhs_dtype = rhs_dtype


class IndexOutOfRangeError(NumerixError, IndexError):
    """
    Element access outside the container bounds.

    Only raised while bounds checking is enabled (see numerix.core.config).

    Attributes:
        index: The offending index or index tuple
        shape: Shape of the container that was accessed
    """

    def __init__(
        self,
        message: str,
        index: object = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(NumerixError):
    """
    Numerical computation produced an unrepresentable result.

    Raised, for example, when an integer matrix product does not fit back
    into the 32-bit integer element type.
    """
    pass
