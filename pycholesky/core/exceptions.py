"""
Exception hierarchy for PyCholesky.

All exceptions inherit from PyCholeskyError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyCholeskyError(Exception):
    """Base exception for all PyCholesky errors."""
    pass


class ValidationError(PyCholeskyError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class ShapeError(DimensionError):
    """
    Matrix is not square where a square matrix is required.

    Raised by the triangular solver when the Cholesky factor is not
    square. Fatal for the call; never retried.

    Attributes:
        shape: Actual (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class DimensionMismatchError(DimensionError):
    """
    Right-hand side row count disagrees with the factor order.

    Attributes:
        expected: Order of the factor
        actual: Number of rows in the right-hand side
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


class NumericalError(PyCholeskyError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not symmetric positive definite.

    The factorization kernels never raise this: they report the verdict
    as a boolean. Only the opt-in checks of the high-level API do.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_pivot: Smallest diagonal pivot seen before the square root
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_pivot: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.min_pivot = min_pivot
