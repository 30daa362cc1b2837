"""
Core infrastructure for PyCholesky.

This module provides the shared abstractions the Cholesky domain is
built on.

Key components:
    protocols: Matrix, Backend protocols
    matrix: DenseMatrix container
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pycholesky.core.protocols import Matrix, Backend
from pycholesky.core.matrix import DenseMatrix
from pycholesky.core.result import Result
from pycholesky.core.exceptions import (
    PyCholeskyError,
    ValidationError,
    DimensionError,
    ShapeError,
    DimensionMismatchError,
    NumericalError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Protocols
    "Matrix",
    "Backend",
    # Containers
    "DenseMatrix",
    "Result",
    # Exceptions
    "PyCholeskyError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "DimensionMismatchError",
    "NumericalError",
    "NotPositiveDefiniteError",
]
