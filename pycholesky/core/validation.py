"""
Input validation utilities for PyCholesky.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pycholesky.core.exceptions import (
    ValidationError,
    DimensionError,
    ShapeError,
    DimensionMismatchError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype, non-numeric or complex data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported, expected real data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, cols) of the matrix
        name: Parameter name for error messages

    Raises:
        ShapeError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise ShapeError(
            f"{name}: expected a square matrix, got shape ({rows}, {cols})",
            shape=(rows, cols),
        )


def check_matching_rows(order: int, rows: int, name: str) -> None:
    """
    Verify a right-hand side has one row per unknown.

    Args:
        order: Order of the (square) system matrix
        rows: Row count of the right-hand side
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If rows != order
    """
    if rows != order:
        raise DimensionMismatchError(
            f"{name}: expected {order} rows to match the factor order, got {rows}",
            expected=order,
            actual=rows,
        )
