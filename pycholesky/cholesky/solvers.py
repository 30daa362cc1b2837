"""
Solver dispatch for Cholesky factorization.

This module provides the factor() and solve() functions (public API) and
backend selection.
"""

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.exceptions import DimensionError, NotPositiveDefiniteError
from pycholesky.core.protocols import Matrix
from pycholesky.core.validation import check_square
from pycholesky.cholesky.design import CholeskyDesign
from pycholesky.cholesky.solution import CholeskySolution, Side
from pycholesky.cholesky.backends.cpu import CPUReferenceBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_reference']


def factor(
    a: ArrayLike | Matrix | CholeskyDesign,
    *,
    side: Side = 'lower',
    backend: BackendChoice = 'auto',
    check_spd: bool = False,
) -> CholeskySolution:
    """
    Compute the Cholesky factorization of a matrix.

    side='lower' computes L with A = L L'; side='upper' computes R with
    A = R' R. Whether A is symmetric positive definite is reported through
    CholeskySolution.is_spd; the factor is computed either way.

    Args:
        a: Matrix to factor (m x n with m >= n). Any 2-D array-like, any
           Matrix, or a prebuilt CholeskyDesign.
        side: 'lower' or 'upper'
        backend: Computational backend:
            - 'auto' / 'cpu' / 'cpu_reference': CPU reference kernels
        check_spd: If True, raise instead of returning a non-SPD result

    Returns:
        CholeskySolution with the factor, SPD verdict and diagnostics

    Raises:
        ValidationError: If a is not a finite real 2-D matrix
        DimensionError: If a has fewer rows than columns
        NotPositiveDefiniteError: If check_spd and a is not SPD
        ValueError: If side or backend is unknown

    Example:
        >>> from pycholesky.cholesky import factor
        >>> sol = factor([[4.0, 2.0], [2.0, 3.0]])
        >>> sol.is_spd
        True
        >>> sol.solve([1.0, 2.0])
        array([-0.125,  0.75 ])
    """
    # === Input Validation ===
    if side not in ('lower', 'upper'):
        raise ValueError(f"side must be 'lower' or 'upper', got {side!r}")

    if isinstance(a, CholeskyDesign):
        design = a
    elif isinstance(a, Matrix):
        design = CholeskyDesign.from_matrix(a)
    else:
        design = CholeskyDesign.build(a)

    if design.rows < design.cols:
        raise DimensionError(
            f"{design.name}: expected at least as many rows as columns, "
            f"got shape ({design.rows}, {design.cols})"
        )

    # === Select Backend and Solve ===
    backend_impl = _get_backend(backend, side)
    result = backend_impl.solve(design)
    solution = CholeskySolution(_result=result, _design=design)

    if check_spd and not solution.is_spd:
        raise NotPositiveDefiniteError(
            f"{design.name} is not symmetric positive definite "
            f"(min pivot {solution.min_pivot:.6g})",
            matrix_name=design.name,
            min_pivot=solution.min_pivot,
        )

    return solution


def solve(
    a: ArrayLike | Matrix,
    b: ArrayLike,
    *,
    overwrite_b: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b for symmetric positive definite A.

    Factors A with the lower variant, then runs forward and back
    substitution. A 1-D b gives a 1-D x.

    Raises:
        NotPositiveDefiniteError: If A is not symmetric positive definite
        ShapeError: If A is not square
        DimensionMismatchError: If b does not have one row per unknown
    """
    if isinstance(a, Matrix):
        design = CholeskyDesign.from_matrix(a)
    else:
        design = CholeskyDesign.build(a)
    check_square((design.rows, design.cols), design.name)

    solution = factor(design, side='lower', check_spd=True)
    return solution.solve(b, overwrite_b=overwrite_b)


def _get_backend(choice: BackendChoice, side: Side) -> CPUReferenceBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_reference'):
        return CPUReferenceBackend(side)
    raise ValueError(f"Unknown backend: {choice!r}")
