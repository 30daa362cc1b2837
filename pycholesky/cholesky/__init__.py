"""
Cholesky factorization of dense symmetric positive definite matrices.

Public API:
    factor(A, side='lower') -> CholeskySolution
    solve(A, b) -> x

factor() handles input validation, design construction, backend
selection and result wrapping. The kernels it runs are also available
directly from pycholesky.core.compute.linalg.

Example:
    >>> from pycholesky.cholesky import factor
    >>> sol = factor(A)
    >>> sol.is_spd
    >>> x = sol.solve(b)
    >>> print(sol.summary())
"""

from pycholesky.cholesky.design import CholeskyDesign
from pycholesky.cholesky.solution import CholeskySolution, CholeskyParams
from pycholesky.cholesky.solvers import factor, solve

__all__ = [
    "factor",
    "solve",
    "CholeskyDesign",
    "CholeskySolution",
    "CholeskyParams",
]
