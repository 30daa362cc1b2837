"""
Linear algebra kernels for PyCholesky.

Reference implementations written directly against the Matrix protocol
(element and row access), so any conforming container can be factored.

All functions follow these conventions:
    - Factors are freshly allocated DenseMatrix instances
    - Non-SPD input is reported through a boolean, never raised
    - Shape errors in the solver are raised immediately

Submodules:
    cholesky: Lower and upper Cholesky decomposition
    solve: Forward/back substitution with a Cholesky factor
"""

from pycholesky.core.compute.linalg.cholesky import (
    cholesky_lower,
    cholesky_upper,
)
from pycholesky.core.compute.linalg.solve import cholesky_solve

__all__ = [
    "cholesky_lower",
    "cholesky_upper",
    "cholesky_solve",
]
