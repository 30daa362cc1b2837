"""
PyCholesky: dense Cholesky factorization for Python.

Lower (A = L L') and upper (A = R' R) Cholesky decomposition with an
advisory symmetric positive definite verdict, and a forward/back
substitution solver built on the lower factor.

Submodules:
    cholesky: factor() / solve() public API
    core: Matrix protocol, DenseMatrix, exceptions, kernels
"""

__version__ = "0.1.0"

from pycholesky import cholesky
from pycholesky.core.matrix import DenseMatrix
from pycholesky.core.compute.linalg import (
    cholesky_lower,
    cholesky_upper,
    cholesky_solve,
)
from pycholesky.core.exceptions import (
    ShapeError,
    DimensionMismatchError,
    NotPositiveDefiniteError,
)

__all__ = [
    "__version__",
    "cholesky",
    "DenseMatrix",
    "cholesky_lower",
    "cholesky_upper",
    "cholesky_solve",
    "ShapeError",
    "DimensionMismatchError",
    "NotPositiveDefiniteError",
]
