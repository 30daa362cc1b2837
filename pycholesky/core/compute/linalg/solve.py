"""
Triangular solvers built on a Cholesky factor.

cholesky_solve solves A X = B given the lower factor L of A = L L' by
forward substitution (L Y = B) followed by back substitution (L' X = Y).
"""

import numpy as np
from numpy.typing import ArrayLike

from pycholesky.core.matrix import DenseMatrix, as_matrix
from pycholesky.core.protocols import Matrix
from pycholesky.core.validation import check_square, check_matching_rows


def cholesky_solve(
    l: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    overwrite_b: bool = True
) -> Matrix:
    """
    Solve a @ x = b where a = l @ l.T.

    By default the solve runs in place: b is overwritten column by column
    and the returned matrix is b itself, so callers that still need the
    right-hand side must copy it first. A float64 C-contiguous NumPy b is
    wrapped without copying and is therefore overwritten as well; any other
    array-like is converted first and left untouched. With
    overwrite_b=False a fresh solution matrix is allocated instead.

    No check is made for a zero diagonal in l. A factor whose pivots were
    clamped (spd == False from the factorization) gives inf or NaN entries;
    check the SPD flag before solving.

    Args:
        l: Lower triangular Cholesky factor (n x n)
        b: Right-hand side (n x nx)
        overwrite_b: Solve in place (True) or into a copy (False)

    Returns:
        Solution x (n x nx); the same object as b when solved in place

    Raises:
        ShapeError: If l is not square
        DimensionMismatchError: If b does not have n rows
    """
    l = as_matrix(l, 'l')
    b = as_matrix(b, 'b')

    check_square(l.dims(), 'l')
    n = l.rows
    bm, nx = b.dims()
    check_matching_rows(n, bm, 'b')

    if overwrite_b:
        x = b
    else:
        rows = [b.row(i) for i in range(bm)]
        x = DenseMatrix(np.array(rows, dtype=np.float64).reshape(bm, nx))

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        # Solve L*Y = B
        for k in range(n):
            l_kk = np.float64(l.at(k, k))
            for j in range(nx):
                x_kj = np.float64(x.at(k, j))
                for i in range(k):
                    x_kj -= x.at(i, j) * l.at(k, i)
                x.set(k, j, x_kj / l_kk)

        # Solve L'*X = Y
        for k in range(n - 1, -1, -1):
            l_kk = np.float64(l.at(k, k))
            for j in range(nx):
                x_kj = np.float64(x.at(k, j))
                for i in range(k + 1, n):
                    x_kj -= x.at(i, j) * l.at(i, k)
                x.set(k, j, x_kj / l_kk)

    return x
