"""
Cholesky decomposition kernels.

Reference (dot-product) Cholesky factorization in two variants:

    cholesky_lower: A = L L'   (row-oriented, L lower triangular)
    cholesky_upper: A = R' R   (column-oriented, R upper triangular)

Both return the factor together with a boolean verdict on whether A is
symmetric positive definite. The verdict is advisory: the factor is
always computed in full and nothing is raised for non-SPD input.

The verdict is true only if A is square, every pair A[k, j] == A[j, k]
compared during elimination is exactly equal, and every diagonal pivot
is strictly positive. Non-positive pivots are clamped to zero before the
square root, and entries below (or right of) a zero pivot are set to
zero, so a finite input always yields a finite factor.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.matrix import DenseMatrix, as_matrix
from pycholesky.core.protocols import Matrix

# (factor, spd) or (factor, spd, pivots)
FactorResult = (
    tuple[DenseMatrix, bool]
    | tuple[DenseMatrix, bool, NDArray[np.floating[Any]]]
)


def cholesky_lower(
    a: Matrix | ArrayLike,
    *,
    return_pivots: bool = False
) -> FactorResult:
    """
    Left Cholesky decomposition: a = l @ l.T.

    Algorithm, for each row j:
        L[j, k] = (A[j, k] - sum_{i<k} L[k, i] L[j, i]) / L[k, k]   for k < j
        d       = A[j, j] - sum_{k<j} L[j, k]^2
        L[j, j] = sqrt(max(d, 0))
    Rows of L are fetched and stored whole, so the inner dot product
    works on local copies.

    Args:
        a: Matrix to factor (m x n). Only its leading n x n block is read.
        return_pivots: Also return the n diagonal pivots d (before clamping).

    Returns:
        (L, spd) or (L, spd, pivots). L is a freshly allocated n x n lower
        triangular DenseMatrix.

    Raises:
        IndexError: If a has fewer rows than columns (out-of-range access)
    """
    a = as_matrix(a, 'a')
    m, n = a.dims()
    spd = m == n
    l = DenseMatrix.zeros(n, n)
    pivots = np.zeros(n, dtype=np.float64)

    for j in range(n):
        d = 0.0
        l_row_j = l.row(j)
        for k in range(j):
            l_row_k = l.row(k)
            s = 0.0
            for i in range(k):
                s += l_row_k[i] * l_row_j[i]
            l_kk = l_row_k[k]
            if l_kk != 0.0:
                s = (a.at(j, k) - s) / l_kk
            else:
                s = 0.0
            l_row_j[k] = s
            d += s * s
            spd = spd and a.at(k, j) == a.at(j, k)
        l.set_row(j, l_row_j)

        d = a.at(j, j) - d
        pivots[j] = d
        spd = spd and d > 0
        l.set(j, j, math.sqrt(max(d, 0.0)))
        for k in range(j + 1, n):
            l.set(j, k, 0.0)

    spd = bool(spd)
    if return_pivots:
        return l, spd, pivots
    return l, spd


def cholesky_upper(
    a: Matrix | ArrayLike,
    *,
    return_pivots: bool = False
) -> FactorResult:
    """
    Right Cholesky decomposition: a = r.T @ r.

    Transpose-dual of cholesky_lower: R[k, j] takes the place of L[j, k]
    and the inner product runs down two partial columns of R. For the
    same SPD input, r matches cholesky_lower's l.T up to rounding order.

    Args:
        a: Matrix to factor (m x n). Only its leading n x n block is read.
        return_pivots: Also return the n diagonal pivots d (before clamping).

    Returns:
        (R, spd) or (R, spd, pivots). R is a freshly allocated n x n upper
        triangular DenseMatrix.
    """
    a = as_matrix(a, 'a')
    m, n = a.dims()
    spd = m == n
    r = DenseMatrix.zeros(n, n)
    pivots = np.zeros(n, dtype=np.float64)

    for j in range(n):
        d = 0.0
        for k in range(j):
            s = a.at(k, j)
            for i in range(k):
                s -= r.at(i, k) * r.at(i, j)
            r_kk = r.at(k, k)
            if r_kk != 0.0:
                s /= r_kk
            else:
                s = 0.0
            r.set(k, j, s)
            d += s * s
            spd = spd and a.at(k, j) == a.at(j, k)

        d = a.at(j, j) - d
        pivots[j] = d
        spd = spd and d > 0
        r.set(j, j, math.sqrt(max(d, 0.0)))
        for k in range(j + 1, n):
            r.set(k, j, 0.0)

    spd = bool(spd)
    if return_pivots:
        return r, spd, pivots
    return r, spd
