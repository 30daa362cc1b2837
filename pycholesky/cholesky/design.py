"""
Cholesky Design.

Design wraps the matrix to be factored. It validates the input once at
the API boundary so backends can trust it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.matrix import DenseMatrix
from pycholesky.core.protocols import Matrix
from pycholesky.core.validation import check_array, check_2d, check_finite


@dataclass(frozen=True)
class CholeskyDesign:
    """
    Validated input for a Cholesky factorization.

    Holds a private copy of the matrix, so later changes to the caller's
    array do not affect the design. Non-square input is accepted: the
    kernels report it through the SPD flag rather than raising.

    Construction:
        CholeskyDesign.build(a)              # from any 2-D array-like
        CholeskyDesign.from_matrix(m)        # from any Matrix
    """
    _matrix: DenseMatrix
    _rows: int
    _cols: int
    _name: str = 'A'

    @classmethod
    def build(cls, a: ArrayLike, name: str = 'A') -> CholeskyDesign:
        """Build design from an array-like."""
        arr = check_array(a, name)
        check_2d(arr, name)
        check_finite(arr, name)
        m, n = arr.shape
        return cls(_matrix=DenseMatrix.from_array(arr), _rows=m, _cols=n, _name=name)

    @classmethod
    def from_matrix(cls, matrix: Matrix, name: str = 'A') -> CholeskyDesign:
        """Build design from a Matrix, copying it row by row."""
        m, n = matrix.dims()
        data = np.array([matrix.row(i) for i in range(m)], dtype=np.float64)
        return cls.build(data.reshape(m, n), name=name)

    # === Properties ===

    @property
    def matrix(self) -> DenseMatrix:
        """The matrix to factor (m x n)."""
        return self._matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @property
    def is_symmetric(self) -> bool:
        """Exact symmetry, no tolerance."""
        if not self.is_square:
            return False
        data = self._matrix.to_numpy(copy=False)
        return bool(np.array_equal(data, data.T))

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the matrix as a NumPy array."""
        return self._matrix.to_numpy()
