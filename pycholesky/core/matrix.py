"""
Dense row-major matrix container.

DenseMatrix is the concrete Matrix used throughout PyCholesky. It is a
thin wrapper over a 2-D float64 NumPy array that adds bounds-checked
element and row access. Wrapping a float64 C-contiguous array does not
copy it, so writes through the matrix are visible in the caller's array.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.exceptions import DimensionError
from pycholesky.core.protocols import Matrix
from pycholesky.core.validation import check_array, check_2d


class DenseMatrix:
    """
    Row-major 2-D array of double-precision floats.

    Construction:
        DenseMatrix(arr)                 # wraps arr, no copy if float64 C-order
        DenseMatrix.from_array(arr)      # always copies
        DenseMatrix.zeros(rows, cols)
        DenseMatrix.identity(n)

    Element access outside 0 <= i < rows, 0 <= j < cols raises IndexError.
    Negative indices are not wrapped around.
    """

    __slots__ = ('_data',)

    def __init__(self, data: ArrayLike):
        arr = check_array(data, 'data')
        check_2d(arr, 'data')
        self._data: NDArray[np.float64] = np.ascontiguousarray(arr)

    @classmethod
    def from_array(cls, array: ArrayLike) -> DenseMatrix:
        """Build a DenseMatrix holding a private copy of array."""
        return cls(np.array(array, dtype=np.float64, copy=True))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> DenseMatrix:
        if rows < 0 or cols < 0:
            raise DimensionError(f"negative dimensions: ({rows}, {cols})")
        return cls(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> DenseMatrix:
        return cls(np.eye(n, dtype=np.float64))

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    def dims(self) -> tuple[int, int]:
        return self._data.shape[0], self._data.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # === Element access ===

    def _check_index(self, i: int, j: int) -> None:
        rows, cols = self._data.shape
        if not (0 <= i < rows):
            raise IndexError(f"row index {i} out of range [0, {rows})")
        if not (0 <= j < cols):
            raise IndexError(f"column index {j} out of range [0, {cols})")

    def at(self, i: int, j: int) -> float:
        self._check_index(i, j)
        return float(self._data[i, j])

    def set(self, i: int, j: int, v: float) -> None:
        self._check_index(i, j)
        self._data[i, j] = v

    def row(self, i: int) -> NDArray[np.float64]:
        """Copy of row i."""
        self._check_row(i)
        return self._data[i].copy()

    def set_row(self, i: int, values: ArrayLike) -> None:
        """
        Overwrite row i.

        Raises:
            IndexError: If i is out of range
            DimensionError: If values does not hold exactly cols entries
        """
        self._check_row(i)
        vals = np.asarray(values, dtype=np.float64)
        if vals.shape != (self.cols,):
            raise DimensionError(
                f"set_row: expected {self.cols} values, got shape {vals.shape}"
            )
        self._data[i] = vals

    def _check_row(self, i: int) -> None:
        if not (0 <= i < self.rows):
            raise IndexError(f"row index {i} out of range [0, {self.rows})")

    # === Conversion ===

    def to_numpy(self, copy: bool = True) -> NDArray[np.float64]:
        """Underlying data; a copy unless copy=False."""
        if copy:
            return self._data.copy()
        return self._data

    def copy(self) -> DenseMatrix:
        return DenseMatrix(self._data.copy())

    @property
    def T(self) -> DenseMatrix:
        """Freshly allocated transpose."""
        return DenseMatrix(self._data.T.copy())

    def __matmul__(self, other: DenseMatrix) -> DenseMatrix:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        if self.cols != other.rows:
            raise DimensionError(
                f"matmul: inner dimensions differ ({self.rows}, {self.cols}) @ "
                f"({other.rows}, {other.cols})"
            )
        return DenseMatrix(self._data @ other._data)

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __repr__(self) -> str:
        return f"DenseMatrix(rows={self.rows}, cols={self.cols})"


def as_matrix(a: Matrix | ArrayLike, name: str) -> Matrix:
    """
    Return a unchanged if it already satisfies Matrix, else wrap it.

    Wrapping goes through DenseMatrix, so a float64 C-contiguous NumPy
    array is shared rather than copied.
    """
    if isinstance(a, Matrix):
        return a
    arr = check_array(a, name)
    check_2d(arr, name)
    return DenseMatrix(arr)
