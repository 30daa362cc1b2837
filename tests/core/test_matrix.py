"""
Tests for the DenseMatrix container and the Matrix protocol.

Validates:
    - Construction (wrapping without copy, copying, zeros, identity)
    - Bounds-checked element and row access
    - Conversion, transpose and matmul
    - as_matrix pass-through and wrapping
"""

import numpy as np
import pytest

from pycholesky.core.exceptions import DimensionError, ValidationError
from pycholesky.core.matrix import DenseMatrix, as_matrix
from pycholesky.core.protocols import Matrix


class TestConstruction:

    def test_wraps_float64_without_copy(self):
        arr = np.arange(6, dtype=np.float64).reshape(2, 3)
        m = DenseMatrix(arr)
        m.set(0, 0, 99.0)
        assert arr[0, 0] == 99.0

    def test_from_array_copies(self):
        arr = np.zeros((2, 2))
        m = DenseMatrix.from_array(arr)
        m.set(1, 1, 5.0)
        assert arr[1, 1] == 0.0

    def test_int_input_converted(self):
        m = DenseMatrix([[1, 2], [3, 4]])
        assert m.at(1, 0) == 3.0
        assert isinstance(m.at(1, 0), float)

    def test_zeros_and_identity(self):
        z = DenseMatrix.zeros(2, 3)
        assert z.dims() == (2, 3)
        assert not np.any(z.to_numpy())
        np.testing.assert_array_equal(DenseMatrix.identity(3).to_numpy(), np.eye(3))

    def test_zeros_negative_rejected(self):
        with pytest.raises(DimensionError):
            DenseMatrix.zeros(-1, 2)

    def test_1d_rejected(self):
        with pytest.raises(DimensionError):
            DenseMatrix([1.0, 2.0])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            DenseMatrix([["a"]])

    def test_satisfies_protocol(self):
        assert isinstance(DenseMatrix.zeros(1, 1), Matrix)

    def test_ndarray_is_not_a_matrix(self):
        assert not isinstance(np.zeros((2, 2)), Matrix)


class TestAccess:

    @pytest.fixture
    def m(self):
        return DenseMatrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_shape(self, m):
        assert m.rows == 2
        assert m.cols == 3
        assert not m.is_square

    def test_at_and_set(self, m):
        m.set(1, 2, -1.5)
        assert m.at(1, 2) == -1.5

    @pytest.mark.parametrize("i, j", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range_is_index_error(self, m, i, j):
        with pytest.raises(IndexError):
            m.at(i, j)
        with pytest.raises(IndexError):
            m.set(i, j, 0.0)

    def test_row_is_copy(self, m):
        r = m.row(0)
        r[0] = 100.0
        assert m.at(0, 0) == 1.0
        np.testing.assert_array_equal(m.row(1), [4.0, 5.0, 6.0])

    def test_set_row(self, m):
        m.set_row(0, [7.0, 8.0, 9.0])
        np.testing.assert_array_equal(m.row(0), [7.0, 8.0, 9.0])

    def test_set_row_wrong_length(self, m):
        with pytest.raises(DimensionError, match="expected 3 values"):
            m.set_row(0, [1.0, 2.0])

    def test_row_out_of_range(self, m):
        with pytest.raises(IndexError):
            m.row(2)
        with pytest.raises(IndexError):
            m.set_row(5, [0.0, 0.0, 0.0])


class TestConversion:

    def test_to_numpy_copy_and_view(self):
        m = DenseMatrix.zeros(2, 2)
        m.to_numpy()[0, 0] = 1.0
        assert m.at(0, 0) == 0.0
        m.to_numpy(copy=False)[0, 0] = 1.0
        assert m.at(0, 0) == 1.0

    def test_transpose_is_fresh(self):
        m = DenseMatrix([[1.0, 2.0], [3.0, 4.0]])
        t = m.T
        np.testing.assert_array_equal(t.to_numpy(), [[1.0, 3.0], [2.0, 4.0]])
        t.set(0, 0, 0.0)
        assert m.at(0, 0) == 1.0

    def test_matmul(self):
        a = DenseMatrix([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal((a @ DenseMatrix.identity(2)).to_numpy(), a.to_numpy())

    def test_matmul_shape_mismatch(self):
        with pytest.raises(DimensionError, match="inner dimensions"):
            DenseMatrix.zeros(2, 3) @ DenseMatrix.zeros(2, 3)

    def test_np_asarray(self):
        m = DenseMatrix([[1.0, 2.0]])
        np.testing.assert_array_equal(np.asarray(m), [[1.0, 2.0]])

    def test_copy_independent(self):
        m = DenseMatrix.zeros(1, 1)
        c = m.copy()
        c.set(0, 0, 1.0)
        assert m.at(0, 0) == 0.0


class TestAsMatrix:

    def test_matrix_passthrough(self):
        m = DenseMatrix.zeros(2, 2)
        assert as_matrix(m, "A") is m

    def test_array_wrapped(self):
        arr = np.eye(2)
        m = as_matrix(arr, "A")
        assert isinstance(m, DenseMatrix)
        m.set(0, 1, 3.0)
        assert arr[0, 1] == 3.0

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="^A:"):
            as_matrix([1.0, 2.0], "A")
