"""
Tests for the lower and upper Cholesky kernels.

Validates:
    - Reconstruction (L L' and R' R) on SPD input
    - Agreement of the two variants and with LAPACK
    - SPD verdict on indefinite, asymmetric, zero and non-square input
    - Triangularity and finiteness of the factor in every case
"""

import numpy as np
import pytest
from scipy.linalg import cholesky as scipy_cholesky

from pycholesky.core.compute.linalg import cholesky_lower, cholesky_upper
from pycholesky.core.compute.tolerances import CPU_FP64
from pycholesky.core.matrix import DenseMatrix


KERNELS = [
    pytest.param(cholesky_lower, id="lower"),
    pytest.param(cholesky_upper, id="upper"),
]


def _reconstruct(kernel, f):
    if kernel is cholesky_lower:
        return f @ f.T
    return f.T @ f


# ═══════════════════════════════════════════════════════════════════════
# SPD input
# ═══════════════════════════════════════════════════════════════════════


class TestSPD:

    @pytest.mark.parametrize("kernel", KERNELS)
    def test_reconstructs_input(self, kernel, spd_matrix):
        f, spd = kernel(spd_matrix)
        assert spd is True
        np.testing.assert_allclose(
            _reconstruct(kernel, f.to_numpy()), spd_matrix,
            rtol=CPU_FP64.rtol, atol=CPU_FP64.atol,
        )

    def test_lower_is_lower_triangular(self, spd_matrix):
        l, _ = cholesky_lower(spd_matrix)
        L = l.to_numpy()
        assert np.all(np.triu(L, k=1) == 0.0)
        assert np.all(np.diag(L) > 0)

    def test_upper_is_upper_triangular(self, spd_matrix):
        r, _ = cholesky_upper(spd_matrix)
        R = r.to_numpy()
        assert np.all(np.tril(R, k=-1) == 0.0)
        assert np.all(np.diag(R) > 0)

    def test_variants_are_transposes(self, spd_matrix):
        l, _ = cholesky_lower(spd_matrix)
        r, _ = cholesky_upper(spd_matrix)
        np.testing.assert_allclose(l.to_numpy(), r.to_numpy().T, rtol=1e-12, atol=1e-14)

    def test_matches_lapack(self, spd_matrix):
        l, _ = cholesky_lower(spd_matrix)
        np.testing.assert_allclose(
            l.to_numpy(), scipy_cholesky(spd_matrix, lower=True), rtol=1e-10, atol=1e-12
        )

    def test_known_2x2(self, spd_2x2):
        l, spd = cholesky_lower(spd_2x2)
        assert spd
        expected = np.array([[2.0, 0.0], [1.0, np.sqrt(2.0)]])
        np.testing.assert_allclose(l.to_numpy(), expected, rtol=1e-15)

    @pytest.mark.parametrize("n", [1, 2, 5, 12])
    def test_random_orders(self, rng, n):
        M = rng.standard_normal((n, n))
        A = M @ M.T + np.eye(n)
        A = (A + A.T) / 2
        for kernel in (cholesky_lower, cholesky_upper):
            f, spd = kernel(A)
            assert spd
            np.testing.assert_allclose(_reconstruct(kernel, f.to_numpy()), A, rtol=1e-9, atol=1e-12)

    def test_input_not_modified(self, spd_matrix):
        before = spd_matrix.copy()
        cholesky_lower(spd_matrix)
        cholesky_upper(spd_matrix)
        np.testing.assert_array_equal(spd_matrix, before)

    def test_accepts_dense_matrix(self, spd_2x2):
        l, spd = cholesky_lower(DenseMatrix(spd_2x2))
        assert spd
        assert isinstance(l, DenseMatrix)

    def test_factor_is_fresh_allocation(self, spd_2x2):
        a = DenseMatrix(spd_2x2)
        l, _ = cholesky_lower(a)
        assert l is not a

    def test_empty_matrix(self):
        l, spd = cholesky_lower(np.zeros((0, 0)))
        assert l.dims() == (0, 0)
        assert spd is True


# ═══════════════════════════════════════════════════════════════════════
# Non-SPD input: verdict false, factor still computed
# ═══════════════════════════════════════════════════════════════════════


class TestNotSPD:

    @pytest.mark.parametrize("kernel", KERNELS)
    def test_indefinite(self, kernel, indefinite_2x2):
        f, spd = kernel(indefinite_2x2)
        assert spd is False
        F = f.to_numpy()
        assert np.all(np.isfinite(F))
        # d = 1 - 2^2 = -3 is clamped to zero
        assert F[1, 1] == 0.0
        assert F[0, 0] == 1.0

    @pytest.mark.parametrize("kernel", KERNELS)
    def test_asymmetric(self, kernel, asymmetric_2x2):
        _, spd = kernel(asymmetric_2x2)
        assert spd is False

    def test_asymmetric_pivots_positive(self, asymmetric_2x2):
        _, spd, pivots = cholesky_lower(asymmetric_2x2, return_pivots=True)
        assert not spd
        assert np.all(pivots > 0)

    @pytest.mark.parametrize("kernel", KERNELS)
    @pytest.mark.parametrize("n", [1, 2, 4])
    def test_zero_matrix(self, kernel, n):
        f, spd = kernel(np.zeros((n, n)))
        assert spd is False
        np.testing.assert_array_equal(f.to_numpy(), np.zeros((n, n)))

    def test_negative_diagonal(self):
        l, spd = cholesky_lower(np.array([[-4.0]]))
        assert spd is False
        assert l.at(0, 0) == 0.0

    def test_zero_pivot_mid_matrix_stays_finite(self):
        # Rank-deficient PSD matrix: second pivot is exactly zero
        A = np.array([
            [1.0, 1.0, 0.0],
            [1.0, 1.0, 0.0],
            [0.0, 0.0, 2.0],
        ])
        for kernel in (cholesky_lower, cholesky_upper):
            f, spd = kernel(A)
            assert spd is False
            assert np.all(np.isfinite(f.to_numpy()))

    @pytest.mark.parametrize("kernel", KERNELS)
    def test_tall_input_factors_leading_block(self, kernel, spd_2x2):
        tall = np.vstack([spd_2x2, [[7.0, 7.0]]])
        f, spd = kernel(tall)
        ref, _ = kernel(spd_2x2)
        assert spd is False
        assert f.dims() == (2, 2)
        np.testing.assert_array_equal(f.to_numpy(), ref.to_numpy())

    def test_wide_input_is_index_error(self):
        with pytest.raises(IndexError):
            cholesky_lower(np.ones((2, 3)))


class TestPivots:

    def test_pivots_are_squared_diagonal(self, spd_matrix):
        l, _, pivots = cholesky_lower(spd_matrix, return_pivots=True)
        np.testing.assert_allclose(pivots, np.diag(l.to_numpy()) ** 2, rtol=1e-12)

    def test_negative_pivot_reported(self, indefinite_2x2):
        _, _, pivots = cholesky_upper(indefinite_2x2, return_pivots=True)
        np.testing.assert_allclose(pivots, [1.0, -3.0])
