"""
Cholesky solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Literal, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycholesky.core.result import Result
from pycholesky.core.matrix import DenseMatrix
from pycholesky.core.compute.linalg.solve import cholesky_solve
from pycholesky.core.compute.tolerances import (
    ToleranceTier,
    ILL_CONDITIONED_THRESHOLD,
    select_tolerance,
)
from pycholesky.core.validation import check_array

if TYPE_CHECKING:
    from pycholesky.cholesky.design import CholeskyDesign


Side = Literal['lower', 'upper']


@dataclass(frozen=True)
class CholeskyParams:
    """
    Parameter payload for a Cholesky factorization.

    This is the immutable data computed by backends.
    """
    factor: DenseMatrix
    spd: bool
    pivots: NDArray[np.floating[Any]]
    side: Side


@dataclass
class CholeskySolution:
    """
    User-facing factorization results.

    Wraps the backend Result and provides the factor in either
    orientation, reconstruction checks and a solve entry point.
    """
    _result: Result[CholeskyParams]
    _design: 'CholeskyDesign'

    _lower: DenseMatrix | None = None

    @property
    def factor(self) -> DenseMatrix:
        """The factor as computed: L for side='lower', R for side='upper'."""
        return self._result.params.factor

    @property
    def side(self) -> Side:
        return self._result.params.side

    @property
    def is_spd(self) -> bool:
        return self._result.params.spd

    @property
    def order(self) -> int:
        return self.factor.rows

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        """Diagonal pivots before clamping; L[j, j] = sqrt(max(pivot, 0))."""
        return self._result.params.pivots

    @property
    def min_pivot(self) -> float:
        if self.pivots.size == 0:
            return float('nan')
        return float(np.min(self.pivots))

    @property
    def lower(self) -> DenseMatrix:
        """Lower factor L (transposed from R when side='upper')."""
        if self.side == 'lower':
            return self.factor
        if self._lower is None:
            self._lower = self.factor.T
        return self._lower

    @property
    def upper(self) -> DenseMatrix:
        """Upper factor R (transposed from L when side='lower')."""
        if self.side == 'upper':
            return self.factor
        return self.factor.T

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """L L' (or R' R) as a NumPy array."""
        f = self.factor.to_numpy(copy=False)
        if self.side == 'lower':
            return f @ f.T
        return f.T @ f

    def is_accurate(self, tolerance: ToleranceTier | None = None) -> bool:
        """
        Check that the factor reproduces the input matrix.

        Always False for a non-square input. When no tolerance is given,
        the tier is chosen from the condition number of the input.
        """
        if not self._design.is_square:
            return False
        a = self._design.matrix.to_numpy(copy=False)
        if tolerance is None:
            cond = np.linalg.cond(a) if a.size else 1.0
            tolerance = select_tolerance(cond > ILL_CONDITIONED_THRESHOLD)
        return bool(np.allclose(
            self.reconstruct(), a, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def log_det(self) -> float:
        """
        log det(A) = 2 * sum(log diag(L)).

        -inf when a pivot was clamped to zero. Only meaningful when is_spd.
        """
        diag = np.diag(self.factor.to_numpy(copy=False))
        with np.errstate(divide='ignore'):
            return float(2.0 * np.sum(np.log(diag)))

    def solve(
        self,
        b: ArrayLike,
        *,
        overwrite_b: bool = False,
    ) -> NDArray[np.floating[Any]]:
        """
        Solve A x = b with this factorization.

        A 1-D b is treated as a single column and a 1-D x is returned.
        With overwrite_b=True and a float64 C-contiguous b, the solution is
        written into b and b itself is returned.

        Warns:
            RuntimeWarning: If the factorization was not SPD; the solution
            may then contain inf or NaN.
        """
        if not self.is_spd:
            warnings.warn(
                f"Solving with the factor of a matrix that is not symmetric "
                f"positive definite (min pivot {self.min_pivot:.6g}); the "
                f"solution may contain inf or NaN.",
                RuntimeWarning,
                stacklevel=2,
            )

        b_arr = check_array(b, 'b')
        if not overwrite_b:
            b_arr = b_arr.copy()
        squeeze = b_arr.ndim == 1
        if squeeze:
            b_arr = b_arr.reshape(-1, 1)

        x = cholesky_solve(self.lower, b_arr, overwrite_b=True)
        x_arr = x.to_numpy(copy=False)
        if squeeze:
            return x_arr.reshape(-1)
        return x_arr

    def summary(self) -> str:
        """Text summary of the factorization."""
        title = "Cholesky Factorization (L L')" if self.side == 'lower' \
            else "Cholesky Factorization (R' R)"
        lines = [
            title,
            "=" * 60,
            f"Input: {self._design.rows} x {self._design.cols}",
            f"Order: {self.order}",
            f"Symmetric positive definite: {'yes' if self.is_spd else 'no'}",
            f"Min pivot: {self.min_pivot:.6g}",
        ]
        if self.is_spd:
            lines.append(f"log det: {self.log_det():.6f}")

        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"CholeskySolution(side={self.side!r}, order={self.order}, "
            f"spd={self.is_spd})"
        )
