"""
CPU reference backend for Cholesky factorization.

Runs the dot-product Cholesky kernels from core.compute.linalg directly
against the design's DenseMatrix. Element-wise Python loops: this is the
reference implementation, not a tuned kernel.
"""

from typing import Any

from pycholesky.core.result import Result
from pycholesky.core.compute.timing import Timer
from pycholesky.core.compute.linalg.cholesky import cholesky_lower, cholesky_upper
from pycholesky.cholesky.design import CholeskyDesign
from pycholesky.cholesky.solution import CholeskyParams, Side


class CPUReferenceBackend:
    """
    CPU backend using the reference Cholesky kernels.

    Implements the Backend protocol for CholeskyDesign -> CholeskyParams.
    """

    def __init__(self, side: Side = 'lower'):
        if side not in ('lower', 'upper'):
            raise ValueError(f"side must be 'lower' or 'upper', got {side!r}")
        self._side = side

    @property
    def name(self) -> str:
        return f'cpu_{self._side}'

    @property
    def side(self) -> Side:
        return self._side

    def solve(self, design: CholeskyDesign) -> Result[CholeskyParams]:
        """
        Factor the design matrix.

        Never raises for non-SPD input: the verdict is recorded in the
        payload and explained in the result warnings.
        """
        timer = Timer()
        timer.start()

        kernel = cholesky_lower if self._side == 'lower' else cholesky_upper
        with timer.section('factorization'):
            factor, spd, pivots = kernel(design.matrix, return_pivots=True)

        timer.stop()

        warnings_list: list[str] = []
        if not spd:
            if not design.is_square:
                warnings_list.append(
                    f"{design.name} is not square ({design.rows} x {design.cols}); "
                    f"factored its leading {design.cols} x {design.cols} block"
                )
            elif not design.is_symmetric:
                warnings_list.append(f"{design.name}: matrix is not symmetric")
            warnings_list.append(
                f"{design.name}: matrix is not symmetric positive definite"
            )

        params = CholeskyParams(
            factor=factor,
            spd=spd,
            pivots=pivots,
            side=self._side,
        )

        info: dict[str, Any] = {
            'method': 'cholesky',
            'side': self._side,
            'order': factor.rows,
            'spd': spd,
            'min_pivot': float(pivots.min()) if pivots.size else None,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
