"""
Core protocols for PyCholesky.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any array-backed container with the right surface can be handed to
the kernels.

Design Principles:
    - Minimal contracts: prescribe only what the kernels actually call
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, TYPE_CHECKING, runtime_checkable
import numpy as np
from numpy.typing import ArrayLike, NDArray

if TYPE_CHECKING:
    from pycholesky.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Matrix(Protocol):
    """
    Minimal capability surface of a dense real matrix.

    The factorization and solve kernels only ever query the shape, read
    and write single elements, and (for the row-oriented lower variant)
    read and write whole rows. Indices are zero-based and must satisfy
    0 <= i < rows and 0 <= j < cols; violating that is a programmer error.
    """

    @property
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def cols(self) -> int:
        """Number of columns."""
        ...

    def dims(self) -> tuple[int, int]:
        """(rows, cols)."""
        ...

    def at(self, i: int, j: int) -> float:
        """Element at row i, column j."""
        ...

    def set(self, i: int, j: int, v: float) -> None:
        """Overwrite element at row i, column j."""
        ...

    def row(self, i: int) -> NDArray[np.floating[Any]]:
        """Copy of row i."""
        ...

    def set_row(self, i: int, values: ArrayLike) -> None:
        """Overwrite row i with values (length must equal cols)."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter
    payload wrapped in a Result. Backends are stateless apart from
    construction-time configuration.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{variant}'
        Examples: 'cpu_lower', 'cpu_upper'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...

