"""
Generic result container for PyCholesky computations.

The Result class provides a standardized envelope that backend outputs
use. Domains define their own parameter payloads; the envelope carries
the metadata common to all of them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (side, order, pivots)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (the factor and its verdict)
        info: Structured metadata (method, side, order, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=CholeskyParams(factor=l, spd=True, pivots=pivots),
        ...     info={'method': 'cholesky', 'side': 'lower', 'order': 3},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_lower'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
