"""
Tolerance tiers for numerical validation.

Defines precision expectations for reconstruction checks on computed
factors:
- CPU FP64: well-conditioned input, near machine precision
- CPU FP64 ill-conditioned: cond(A) > 1e8

Used by the test suite and by CholeskySolution.is_accurate().
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned SPD input
CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision — L L\' reproduces A',
)

# Ill-conditioned SPD input
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e8)',
)

# Condition number above which reconstruction is checked against the
# relaxed tier.
ILL_CONDITIONED_THRESHOLD = 1e8


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
