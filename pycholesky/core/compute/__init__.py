"""
Shared compute infrastructure for PyCholesky.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
    linalg: Cholesky factorization and solve kernels
"""

from pycholesky.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
