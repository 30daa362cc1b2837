"""
Cholesky backends.

Available backends:
    CPUReferenceBackend: CPU reference implementation (element-wise kernels)
"""

from pycholesky.cholesky.backends.cpu import CPUReferenceBackend

__all__ = [
    "CPUReferenceBackend",
]
