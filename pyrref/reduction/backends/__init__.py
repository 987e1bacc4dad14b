"""
Reduction backends.

Available backends:
    CPUGaussJordanBackend: vectorised elimination (default)
    CPUReferenceBackend: row-by-row elimination
"""

from pyrref.reduction.backends.cpu import CPUGaussJordanBackend, CPUReferenceBackend

__all__ = [
    "CPUGaussJordanBackend",
    "CPUReferenceBackend",
]
