"""
Core infrastructure for pyrref.

Key components:
    matrix: Matrix value type
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pyrref.core.matrix import Matrix
from pyrref.core.protocols import Backend
from pyrref.core.result import Result
from pyrref.core.exceptions import (
    PyRREFError,
    ValidationError,
    ShapeError,
    DegenerateMatrixError,
    NumericalError,
    InvalidEntryError,
)

__all__ = [
    # Value type
    "Matrix",
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyRREFError",
    "ValidationError",
    "ShapeError",
    "DegenerateMatrixError",
    "NumericalError",
    "InvalidEntryError",
]
