"""
pyrref: reduced row echelon form for dense real matrices.

Gauss-Jordan elimination over float64 numpy arrays with explicit
near-zero handling, wrapped around an immutable Matrix value type.

Submodules:
    core: Matrix type, exceptions, validation, tolerance tiers
    reduction: Gauss-Jordan elimination and RREF checks
"""

__version__ = "0.1.0"

from pyrref.core.matrix import Matrix
from pyrref.core.exceptions import (
    PyRREFError,
    ValidationError,
    ShapeError,
    DegenerateMatrixError,
    NumericalError,
    InvalidEntryError,
)
from pyrref.reduction import (
    rref,
    to_reduced_row_echelon_form,
    rank,
    is_rref,
    ReductionSolution,
)

__all__ = [
    "__version__",
    "Matrix",
    "rref",
    "to_reduced_row_echelon_form",
    "rank",
    "is_rref",
    "ReductionSolution",
    "PyRREFError",
    "ValidationError",
    "ShapeError",
    "DegenerateMatrixError",
    "NumericalError",
    "InvalidEntryError",
]
