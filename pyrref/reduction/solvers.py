"""
Solver dispatch for matrix reduction.

Provides rref() as the full entry point, plus to_reduced_row_echelon_form(),
rank() and is_rref() for the common one-value questions.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pyrref.core.compute.tolerances import ToleranceTier
from pyrref.core.exceptions import ValidationError
from pyrref.core.matrix import Matrix
from pyrref.reduction._common import PivotingStrategy, check_rref
from pyrref.reduction.backends.cpu import CPUGaussJordanBackend, CPUReferenceBackend
from pyrref.reduction.design import ReductionDesign
from pyrref.reduction.solution import ReductionSolution


BackendChoice = Literal['auto', 'cpu', 'cpu_reference']


def _ensure_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix.from_array(data)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUGaussJordanBackend()

    if choice == 'cpu_reference':
        return CPUReferenceBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")


def _reduce(
    data: ArrayLike | Matrix,
    pivoting: PivotingStrategy,
    tolerance: str | float | ToleranceTier,
    backend: BackendChoice,
    stacklevel: int,
) -> ReductionSolution:
    """
    Validate, solve and re-emit backend warnings.

    stacklevel is counted from this function, so each public entry point
    passes 3 to attribute warnings to its own caller.
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    matrix = _ensure_matrix(data)
    design = ReductionDesign.build(matrix, pivoting=pivoting, tolerance=tolerance)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)

    return ReductionSolution(_result=result, _design=design)


def rref(
    data: ArrayLike | Matrix,
    *,
    pivoting: PivotingStrategy = 'first_nonzero',
    tolerance: str | float | ToleranceTier = 'default',
    backend: BackendChoice = 'auto',
) -> ReductionSolution:
    """
    Reduce a matrix to reduced row echelon form by Gauss-Jordan elimination.

    Every nonzero row of the result leads with 1, each leading 1 sits
    strictly right of the one above it and is the only nonzero entry in
    its column, and all-zero rows come last. The input is never modified.

    Args:
        data: Matrix or any 2D array-like of real numbers.
        pivoting: How a pivot row is chosen among the candidates in a column:
            - 'first_nonzero': topmost entry above the pivot threshold
            - 'max_magnitude': largest entry (partial pivoting), more
              stable on ill-conditioned input
        tolerance: Zero thresholds. A tier name ('default', 'strict',
            'loose'), a ToleranceTier, or a float used as both the pivot
            and clamp threshold. 'strict' treats any nonzero as a pivot
            and never clamps.
        backend: 'auto' / 'cpu' for vectorised elimination,
            'cpu_reference' for row-by-row elimination.

    Returns:
        ReductionSolution with the reduced matrix, pivot columns and rank

    Raises:
        ShapeError: If data is ragged or not 2D
        DegenerateMatrixError: If the matrix has zero rows or columns
        InvalidEntryError: If the matrix contains NaN or Inf
        ValidationError: If pivoting, tolerance or backend is unknown
        NumericalError: If scaling or eliminating a pivot row overflows

    Example:
        >>> from pyrref import rref
        >>> solution = rref([[1, 3], [2, 1.5], [-2, -1.5]])
        >>> print(solution.matrix)
        | 1 0 |
        | 0 1 |
        | 0 0 |
        >>> solution.pivot_columns
        (0, 1)
    """
    return _reduce(data, pivoting, tolerance, backend, stacklevel=3)


def to_reduced_row_echelon_form(
    matrix: ArrayLike | Matrix,
    *,
    pivoting: PivotingStrategy = 'first_nonzero',
    tolerance: str | float | ToleranceTier = 'default',
) -> Matrix:
    """
    Return a new Matrix in reduced row echelon form.

    Same dimensions as the input and row-equivalent to it. See rref() for
    the options and the errors raised.
    """
    return _reduce(matrix, pivoting, tolerance, 'auto', stacklevel=3).matrix


def rank(
    data: ArrayLike | Matrix,
    *,
    pivoting: PivotingStrategy = 'first_nonzero',
    tolerance: str | float | ToleranceTier = 'default',
) -> int:
    """Number of pivots found by Gauss-Jordan elimination."""
    return _reduce(data, pivoting, tolerance, 'auto', stacklevel=3).rank


def is_rref(data: ArrayLike | Matrix, *, atol: float = 0.0) -> bool:
    """
    Check whether a matrix is already in reduced row echelon form.

    Entries with |x| <= atol count as zero. Empty matrices trivially pass.
    """
    matrix = _ensure_matrix(data)
    return check_rref(matrix.values, atol=atol)
