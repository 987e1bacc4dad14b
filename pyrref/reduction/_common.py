"""
Elementary row operations and RREF checks shared by the reduction backends.

All row operations work in place on a writable float64 array owned by the
caller. None of them validate their arguments; the design does that once
at the boundary.
"""

from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pyrref.core.exceptions import NumericalError


PivotingStrategy = Literal['first_nonzero', 'max_magnitude']
PIVOTING_STRATEGIES = ('first_nonzero', 'max_magnitude')


def find_pivot_row(
    A: NDArray[np.floating[Any]],
    col: int,
    start: int,
    eps: float,
    pivoting: PivotingStrategy = 'first_nonzero',
) -> int | None:
    """
    Locate the pivot row for a column.

    Only rows start..n-1 are candidates, and a candidate must satisfy
    |A[i, col]| > eps.

    Args:
        A: Working matrix
        col: Column being reduced
        start: Current pivot row; rows above it already hold pivots
        eps: Near-zero threshold
        pivoting: 'first_nonzero' takes the topmost candidate,
            'max_magnitude' the largest (topmost on ties)

    Returns:
        Row index of the pivot, or None if the column has no pivot
    """
    magnitudes = np.abs(A[start:, col])
    candidates = np.flatnonzero(magnitudes > eps)
    if candidates.size == 0:
        return None
    if pivoting == 'max_magnitude':
        return start + int(np.argmax(magnitudes))
    return start + int(candidates[0])


def swap_rows(A: NDArray[np.floating[Any]], i: int, j: int) -> None:
    """Exchange rows i and j."""
    if i == j:
        return
    A[[i, j]] = A[[j, i]]


def scale_row(A: NDArray[np.floating[Any]], row: int, col: int) -> None:
    """
    Divide a row by its entry in col so that entry becomes exactly 1.

    Raises:
        NumericalError: If the division overflows
    """
    pivot = A[row, col]
    with np.errstate(over='ignore'):
        A[row] /= pivot
    if not np.all(np.isfinite(A[row])):
        raise NumericalError(
            f"Scaling row {row} by pivot {pivot:.6g} in column {col} overflowed"
        )
    A[row, col] = 1.0


def eliminate_column(A: NDArray[np.floating[Any]], col: int, pivot_row: int) -> None:
    """
    Zero column col in every row except pivot_row.

    Subtracts A[i, col] * A[pivot_row] from each other row i in one
    outer-product update. The pivot row must already be scaled.

    Raises:
        NumericalError: If the update overflows
    """
    factors = A[:, col].copy()
    factors[pivot_row] = 0.0
    with np.errstate(over='ignore', invalid='ignore'):
        A -= np.outer(factors, A[pivot_row])
    _check_eliminated(A, col)
    A[:, col] = 0.0
    A[pivot_row, col] = 1.0


def eliminate_column_rowwise(A: NDArray[np.floating[Any]], col: int, pivot_row: int) -> None:
    """
    Zero column col in every row except pivot_row, one row at a time.

    Rows whose entry is already zero are skipped.

    Raises:
        NumericalError: If the update overflows
    """
    pivot = A[pivot_row]
    with np.errstate(over='ignore', invalid='ignore'):
        for i in range(A.shape[0]):
            if i == pivot_row:
                continue
            factor = A[i, col]
            if factor != 0.0:
                A[i] -= factor * pivot
                A[i, col] = 0.0
    _check_eliminated(A, col)


def _check_eliminated(A: NDArray[np.floating[Any]], col: int) -> None:
    finite = np.isfinite(A)
    if not np.all(finite):
        rows = sorted({int(i) for i, _ in np.argwhere(~finite)})
        raise NumericalError(
            f"Eliminating column {col} overflowed in rows {rows}"
        )


def clear_below(A: NDArray[np.floating[Any]], col: int, start: int) -> int:
    """
    Zero a pivotless column from row start down.

    Called when every candidate is within the pivot threshold.

    Returns:
        Number of nonzero entries that were cleared
    """
    segment = A[start:, col]
    n_cleared = int(np.count_nonzero(segment))
    segment[:] = 0.0
    return n_cleared


def clamp_near_zero(A: NDArray[np.floating[Any]], eps: float) -> int:
    """
    Replace entries with |x| <= eps by exact 0.0.

    Signed zeros are normalised to +0.0 as well.

    Returns:
        Number of nonzero entries that were clamped
    """
    mask = np.abs(A) <= eps
    n_clamped = int(np.count_nonzero(A[mask]))
    A[mask] = 0.0
    return n_clamped


def leading_columns(A: NDArray[np.floating[Any]], atol: float = 0.0) -> list[int | None]:
    """Column of the leftmost entry with |x| > atol in every row, or None for zero rows."""
    leads: list[int | None] = []
    for row in A:
        nonzero = np.flatnonzero(np.abs(row) > atol)
        leads.append(int(nonzero[0]) if nonzero.size else None)
    return leads


def check_rref(A: NDArray[np.floating[Any]], atol: float = 0.0) -> bool:
    """
    Test the four reduced row echelon conditions.

    1. Each nonzero row leads with 1.
    2. Leading entries move strictly right going down.
    3. A leading entry is the only nonzero in its column.
    4. Zero rows come last.

    Entries with |x| <= atol count as zero, and a leading entry may differ
    from 1 by at most atol.
    """
    previous = -1
    seen_zero_row = False
    for i, lead in enumerate(leading_columns(A, atol)):
        if lead is None:
            seen_zero_row = True
            continue
        if seen_zero_row or lead <= previous:
            return False
        if abs(A[i, lead] - 1.0) > atol:
            return False
        if np.count_nonzero(np.abs(A[:, lead]) > atol) != 1:
            return False
        previous = lead
    return True
