"""
Input validation utilities for pyrref.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyrref.core.exceptions import (
    ValidationError,
    ShapeError,
    DegenerateMatrixError,
    InvalidEntryError,
)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    numpy arrays are rectangular by construction and pass through.
    Anything that is not a sequence of sequences is left for check_array
    and check_2d to judge.

    Args:
        rows: Candidate nested sequence
        name: Parameter name for error messages

    Raises:
        ShapeError: If rows have different lengths
    """
    if isinstance(rows, np.ndarray) or not isinstance(rows, Sequence):
        return
    if isinstance(rows, (str, bytes)):
        return

    lengths = []
    for row in rows:
        if isinstance(row, np.ndarray) and row.ndim > 0:
            lengths.append(row.shape[0])
        elif isinstance(row, Sequence) and not isinstance(row, (str, bytes)):
            lengths.append(len(row))
        else:
            # scalar rows: 1-D input, reported by check_2d
            return

    if len(set(lengths)) > 1:
        raise ShapeError(
            f"{name}: rows have inconsistent lengths {lengths}",
            row_lengths=tuple(lengths),
        )


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    Always returns a fresh copy so the caller's buffer is never shared.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    # Reject non-numeric dtypes (strings, bytes, booleans, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ShapeError: If array is not 2D
    """
    if array.ndim != 2:
        raise ShapeError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            shape=tuple(array.shape),
        )


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DegenerateMatrixError: If either dimension is zero
    """
    n, m = array.shape
    if n == 0 or m == 0:
        raise DegenerateMatrixError(
            f"{name}: degenerate matrix with shape ({n}, {m}) has no echelon form",
            shape=(n, m),
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        InvalidEntryError: If array contains non-finite values
    """
    finite = np.isfinite(array)
    if not np.all(finite):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        positions = tuple(
            (int(i), int(j)) for i, j in np.argwhere(~finite)
        )
        raise InvalidEntryError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf) "
            f"at {list(positions)}",
            n_nan=n_nan,
            n_inf=n_inf,
            positions=positions,
        )
