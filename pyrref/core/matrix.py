"""
Matrix: dense, immutable value type for real matrices.

A Matrix owns a private float64 array that is copied on the way in and
marked read-only, so two matrices never share a buffer with each other or
with caller data. Every transformation produces a new Matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyrref.core.compute.tolerances import DEFAULT
from pyrref.core.validation import check_array, check_2d, check_rectangular


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense row-major matrix of float64 entries.

    Construction:
        Matrix([[1, 3], [2, 1.5]])              # same as from_rows
        Matrix.from_rows([[1, 3], [2, 1.5]])    # nested sequences
        Matrix.from_array(np.eye(3))            # any 2D array-like
        Matrix.identity(3)
        Matrix.zeros(2, 4)

    Every path validates and copies its input. Equality is exact and
    element-wise. Use allclose() when roundoff matters.
    """
    _data: NDArray[np.floating[Any]]

    def __post_init__(self) -> None:
        check_rectangular(self._data, 'rows')
        array = check_array(self._data, 'rows')
        if array.ndim == 1 and array.size == 0:
            array = array.reshape(0, 0)
        check_2d(array, 'rows')
        array = np.ascontiguousarray(array)
        array.flags.writeable = False
        object.__setattr__(self, '_data', array)

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a Matrix from a sequence of rows.

        Args:
            rows: Sequence of equal-length sequences of real numbers.
                An empty sequence gives a (0, 0) matrix.

        Raises:
            ShapeError: If rows have different lengths or the input is not 2D
            ValidationError: If entries are not real numbers
        """
        return cls(rows)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Objects exposing ``.values`` (pandas DataFrames) are unwrapped first.
        """
        if hasattr(array, 'values') and not isinstance(array, np.ndarray):
            array = array.values
        return cls(array)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        return cls(np.eye(n, dtype=np.float64))

    @classmethod
    def zeros(cls, n_rows: int, n_cols: int) -> Matrix:
        """All-zero matrix of the given shape."""
        return cls(np.zeros((n_rows, n_cols), dtype=np.float64))

    # === Properties ===

    @property
    def n_rows(self) -> int:
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_cols)

    @property
    def is_empty(self) -> bool:
        """True if the matrix has zero rows or zero columns."""
        return self.n_rows == 0 or self.n_cols == 0

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the entries."""
        return self._data

    # === Conversion ===

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the entries."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def __len__(self) -> int:
        return self.n_rows

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for row in self._data:
            yield tuple(float(v) for v in row)

    def __getitem__(self, key):
        item = self._data[key]
        if isinstance(item, np.ndarray):
            return item
        return float(item)

    # === Comparison ===

    def equals(self, other: Matrix) -> bool:
        """True iff both matrices have the same shape and identical entries."""
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate element-wise comparison.

        Defaults come from the default tolerance tier. Matrices of different
        shapes are never close.
        """
        if self.shape != other.shape:
            return False
        rtol = DEFAULT.rtol if rtol is None else rtol
        atol = DEFAULT.atol if atol is None else atol
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # float hashing maps -0.0 and 0.0 together, matching ==
        return hash((self.shape, tuple(self._data.ravel().tolist())))

    # === Display ===

    def render(self) -> str:
        """
        Bracketed grid, one row per line. A matrix with no rows or no
        columns renders as the empty string.

        Example:
            | 1 0 |
            | 0 1 |
        """
        if self.is_empty:
            return ""
        return "\n".join(
            "|" + "".join(f" {_format_entry(v)}" for v in row) + " |"
            for row in self._data
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def _format_entry(value: float) -> str:
    # adding 0.0 turns -0.0 into 0.0
    return f"{value + 0.0:g}"
