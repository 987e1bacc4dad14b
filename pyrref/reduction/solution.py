"""
Reduction solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyrref.core.matrix import Matrix
from pyrref.core.result import Result

if TYPE_CHECKING:
    from pyrref.reduction.design import ReductionDesign


@dataclass(frozen=True)
class ReductionParams:
    """
    Parameter payload for Gauss-Jordan elimination.

    This is the immutable data computed by backends.
    """
    reduced: NDArray[np.floating[Any]]
    pivot_columns: tuple[int, ...]
    row_permutation: tuple[int, ...]
    n_swaps: int
    n_clamped: int

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)


class ReductionSolution:
    """
    User-facing reduction results.

    Wraps the backend Result and exposes the reduced matrix alongside
    pivot bookkeeping.
    """

    __slots__ = ('_result', '_design', '_matrix')

    def __init__(self, _result: Result[ReductionParams], _design: 'ReductionDesign') -> None:
        self._result = _result
        self._design = _design
        self._matrix = Matrix.from_array(_result.params.reduced)

    @property
    def matrix(self) -> Matrix:
        """The matrix in reduced row echelon form."""
        return self._matrix

    @property
    def original(self) -> Matrix:
        return self._design.matrix

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def free_columns(self) -> tuple[int, ...]:
        """Columns without a pivot."""
        pivots = set(self.pivot_columns)
        return tuple(c for c in range(self._design.m) if c not in pivots)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def nullity(self) -> int:
        return self._design.m - self.rank

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self._design.n, self._design.m)

    @property
    def row_permutation(self) -> tuple[int, ...]:
        """Original index of each output row before elimination mixed them."""
        return self._result.params.row_permutation

    @property
    def n_swaps(self) -> int:
        return self._result.params.n_swaps

    @property
    def n_clamped(self) -> int:
        """Entries forced to exact zero because they fell within tolerance."""
        return self._result.params.n_clamped

    @property
    def pivoting(self) -> str:
        return self._design.pivoting

    @property
    def tolerance_name(self) -> str:
        return self._design.tolerance.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Text summary: shape, rank, pivots and the reduced matrix."""
        n, m = self._design.n, self._design.m
        lines = []
        lines.append(f"Reduced row echelon form ({n} x {m})")
        lines.append("")
        lines.append(f"  rank = {self.rank}, nullity = {self.nullity}")
        lines.append(f"  pivot columns = {list(self.pivot_columns)}")
        lines.append(f"  free columns = {list(self.free_columns)}")
        lines.append(
            f"  pivoting = {self.pivoting}, tolerance = {self.tolerance_name}, "
            f"swaps = {self.n_swaps}, clamped = {self.n_clamped}"
        )
        lines.append("")
        lines.extend(f"  {line}" for line in self._matrix.render().splitlines())
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ReductionSolution(shape=({self._design.n}, {self._design.m}), "
            f"rank={self.rank}, "
            f"pivot_columns={list(self.pivot_columns)})"
        )
