"""
ReductionDesign: validated input for Gauss-Jordan elimination.

The design is where boundary checks happen. Backends trust it and never
validate again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyrref.core.compute.tolerances import ToleranceTier, select_tolerance
from pyrref.core.exceptions import ValidationError
from pyrref.core.matrix import Matrix
from pyrref.core.validation import check_finite, check_nonempty
from pyrref.reduction._common import PIVOTING_STRATEGIES, PivotingStrategy


@dataclass(frozen=True)
class ReductionDesign:
    """
    Matrix plus elimination settings, immutable after construction.

    Construction:
        ReductionDesign.build(matrix)
        ReductionDesign.build(matrix, pivoting='max_magnitude', tolerance='loose')
    """
    _matrix: Matrix
    _n: int
    _m: int
    _pivoting: PivotingStrategy
    _tolerance: ToleranceTier

    @classmethod
    def build(
        cls,
        matrix: Matrix,
        *,
        pivoting: PivotingStrategy = 'first_nonzero',
        tolerance: str | float | ToleranceTier = 'default',
    ) -> ReductionDesign:
        """
        Validate a matrix for reduction.

        Raises:
            DegenerateMatrixError: If the matrix has zero rows or columns
            InvalidEntryError: If the matrix holds NaN or Inf
            ValidationError: If pivoting or tolerance is not recognised
        """
        if pivoting not in PIVOTING_STRATEGIES:
            raise ValidationError(
                f"Unknown pivoting strategy: {pivoting!r}, expected one of {list(PIVOTING_STRATEGIES)}"
            )
        tier = select_tolerance(tolerance)

        check_nonempty(matrix.values, 'matrix')
        check_finite(matrix.values, 'matrix')

        n, m = matrix.shape
        return cls(_matrix=matrix, _n=n, _m=m, _pivoting=pivoting, _tolerance=tier)

    # === Properties ===

    @property
    def matrix(self) -> Matrix:
        """The matrix being reduced."""
        return self._matrix

    @property
    def n(self) -> int:
        """Number of rows."""
        return self._n

    @property
    def m(self) -> int:
        """Number of columns."""
        return self._m

    @property
    def pivoting(self) -> PivotingStrategy:
        return self._pivoting

    @property
    def tolerance(self) -> ToleranceTier:
        return self._tolerance

    def working_copy(self) -> NDArray[np.floating[Any]]:
        """Fresh writable copy of the entries for a backend to reduce in place."""
        return self._matrix.to_array()
