"""
CPU backends for Gauss-Jordan elimination.

Both backends run the same column sweep:

    for each column c, left to right:
        find a pivot at or below the current pivot row r
        no pivot: zero the column from r down, move to the next column
        swap the pivot into row r and divide row r by the pivot
        subtract multiples of row r from every other row, above and below
        clamp near-zero residue, advance r

and stop once every row holds a pivot or every column has been visited.
They differ only in how the elimination step is carried out, and they
produce bit-identical output.
"""

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pyrref.core.compute.timing import Timer
from pyrref.core.compute.tolerances import SMALL_PIVOT_RATIO
from pyrref.core.result import Result
from pyrref.reduction._common import (
    clamp_near_zero,
    clear_below,
    eliminate_column,
    eliminate_column_rowwise,
    find_pivot_row,
    scale_row,
    swap_rows,
)
from pyrref.reduction.design import ReductionDesign
from pyrref.reduction.solution import ReductionParams


Eliminator = Callable[[NDArray[np.floating[Any]], int, int], None]


def _gauss_jordan(
    design: ReductionDesign,
    eliminate: Eliminator,
    timer: Timer,
) -> tuple[ReductionParams, tuple[str, ...]]:
    A = design.working_copy()
    n, m = design.n, design.m
    tol = design.tolerance
    pivoting = design.pivoting

    permutation = list(range(n))
    pivot_columns: list[int] = []
    warnings: list[str] = []
    n_swaps = 0
    n_clamped = 0

    r = 0
    for c in range(m):
        if r == n:
            break

        with timer.section('pivot_search'):
            p = find_pivot_row(A, c, r, tol.pivot_atol, pivoting)

        if p is None:
            n_clamped += clear_below(A, c, r)
            continue

        if pivoting == 'first_nonzero':
            largest = float(np.max(np.abs(A[r:, c])))
            chosen = abs(float(A[p, c]))
            if chosen < SMALL_PIVOT_RATIO * largest:
                warnings.append(
                    f"Column {c}: pivot {A[p, c]:.3g} is {chosen / largest:.1e} times "
                    f"the largest candidate {largest:.3g}; "
                    f"consider pivoting='max_magnitude'"
                )

        if p != r:
            swap_rows(A, p, r)
            permutation[p], permutation[r] = permutation[r], permutation[p]
            n_swaps += 1

        with timer.section('elimination'):
            scale_row(A, r, c)
            eliminate(A, c, r)
            n_clamped += clamp_near_zero(A, tol.clamp_atol)

        pivot_columns.append(c)
        r += 1

    A.flags.writeable = False
    params = ReductionParams(
        reduced=A,
        pivot_columns=tuple(pivot_columns),
        row_permutation=tuple(permutation),
        n_swaps=n_swaps,
        n_clamped=n_clamped,
    )
    return params, tuple(warnings)


def _info(design: ReductionDesign, params: ReductionParams) -> dict[str, Any]:
    return {
        'method': 'gauss_jordan',
        'pivoting': design.pivoting,
        'tolerance': design.tolerance.name,
        'rank': params.rank,
        'n_swaps': params.n_swaps,
        'n_clamped': params.n_clamped,
    }


class CPUGaussJordanBackend:
    """
    CPU backend with vectorised elimination.

    Implements the Backend protocol for ReductionDesign -> ReductionParams.
    Each pivot clears its column in all other rows with a single
    outer-product update.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: ReductionDesign) -> Result[ReductionParams]:
        """
        Reduce the design's matrix to reduced row echelon form.

        Args:
            design: Validated reduction design

        Returns:
            Result containing ReductionParams

        Raises:
            NumericalError: If scaling a pivot row overflows
        """
        timer = Timer()
        timer.start()
        params, warnings = _gauss_jordan(design, eliminate_column, timer)
        timer.stop()

        return Result(
            params=params,
            info=_info(design, params),
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )


class CPUReferenceBackend:
    """
    CPU backend eliminating one row at a time.

    Follows the textbook procedure literally and skips rows that are
    already zero in the pivot column. Kept as the reference the
    vectorised backend is tested against.
    """

    @property
    def name(self) -> str:
        return 'cpu_reference'

    def solve(self, design: ReductionDesign) -> Result[ReductionParams]:
        timer = Timer()
        timer.start()
        params, warnings = _gauss_jordan(design, eliminate_column_rowwise, timer)
        timer.stop()

        return Result(
            params=params,
            info=_info(design, params),
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
