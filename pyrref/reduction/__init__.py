"""
Gauss-Jordan reduction to reduced row echelon form.

Public API:
    rref(data, ...) -> ReductionSolution
    to_reduced_row_echelon_form(matrix) -> Matrix
    rank(data) -> int
    is_rref(data) -> bool

Example:
    >>> from pyrref.reduction import rref
    >>> solution = rref([[2, 4, 6]])
    >>> solution.matrix.to_list()
    [[1.0, 2.0, 3.0]]
"""

from pyrref.reduction.design import ReductionDesign
from pyrref.reduction.solution import ReductionParams, ReductionSolution
from pyrref.reduction.solvers import rref, to_reduced_row_echelon_form, rank, is_rref

__all__ = [
    "rref",
    "to_reduced_row_echelon_form",
    "rank",
    "is_rref",
    "ReductionDesign",
    "ReductionParams",
    "ReductionSolution",
]
