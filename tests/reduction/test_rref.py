"""
Tests for rref() and to_reduced_row_echelon_form().

Tests the complete pipeline: input conversion, design validation,
backend selection and the reduced matrix itself.
"""

import warnings

import numpy as np
import pytest

from pyrref import Matrix, rref, to_reduced_row_echelon_form, rank, is_rref
from pyrref.core.exceptions import (
    DegenerateMatrixError,
    InvalidEntryError,
    NumericalError,
    ShapeError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Known reductions
# ═══════════════════════════════════════════════════════════════════════


class TestKnownReductions:

    def test_tall_rank_two(self, tall_matrix):
        result = to_reduced_row_echelon_form(Matrix.from_rows(tall_matrix))
        assert result == Matrix.from_rows([[1, 0], [0, 1], [0, 0]])

    def test_identity_is_fixed_point(self):
        identity = Matrix.from_rows([[1, 0], [0, 1]])
        solution = rref(identity)
        assert solution.matrix == identity
        assert solution.n_swaps == 0

    def test_zero_matrix_is_fixed_point(self):
        zeros = Matrix.from_rows([[0, 0], [0, 0]])
        solution = rref(zeros)
        assert solution.matrix == zeros
        assert solution.rank == 0

    def test_zero_column_gets_no_pivot(self):
        result = to_reduced_row_echelon_form(Matrix.from_rows([[1, 0, 2], [2, 0, 4]]))
        assert result == Matrix.from_rows([[1, 0, 2], [0, 0, 0]])

    def test_single_row_scaled(self):
        result = to_reduced_row_echelon_form(Matrix.from_rows([[2, 4, 6]]))
        assert result == Matrix.from_rows([[1, 2, 3]])

    def test_pivot_found_below_first_row(self):
        # | 0  10  0   |
        # | 0   5  2.5 |
        # | 2   0  0   |
        matrix = Matrix.from_rows([[0, 10, 0], [0, 5, 2.5], [2, 0, 0]])
        assert to_reduced_row_echelon_form(matrix) == Matrix.identity(3)

    def test_non_square_with_free_column(self):
        matrix = Matrix.from_rows([[2, 2, 0], [0, 0, 1]])
        expected = Matrix.from_rows([[1, 1, 0], [0, 0, 1]])
        assert to_reduced_row_echelon_form(matrix) == expected

    def test_wide_consecutive_integers(self):
        matrix = [[1, 2, 3], [2, 3, 4], [3, 4, 5], [4, 5, 6]]
        expected = Matrix.from_rows([[1, 0, -1], [0, 1, 2], [0, 0, 0], [0, 0, 0]])
        assert to_reduced_row_echelon_form(matrix) == expected

    def test_single_column(self):
        result = to_reduced_row_echelon_form([[0], [0], [-3]])
        assert result == Matrix.from_rows([[1], [0], [0]])

    def test_one_by_one(self):
        assert to_reduced_row_echelon_form([[-4.0]]) == Matrix.from_rows([[1.0]])

    def test_render_of_reduced_matrix(self, tall_matrix):
        result = to_reduced_row_echelon_form(tall_matrix)
        assert result.render() == "| 1 0 |\n| 0 1 |\n| 0 0 |"


# ═══════════════════════════════════════════════════════════════════════
# Input handling
# ═══════════════════════════════════════════════════════════════════════


class TestInputs:

    def test_accepts_nested_lists(self, tall_matrix):
        assert isinstance(to_reduced_row_echelon_form(tall_matrix), Matrix)

    def test_accepts_ndarray(self, tall_matrix):
        result = to_reduced_row_echelon_form(np.array(tall_matrix))
        assert result.shape == (3, 2)

    def test_input_matrix_not_mutated(self, tall_matrix):
        matrix = Matrix.from_rows(tall_matrix)
        before = matrix.to_array()
        to_reduced_row_echelon_form(matrix)
        np.testing.assert_array_equal(matrix.values, before)

    def test_input_array_not_mutated(self, tall_matrix):
        A = np.array(tall_matrix)
        before = A.copy()
        rref(A)
        np.testing.assert_array_equal(A, before)

    def test_output_shares_no_memory(self, tall_matrix):
        matrix = Matrix.from_rows(tall_matrix)
        result = to_reduced_row_echelon_form(matrix)
        assert result is not matrix
        assert not np.shares_memory(result.values, matrix.values)


# ═══════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════


class TestErrors:

    def test_ragged_rows(self):
        with pytest.raises(ShapeError, match="inconsistent lengths"):
            rref([[1, 2, 3], [4, 5]])

    @pytest.mark.parametrize("data", [[], [[]], np.zeros((0, 3)), np.zeros((3, 0))])
    def test_degenerate_matrix(self, data):
        with pytest.raises(DegenerateMatrixError):
            to_reduced_row_echelon_form(data)

    def test_degenerate_matrix_shape_attribute(self):
        with pytest.raises(DegenerateMatrixError) as exc_info:
            rref(Matrix.zeros(2, 0))
        assert exc_info.value.shape == (2, 0)

    def test_nan_entry(self):
        with pytest.raises(InvalidEntryError, match="NaN") as exc_info:
            rref([[1.0, np.nan], [2.0, 3.0]])
        assert exc_info.value.positions == ((0, 1),)

    def test_inf_entry(self):
        with pytest.raises(InvalidEntryError, match="Inf"):
            rref(Matrix.from_rows([[np.inf, 1.0]]))

    def test_unknown_pivoting(self):
        with pytest.raises(ValidationError, match="pivoting strategy"):
            rref([[1.0]], pivoting='largest')

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            rref([[1.0]], backend='gpu')

    def test_unknown_tolerance(self):
        with pytest.raises(ValidationError, match="tolerance"):
            rref([[1.0]], tolerance='exact')

    def test_pivot_scaling_overflow(self):
        with pytest.raises(NumericalError, match="overflowed"):
            rref([[1e-310, 1e300]], tolerance='strict')

    @pytest.mark.parametrize("backend", ['cpu_gauss_jordan', 'cpu_reference'])
    def test_elimination_overflow(self, backend):
        # row 0 already holds the column 0 pivot when column 1 overflows it
        data = [[1.0, 1e10, 0.0], [0.0, 1.0, 1e308]]
        with pytest.raises(NumericalError, match="Eliminating column 1 overflowed"):
            rref(data, backend=backend)


# ═══════════════════════════════════════════════════════════════════════
# Tolerance and pivoting options
# ═══════════════════════════════════════════════════════════════════════


class TestTolerance:

    def test_cancellation_residue_clamped(self):
        # 0.3 / 0.1 == 2.9999999999999996, so 3 - 1 * that leaves 4.4e-16
        solution = rref([[0.1, 0.3], [1.0, 3.0]])
        assert solution.rank == 1
        assert solution.n_clamped >= 1
        assert solution.matrix[1, 1] == 0.0
        assert is_rref(solution.matrix)

    def test_strict_tolerance_keeps_residue_as_pivot(self):
        solution = rref([[0.1, 0.3], [1.0, 3.0]], tolerance='strict')
        assert solution.rank == 2
        assert solution.matrix == Matrix.identity(2)

    def test_tiny_entries_below_threshold_are_not_pivots(self):
        solution = rref([[1e-310, 1e300]])
        assert solution.matrix == Matrix.from_rows([[0.0, 1.0]])
        assert solution.pivot_columns == (1,)

    def test_float_tolerance(self):
        data = [[1e-7, 0.0], [0.0, 1.0]]
        assert rank(data, tolerance=1e-6) == 1
        assert rank(data, tolerance=1e-8) == 2

    def test_loose_tier(self):
        assert rank([[1e-9, 1.0], [1.0, 1.0]], tolerance='loose') == 2
        assert rref([[1e-9], [0.0]], tolerance='loose').rank == 0


class TestPivoting:

    def test_small_pivot_warns(self):
        with pytest.warns(RuntimeWarning, match="max_magnitude"):
            solution = rref([[1e-10, 1.0], [1.0, 1.0]])
        assert solution.warnings
        assert is_rref(solution.matrix)

    @pytest.mark.parametrize("entry_point", [rref, to_reduced_row_echelon_form, rank])
    def test_small_pivot_warning_points_at_caller(self, entry_point):
        with pytest.warns(RuntimeWarning, match="max_magnitude") as record:
            entry_point([[1e-10, 1.0], [1.0, 1.0]])
        assert record[0].filename == __file__

    def test_max_magnitude_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            solution = rref([[1e-10, 1.0], [1.0, 1.0]], pivoting='max_magnitude')
        assert solution.warnings == ()
        assert solution.matrix == Matrix.identity(2)

    def test_max_magnitude_swaps_largest_up(self):
        solution = rref([[1.0, 2.0], [4.0, 1.0]], pivoting='max_magnitude')
        assert solution.n_swaps == 1
        assert solution.row_permutation == (1, 0)
        assert solution.matrix.allclose(Matrix.identity(2))

    def test_strategies_agree_on_well_conditioned_input(self, rng):
        A = rng.standard_normal((4, 6))
        first = rref(A).matrix
        largest = rref(A, pivoting='max_magnitude').matrix
        assert first.allclose(largest, rtol=1e-9, atol=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# rank / is_rref helpers
# ═══════════════════════════════════════════════════════════════════════


class TestHelpers:

    def test_rank(self, tall_matrix):
        assert rank(tall_matrix) == 2

    def test_rank_of_zero_matrix(self):
        assert rank(Matrix.zeros(3, 3)) == 0

    def test_is_rref_true(self):
        assert is_rref([[1, 0, 2], [0, 1, 3]])

    def test_is_rref_false(self, tall_matrix):
        assert not is_rref(tall_matrix)

    def test_is_rref_empty(self):
        assert is_rref(Matrix.from_rows([]))
