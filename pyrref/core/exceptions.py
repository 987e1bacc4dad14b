"""
Exception hierarchy for pyrref.

All exceptions inherit from PyRREFError to allow catching any
library-specific error. Validation problems (bad shapes, empty matrices)
and numerical problems (non-finite entries) are kept on separate branches.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyRREFError(Exception):
    """Base exception for all pyrref errors."""
    pass


class ValidationError(PyRREFError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Matrix rows are inconsistent or the input is not two-dimensional.

    Attributes:
        row_lengths: Length of every row, when the input was ragged
        shape: Shape of the offending input, when it was rectangular
            but had the wrong number of dimensions
    """

    def __init__(
        self,
        message: str,
        row_lengths: tuple[int, ...] | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.row_lengths = row_lengths
        self.shape = shape


class DegenerateMatrixError(ValidationError):
    """
    Matrix has zero rows or zero columns.

    Raised at the reduction boundary. Empty matrices can be constructed
    but have no echelon form.

    Attributes:
        shape: (n_rows, n_cols) of the rejected matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyRREFError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class InvalidEntryError(NumericalError):
    """
    Matrix contains NaN or Inf entries.

    Non-finite values make pivot comparisons meaningless, so reduction
    refuses them up front instead of returning a corrupted result.

    Attributes:
        n_nan: Number of NaN entries
        n_inf: Number of +/-Inf entries
        positions: (row, col) index of every non-finite entry
    """

    def __init__(
        self,
        message: str,
        n_nan: int = 0,
        n_inf: int = 0,
        positions: tuple[tuple[int, int], ...] = (),
    ):
        super().__init__(message)
        self.n_nan = n_nan
        self.n_inf = n_inf
        self.positions = positions
