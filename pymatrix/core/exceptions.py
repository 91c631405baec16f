"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Numeric fallbacks (division by zero, singular inverse) are NOT errors;
      these exceptions cover misuse of the API, not numerical outcomes
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when a matrix or vector does not have the shape an operation
    requires, e.g. adding a 3x3 matrix to a 2x2 matrix.

    Attributes:
        expected: Expected shape, if known
        actual: Shape that was supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Checked element access was given an index outside the table.

    Only the checked accessors raise this; the fast accessors leave
    range checking to the caller.

    Attributes:
        index: The offending index
        shape: Shape of the matrix or vector being accessed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised only by helpers that explicitly opt in to strict inversion.
    The default inverse/determinant path reports singularity through the
    invertibility flag instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant reported by the solver, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank
