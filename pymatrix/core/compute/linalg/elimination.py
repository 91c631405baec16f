"""
Gaussian elimination solvers.

Provides the elimination service behind Matrix inverse() and determinant():
given a flat row-major n x n buffer, report invertibility and the
determinant, and optionally write the inverse and the solutions of
M x = b and M Y = C into caller-supplied buffers.

Two implementations satisfy the EliminationSolver protocol:
    gauss_jordan_elimination: NumPy Gauss-Jordan with full pivoting
    lapack_elimination: LU factorization via SciPy (LAPACK getrf/getrs)

Both treat an exactly-zero pivot as singular. No tolerance is applied;
near-singular matrices are inverted and it is up to the caller to judge
the result (e.g. via the determinant or a residual check).
"""

from dataclasses import dataclass
from typing import Any
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import EliminationSolver
from pymatrix.core.validation import check_array, check_dimension, check_length

GAUSS_JORDAN = 'gauss_jordan'
LAPACK = 'lapack'
DEFAULT_SOLVER = GAUSS_JORDAN


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of a Gaussian elimination request.

    Attributes:
        invertible: False if a zero pivot was encountered
        determinant: Determinant of the input (0 when singular)
    """
    invertible: bool
    determinant: float


@dataclass
class _Request:
    """Validated buffers of one elimination call."""
    n: int
    A: NDArray[np.floating[Any]]
    inverse: NDArray[np.floating[Any]] | None
    b: NDArray[np.floating[Any]] | None
    x: NDArray[np.floating[Any]] | None
    C: NDArray[np.floating[Any]] | None
    y: NDArray[np.floating[Any]] | None
    num_cols: int


def _check_output(buffer: Any, length: int, name: str) -> NDArray[np.floating[Any]]:
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(
            f"{name}: output buffer must be a numpy array, got {type(buffer).__name__}"
        )
    # Results are real and fractional; other dtypes would truncate or reject them
    if not np.issubdtype(buffer.dtype, np.floating):
        raise ValidationError(
            f"{name}: output buffer must have a real floating-point dtype, got {buffer.dtype}"
        )
    check_length(buffer.size, length, name)
    return buffer


def _real_input(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(values, name).reshape(-1)
    if np.iscomplexobj(arr):
        raise ValidationError(f"{name}: expected real values, got dtype {arr.dtype}")
    return arr


def _prepare(
    n: int,
    matrix: ArrayLike,
    inverse: NDArray[np.floating[Any]] | None,
    b: ArrayLike | None,
    x: NDArray[np.floating[Any]] | None,
    c: ArrayLike | None,
    num_cols: int,
    y: NDArray[np.floating[Any]] | None,
) -> _Request:
    n = check_dimension(n, 'n')
    num_cols = check_dimension(num_cols, 'num_cols')

    flat = _real_input(matrix, 'matrix')
    check_length(flat.size, n * n, 'matrix')
    # Integer input is promoted by check_array; float32 stays float32
    work_dtype = np.result_type(flat.dtype, np.float32)
    A = flat.astype(work_dtype, copy=True).reshape(n, n)

    if inverse is not None:
        inverse = _check_output(inverse, n * n, 'inverse')

    rhs_b = None
    if b is not None:
        if x is None:
            raise ValidationError("x: an output buffer is required when b is given")
        rhs_b = _real_input(b, 'b').astype(work_dtype, copy=True)
        check_length(rhs_b.size, n, 'b')
        x = _check_output(x, n, 'x')

    rhs_c = None
    if c is not None:
        if y is None:
            raise ValidationError("y: an output buffer is required when c is given")
        rhs_c = _real_input(c, 'c').astype(work_dtype, copy=True)
        check_length(rhs_c.size, n * num_cols, 'c')
        rhs_c = rhs_c.reshape(n, num_cols)
        y = _check_output(y, n * num_cols, 'y')

    return _Request(n=n, A=A, inverse=inverse, b=rhs_b, x=x, C=rhs_c, y=y,
                    num_cols=num_cols)


def _fail(request: _Request) -> EliminationResult:
    """Zero-fill every requested output and report a singular matrix."""
    for buffer in (request.inverse, request.x, request.y):
        if buffer is not None:
            buffer.reshape(-1)[:] = 0
    return EliminationResult(invertible=False, determinant=0.0)


def _write(buffer: NDArray[np.floating[Any]] | None, values: NDArray[Any]) -> None:
    if buffer is not None:
        buffer.reshape(-1)[:] = values.reshape(-1)


def gauss_jordan_elimination(
    n: int,
    matrix: ArrayLike,
    inverse: NDArray[np.floating[Any]] | None = None,
    b: ArrayLike | None = None,
    x: NDArray[np.floating[Any]] | None = None,
    c: ArrayLike | None = None,
    num_cols: int = 0,
    y: NDArray[np.floating[Any]] | None = None,
) -> EliminationResult:
    """
    Gauss-Jordan elimination with full pivoting.

    At each step the largest-magnitude entry among the rows and columns not
    yet pivoted is chosen. Its row is swapped onto the diagonal (each swap
    flips the determinant sign), the row is normalized, and the column is
    cleared in every other row. The inverse is built in place in the
    working copy; column swaps are undone at the end.

    Args:
        n: Matrix order
        matrix: Flat n*n buffer, row-major (not modified)
        inverse: Optional flat n*n output for the inverse
        b: Optional length-n right-hand side
        x: Output for the solution of M x = b (required with b)
        c: Optional flat n*num_cols right-hand side, row-major
        num_cols: Number of columns of c
        y: Output for the solution of M Y = C (required with c)

    Returns:
        EliminationResult with invertibility flag and determinant

    Raises:
        ValidationError: If an input is not real, or an output is missing
            or not a floating-point array
        DimensionError: If a buffer length does not match n
    """
    request = _prepare(n, matrix, inverse, b, x, c, num_cols, y)
    n = request.n
    A, rhs_b, rhs_c = request.A, request.b, request.C

    row_index = np.zeros(n, dtype=np.intp)
    col_index = np.zeros(n, dtype=np.intp)
    pivoted = np.zeros(n, dtype=bool)
    determinant = A.dtype.type(1)
    odd = False

    for i0 in range(n):
        # Largest entry in the unpivoted block
        free = np.flatnonzero(~pivoted)
        block = np.abs(A[np.ix_(free, free)])
        k = int(np.argmax(block))
        if block.flat[k] == 0:
            return _fail(request)
        row = free[k // free.size]
        col = free[k % free.size]
        pivoted[col] = True

        if row != col:
            odd = not odd
            A[[row, col], :] = A[[col, row], :]
            if rhs_b is not None:
                rhs_b[[row, col]] = rhs_b[[col, row]]
            if rhs_c is not None:
                rhs_c[[row, col], :] = rhs_c[[col, row], :]

        row_index[i0] = row
        col_index[i0] = col

        pivot = A[col, col]
        determinant *= pivot
        inv_pivot = 1 / pivot
        A[col, col] = 1
        A[col, :] *= inv_pivot
        if rhs_b is not None:
            rhs_b[col] *= inv_pivot
        if rhs_c is not None:
            rhs_c[col, :] *= inv_pivot

        others = np.arange(n) != col
        factors = A[others, col].copy()
        A[others, col] = 0
        A[others, :] -= np.outer(factors, A[col, :])
        if rhs_b is not None:
            rhs_b[others] -= factors * rhs_b[col]
        if rhs_c is not None:
            rhs_c[others, :] -= np.outer(factors, rhs_c[col, :])

    if request.inverse is not None:
        for i1 in range(n - 1, -1, -1):
            if row_index[i1] != col_index[i1]:
                A[:, [row_index[i1], col_index[i1]]] = A[:, [col_index[i1], row_index[i1]]]
        _write(request.inverse, A)

    if rhs_b is not None:
        _write(request.x, rhs_b)
    if rhs_c is not None:
        _write(request.y, rhs_c)

    if odd:
        determinant = -determinant
    return EliminationResult(invertible=True, determinant=float(determinant))


def lapack_elimination(
    n: int,
    matrix: ArrayLike,
    inverse: NDArray[np.floating[Any]] | None = None,
    b: ArrayLike | None = None,
    x: NDArray[np.floating[Any]] | None = None,
    c: ArrayLike | None = None,
    num_cols: int = 0,
    y: NDArray[np.floating[Any]] | None = None,
) -> EliminationResult:
    """
    LU elimination with partial pivoting using LAPACK (via SciPy).

    Same contract as gauss_jordan_elimination. The determinant is the
    product of the U diagonal, negated once per row interchange. A zero on
    the U diagonal marks the matrix singular.
    """
    from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

    request = _prepare(n, matrix, inverse, b, x, c, num_cols, y)
    n = request.n
    if n == 0:
        return EliminationResult(invertible=True, determinant=1.0)

    # lu_factor warns on an exactly singular U; singularity is reported
    # through the result instead
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(request.A, check_finite=False)

    diag_U = np.diag(lu)
    if np.any(diag_U == 0):
        return _fail(request)

    swaps = int(np.sum(piv != np.arange(n)))
    determinant = float(np.prod(diag_U))
    if swaps % 2 == 1:
        determinant = -determinant

    factors = (lu, piv)
    if request.inverse is not None:
        _write(request.inverse, lu_solve(factors, np.eye(n, dtype=lu.dtype),
                                         check_finite=False))
    if request.b is not None:
        _write(request.x, lu_solve(factors, request.b, check_finite=False))
    if request.C is not None and request.num_cols > 0:
        _write(request.y, lu_solve(factors, request.C, check_finite=False))

    return EliminationResult(invertible=True, determinant=determinant)


_SOLVERS: dict[str, EliminationSolver] = {
    GAUSS_JORDAN: gauss_jordan_elimination,
    LAPACK: lapack_elimination,
}


def get_solver(solver: str | EliminationSolver | None = None) -> EliminationSolver:
    """
    Resolve a solver name or callable.

    Args:
        solver: 'gauss_jordan', 'lapack', a callable satisfying
                EliminationSolver, or None for the default

    Returns:
        The solver callable

    Raises:
        ValidationError: If the name is unknown
    """
    if solver is None:
        return _SOLVERS[DEFAULT_SOLVER]
    if isinstance(solver, str):
        try:
            return _SOLVERS[solver]
        except KeyError:
            raise ValidationError(
                f"solver: unknown solver {solver!r}, expected one of {sorted(_SOLVERS)}"
            ) from None
    if not callable(solver):
        raise ValidationError(
            f"solver: expected a name or callable, got {type(solver).__name__}"
        )
    return solver
