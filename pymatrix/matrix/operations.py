"""
Matrix algorithms.

Free functions over the public Matrix/Vector API: transposition, norms,
products (including the transposed variants), diagonal helpers,
homogeneous lift/project, and inversion/determinant through a pluggable
elimination solver.

Products work on logical (R, C) arrays, so mixing matrices created under
different storage orders is safe. Norms read the flat buffer directly
because they do not depend on element order.

Inversion and the determinant are delegated to an EliminationSolver (see
pymatrix.core.compute.linalg.elimination). Singular input is not an
error: determinant() returns 0 and inverse() returns the zero matrix with
an invertibility flag the caller may inspect.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.elimination import get_solver
from pymatrix.core.exceptions import DimensionError, SingularMatrixError
from pymatrix.core.protocols import EliminationSolver
from pymatrix.core.validation import check_length, check_square
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.vector import Vector, vector_values


def _matrix(array: NDArray[Any]) -> Matrix:
    return Matrix[array.shape[0], array.shape[1], array.dtype](array)


def _vector(array: NDArray[Any]) -> Vector:
    return Vector[array.shape[0], array.dtype](array)


def _check_common(k_left: int, k_right: int, operation: str) -> None:
    if k_left != k_right:
        raise DimensionError(
            f"{operation}: inner dimensions do not match ({k_left} vs {k_right})",
            expected=(k_left,),
            actual=(k_right,),
        )


# ═══════════════════════════════════════════════════════════════════════
# Geometric operations
# ═══════════════════════════════════════════════════════════════════════


def l1_norm(M: Matrix) -> float:
    """Sum of the absolute values of all elements."""
    return float(np.sum(np.abs(M.buffer)))


def l2_norm(M: Matrix) -> float:
    """Square root of the sum of squares of all elements (Frobenius norm)."""
    buf = M.buffer
    return float(np.sqrt(np.sum(buf * buf)))


def linf_norm(M: Matrix) -> float:
    """Largest absolute element; 0 for an empty matrix."""
    if M.size == 0:
        return 0.0
    return float(np.max(np.abs(M.buffer)))


def transpose(M: Matrix) -> Matrix:
    """M^T: a C x R matrix with result(c, r) = M(r, c)."""
    return _matrix(M.to_numpy().T)


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


def multiply_mv(M: Matrix, V: Vector) -> Vector:
    """M*V for M of shape (R, C) and V of length C; returns length R."""
    v = vector_values(V, 'V')
    check_length(v.size, M.cols, 'V')
    return _vector(M.to_numpy() @ v)


def multiply_vm(V: Vector, M: Matrix) -> Vector:
    """V^T*M for V of length R and M of shape (R, C); returns length C."""
    v = vector_values(V, 'V')
    check_length(v.size, M.rows, 'V')
    return _vector(v @ M.to_numpy())


def multiply_ab(A: Matrix, B: Matrix) -> Matrix:
    """A*B for A (R x K) and B (K x C)."""
    _check_common(A.cols, B.rows, 'multiply_ab')
    return _matrix(A.to_numpy() @ B.to_numpy())


def multiply_abt(A: Matrix, B: Matrix) -> Matrix:
    """A*B^T for A (R x K) and B (C x K), without forming B^T."""
    _check_common(A.cols, B.cols, 'multiply_abt')
    return _matrix(A.to_numpy() @ B.to_numpy().T)


def multiply_atb(A: Matrix, B: Matrix) -> Matrix:
    """A^T*B for A (K x R) and B (K x C), without forming A^T."""
    _check_common(A.rows, B.rows, 'multiply_atb')
    return _matrix(A.to_numpy().T @ B.to_numpy())


def multiply_atbt(A: Matrix, B: Matrix) -> Matrix:
    """A^T*B^T for A (K x R) and B (C x K), without forming either transpose."""
    _check_common(A.rows, B.cols, 'multiply_atbt')
    return _matrix(A.to_numpy().T @ B.to_numpy().T)


def multiply_md(M: Matrix, D: Vector) -> Matrix:
    """M*diag(D): column c of M scaled by D[c]."""
    d = vector_values(D, 'D')
    check_length(d.size, M.cols, 'D')
    return _matrix(M.to_numpy() * d[np.newaxis, :])


def multiply_dm(D: Vector, M: Matrix) -> Matrix:
    """diag(D)*M: row r of M scaled by D[r]."""
    d = vector_values(D, 'D')
    check_length(d.size, M.rows, 'D')
    return _matrix(d[:, np.newaxis] * M.to_numpy())


def outer_product(U: Vector, V: Vector) -> Matrix:
    """U*V^T: result(r, c) = U[r]*V[c]."""
    return _matrix(np.outer(vector_values(U, 'U'), vector_values(V, 'V')))


# ═══════════════════════════════════════════════════════════════════════
# Diagonal and homogeneous helpers
# ═══════════════════════════════════════════════════════════════════════


def make_diagonal(D: Vector, M: Matrix) -> None:
    """
    Overwrite M with the diagonal matrix whose diagonal is D.

    Args:
        D: Diagonal entries, length N
        M: N x N matrix, modified in place

    Raises:
        DimensionError: If M is not square or len(D) != N
    """
    n = check_square(M.shape, 'M')
    d = vector_values(D, 'D')
    check_length(d.size, n, 'D')
    M.make_zero()
    for i in range(n):
        M[i, i] = d[i]


def hlift(M: Matrix) -> Matrix:
    """
    Embed an N x N linear map as an (N+1) x (N+1) homogeneous one.

    The upper-left N x N block is M; the last row and column are those of
    the identity.
    """
    n = check_square(M.shape, 'M')
    lifted = np.eye(n + 1, dtype=M.dtype)
    lifted[:n, :n] = M.to_numpy()
    return _matrix(lifted)


def hproject(M: Matrix) -> Matrix:
    """
    Extract the upper-left (N-1) x (N-1) block of an N x N matrix.

    Raises:
        DimensionError: If M is not square or N < 2
    """
    n = check_square(M.shape, 'M')
    if n < 2:
        raise DimensionError(
            f"M: hproject requires order >= 2, got {n}",
            actual=M.shape,
        )
    return _matrix(M.to_numpy()[:n - 1, :n - 1])


# ═══════════════════════════════════════════════════════════════════════
# Inversion and determinant
# ═══════════════════════════════════════════════════════════════════════


def _empty_like(M: Matrix) -> Matrix:
    # Same layout as M, so its buffer pairs with M.buffer
    result = M.copy()
    result.make_zero()
    return result


def inverse(
    M: Matrix,
    report_invertibility: bool = False,
    solver: str | EliminationSolver | None = None,
) -> Matrix | tuple[Matrix, bool]:
    """
    Inverse of a square matrix.

    The matrix buffer is handed to the solver as-is. The solver expects
    row-major input; a column-major buffer is the row-major buffer of M^T,
    and the inverse of M^T written back in column-major order reads as the
    inverse of M, so the result is correct under either storage order.

    Args:
        M: N x N matrix
        report_invertibility: If True, return (inverse, invertible)
        solver: Solver name or callable (default Gauss-Jordan)

    Returns:
        The inverse, or (inverse, invertible). For a singular M the
        inverse is the zero matrix and invertible is False.

    Raises:
        DimensionError: If M is not square
    """
    n = check_square(M.shape, 'M')
    inv_M = _empty_like(M)
    result = get_solver(solver)(n, M.buffer, inverse=inv_M.buffer)
    if report_invertibility:
        return inv_M, result.invertible
    return inv_M


def inverse_or_raise(
    M: Matrix,
    solver: str | EliminationSolver | None = None,
) -> Matrix:
    """
    Inverse of a square matrix, raising on singular input.

    Raises:
        DimensionError: If M is not square
        SingularMatrixError: If M is singular
    """
    inv_M, invertible = inverse(M, report_invertibility=True, solver=solver)
    if not invertible:
        n = M.rows
        raise SingularMatrixError(
            f"M: {n}x{n} matrix is singular (zero pivot during elimination)",
            matrix_name='M',
            determinant=0.0,
            expected_rank=n,
        )
    return inv_M


def determinant(
    M: Matrix,
    solver: str | EliminationSolver | None = None,
) -> float:
    """
    Determinant of a square matrix; 0 when M is singular.

    Raises:
        DimensionError: If M is not square
    """
    n = check_square(M.shape, 'M')
    return get_solver(solver)(n, M.buffer).determinant


def solve(
    M: Matrix,
    b: Vector,
    solver: str | EliminationSolver | None = None,
) -> tuple[Vector, bool]:
    """
    Solve M x = b.

    Args:
        M: N x N matrix
        b: Right-hand side, length N
        solver: Solver name or callable (default Gauss-Jordan)

    Returns:
        (x, invertible). For a singular M, x is zero and invertible is False.

    Raises:
        DimensionError: If M is not square or len(b) != N
    """
    n = check_square(M.shape, 'M')
    rhs = vector_values(b, 'b')
    check_length(rhs.size, n, 'b')
    x = np.zeros(n, dtype=np.result_type(M.dtype, rhs.dtype))
    # Logical copy: the right-hand side pairs with rows, not storage
    result = get_solver(solver)(n, M.to_numpy().reshape(-1), b=rhs, x=x)
    return _vector(x), result.invertible
