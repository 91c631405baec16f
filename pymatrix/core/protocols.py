"""
Core protocols for PyMatrix.

These define structural interfaces that pluggable implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that any callable with the right signature can be handed to
inverse()/determinant(), including plain functions.
"""

from typing import Protocol, Any, TYPE_CHECKING, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray

if TYPE_CHECKING:
    from pymatrix.core.compute.linalg.elimination import EliminationResult


@runtime_checkable
class EliminationSolver(Protocol):
    """
    Protocol for dense Gaussian-elimination solvers.

    A solver receives a flat n*n buffer in row-major order and reports
    whether the matrix is invertible together with its determinant. The
    optional buffers request extra work and are written in place:

        inverse:      n*n output buffer for the inverse (row-major)
        b, x:         solve M x = b for a length-n right-hand side
        c, y:         solve M Y = C for an n x num_cols right-hand side

    Callers that only need the inverse or determinant leave the ancillary
    buffers as None; the solver passes them through untouched.

    Singular matrices are not errors: the solver returns
    invertible=False and determinant 0, and zero-fills every output
    buffer it was given.
    """

    def __call__(
        self,
        n: int,
        matrix: ArrayLike,
        inverse: NDArray[np.floating[Any]] | None = None,
        b: ArrayLike | None = None,
        x: NDArray[np.floating[Any]] | None = None,
        c: ArrayLike | None = None,
        num_cols: int = 0,
        y: NDArray[np.floating[Any]] | None = None,
    ) -> 'EliminationResult':
        ...
