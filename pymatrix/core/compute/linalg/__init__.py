"""
Linear algebra kernels for PyMatrix.

All functions follow these conventions:
    - Inputs are flat row-major buffers plus explicit dimensions
    - Outputs are written into caller-supplied numpy buffers
    - Each call returns a structured result dataclass
    - Singularity is reported, never raised

Submodules:
    elimination: Gauss-Jordan and LAPACK LU elimination solvers
"""

from pymatrix.core.compute.linalg.elimination import (
    DEFAULT_SOLVER,
    GAUSS_JORDAN,
    LAPACK,
    EliminationResult,
    gauss_jordan_elimination,
    get_solver,
    lapack_elimination,
)

__all__ = [
    # Elimination
    "DEFAULT_SOLVER",
    "GAUSS_JORDAN",
    "LAPACK",
    "EliminationResult",
    "gauss_jordan_elimination",
    "get_solver",
    "lapack_elimination",
]
