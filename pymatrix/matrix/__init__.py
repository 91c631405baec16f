"""
Fixed-size matrices and vectors.

Usage:
    from pymatrix.matrix import Matrix, Vector, inverse, transpose

    M = Matrix[3, 3]([2, 0, 0, 0, 3, 0, 0, 0, 4])
    inv_M, invertible = inverse(M, report_invertibility=True)
    v = transpose(M) * Vector[3]([1, 1, 1])
"""

from pymatrix.matrix.table import Table, RowMajorTable, ColMajorTable, make_table
from pymatrix.matrix.vector import Vector
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.operations import (
    determinant,
    hlift,
    hproject,
    inverse,
    inverse_or_raise,
    l1_norm,
    l2_norm,
    linf_norm,
    make_diagonal,
    multiply_ab,
    multiply_abt,
    multiply_atb,
    multiply_atbt,
    multiply_dm,
    multiply_md,
    multiply_mv,
    multiply_vm,
    outer_product,
    solve,
    transpose,
)

__all__ = [
    # Storage
    "Table",
    "RowMajorTable",
    "ColMajorTable",
    "make_table",
    # Value types
    "Vector",
    "Matrix",
    # Geometric operations
    "l1_norm",
    "l2_norm",
    "linf_norm",
    "transpose",
    # Products
    "multiply_mv",
    "multiply_vm",
    "multiply_ab",
    "multiply_abt",
    "multiply_atb",
    "multiply_atbt",
    "multiply_md",
    "multiply_dm",
    "outer_product",
    # Diagonal and homogeneous helpers
    "make_diagonal",
    "hlift",
    "hproject",
    # Inversion and determinant
    "inverse",
    "inverse_or_raise",
    "determinant",
    "solve",
]
