"""
Shared compute infrastructure for PyMatrix.

This module contains shared NUMERIC infrastructure: precision constants,
tolerance tiers, and the elimination kernels used by the matrix layer.

Submodules:
    precision: Machine epsilon, tolerance tiers, closeness checks
    linalg: Linear algebra kernels (Gaussian elimination)
"""

from pymatrix.core.compute.precision import (
    EPSILON_32,
    EPSILON_64,
    FP32,
    FP64,
    ToleranceTier,
    allclose,
    is_close,
    machine_epsilon,
    select_tolerance,
)

__all__ = [
    # Precision
    "EPSILON_32",
    "EPSILON_64",
    "FP32",
    "FP64",
    "ToleranceTier",
    "allclose",
    "is_close",
    "machine_epsilon",
    "select_tolerance",
]
