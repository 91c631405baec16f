"""
Numerical precision constants and tolerance tiers.

Provides machine epsilon, tolerance tiers per element type, and closeness
checks used by callers comparing computed matrices (e.g. M * inverse(M)
against the identity) and by the test suite.

Tolerance tiers:
- FP64: double precision elimination on matrices of a few hundred elements
- FP32: relaxed for single-precision arithmetic
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision products and eliminations',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision products and eliminations',
)


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def select_tolerance(dtype: np.dtype | type = np.float64) -> ToleranceTier:
    """Select the tolerance tier matching an element type."""
    if np.dtype(dtype).itemsize <= 4:
        return FP32
    return FP64


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = FP64.rtol,
    atol: float = FP64.atol
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def allclose(a: Any, b: Any, tier: ToleranceTier | None = None) -> bool:
    """
    Check whether two matrices, vectors or arrays agree elementwise.

    Matrices and vectors are compared in logical order through their
    to_numpy() copies, so the result does not depend on storage order.

    Args:
        a: Matrix, Vector or array-like
        b: Matrix, Vector or array-like of the same shape
        tier: Tolerance tier. If None, chosen from the dtype of a.

    Returns:
        True if every element pair is close and the shapes match
    """
    a_arr = a.to_numpy() if hasattr(a, 'to_numpy') else np.asarray(a)
    b_arr = b.to_numpy() if hasattr(b, 'to_numpy') else np.asarray(b)
    if a_arr.shape != b_arr.shape:
        return False
    if tier is None:
        tier = select_tolerance(a_arr.dtype)
    return bool(np.all(is_close(a_arr, b_arr, rtol=tier.rtol, atol=tier.atol)))
