"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

The matrix fast paths do not call these; they guard construction,
the checked accessors, and the solver boundary.
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
    dtype: np.dtype | type | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target dtype. If None, integers are promoted to float64.

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if dtype is not None:
        return result.astype(dtype, copy=False)

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix or vector dimension is a non-negative integer.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    # bool is an Integral but never a meaningful dimension
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: dimension must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: dimension must be non-negative, got {value}")
    return int(value)


def check_shape(
    actual: tuple[int, ...],
    expected: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify an operand has exactly the expected shape.

    Args:
        actual: Shape of the supplied operand
        expected: Shape the operation requires
        name: Parameter name for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if tuple(actual) != tuple(expected):
        raise DimensionError(
            f"{name}: expected shape {tuple(expected)}, got {tuple(actual)}",
            expected=tuple(expected),
            actual=tuple(actual),
        )


def check_square(shape: tuple[int, int], name: str) -> int:
    """
    Verify a matrix shape is square.

    Returns:
        The matrix order N

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {tuple(shape)}",
            expected=(rows, rows),
            actual=tuple(shape),
        )
    return rows


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify a vector or flat buffer has the expected number of elements.

    Raises:
        DimensionError: If the lengths differ
    """
    if length != expected:
        raise DimensionError(
            f"{name}: expected {expected} elements, got {length}",
            expected=(expected,),
            actual=(length,),
        )


def check_index(
    index: tuple[int, ...],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify every component of an index lies in [0, extent).

    Negative indices are rejected rather than wrapped.

    Raises:
        IndexOutOfRangeError: If any component is out of range
    """
    if len(index) != len(shape):
        raise IndexOutOfRangeError(
            f"{name}: expected {len(shape)} indices, got {len(index)}",
            index=tuple(index),
            shape=tuple(shape),
        )
    for i, extent in zip(index, shape):
        if not 0 <= i < extent:
            raise IndexOutOfRangeError(
                f"{name}: index {tuple(index)} out of range for shape {tuple(shape)}",
                index=tuple(index),
                shape=tuple(shape),
            )
