"""
Storage-order constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for storage-order strings and
for the process-wide storage order. Import from here, never use raw strings.

The order is read once, when this module is first imported, from the
PYMATRIX_STORAGE_ORDER environment variable. That import is the Python
counterpart of a build-time switch: every matrix created afterwards uses
the same physical layout, and no public accessor reveals which one except
the linear index and the comparison operators.

Usage:
    PYMATRIX_STORAGE_ORDER=col_major python my_script.py

    from pymatrix.core.layout import use_storage_order, COL_MAJOR

    with use_storage_order(COL_MAJOR):
        M = Matrix[3, 3]()
"""

import os
import warnings
from contextlib import contextmanager
from typing import Iterator

from pymatrix.core.exceptions import ValidationError

# Rows are contiguous in memory
ROW_MAJOR = 'row_major'

# Columns are contiguous in memory
COL_MAJOR = 'col_major'

# All storage orders as a frozenset for validation
ALL_STORAGE_ORDERS = frozenset({
    ROW_MAJOR,
    COL_MAJOR,
})

# Environment variable consulted at import time
STORAGE_ORDER_ENV = 'PYMATRIX_STORAGE_ORDER'

DEFAULT_STORAGE_ORDER = ROW_MAJOR


def _order_from_environment() -> str:
    value = os.environ.get(STORAGE_ORDER_ENV)
    if value is None or value.strip() == '':
        return DEFAULT_STORAGE_ORDER

    order = value.strip().lower()
    if order not in ALL_STORAGE_ORDERS:
        warnings.warn(
            f"{STORAGE_ORDER_ENV}={value!r} is not one of "
            f"{sorted(ALL_STORAGE_ORDERS)}, using {DEFAULT_STORAGE_ORDER!r}"
        )
        return DEFAULT_STORAGE_ORDER
    return order


_active_order: str = _order_from_environment()


def check_storage_order(order: str) -> str:
    """
    Validate a storage-order name.

    Args:
        order: Candidate order name

    Returns:
        The validated order

    Raises:
        ValidationError: If order is not ROW_MAJOR or COL_MAJOR
    """
    if order not in ALL_STORAGE_ORDERS:
        raise ValidationError(
            f"order: unknown storage order {order!r}, "
            f"expected one of {sorted(ALL_STORAGE_ORDERS)}"
        )
    return order


def storage_order() -> str:
    """Return the storage order used for newly created matrices."""
    return _active_order


def set_storage_order(order: str) -> None:
    """
    Change the storage order for matrices created from now on.

    Existing matrices keep the layout they were created with. Intended for
    process setup and for tests that exercise both layouts; switching in
    the middle of a computation makes comparison results layout-mixed.

    Raises:
        ValidationError: If order is unknown
    """
    global _active_order
    _active_order = check_storage_order(order)


@contextmanager
def use_storage_order(order: str) -> Iterator[str]:
    """Temporarily switch the storage order, restoring it on exit."""
    previous = storage_order()
    set_storage_order(order)
    try:
        yield order
    finally:
        set_storage_order(previous)


__all__ = [
    'ROW_MAJOR',
    'COL_MAJOR',
    'ALL_STORAGE_ORDERS',
    'STORAGE_ORDER_ENV',
    'DEFAULT_STORAGE_ORDER',
    'check_storage_order',
    'storage_order',
    'set_storage_order',
    'use_storage_order',
]
