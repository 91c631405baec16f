"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix.core.layout import ALL_STORAGE_ORDERS, use_storage_order


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=sorted(ALL_STORAGE_ORDERS))
def storage_order(request):
    """Run the test once per storage order; restores the previous order."""
    with use_storage_order(request.param) as order:
        yield order


@pytest.fixture
def invertible_3x3():
    """Well-conditioned 3x3 matrix with determinant -306 (row-major values)."""
    return [6.0, 1.0, 1.0,
            4.0, -2.0, 5.0,
            2.0, 8.0, 7.0]


@pytest.fixture
def singular_3x3():
    """
    3x3 matrix with two identical rows (row-major values).

    Entries are chosen so every elimination step is exact in binary
    floating point; the zero pivot comes out exactly zero, as does the
    pivot of the transposed matrix.
    """
    return [2.0, 4.0, 8.0,
            2.0, 4.0, 8.0,
            1.0, 2.0, 1.0]
