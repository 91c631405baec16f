"""
Tests for the storage tables.

The two layouts must agree on every (r, c) access and differ only in the
linear (physical) index.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.layout import COL_MAJOR, ROW_MAJOR, use_storage_order
from pymatrix.matrix.table import ColMajorTable, RowMajorTable, make_table


def _filled(table_cls):
    table = table_cls(2, 3)
    for r in range(2):
        for c in range(3):
            table[r, c] = 10 * r + c
    return table


class TestConstruction:

    @pytest.mark.parametrize("table_cls", [RowMajorTable, ColMajorTable])
    def test_zero_initialized(self, table_cls):
        table = table_cls(3, 4)
        assert len(table) == 12
        np.testing.assert_array_equal(table.flat, np.zeros(12))

    @pytest.mark.parametrize("table_cls", [RowMajorTable, ColMajorTable])
    def test_dtype(self, table_cls):
        assert table_cls(2, 2, np.float32).dtype == np.float32

    def test_make_table_follows_process_order(self):
        with use_storage_order(COL_MAJOR):
            assert isinstance(make_table(2, 2), ColMajorTable)
        with use_storage_order(ROW_MAJOR):
            assert isinstance(make_table(2, 2), RowMajorTable)

    def test_make_table_explicit_order(self):
        assert make_table(2, 2, order=COL_MAJOR).order == COL_MAJOR

    def test_make_table_unknown_order(self):
        with pytest.raises(ValidationError):
            make_table(2, 2, order="diagonal")


class TestAccess:

    @pytest.mark.parametrize("table_cls", [RowMajorTable, ColMajorTable])
    def test_two_index_access(self, table_cls):
        table = _filled(table_cls)
        assert table[1, 2] == 12
        np.testing.assert_array_equal(table.logical, [[0, 1, 2], [10, 11, 12]])

    def test_row_major_linear_order(self):
        np.testing.assert_array_equal(_filled(RowMajorTable).flat, [0, 1, 2, 10, 11, 12])

    def test_col_major_linear_order(self):
        np.testing.assert_array_equal(_filled(ColMajorTable).flat, [0, 10, 1, 11, 2, 12])

    @pytest.mark.parametrize("table_cls", [RowMajorTable, ColMajorTable])
    def test_linear_write(self, table_cls):
        table = table_cls(2, 2)
        table[3] = 5.0
        # The last physical slot is (1, 1) in both layouts
        assert table[1, 1] == 5.0

    def test_logical_is_a_view(self):
        table = ColMajorTable(2, 3)
        table.logical[0, 2] = 7.0
        assert table[0, 2] == 7.0
        assert np.shares_memory(table.logical, table.flat)


class TestCopy:

    @pytest.mark.parametrize("table_cls", [RowMajorTable, ColMajorTable])
    def test_copy_is_independent(self, table_cls):
        table = _filled(table_cls)
        clone = table.copy()
        clone[0, 0] = -1.0
        assert table[0, 0] == 0
        assert clone.order == table.order
        np.testing.assert_array_equal(clone.flat[1:], table.flat[1:])
