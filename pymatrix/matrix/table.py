"""
Storage tables for fixed-size matrices.

A table owns R*C elements in one contiguous numpy array and exposes two
accessors that hide the physical layout:

    table[r, c]   element in row r, column c
    table[i]      element i of the physical storage sequence

RowMajorTable keeps rows contiguous (array shape (R, C)); ColMajorTable
keeps columns contiguous (array shape (C, R)). Which one a new matrix gets
is decided by the process-wide storage order in pymatrix.core.layout.

Neither accessor checks ranges beyond what numpy itself does. The linear
accessor is only meaningful for order-agnostic loops (scale every element,
sum of squares, ...) or at a boundary that documents the order it expects.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.layout import ROW_MAJOR, COL_MAJOR, check_storage_order, storage_order


class Table:
    """Base class for the two physical layouts."""

    order: str = ''

    __slots__ = ('rows', 'cols', '_storage', '_flat')

    def __init__(self, rows: int, cols: int, dtype: np.dtype | type = np.float64):
        self.rows = rows
        self.cols = cols
        self._storage = np.zeros(self._physical_shape(rows, cols), dtype=dtype)
        self._flat = self._storage.reshape(-1)

    @staticmethod
    def _physical_shape(rows: int, cols: int) -> tuple[int, int]:
        raise NotImplementedError

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    @property
    def flat(self) -> NDArray[Any]:
        """1-D view of the physical storage sequence."""
        return self._flat

    @property
    def logical(self) -> NDArray[Any]:
        """(rows, cols) view in logical order. Never a copy."""
        raise NotImplementedError

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return self.logical[key]
        return self._flat[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            self.logical[key] = value
        else:
            self._flat[key] = value

    def __len__(self) -> int:
        return self._flat.size

    def copy(self) -> 'Table':
        clone = type(self).__new__(type(self))
        clone.rows = self.rows
        clone.cols = self.cols
        clone._storage = self._storage.copy()
        clone._flat = clone._storage.reshape(-1)
        return clone


class RowMajorTable(Table):
    """Rows are contiguous: element (r, c) lives at flat index c + cols*r."""

    order = ROW_MAJOR

    __slots__ = ()

    @staticmethod
    def _physical_shape(rows: int, cols: int) -> tuple[int, int]:
        return (rows, cols)

    @property
    def logical(self) -> NDArray[Any]:
        return self._storage


class ColMajorTable(Table):
    """Columns are contiguous: element (r, c) lives at flat index r + rows*c."""

    order = COL_MAJOR

    __slots__ = ()

    @staticmethod
    def _physical_shape(rows: int, cols: int) -> tuple[int, int]:
        return (cols, rows)

    @property
    def logical(self) -> NDArray[Any]:
        return self._storage.T


_TABLES: dict[str, type[Table]] = {
    ROW_MAJOR: RowMajorTable,
    COL_MAJOR: ColMajorTable,
}


def make_table(
    rows: int,
    cols: int,
    dtype: np.dtype | type = np.float64,
    order: str | None = None,
) -> Table:
    """
    Create a zero-filled table.

    Args:
        rows: Number of rows
        cols: Number of columns
        dtype: Element type
        order: ROW_MAJOR or COL_MAJOR. If None, the process-wide order.

    Returns:
        Table of the requested layout
    """
    if order is None:
        order = storage_order()
    return _TABLES[check_storage_order(order)](rows, cols, dtype)
