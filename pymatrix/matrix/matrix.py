"""
Fixed-size matrices.

Matrix[R, C] is a value type holding R*C elements in a storage table
whose physical layout (row-major or column-major) is fixed process-wide by
pymatrix.core.layout. Every accessor except the linear index and the
comparison operators gives the same answer under either layout.

Shapes are types: Matrix[2, 3] always returns the same class, and
operations that need matching shapes raise DimensionError on a mismatch
before touching any data.

    A = Matrix[2, 3]([1, 2, 3, 4, 5, 6])     # row-major values
    B = Matrix[3, 2].identity()
    C = A * B                                # Matrix[2, 2]
    v = A * Vector[3]([1, 0, 0])             # Vector[2]

Fast accessors (m[r, c], m[i]) are unchecked beyond numpy's own
indexing; at() and set_at() are the checked variants.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.layout import ROW_MAJOR, storage_order
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_length,
    check_shape,
)
from pymatrix.matrix.table import Table, make_table
from pymatrix.matrix.vector import Vector, check_element_type, is_scalar, vector_values


_MATRIX_TYPES: dict[tuple[int, int, np.dtype], type['Matrix']] = {}


class Matrix:
    """
    Matrix of R rows and C columns.

    Parameterise before use: Matrix[R, C] or Matrix[R, C, dtype]
    (default float64). The bare Matrix class is the common base of all
    shapes and cannot hold data.

    Construction:
        Matrix[R, C]()                 # zero matrix
        Matrix[R, C](values)           # row-major values; missing cells zero,
                                       # excess values ignored
        Matrix[R, C](rows)             # 2-D array-like of shape (R, C)
        Matrix[R, C].unit(r, c)        # standard basis matrix
        Matrix[R, C].identity()        # ones on the leading diagonal
        Matrix.from_numpy(array)       # shape taken from the array

    Comparison:
        ==, <, <= etc. compare the elements lexicographically in physical
        storage order. Equality is layout independent; ORDERING IS NOT:
        a row-major and a column-major process may sort the same matrices
        differently. Sorted containers of matrices are only reproducible
        under one storage order.
    """

    ROWS: int | None = None
    COLS: int | None = None
    DTYPE: np.dtype = np.dtype(np.float64)

    __slots__ = ('_table',)

    # Keep numpy from broadcasting over matrices in mixed expressions
    __array_ufunc__ = None

    def __class_getitem__(cls, params: Any) -> type['Matrix']:
        if not isinstance(params, tuple) or len(params) not in (2, 3):
            raise TypeError("Matrix takes Matrix[R, C] or Matrix[R, C, dtype]")
        rows, cols = params[0], params[1]
        dtype = params[2] if len(params) == 3 else np.float64

        rows = check_dimension(rows, 'R')
        cols = check_dimension(cols, 'C')
        dtype = check_element_type(dtype, 'dtype')
        key = (rows, cols, dtype)
        specialized = _MATRIX_TYPES.get(key)
        if specialized is None:
            name = f"Matrix{rows}x{cols}"
            if dtype != np.float64:
                name = f"{name}_{dtype.name}"
            specialized = type(name, (Matrix,), {
                '__slots__': (),
                '__module__': __name__,
                '__qualname__': name,
                'ROWS': rows,
                'COLS': cols,
                'DTYPE': dtype,
            })
            _MATRIX_TYPES[key] = specialized
        return specialized

    def __init__(self, values: ArrayLike | None = None):
        cls = type(self)
        if cls.ROWS is None or cls.COLS is None:
            raise TypeError("Matrix must be parameterised with a shape, e.g. Matrix[3, 3]()")
        self._table: Table = make_table(cls.ROWS, cls.COLS, cls.DTYPE)
        if values is not None:
            self._assign(values)

    def _assign(self, values: ArrayLike) -> None:
        rows, cols = self.shape
        arr = check_array(values, 'values', dtype=self.DTYPE)
        if arr.ndim == 0:
            arr = arr.reshape(1)
        if arr.ndim == 2:
            check_shape(arr.shape, (rows, cols), 'values')
            self._table.logical[...] = arr
            return

        # Flat values are row-major whatever the physical layout
        check_1d(arr, 'values')
        count = min(arr.size, rows * cols)
        padded = np.zeros(rows * cols, dtype=self.DTYPE)
        padded[:count] = arr[:count]
        self._table.logical[...] = padded.reshape(rows, cols)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> 'Matrix':
        """
        Build a matrix from a 2-D array in logical (row, col) order.

        On a parameterised class the array shape must equal (R, C). On the
        bare Matrix class the shape and element type come from the array.
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        if cls.ROWS is None:
            cls = Matrix[arr.shape[0], arr.shape[1], arr.dtype]
        else:
            check_shape(arr.shape, (cls.ROWS, cls.COLS), 'array')
        return cls(arr)

    # === Special matrices ===

    @classmethod
    def zero(cls) -> 'Matrix':
        """All components 0."""
        M = cls()
        M.make_zero()
        return M

    @classmethod
    def unit(cls, r: int, c: int) -> 'Matrix':
        """Component (r, c) is 1, all others 0; all 0 if (r, c) is out of range."""
        M = cls()
        M.make_unit(r, c)
        return M

    @classmethod
    def identity(cls) -> 'Matrix':
        """Diagonal entries 1, others 0, also when non-square."""
        M = cls()
        M.make_identity()
        return M

    def make_zero(self) -> None:
        self._table.flat[:] = 0

    def make_unit(self, r: int, c: int) -> None:
        self.make_zero()
        rows, cols = self.shape
        if 0 <= r < rows and 0 <= c < cols:
            self._table[r, c] = 1

    def make_identity(self) -> None:
        self.make_zero()
        diagonal = np.arange(min(self.shape))
        self._table.logical[diagonal, diagonal] = 1

    # === Properties ===

    @property
    def shape(self) -> tuple[int, int]:
        return (self._table.rows, self._table.cols)

    @property
    def rows(self) -> int:
        return self._table.rows

    @property
    def cols(self) -> int:
        return self._table.cols

    @property
    def size(self) -> int:
        return len(self._table)

    @property
    def dtype(self) -> np.dtype:
        return self._table.dtype

    @property
    def order(self) -> str:
        """Storage order this instance was created with."""
        return self._table.order

    @property
    def buffer(self) -> NDArray[Any]:
        """
        Flat view of the elements in physical storage order.

        Writes go through to the matrix. Only use it where the order does
        not matter, or where the consumer documents the order it expects
        (see pymatrix.matrix.operations.inverse).
        """
        return self._table.flat

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as an (R, C) array in logical order."""
        return np.array(self._table.logical)

    def copy(self) -> 'Matrix':
        clone = type(self).__new__(type(self))
        clone._table = self._table.copy()
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> 'Matrix':
        return self.copy()

    # === Element access ===

    def __getitem__(self, key: tuple[int, int] | int) -> Any:
        return self._table[key]

    def __setitem__(self, key: tuple[int, int] | int, value: Any) -> None:
        self._table[key] = value

    def at(self, r: int, c: int) -> Any:
        """Checked read of element (r, c)."""
        check_index((r, c), self.shape, 'index')
        return self._table[r, c]

    def set_at(self, r: int, c: int, value: Any) -> None:
        """Checked write of element (r, c)."""
        check_index((r, c), self.shape, 'index')
        self._table[r, c] = value

    def get_row(self, r: int) -> Vector:
        return Vector[self.cols, self.DTYPE](self._table.logical[r, :])

    def get_col(self, c: int) -> Vector:
        return Vector[self.rows, self.DTYPE](self._table.logical[:, c])

    def set_row(self, r: int, vec: Vector | ArrayLike) -> None:
        values = vector_values(vec, 'vec')
        check_length(values.size, self.cols, 'vec')
        self._table.logical[r, :] = values

    def set_col(self, c: int, vec: Vector | ArrayLike) -> None:
        values = vector_values(vec, 'vec')
        check_length(values.size, self.rows, 'vec')
        self._table.logical[:, c] = values

    def __iter__(self) -> Iterator[Vector]:
        """Iterate over the rows."""
        for r in range(self.rows):
            yield self.get_row(r)

    # === Comparison ===

    def _sequence(self, order: str) -> tuple[Any, ...]:
        """Elements in the physical sequence of the given storage order."""
        logical = self._table.logical
        if order == self._table.order:
            return tuple(self._table.flat.tolist())
        if order == ROW_MAJOR:
            return tuple(logical.reshape(-1).tolist())
        return tuple(logical.T.reshape(-1).tolist())

    def _ordering_keys(self, other: 'Matrix') -> tuple[tuple[Any, ...], tuple[Any, ...]]:
        check_shape(other.shape, self.shape, 'other')
        order = storage_order()
        return self._sequence(order), other._sequence(order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.shape != self.shape:
            return False
        return bool(np.array_equal(self._table.logical, other._table.logical))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        mine, theirs = self._ordering_keys(other)
        return mine < theirs

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        mine, theirs = self._ordering_keys(other)
        return mine <= theirs

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        mine, theirs = self._ordering_keys(other)
        return mine > theirs

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        mine, theirs = self._ordering_keys(other)
        return mine >= theirs

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    # === Arithmetic ===

    def __pos__(self) -> 'Matrix':
        return self.copy()

    def __neg__(self) -> 'Matrix':
        result = self.copy()
        np.negative(result._table.flat, out=result._table.flat)
        return result

    def __add__(self, other: object) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: object) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __iadd__(self, other: object) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        check_shape(other.shape, self.shape, 'other')
        self._table.logical[...] += other._table.logical
        return self

    def __isub__(self, other: object) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        check_shape(other.shape, self.shape, 'other')
        self._table.logical[...] -= other._table.logical
        return self

    def __imul__(self, scalar: object) -> 'Matrix':
        if not is_scalar(scalar):
            return NotImplemented
        self._table.flat[...] *= scalar
        return self

    def __itruediv__(self, scalar: object) -> 'Matrix':
        if not is_scalar(scalar):
            return NotImplemented
        if scalar != 0:
            self._table.flat[...] *= 1 / scalar
        else:
            # Division by zero yields the zero matrix, never inf/NaN
            self.make_zero()
        return self

    def __truediv__(self, scalar: object) -> 'Matrix':
        if not is_scalar(scalar):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    def __mul__(self, other: object) -> Any:
        from pymatrix.matrix import operations

        if is_scalar(other):
            result = self.copy()
            result *= other
            return result
        if isinstance(other, Vector):
            return operations.multiply_mv(self, other)
        if isinstance(other, Matrix):
            return operations.multiply_ab(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> Any:
        from pymatrix.matrix import operations

        if is_scalar(other):
            return self.__mul__(other)
        if isinstance(other, Vector):
            return operations.multiply_vm(other, self)
        return NotImplemented

    def __matmul__(self, other: object) -> Any:
        if isinstance(other, (Vector, Matrix)):
            return self.__mul__(other)
        return NotImplemented

    def __rmatmul__(self, other: object) -> Any:
        if isinstance(other, Vector):
            return self.__rmul__(other)
        return NotImplemented

    def __repr__(self) -> str:
        rows, cols = self.shape
        params = f"{rows}, {cols}"
        if self.DTYPE != np.float64:
            params = f"{params}, {self.DTYPE.name}"
        return f"Matrix[{params}]({self.to_numpy().tolist()})"
