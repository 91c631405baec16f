"""
Fixed-length vectors.

Vector[N] is the row/column type of Matrix[R, C] and the operand of
matrix-vector products. It is a thin value type over a 1-D numpy array:
indexable, copyable, zero by default.

    v = Vector[3]([1.0, 2.0, 3.0])
    w = Vector[3, np.float32]()
"""

from __future__ import annotations

import numbers
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_1d,
    check_array,
    check_dimension,
    check_index,
    check_length,
)


_VECTOR_TYPES: dict[tuple[int, np.dtype], type['Vector']] = {}


def check_element_type(dtype: Any, name: str) -> np.dtype:
    """
    Resolve an element type, accepting only real floating-point dtypes.

    Integer elements cannot hold quotients or inverses, and complex
    elements have no ordering, so both are rejected along with
    non-numeric dtypes.

    Raises:
        ValidationError: If dtype is not a real floating-point type
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a dtype: {e}") from e
    if not np.issubdtype(result, np.number):
        raise ValidationError(f"{name}: non-numeric element type {result}")
    if not np.issubdtype(result, np.floating):
        raise ValidationError(
            f"{name}: element type {result} is not a real floating-point type"
        )
    return result


def is_scalar(value: Any) -> bool:
    """True for Python and numpy numbers (the operands of scaling)."""
    return isinstance(value, numbers.Number)


class Vector:
    """
    Vector of N elements.

    Parameterise before use: Vector[N] or Vector[N, dtype]. The bare
    Vector class only serves as the common base and cannot hold data.

    Construction:
        Vector[N]()               # all zero
        Vector[N](values)         # first N values, rest zero, excess ignored
        Vector.from_numpy(array)  # size taken from the array
    """

    SIZE: int | None = None
    DTYPE: np.dtype = np.dtype(np.float64)

    __slots__ = ('_data',)

    # Keep numpy from broadcasting over vectors in mixed expressions
    __array_ufunc__ = None

    def __class_getitem__(cls, params: Any) -> type['Vector']:
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) == 1:
            size, dtype = params[0], np.float64
        elif len(params) == 2:
            size, dtype = params
        else:
            raise TypeError(f"Vector takes Vector[N] or Vector[N, dtype], got {len(params)} parameters")

        size = check_dimension(size, 'N')
        dtype = check_element_type(dtype, 'dtype')
        key = (size, dtype)
        specialized = _VECTOR_TYPES.get(key)
        if specialized is None:
            name = f"Vector{size}" if dtype == np.float64 else f"Vector{size}_{dtype.name}"
            specialized = type(name, (Vector,), {
                '__slots__': (),
                '__module__': __name__,
                '__qualname__': name,
                'SIZE': size,
                'DTYPE': dtype,
            })
            _VECTOR_TYPES[key] = specialized
        return specialized

    def __init__(self, values: ArrayLike | None = None):
        cls = type(self)
        if cls.SIZE is None:
            raise TypeError("Vector must be parameterised with a size, e.g. Vector[3]()")
        self._data = np.zeros(cls.SIZE, dtype=cls.DTYPE)
        if values is not None:
            arr = check_array(values, 'values', dtype=cls.DTYPE)
            if arr.ndim == 0:
                arr = arr.reshape(1)
            check_1d(arr, 'values')
            count = min(arr.size, cls.SIZE)
            self._data[:count] = arr[:count]

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> 'Vector':
        """
        Build a vector from a 1-D array.

        On a parameterised class the array length must equal N. On the bare
        Vector class the size and element type are taken from the array.
        """
        arr = check_array(array, 'array')
        check_1d(arr, 'array')
        if cls.SIZE is None:
            cls = Vector[arr.size, arr.dtype]
        else:
            check_length(arr.size, cls.SIZE, 'array')
        return cls(arr)

    # === Properties ===

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a 1-D array."""
        return self._data.copy()

    def copy(self) -> 'Vector':
        clone = type(self).__new__(type(self))
        clone._data = self._data.copy()
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> 'Vector':
        return self.copy()

    # === Element access ===

    def __getitem__(self, i: int) -> Any:
        return self._data[i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._data[i] = value

    def at(self, i: int) -> Any:
        """Checked read; negative or too-large indices raise."""
        check_index((i,), self._data.shape, 'index')
        return self._data[i]

    def set_at(self, i: int, value: Any) -> None:
        """Checked write."""
        check_index((i,), self._data.shape, 'index')
        self._data[i] = value

    def __len__(self) -> int:
        return self._data.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    # === Arithmetic ===

    def _check_same_size(self, other: 'Vector') -> None:
        check_length(other.size, self.size, 'other')

    def __neg__(self) -> 'Vector':
        result = self.copy()
        result._data *= -1
        return result

    def __add__(self, other: object) -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        result = self.copy()
        result._data += other._data
        return result

    def __sub__(self, other: object) -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        result = self.copy()
        result._data -= other._data
        return result

    def __mul__(self, other: object) -> 'Vector':
        # Vector * Matrix is handled by Matrix.__rmul__
        if not is_scalar(other):
            return NotImplemented
        result = self.copy()
        result._data *= other
        return result

    def __rmul__(self, other: object) -> 'Vector':
        return self.__mul__(other)

    def __repr__(self) -> str:
        cls = type(self)
        params = f"{cls.SIZE}" if cls.DTYPE == np.float64 else f"{cls.SIZE}, {cls.DTYPE.name}"
        return f"Vector[{params}]({self._data.tolist()})"


def vector_values(vec: Vector | ArrayLike, name: str) -> NDArray[Any]:
    """Elements of a Vector, or of a 1-D array-like standing in for one."""
    if isinstance(vec, Vector):
        return vec.to_numpy()
    arr = check_array(vec, name)
    check_1d(arr, name)
    return arr
