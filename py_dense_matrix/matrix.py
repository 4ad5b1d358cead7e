# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

# source path: py_dense_matrix/matrix.py

"""
Dense row-major matrix for py-dense-matrix

A Matrix owns one flat, C-contiguous numpy buffer of num_rows * num_columns
elements. Row r lives at buffer[r * num_columns:(r + 1) * num_columns].
Indexing a matrix by row returns a view of that range, so reads and writes go
straight to the buffer.
"""

import operator
from typing import Any, Sequence, Tuple

import numpy as np
from numpy.typing import DTypeLike, NDArray

from .errors import IndexOutOfRangeError, InvalidDimensionError
from .rows import Rows, RowsMut

_DEFAULT_DTYPE = np.float64


def _validate_dimensions(num_rows: Any, num_columns: Any) -> Tuple[int, int]:
    """Check that both dimensions are integers > 0. Rows are checked first."""
    dimensions = []
    for dimension_name, value in (("rows", num_rows), ("columns", num_columns)):
        if isinstance(value, bool):
            raise TypeError(f"`num_{dimension_name}` must be an integer, got bool")
        try:
            value = operator.index(value)
        except TypeError:
            raise TypeError(f"`num_{dimension_name}` must be an integer, "
                            f"got {type(value).__name__}") from None
        if value < 1:
            raise InvalidDimensionError(dimension_name, value)
        dimensions.append(value)
    return dimensions[0], dimensions[1]


def _validate_dtype(dtype: DTypeLike) -> np.dtype:
    """Matrix elements must support zero, one, addition and multiplication."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.number):
        raise TypeError(f"Unsupported dtype {dtype}. Matrix elements must have a numeric dtype")
    return dtype


class Matrix:
    """
    A two-dimensional array with shape (num_rows, num_columns).

    Matrix(num_rows, num_columns, dtype) creates a matrix filled with the
    default value of dtype. See the full, zeros, ones and from_rows
    classmethods for the other constructors.
    """

    def __init__(self, num_rows: int, num_columns: int, dtype: DTypeLike = _DEFAULT_DTYPE):
        num_rows, num_columns = _validate_dimensions(num_rows, num_columns)
        dtype = _validate_dtype(dtype)
        self._set_buffer(np.full(num_rows * num_columns, dtype.type(), dtype=dtype), num_rows, num_columns)

    def _set_buffer(self, data: NDArray, num_rows: int, num_columns: int) -> None:
        self._data = data
        self._num_rows = num_rows
        self._num_columns = num_columns

    @classmethod
    def _from_buffer(cls, data: NDArray, num_rows: int, num_columns: int) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._set_buffer(data, num_rows, num_columns)
        return matrix

    @classmethod
    def full(cls, num_rows: int, num_columns: int, fill_value: Any, dtype: DTypeLike = None) -> "Matrix":
        """
        Create a matrix with shape (num_rows, num_columns) filled with fill_value.

        Args:
            num_rows: Number of rows, must be > 0
            num_columns: Number of columns, must be > 0
            fill_value: Value of every cell
            dtype: Element type; inferred from fill_value when omitted

        Raises:
            InvalidDimensionError: If num_rows or num_columns is zero
            ValueError: If fill_value is not a scalar
        """
        num_rows, num_columns = _validate_dimensions(num_rows, num_columns)
        if np.ndim(fill_value) != 0:
            raise ValueError(f"full: fill_value must be a scalar, got {type(fill_value).__name__}")
        if dtype is None:
            dtype = np.asarray(fill_value).dtype
        dtype = _validate_dtype(dtype)
        data = np.full(num_rows * num_columns, fill_value, dtype=dtype)
        return cls._from_buffer(data, num_rows, num_columns)

    @classmethod
    def new(cls, num_rows: int, num_columns: int, dtype: DTypeLike = _DEFAULT_DTYPE) -> "Matrix":
        """Create a matrix filled with the default value of dtype."""
        return cls(num_rows, num_columns, dtype)

    @classmethod
    def zeros(cls, num_rows: int, num_columns: int, dtype: DTypeLike = _DEFAULT_DTYPE) -> "Matrix":
        """Create a matrix filled with zeros."""
        num_rows, num_columns = _validate_dimensions(num_rows, num_columns)
        dtype = _validate_dtype(dtype)
        return cls.full(num_rows, num_columns, dtype.type(0), dtype)

    @classmethod
    def ones(cls, num_rows: int, num_columns: int, dtype: DTypeLike = _DEFAULT_DTYPE) -> "Matrix":
        """Create a matrix filled with ones."""
        num_rows, num_columns = _validate_dimensions(num_rows, num_columns)
        dtype = _validate_dtype(dtype)
        return cls.full(num_rows, num_columns, dtype.type(1), dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], dtype: DTypeLike = None) -> "Matrix":
        """
        Create a matrix from a sequence of M rows of N values each.

        The values are copied in row-major order. The result has shape (M, N).

        Args:
            rows: Nested sequences or a 2-dimensional numpy array
            dtype: Element type; inferred from the values when omitted

        Raises:
            InvalidDimensionError: If there are no rows or the rows are empty
            ValueError: If the rows do not all have the same length
        """
        if isinstance(rows, np.ndarray) and rows.ndim != 2:
            raise ValueError(f"from_rows: Input array must be 2-dimensional, got {rows.ndim} dimensions")

        num_rows = len(rows)
        if num_rows == 0:
            raise InvalidDimensionError("rows", 0)
        try:
            num_columns = len(rows[0])
        except TypeError:
            raise TypeError(f"from_rows: rows must be sequences, got {type(rows[0]).__name__}") from None
        if num_columns == 0:
            raise InvalidDimensionError("columns", 0)

        for row_index, row in enumerate(rows):
            if len(row) != num_columns:
                raise ValueError(f"from_rows: row {row_index} has length {len(row)}, expected {num_columns}")

        array = np.array(rows, dtype=dtype, order="C")
        if array.ndim != 2:
            raise ValueError("from_rows: rows must contain scalar values")
        _validate_dtype(array.dtype)

        return cls._from_buffer(array.reshape(-1), num_rows, num_columns)

    @classmethod
    def from_numpy(cls, array: NDArray) -> "Matrix":
        """Create a matrix from a copy of a 2-dimensional array, keeping its dtype."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"from_numpy: Input array must be 2-dimensional, got {array.ndim} dimensions")
        return cls.from_rows(array)

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_columns(self) -> int:
        return self._num_columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._num_rows, self._num_columns

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def size(self) -> int:
        return self._data.size

    def as_flattened(self) -> NDArray:
        """Read-only view of the whole buffer in row-major order."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def rows(self) -> Rows:
        """An iterator over the rows of the matrix. The rows are read-only views."""
        return Rows(self._data, self._num_columns)

    def rows_mut(self) -> RowsMut:
        """An iterator over the rows of the matrix. The rows are writable views."""
        return RowsMut(self._data, self._num_columns)

    def _row_range(self, index: Any) -> slice:
        if isinstance(index, bool):
            raise TypeError("Matrix indices must be integers, not bool")
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(f"Matrix indices must be integers, not {type(index).__name__}") from None
        if index < 0 or index >= self._num_rows:
            raise IndexOutOfRangeError(index, self._num_rows)
        start = index * self._num_columns
        return slice(start, start + self._num_columns)

    def __getitem__(self, index: int) -> NDArray:
        return self._data[self._row_range(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._row_range(index)] = value

    def __len__(self) -> int:
        return self._num_rows

    def __iter__(self) -> Rows:
        return self.rows()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from .matrix_product_ops import matrix_product_parallel
        return matrix_product_parallel(self, other)

    def to_numpy(self) -> NDArray:
        """Copy of the matrix as a 2-dimensional numpy array."""
        return self._data.reshape(self._num_rows, self._num_columns).copy()

    def tolist(self) -> list:
        return self.to_numpy().tolist()

    def __repr__(self) -> str:
        body = np.array2string(self._data.reshape(self._num_rows, self._num_columns),
                               separator=", ", prefix="Matrix(")
        return f"Matrix({body}, dtype={self.dtype})"


__all__ = [
    'Matrix',
]
