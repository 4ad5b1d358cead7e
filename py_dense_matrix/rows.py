# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

# source path: py_dense_matrix/rows.py

"""
Row iterators for py-dense-matrix

Rows and RowsMut walk a matrix's flat buffer one row at a time and yield numpy
views, never copies. Both are exact-size: len() always reports how many rows
are left.

Each iterator holds only the part of the buffer it has not yet handed out.
Advancing splits that remaining view into a head, which is returned, and a
tail, which is kept. Because every returned view is carved off the currently
held region and the iterator then drops its reference to it, the views
yielded by one RowsMut never overlap.
"""

import operator
from typing import Optional, Tuple

from numpy.typing import NDArray


class _RowIterator:
    """Shared machinery for Rows and RowsMut."""

    def __init__(self, remaining: NDArray, num_columns: int):
        if remaining.ndim != 1:
            raise ValueError(f"{type(self).__name__}: buffer must be 1-dimensional, got {remaining.ndim} dimensions")
        if num_columns < 1:
            raise ValueError(f"{type(self).__name__}: num_columns must be > 0, got {num_columns}")
        if remaining.size % num_columns != 0:
            raise ValueError(f"{type(self).__name__}: buffer of size {remaining.size} "
                             f"is not a whole number of rows of width {num_columns}")
        self._remaining = remaining
        self._num_columns = num_columns

    @property
    def num_columns(self) -> int:
        return self._num_columns

    def _exhaust(self) -> None:
        self._remaining = self._remaining[:0]

    def __iter__(self):
        return self

    def __next__(self) -> NDArray:
        if self._remaining.size == 0:
            raise StopIteration
        head, tail = self._split(self._num_columns)
        self._remaining = tail
        return head

    def _split(self, offset: int) -> Tuple[NDArray, NDArray]:
        remaining = self._remaining
        return remaining[:offset], remaining[offset:]

    def __len__(self) -> int:
        return self._remaining.size // self._num_columns

    def __length_hint__(self) -> int:
        return len(self)

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Lower and upper bound on the remaining rows; always equal."""
        remaining = len(self)
        return remaining, remaining

    def count(self) -> int:
        """Number of remaining rows. Consumes the iterator."""
        remaining = len(self)
        self._exhaust()
        return remaining

    def nth(self, n: int) -> Optional[NDArray]:
        """
        Skip n rows and return the next one.

        Args:
            n: Number of rows to skip, counted from the current position

        Returns:
            The n-th remaining row (0-based), or None if fewer than n + 1 rows
            remain, in which case the iterator is exhausted

        Raises:
            ValueError: If n is not a non-negative integer
        """
        if isinstance(n, bool):
            raise ValueError(f"{type(self).__name__}.nth: n must be a non-negative integer, got {n!r}")
        try:
            n = operator.index(n)
        except TypeError:
            raise ValueError(f"{type(self).__name__}.nth: n must be a non-negative integer, "
                             f"got {type(n).__name__}") from None
        if n < 0:
            raise ValueError(f"{type(self).__name__}.nth: n must be non-negative, got {n}")
        if n >= len(self):
            self._exhaust()
            return None

        start = n * self._num_columns
        end = start + self._num_columns
        head, tail = self._split(end)
        self._remaining = tail
        return head[start:]

    def last(self) -> Optional[NDArray]:
        """
        Return the final remaining row without walking the rows before it.

        Consumes the iterator. Returns None if no rows remain.
        """
        if self._remaining.size == 0:
            return None
        start = self._remaining.size - self._num_columns
        _, last = self._split(start)
        self._exhaust()
        return last

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(remaining={len(self)}, "
                f"num_columns={self._num_columns}, dtype={self._remaining.dtype})")


class Rows(_RowIterator):
    """
    An iterator over the rows of a matrix. The rows are read-only views.

    Created by Matrix.rows(). Writes made to the matrix after the iterator was
    created are visible through rows not yet yielded.
    """

    def __init__(self, buffer: NDArray, num_columns: int):
        remaining = buffer.view()
        remaining.flags.writeable = False
        super().__init__(remaining, num_columns)

    def __copy__(self) -> "Rows":
        # Both copies share the read-only buffer and advance independently.
        return Rows(self._remaining, self._num_columns)


class RowsMut(_RowIterator):
    """
    An iterator over the rows of a matrix. The rows are writable views.

    Created by Matrix.rows_mut(). Every row it yields is disjoint from every
    other row it yields, so the rows can be written independently, including
    from different threads. Writes go straight to the matrix's buffer.
    """

    def __init__(self, buffer: NDArray, num_columns: int):
        if not buffer.flags.writeable:
            raise ValueError("RowsMut: buffer is read-only")
        super().__init__(buffer.view(), num_columns)

    def __copy__(self):
        # A copy would hand out rows overlapping the ones this iterator yields.
        raise TypeError("RowsMut cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("RowsMut cannot be copied")


__all__ = [
    'Rows',
    'RowsMut',
]
