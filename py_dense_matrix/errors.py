# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

# source path: py_dense_matrix/errors.py

"""
Exceptions raised by py-dense-matrix

Every exception derives from MatrixError and from the builtin exception a
caller would naturally catch (ValueError or IndexError), so that code written
against plain numpy-style validation keeps working.
"""

from typing import Optional


class MatrixError(Exception):
    """Base class for all py-dense-matrix errors."""


class InvalidDimensionError(MatrixError, ValueError):
    """A constructor was asked for a matrix with zero rows or zero columns."""

    def __init__(self, dimension_name: str, value: int):
        self.dimension_name = dimension_name
        self.value = value
        super().__init__(f"`num_{dimension_name}` (is {value}) should be > 0")


class DimensionMismatchError(MatrixError, ValueError):
    """The left operand's column count differs from the right operand's row count."""

    def __init__(self, a_num_columns: int, b_num_rows: int, operation_name: Optional[str] = None):
        self.a_num_columns = a_num_columns
        self.b_num_rows = b_num_rows
        self.operation_name = operation_name
        message = (f"Matrix dimensions incompatible for multiplication: "
                   f"`a.num_columns` (is {a_num_columns}) "
                   f"should be equal to `b.num_rows` (is {b_num_rows})")
        if operation_name:
            message = f"{operation_name}: {message}"
        super().__init__(message)


class IndexOutOfRangeError(MatrixError, IndexError):
    """A row index is negative or not less than the number of rows."""

    def __init__(self, index: int, num_rows: int):
        self.index = index
        self.num_rows = num_rows
        super().__init__(f"row index {index} out of range for matrix with {num_rows} rows")


__all__ = [
    'MatrixError',
    'InvalidDimensionError',
    'DimensionMismatchError',
    'IndexOutOfRangeError',
]
