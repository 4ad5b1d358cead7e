# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

# source path: py_dense_matrix/matrix_product_ops.py

"""
Matrix product operations module for py-dense-matrix

This module provides two implementations of C = A @ B:

- matrix_product_naive: the reference triple loop, one scalar
  multiply-accumulate at a time, single-threaded.
- matrix_product_parallel: one work unit per output row, fanned out over a
  thread pool. Each unit writes only its own row of C, obtained from
  C.rows_mut(), and only reads A and B, so the units need no locking.

Both validate their inputs before allocating the result.
"""

import logging
from itertools import repeat
from multiprocessing.pool import ThreadPool
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ._config import resolve_num_threads
from .errors import DimensionMismatchError
from .matrix import Matrix

logger = logging.getLogger(__name__)


def _validate_matrix_product_inputs(a: Matrix, b: Matrix, operation_name: str) -> None:
    """Validate inputs for matrix product operations."""
    if not isinstance(a, Matrix) or not isinstance(b, Matrix):
        raise TypeError(f"{operation_name}: Inputs must be Matrix instances, "
                        f"got {type(a).__name__} and {type(b).__name__}")

    if a.dtype != b.dtype:
        raise ValueError(f"{operation_name}: Input matrices must have the same dtype, "
                         f"got {a.dtype} and {b.dtype}")

    if a.num_columns != b.num_rows:
        raise DimensionMismatchError(a.num_columns, b.num_rows, operation_name)


def matrix_product_naive(a: Matrix, b: Matrix) -> Matrix:
    """Matrix multiplication using the naive triple-loop algorithm.

    Every cell C[i][j] is accumulated from zero as A[i][0] * B[0][j] +
    A[i][1] * B[1][j] + ..., in increasing index order.

    Args:
        a: Input matrix A of shape (m, k)
        b: Input matrix B of shape (k, n)

    Returns:
        Result matrix C of shape (m, n) where C = A @ B

    Raises:
        DimensionMismatchError: If a.num_columns != b.num_rows
    """
    _validate_matrix_product_inputs(a, b, "matrix_product_naive")
    logger.debug(f"matrix_product_naive: {a.shape} @ {b.shape} ({a.dtype})")

    c = Matrix.zeros(a.num_rows, b.num_columns, dtype=a.dtype)
    zero = c.dtype.type(0)
    b_data = b.as_flattened()
    inner = a.num_columns
    b_num_columns = b.num_columns

    # Integer overflow wraps silently, as it does for the array arithmetic of
    # matrix_product_parallel.
    overflow = "ignore" if np.issubdtype(c.dtype, np.integer) else np.geterr()["over"]
    with np.errstate(over=overflow):
        for a_row, c_row in zip(a.rows(), c.rows_mut()):
            for j in range(b_num_columns):
                acc = zero
                for k in range(inner):
                    acc += a_row[k] * b_data[k * b_num_columns + j]
                c_row[j] = acc

    return c


def _matrix_product_row(a_row: NDArray, b: Matrix, c_row: NDArray) -> None:
    """Work unit of matrix_product_parallel: c_row += a_row[k] * B[k] for every k."""
    for a_ik, b_row in zip(a_row, b.rows()):
        c_row += a_ik * b_row


def matrix_product_parallel(a: Matrix, b: Matrix, num_threads: Optional[int] = None) -> Matrix:
    """Matrix multiplication partitioned by output row over a thread pool.

    The result rows are handed out by C.rows_mut() before any work starts, so
    each worker holds the only writable view of its row. The call returns once
    every row is done.

    Args:
        a: Input matrix A of shape (m, k)
        b: Input matrix B of shape (k, n)
        num_threads: Upper bound on worker threads; defaults to get_num_threads()

    Returns:
        Result matrix C of shape (m, n) where C = A @ B

    Raises:
        DimensionMismatchError: If a.num_columns != b.num_rows

    Note:
        Floating point results may differ from matrix_product_naive in the last
        bits because the partial sums are added in a different order.
    """
    _validate_matrix_product_inputs(a, b, "matrix_product_parallel")
    num_threads = resolve_num_threads(num_threads, "matrix_product_parallel")
    num_workers = min(num_threads, a.num_rows)
    logger.debug(f"matrix_product_parallel: {a.shape} @ {b.shape} ({a.dtype}), {num_workers} workers")

    c = Matrix.zeros(a.num_rows, b.num_columns, dtype=a.dtype)
    work_units = list(zip(a.rows(), repeat(b), c.rows_mut()))

    if num_workers == 1:
        for work_unit in work_units:
            _matrix_product_row(*work_unit)
        return c

    with ThreadPool(processes=num_workers) as pool:
        pool.starmap(_matrix_product_row, work_units)

    return c


matrix_product = matrix_product_parallel

# Export all functions
__all__ = [
    'matrix_product',
    'matrix_product_naive',
    'matrix_product_parallel',
]
