# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

# source path: py_dense_matrix/__init__.py

"""
py-dense-matrix: dense row-major matrices with naive and parallel products

This package provides a Matrix type backed by a flat NumPy buffer, zero-copy
row iterators over it, and two matrix product implementations: a reference
triple loop and a row-partitioned thread-parallel version.
"""

from .errors import *
from .rows import *
from .matrix import *
from .matrix_product_ops import *
from ._config import NUM_THREADS_ENV_VAR, get_num_threads

__version__ = "0.1.0"
__all__ = [
    # Matrix type and row iterators
    "Matrix",
    "Rows",
    "RowsMut",

    # Matrix products
    "matrix_product",
    "matrix_product_naive",
    "matrix_product_parallel",

    # Errors
    "MatrixError",
    "InvalidDimensionError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",

    # Configuration
    "NUM_THREADS_ENV_VAR",
    "get_num_threads",
]
