# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

# source path: py_dense_matrix/_config.py

"""
Runtime configuration for py-dense-matrix

The only tunable is the size of the worker pool used by
matrix_product_parallel. It is read from the environment on every call so that
tests and benchmarks can change it without reloading the package.
"""

import logging
import operator
import os
from typing import Optional

logger = logging.getLogger(__name__)

NUM_THREADS_ENV_VAR = "PY_DENSE_MATRIX_NUM_THREADS"


def _default_num_threads() -> int:
    """Number of hardware threads, or 1 if it cannot be determined."""
    return os.cpu_count() or 1


def get_num_threads() -> int:
    """
    Get the number of worker threads for parallel operations.

    Reads PY_DENSE_MATRIX_NUM_THREADS. An unset, empty or zero value selects
    the hardware thread count. Values that are not non-negative integers are
    reported and ignored.

    Returns:
        A positive thread count
    """
    value = os.environ.get(NUM_THREADS_ENV_VAR, "").strip()
    if not value:
        return _default_num_threads()

    try:
        num_threads = int(value)
    except ValueError:
        num_threads = -1

    if num_threads < 0:
        logger.warning(f"Ignoring {NUM_THREADS_ENV_VAR}={value!r}: expected a non-negative integer")
        return _default_num_threads()
    if num_threads == 0:
        return _default_num_threads()
    return num_threads


def resolve_num_threads(num_threads: Optional[int], operation_name: str) -> int:
    """
    Validate an explicit thread count, falling back to get_num_threads().

    Args:
        num_threads: Requested thread count, or None for the configured default
        operation_name: Prefix for error messages

    Returns:
        A positive thread count
    """
    if num_threads is None:
        return get_num_threads()
    if isinstance(num_threads, bool):
        raise ValueError(f"{operation_name}: num_threads must be a positive integer, got {num_threads!r}")
    try:
        num_threads = operator.index(num_threads)
    except TypeError:
        raise ValueError(f"{operation_name}: num_threads must be a positive integer, got {num_threads!r}") from None
    if num_threads < 1:
        raise ValueError(f"{operation_name}: num_threads must be a positive integer, got {num_threads}")
    return num_threads


__all__ = [
    'NUM_THREADS_ENV_VAR',
    'get_num_threads',
]
