#!/usr/bin/env python3
"""
Example: Matrix products and row iteration

This example demonstrates how to build matrices, walk and edit their rows,
and multiply them with the naive and parallel products.
"""

import numpy as np
import time
import py_dense_matrix
from py_dense_matrix import Matrix

def basic_usage():
    """Basic usage example with small integer matrices."""
    print("=== Basic Usage ===")

    a = Matrix.from_rows([[0, 1], [2, 3], [4, 5]])
    b = Matrix.from_rows([[6], [7]])

    print(f"Matrix A: {a.shape} ({a.dtype})")
    print(f"Matrix B: {b.shape} ({b.dtype})")

    c_naive = py_dense_matrix.matrix_product_naive(a, b)
    c_parallel = a @ b

    print(f"A @ B (naive):    {c_naive.tolist()}")
    print(f"A @ B (parallel): {c_parallel.tolist()}")
    print(f"Results match: {c_naive == c_parallel}")
    print()

def row_iteration():
    """Walk and modify rows without copying them."""
    print("=== Row Iteration ===")

    matrix = Matrix.from_rows([[0, 1], [2, 3], [4, 5]])

    rows = matrix.rows()
    print(f"Rows remaining: {len(rows)}")
    print(f"First row: {next(rows).tolist()}, remaining: {len(rows)}")
    print(f"Last row: {rows.last().tolist()}")

    # Swap the first and last rows in place
    rows_mut = matrix.rows_mut()
    first_row = rows_mut.nth(0)
    last_row = rows_mut.last()
    tmp = first_row.copy()
    first_row[:] = last_row
    last_row[:] = tmp

    print(f"After swapping first and last rows: {matrix.as_flattened().tolist()}")
    print()

def dimension_mismatch():
    """Incompatible shapes are reported before any work is done."""
    print("=== Dimension Mismatch ===")

    a = Matrix.from_rows([[0, 1], [2, 3], [4, 5]])
    b = Matrix.from_rows([[6], [7], [8]])

    try:
        py_dense_matrix.matrix_product_parallel(a, b)
    except py_dense_matrix.DimensionMismatchError as e:
        print(f"Error: {e}")
        print(f"  a.num_columns={e.a_num_columns}, b.num_rows={e.b_num_rows}")
    print()

def different_data_types():
    """Example with different data types."""
    print("=== Different Data Types ===")

    dtypes = [np.float32, np.float64, np.int32, np.int64]
    generator = np.random.default_rng(0)

    for dtype in dtypes:
        print(f"Testing {dtype.__name__}:")

        if dtype in [np.int32, np.int64]:
            # For integers, use smaller values to avoid overflow
            a = Matrix.from_numpy(generator.integers(-10, 10, (32, 24)).astype(dtype))
            b = Matrix.from_numpy(generator.integers(-10, 10, (24, 40)).astype(dtype))
        else:
            a = Matrix.from_numpy(generator.standard_normal((32, 24)).astype(dtype))
            b = Matrix.from_numpy(generator.standard_normal((24, 40)).astype(dtype))

        result = py_dense_matrix.matrix_product_parallel(a, b)
        reference = a.to_numpy() @ b.to_numpy()

        if dtype in [np.int32, np.int64]:
            print(f"  Exact match: {np.array_equal(result.to_numpy(), reference)}")
        else:
            max_error = np.max(np.abs(result.to_numpy() - reference))
            print(f"  Max error: {max_error:.2e}")

        print(f"  Shape: {result.shape}")
        print()

def performance_comparison():
    """Naive versus parallel across sizes."""
    print("=== Performance Comparison ===")

    for size in [32, 64, 96]:
        a = Matrix.ones(size, size)

        start_time = time.perf_counter()
        naive = py_dense_matrix.matrix_product_naive(a, a)
        naive_time = time.perf_counter() - start_time

        start_time = time.perf_counter()
        parallel = py_dense_matrix.matrix_product_parallel(a, a)
        parallel_time = time.perf_counter() - start_time

        speedup = naive_time / parallel_time if parallel_time > 0 else float('inf')
        print(f"Square matrices ({size}x{size}):")
        print(f"  naive: {naive_time*1000:.2f}ms, parallel: {parallel_time*1000:.2f}ms")
        print(f"  Speedup: {speedup:.2f}x, Equal: {naive == parallel}")
        print()

def main():
    """Run all examples."""
    print("py-dense-matrix Examples")
    print("=" * 50)

    try:
        basic_usage()
        row_iteration()
        dimension_mismatch()
        different_data_types()
        performance_comparison()

        print("✅ All examples completed successfully!")

    except Exception as e:
        print(f"❌ Error: {e}")
        return 1

    return 0

if __name__ == "__main__":
    exit(main())
