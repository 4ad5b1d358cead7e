#!/usr/bin/env python3
"""
Performance benchmark suite for py-dense-matrix package
Compares the naive and parallel matrix products against NumPy across sizes
"""

import argparse
import logging
import numpy as np
import time
import sys
from typing import Callable, Dict, List

try:
    import py_dense_matrix
    from py_dense_matrix import Matrix
    print("✅ py-dense-matrix imported successfully")
except ImportError as e:
    print(f"❌ Failed to import py-dense-matrix: {e}")
    sys.exit(1)

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [16, 32, 64, 128]

def time_function(func: Callable, *args, warmup_runs: int = 1, timing_runs: int = 3, **kwargs):
    """Time a function with warmup and multiple runs"""
    # Warmup runs
    for _ in range(warmup_runs):
        func(*args, **kwargs)

    # Timing runs
    times = []
    for _ in range(timing_runs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return np.median(times), result

def benchmark_matrix_operations(sizes: List[int], timing_runs: int, num_threads: int) -> List[Dict]:
    """Benchmark matrix products across different sizes"""
    print("\n📊 MATRIX PRODUCT PERFORMANCE BENCHMARK")
    print("=" * 60)
    print(f"Parallel workers: up to {num_threads}")

    results = []

    for size in sizes:
        print(f"\n  Testing ({size}x{size}) @ ({size}x{size}):")

        # A square matrix of ones times itself
        a = Matrix.ones(size, size, dtype=np.float64)
        a_numpy = a.to_numpy()

        numpy_time, numpy_result = time_function(np.dot, a_numpy, a_numpy, timing_runs=timing_runs)
        naive_time, naive_result = time_function(py_dense_matrix.matrix_product_naive, a, a,
                                                 timing_runs=timing_runs)
        parallel_time, parallel_result = time_function(py_dense_matrix.matrix_product_parallel, a, a,
                                                       timing_runs=timing_runs, num_threads=num_threads)

        # Calculate speedups
        parallel_speedup = naive_time / parallel_time if parallel_time > 0 else 0

        # Check accuracy
        naive_error = np.max(np.abs(numpy_result - naive_result.to_numpy()))
        parallel_error = np.max(np.abs(numpy_result - parallel_result.to_numpy()))
        logger.debug(f"size={size} naive_error={naive_error} parallel_error={parallel_error}")

        print(f"    NumPy:           {numpy_time*1000:10.2f}ms")
        print(f"    naive:           {naive_time*1000:10.2f}ms (error: {naive_error:.2e})")
        print(f"    parallel:        {parallel_time*1000:10.2f}ms (speedup vs naive: {parallel_speedup:5.2f}x, error: {parallel_error:.2e})")

        results.append({
            'operation': 'matrix_product',
            'size': f"{size}x{size}x{size}",
            'numpy_time': numpy_time,
            'naive_time': naive_time,
            'parallel_time': parallel_time,
            'parallel_speedup': parallel_speedup,
            'naive_error': naive_error,
            'parallel_error': parallel_error,
        })

    return results

def summarize_results(all_results: List[Dict]):
    """Summarize benchmark results"""
    print("\n🎯 PERFORMANCE BENCHMARK SUMMARY")
    print("=" * 60)

    matrix_results = [r for r in all_results if r.get('operation') == 'matrix_product']
    if matrix_results:
        avg_parallel_speedup = np.mean([r['parallel_speedup'] for r in matrix_results])
        max_error = max(max(r['naive_error'], r['parallel_error']) for r in matrix_results)
        print(f"Matrix Products:")
        print(f"  Average parallel speedup over naive: {avg_parallel_speedup:.2f}x")
        print(f"  Largest error vs NumPy: {max_error:.2e}")

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Benchmark py-dense-matrix matrix products",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--sizes', type=int, nargs='+', default=DEFAULT_SIZES,
                        help='Square matrix sizes to benchmark')
    parser.add_argument('--runs', type=int, default=3,
                        help='Timed runs per measurement')
    parser.add_argument('--threads', type=int, default=None,
                        help='Worker threads for the parallel product (default: configured thread count)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')
    return parser.parse_args(argv)

def main(argv=None):
    """Run performance benchmark suite"""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if any(size < 1 for size in args.sizes):
        print("❌ Sizes must be positive")
        return 1

    num_threads = args.threads if args.threads is not None else py_dense_matrix.get_num_threads()

    print("⚡ PY-DENSE-MATRIX PERFORMANCE BENCHMARK SUITE")
    print("=" * 60)
    print("Comparing naive and parallel products with NumPy")

    all_results = benchmark_matrix_operations(args.sizes, args.runs, num_threads)
    summarize_results(all_results)

    print(f"\n🏁 BENCHMARK COMPLETE")
    print("=" * 60)

    return 0

if __name__ == "__main__":
    sys.exit(main())
