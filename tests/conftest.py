"""
Pytest configuration and fixtures for py-dense-matrix test suite.

This module provides common fixtures, test data, and configuration
for testing the matrix type, its row iterators and the matrix products.
"""

import itertools
import pytest
import numpy as np
import sys
import os

# Add the package to the path for testing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import py_dense_matrix

# Dtypes exercised by the matrix products
ALL_DTYPES = [np.float32, np.float64, np.int32, np.int64]

# Common floating point dtypes
FLOAT_DTYPES = [np.float32, np.float64]

# Common integer dtypes
INT_DTYPES = [np.int32, np.int64]

# Every numeric dtype the constructors accept
CONSTRUCTOR_DTYPES = [
    np.float32, np.float64,
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64,
    np.complex128,
]

@pytest.fixture(params=ALL_DTYPES, ids=lambda x: x.__name__)
def dtype_all(request):
    """Fixture providing all dtypes used by the product tests."""
    return request.param

@pytest.fixture(params=FLOAT_DTYPES, ids=lambda x: x.__name__)
def dtype_float(request):
    """Fixture providing floating point dtypes."""
    return request.param

@pytest.fixture(params=INT_DTYPES, ids=lambda x: x.__name__)
def dtype_int(request):
    """Fixture providing integer dtypes."""
    return request.param

@pytest.fixture(params=CONSTRUCTOR_DTYPES, ids=lambda x: x.__name__)
def dtype_constructor(request):
    """Fixture providing every dtype accepted by the constructors."""
    return request.param


# The naive product is a pure Python triple loop, so keep problems small
TEST_PROBLEM_SIZES = [
    1, 3, 7, 16,
]

def pick_problem_sizes(i_start:int, stride:int) -> tuple[int, int, int]:
    """Pick problem sizes from TEST_PROBLEM_SIZES"""
    l = len(TEST_PROBLEM_SIZES)
    i_m = i_start % l
    i_k = (i_m + stride) % l
    i_n = (i_k + stride) % l
    return (TEST_PROBLEM_SIZES[i_m], TEST_PROBLEM_SIZES[i_k], TEST_PROBLEM_SIZES[i_n])

TEST_M_K_N = list(itertools.chain(
    [pick_problem_sizes(i, 1) for i in range(len(TEST_PROBLEM_SIZES))],
    [pick_problem_sizes(i, 2) for i in range(len(TEST_PROBLEM_SIZES))],
    [pick_problem_sizes(i, 3) for i in range(len(TEST_PROBLEM_SIZES))],
))

@pytest.fixture(params=TEST_M_K_N, ids=lambda mkn: "x".join(map(str, mkn)))
def test_shape_triplet(request):
    """Fixture that provides each (m, k, n) triplet from TEST_M_K_N."""
    return request.param

@pytest.fixture
def test_input_matrix_incremental():
    """Generate incremental matrix"""
    def _generate(dtype, nrows, ncols, start=0):
        mat = np.arange(start, start + nrows * ncols)
        result = mat.astype(dtype).reshape(nrows, ncols)
        return py_dense_matrix.Matrix.from_numpy(result)
    return _generate

@pytest.fixture
def test_input_matrix_random():
    """Generate random matrix"""
    def _generate(dtype, nrows, ncols, seed=42):
        generator = np.random.default_rng(seed)
        if np.issubdtype(dtype, np.integer):
            mat = generator.integers(-10, 10, (nrows, ncols)).astype(dtype)
        else:
            mat = generator.uniform(low=-1, high=1, size=(nrows, ncols)).astype(dtype)
            pass

        return py_dense_matrix.Matrix.from_numpy(mat)
    return _generate

@pytest.fixture
def small_matrix():
    """The 3x2 matrix [[0, 1], [2, 3], [4, 5]]."""
    return py_dense_matrix.Matrix.from_rows([[0, 1], [2, 3], [4, 5]])

@pytest.fixture
def num_threads_env(monkeypatch):
    """Set PY_DENSE_MATRIX_NUM_THREADS for the duration of a test."""
    def _set(value):
        monkeypatch.setenv(py_dense_matrix.NUM_THREADS_ENV_VAR, value)
    monkeypatch.delenv(py_dense_matrix.NUM_THREADS_ENV_VAR, raising=False)
    return _set

@pytest.fixture
def performance_sizes():
    """Generate different sizes for performance testing."""
    return [ 2**i for i in range(3, 7) ]

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "performance: marks tests as performance benchmarks"
    )
    config.addinivalue_line(
        "markers", "error_handling: marks tests of invalid inputs"
    )

def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Mark error handling tests
        if "error_handling" in item.nodeid:
            item.add_marker(pytest.mark.error_handling)

        # Mark performance tests
        if "performance" in item.nodeid or "benchmark" in item.nodeid:
            item.add_marker(pytest.mark.performance)
            item.add_marker(pytest.mark.slow)
