"""
Test utilities for py-dense-matrix test suite.

Common functions for testing and validation.
"""

import numpy as np
from typing import Callable

from py_dense_matrix import Matrix

def assert_matrix_close(actual, expected, dtype, tol_bits=8):
    """
    Assert that two matrices are close with appropriate tolerances for the dtype.

    Either argument may be a Matrix or a 2D numpy array.
    """
    actual = actual.to_numpy() if isinstance(actual, Matrix) else actual
    expected = expected.to_numpy() if isinstance(expected, Matrix) else expected
    assert actual.shape == expected.shape, f"Shapes do not match: {actual.shape} != {expected.shape}"
    assert actual.dtype == expected.dtype, f"Dtypes do not match: {actual.dtype} != {expected.dtype}"
    if np.issubdtype(dtype, np.integer):
        # For integers, check exact equality
        success = np.array_equal(actual, expected)
        if not success:
            assert False, f"Integer matrices not exactly equal for dtype {dtype}"
    else:
        if dtype == np.float32:
            significand_bits = 24
        elif dtype == np.float64:
            significand_bits = 53
        else:
            assert False, f"This should not be possible: {dtype}"
            pass
        # For floats, check within tolerance
        rtol = 0.5**(significand_bits - tol_bits)
        atol = rtol * max(1.0, float(np.max(np.abs(expected))))
        success = np.allclose(actual, expected, rtol=rtol, atol=atol)
        if not success:
            assert False, f"Float matrices not close for dtype {dtype}"

def validate_basic_properties(result, expected_shape, expected_dtype):
    """
    Validate basic properties of a result matrix.
    """
    assert isinstance(result, Matrix), f"Result should be Matrix, got {type(result)}"
    assert result.shape == expected_shape, f"Wrong shape: expected {expected_shape}, got {result.shape}"
    assert result.dtype == expected_dtype, f"Wrong dtype: expected {expected_dtype}, got {result.dtype}"
    assert result.as_flattened().size == expected_shape[0] * expected_shape[1]

def validate_function_error_cases(func: Callable, test_cases: list):
    """
    Test that a function properly raises errors for invalid inputs.

    Args:
        func: The function to test
        test_cases: List of (args, kwargs, expected_exception_type, description)
    """
    for args, kwargs, expected_exception, description in test_cases:
        try:
            result = func(*args, **kwargs)
            raise AssertionError(f"Expected {expected_exception.__name__} for {description}, but function succeeded")
        except expected_exception:
            pass  # Expected behavior
        except Exception as e:
            raise AssertionError(f"Expected {expected_exception.__name__} for {description}, got {type(e).__name__}: {e}")

def get_numpy_reference_matrix_product(a, b):
    """NumPy reference for matrix multiplication."""
    return a.to_numpy() @ b.to_numpy()

class ErrorCaseBuilder:
    """Helper class to build error test cases systematically."""

    def __init__(self):
        self.cases = []

    def add_dimension_mismatch(self, func_name: str, *matrices_with_wrong_dims):
        """Add test case for dimension mismatch."""
        self.cases.append((
            matrices_with_wrong_dims,
            {},
            ValueError,
            f"{func_name} dimension mismatch"
        ))
        return self

    def add_dtype_mismatch(self, func_name: str, *matrices_with_different_dtypes):
        """Add test case for dtype mismatch."""
        self.cases.append((
            matrices_with_different_dtypes,
            {},
            ValueError,
            f"{func_name} dtype mismatch"
        ))
        return self

    def add_type_error(self, func_name: str, *non_matrix_arguments):
        """Add test case for arguments that are not matrices."""
        self.cases.append((
            non_matrix_arguments,
            {},
            TypeError,
            f"{func_name} type error"
        ))
        return self

    def add_invalid_parameter(self, func_name: str, matrices, invalid_param_dict):
        """Add test case for invalid parameter values."""
        self.cases.append((
            matrices,
            invalid_param_dict,
            ValueError,
            f"{func_name} invalid parameter"
        ))
        return self

    def build(self):
        """Return the list of test cases."""
        return self.cases
