"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype promotion, non-numeric rejection
    - check_ndim / check_2d: dimensionality checks
    - check_dimension: non-negative integer dimension parameters
    - check_element_count: element count preservation
    - check_matching_extent: per-axis length agreement
"""

import numpy as np
import pytest

from pymatops.core.exceptions import (
    DimensionError,
    ShapeMismatchError,
    ValidationError,
)
from pymatops.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_element_count,
    check_matching_extent,
    check_ndim,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_promoted_to_requested_dtype(self):
        result = check_array(np.array([1, 2], dtype=np.int64), "X", promote_to=np.float32)
        assert result.dtype == np.float32

    def test_float64_preserved_despite_promote_to(self):
        arr = np.array([1.0, 2.0], dtype=np.float64)
        result = check_array(arr, "X", promote_to=np.float32)
        assert result.dtype == np.float64

    def test_float32_preserved(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "X").dtype == np.float32

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "X")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([[True, False]], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array([[1 + 2j]], "X")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="X"):
            check_array([[1.0, 2.0], [3.0]], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_correct_ndim_passes(self):
        check_ndim(np.zeros((2, 3, 4)), 3, "X")

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "X")

    def test_empty_2d_passes(self):
        check_2d(np.zeros((0, 3)), "X")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(3), "X")

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_2d(np.asarray(1.0), "X")

    def test_3d_rejected(self):
        with pytest.raises(DimensionError, match="X"):
            check_2d(np.zeros((1, 2, 3)), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_python_int(self):
        assert check_dimension(3, "r") == 3

    def test_zero_allowed(self):
        assert check_dimension(0, "r") == 0

    def test_numpy_int_converted(self):
        result = check_dimension(np.int64(4), "r")
        assert result == 4
        assert type(result) is int

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_dimension(-1, "r")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="float"):
            check_dimension(2.0, "r")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="bool"):
            check_dimension(True, "r")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="^cols:"):
            check_dimension("3", "cols")


# ═══════════════════════════════════════════════════════════════════════
# check_element_count / check_matching_extent
# ═══════════════════════════════════════════════════════════════════════


class TestCheckElementCount:

    def test_equal_passes(self):
        check_element_count(6, 6, "reshape")

    def test_mismatch_raises_with_attributes(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            check_element_count(6, 8, "reshape")
        err = exc_info.value
        assert err.operation == "reshape"
        assert err.expected == 8
        assert err.actual == 6
        assert "6 elements" in str(err)


class TestCheckMatchingExtent:

    def test_matching_columns_pass(self):
        check_matching_extent(np.zeros((2, 3)), 1, 3, "m1", "vstack")

    def test_column_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="m2 has 4 columns, expected 3"):
            check_matching_extent(np.zeros((2, 4)), 1, 3, "m2", "vstack")

    def test_row_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="m1 has 2 rows, expected 5") as exc_info:
            check_matching_extent(np.zeros((2, 4)), 0, 5, "m1", "hstack")
        assert exc_info.value.operation == "hstack"
        assert exc_info.value.actual == 2
        assert exc_info.value.expected == 5
