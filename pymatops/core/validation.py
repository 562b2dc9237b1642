"""
Input validation utilities for PyMatOps.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes and
      integer-to-float promotion)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pymatops.core.exceptions import (
    DimensionError,
    ShapeMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
    promote_to: DTypeLike = np.float64,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        promote_to: Floating dtype used when the input has an integer dtype.
            Floating inputs keep their own precision.

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, bool, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(promote_to)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a requested dimension is a non-negative integer.

    Accepts Python and NumPy integers. Booleans and floats are rejected,
    even when the float has an integral value.

    Args:
        value: Requested row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_element_count(
    actual: int,
    expected: int,
    operation: str,
) -> None:
    """
    Verify an operation preserves the number of elements.

    Args:
        actual: Number of elements in the source matrix
        expected: Number of elements implied by the target shape
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the element counts differ
    """
    if actual != expected:
        raise ShapeMismatchError(
            f"{operation}: cannot place {actual} elements into a target "
            f"holding {expected} elements",
            operation=operation,
            expected=expected,
            actual=actual,
        )


def check_matching_extent(
    array: NDArray[np.floating[Any]],
    axis: int,
    expected: int,
    name: str,
    operation: str,
) -> None:
    """
    Verify a matrix has the expected length along one axis.

    Used by the stacking operations, where both operands must agree on
    the axis they are not concatenated along.

    Args:
        array: 2D array to check
        axis: 0 for rows, 1 for columns
        expected: Required length along axis
        name: Parameter name for error messages
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the length along axis differs from expected
    """
    actual = array.shape[axis]
    if actual != expected:
        extent = "rows" if axis == 0 else "columns"
        raise ShapeMismatchError(
            f"{operation}: {name} has {actual} {extent}, expected {expected} "
            f"(shape {array.shape})",
            operation=operation,
            expected=expected,
            actual=actual,
        )
