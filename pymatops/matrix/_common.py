"""
Shared helpers for the matrix operations.

Every public operation funnels its inputs through as_matrix() so that
conversion, dtype promotion and dimensionality checks behave the same
way everywhere.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatops.core.validation import check_2d, check_array

# Default dtype for integer inputs; floating inputs keep their own dtype.
MATRIX_DTYPE = np.float32


def as_matrix(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate an input as a dense floating-point matrix.

    Args:
        x: Array-like input
        name: Parameter name for error messages

    Returns:
        2D floating ndarray. May share memory with x; callers must copy
        before returning it.

    Raises:
        ValidationError: If x is not numeric
        DimensionError: If x is not 2D
    """
    m = check_array(x, name, promote_to=MATRIX_DTYPE)
    check_2d(m, name)
    return m


def result_dtype(*matrices: NDArray[np.floating[Any]]) -> np.dtype:
    """Common floating dtype of validated matrices."""
    if not matrices:
        return np.dtype(MATRIX_DTYPE)
    return np.result_type(*matrices)
