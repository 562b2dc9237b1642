"""
Reshape a matrix without changing its data, after numpy.reshape.

The default order is column-major ('F'), so the element sequence read
down the columns of the input is the sequence written down the columns
of the output.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatops.core.exceptions import ValidationError
from pymatops.core.validation import check_dimension, check_element_count
from pymatops.matrix._common import as_matrix

VALID_ORDERS = ("F", "C")


def reshape(
    x: ArrayLike,
    r: int,
    c: int,
    order: str = "F",
) -> NDArray[np.floating]:
    """
    Give a matrix a new shape without changing its data.

    Parameters
    ----------
    x : array-like
        Input matrix (2D).
    r : int
        Number of rows of the result.
    c : int
        Number of columns of the result.
    order : str
        'F' (default) reads and writes elements in column-major order,
        'C' in row-major order.

    Returns
    -------
    ndarray
        New r x c matrix. Always a copy; writing to it never affects x.

    Raises
    ------
    ShapeMismatchError
        If r * c differs from the number of elements of x.
    """
    if order not in VALID_ORDERS:
        raise ValidationError(
            f"order must be one of {VALID_ORDERS}, got {order!r}"
        )

    m = as_matrix(x, "x")
    r = check_dimension(r, "r")
    c = check_dimension(c, "c")
    check_element_count(m.size, r * c, "reshape")

    return np.reshape(m, (r, c), order=order).copy(order=order)
