"""
Vertical and horizontal concatenation of two matrices, after numpy.vstack
and numpy.hstack.

An operand that is empty along the stacking axis is dropped and a copy of
the other operand is returned unchanged, whatever its shape.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatops.core.validation import check_matching_extent
from pymatops.matrix._common import as_matrix

logger = logging.getLogger(__name__)


def _stack(
    m1: ArrayLike,
    m2: ArrayLike,
    axis: int,
    operation: str,
) -> NDArray[np.floating]:
    """
    Concatenate m1 and m2 along axis (0 = rows, 1 = columns).

    The extent shared by both operands is taken from m1, falling back to
    m2 when m1 is empty along it.
    """
    a = as_matrix(m1, "m1")
    b = as_matrix(m2, "m2")

    if a.shape[axis] == 0:
        logger.debug("%s: m1 is empty along axis %d, returning m2", operation, axis)
        return b.copy()
    if b.shape[axis] == 0:
        logger.debug("%s: m2 is empty along axis %d, returning m1", operation, axis)
        return a.copy()

    other = 1 - axis
    extent = a.shape[other] or b.shape[other]
    check_matching_extent(a, other, extent, "m1", operation)
    check_matching_extent(b, other, extent, "m2", operation)

    return np.concatenate([a, b], axis=axis)


def vstack(m1: ArrayLike, m2: ArrayLike) -> NDArray[np.floating]:
    """
    Stack two matrices vertically.

    Parameters
    ----------
    m1 : array-like
        Top matrix (2D).
    m2 : array-like
        Bottom matrix (2D).

    Returns
    -------
    ndarray
        (m1 rows + m2 rows) x ncol matrix with m1's rows first. If m1 has
        no rows a copy of m2 is returned, else if m2 has no rows a copy
        of m1.

    Raises
    ------
    ShapeMismatchError
        If both operands have rows and their column counts differ.
    """
    return _stack(m1, m2, axis=0, operation="vstack")


def hstack(m1: ArrayLike, m2: ArrayLike) -> NDArray[np.floating]:
    """
    Stack two matrices horizontally.

    Parameters
    ----------
    m1 : array-like
        Left matrix (2D).
    m2 : array-like
        Right matrix (2D).

    Returns
    -------
    ndarray
        nrow x (m1 cols + m2 cols) matrix with m1's columns first. If m1
        has no columns a copy of m2 is returned, else if m2 has no
        columns a copy of m1.

    Raises
    ------
    ShapeMismatchError
        If both operands have columns and their row counts differ.
    """
    return _stack(m1, m2, axis=1, operation="hstack")
