"""
Block-diagonal composition, after scipy.linalg.block_diag.

Matrices are laid along the main diagonal in argument order; every entry
outside the blocks is exactly zero.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatops.matrix._common import as_matrix, result_dtype

logger = logging.getLogger(__name__)


def block_diag(*matrices: ArrayLike) -> NDArray[np.floating]:
    """
    Create a block diagonal matrix from the provided matrices.

    Parameters
    ----------
    *matrices : array-like
        Matrices (2D) to place on the diagonal, in order. Blocks may be
        empty; an r x 0 block still shifts the following blocks down by
        r rows.

    Returns
    -------
    ndarray
        (sum of rows) x (sum of cols) matrix. Block k starts at
        (rows of blocks before k, cols of blocks before k). With no
        arguments a 0 x 0 matrix is returned.

    Examples
    --------
    >>> block_diag(np.eye(2), np.eye(3)).shape
    (5, 5)
    """
    blocks = [as_matrix(m, f"matrices[{k}]") for k, m in enumerate(matrices)]
    if not blocks:
        logger.debug("block_diag: no matrices given, returning 0 x 0 matrix")

    n_rows = sum(b.shape[0] for b in blocks)
    n_cols = sum(b.shape[1] for b in blocks)
    out = np.zeros((n_rows, n_cols), dtype=result_dtype(*blocks))

    row, col = 0, 0
    for b in blocks:
        r, c = b.shape
        out[row:row + r, col:col + c] = b
        row += r
        col += c

    return out
