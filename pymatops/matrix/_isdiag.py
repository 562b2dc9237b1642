"""
Diagonal-matrix predicate, after MATLAB's isdiag.

The test compares the matrix against its diagonal part through the
absolute value of the summed difference, so off-diagonal entries of
opposite sign can cancel. Use a norm-based check where that matters.
"""

from __future__ import annotations

import math
import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pymatops.core.compute.tolerances import DIAGONAL_SUM_TOL
from pymatops.core.exceptions import ValidationError
from pymatops.matrix._common import as_matrix


def isdiag(x: ArrayLike, tol: float = DIAGONAL_SUM_TOL) -> bool:
    """
    Determine whether a matrix is square and diagonal.

    Parameters
    ----------
    x : array-like
        Input matrix (2D).
    tol : float
        Threshold on |sum(diag(x) - x)|. Default 1e-5.

    Returns
    -------
    bool
        False for any non-square matrix. Otherwise True iff the absolute
        aggregate off-diagonal sum is strictly below tol.
    """
    if (
        isinstance(tol, bool)
        or not isinstance(tol, numbers.Real)
        or not math.isfinite(tol)
        or tol <= 0
    ):
        raise ValidationError(f"tol must be a positive finite number, got {tol!r}")

    m = as_matrix(x, "x")
    n_rows, n_cols = m.shape
    if n_rows != n_cols:
        return False

    diagonal_part = np.diag(np.diag(m))
    with np.errstate(over="ignore", invalid="ignore"):
        deviation = abs((diagonal_part - m).sum())

    # NaN/Inf entries, or a sum that overflows the matrix dtype
    if not np.isfinite(deviation):
        warnings.warn(
            "isdiag: aggregate deviation is non-finite, treating it as not diagonal",
            RuntimeWarning,
            stacklevel=2,
        )
        return False

    return bool(deviation < tol)
