"""
Kronecker product of two matrices, after numpy.kron.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatops.matrix._common import as_matrix, result_dtype


def kron(m1: ArrayLike, m2: ArrayLike) -> NDArray[np.floating]:
    """
    Compute the Kronecker product m1 ⊗ m2.

    Args:
        m1: First matrix (p, q)
        m2: Second matrix (s, t)

    Returns:
        Matrix of shape (p*s, q*t) whose (i, j) block of size (s, t)
        is m1[i, j] * m2
    """
    a = as_matrix(m1, "m1")
    b = as_matrix(m2, "m2")

    p, q = a.shape
    s, t = b.shape
    result = np.empty((p * s, q * t), dtype=result_dtype(a, b))

    # Blocks are disjoint, so every entry is written exactly once
    for i in range(p):
        for j in range(q):
            result[i*s:(i+1)*s, j*t:(j+1)*t] = a[i, j] * b

    return result
