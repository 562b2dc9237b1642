"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the floating dtypes a matrix can carry:
- FP64: double precision, exact algorithms match to machine precision
- FP32: single precision, the library's default matrix dtype

Also holds the fixed threshold used by the diagonal test. Used by the
matrix predicates and by the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, matches NumPy/SciPy to machine precision',
)

FP32 = ToleranceTier(
    rtol=1e-6,
    atol=1e-7,
    name='fp32',
    description='Single precision, default matrix dtype',
)

# Threshold on |sum(diag(x) - x)| below which a square matrix counts as
# diagonal. Compared against the aggregate sum, not per entry.
DIAGONAL_SUM_TOL = 1e-5


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier for a floating dtype."""
    if np.finfo(dtype).bits >= 64:
        return FP64
    return FP32
