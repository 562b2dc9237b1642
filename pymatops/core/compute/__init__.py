"""
Shared numeric infrastructure for PyMatOps.

IMPORTANT: This is NOT where matrix operations live. Those go in
pymatops.matrix. This module contains shared NUMERIC constants.

Submodules:
    tolerances: Tolerance tiers and comparison thresholds
"""

from pymatops.core.compute.tolerances import (
    DIAGONAL_SUM_TOL,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    "DIAGONAL_SUM_TOL",
    "FP32",
    "FP64",
    "ToleranceTier",
    "select_tolerance",
]
