"""
Core infrastructure for PyMatOps.

This module provides shared abstractions and utilities used by the
matrix operations.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers and numeric constants
"""

from pymatops.core.exceptions import (
    PyMatOpsError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
)

__all__ = [
    # Exceptions
    "PyMatOpsError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
]
