"""
PyMatOps: numpy/scipy-style matrix conveniences for linear algebra code.

Submodules:
    matrix: reshape, isdiag, vstack, hstack, block_diag, kron
    core: exceptions, validators, tolerance constants
"""

import logging

__version__ = "0.1.0"

from pymatops.matrix import (
    reshape,
    isdiag,
    vstack,
    hstack,
    block_diag,
    kron,
)
from pymatops.core.exceptions import (
    PyMatOpsError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "reshape",
    "isdiag",
    "vstack",
    "hstack",
    "block_diag",
    "kron",
    "PyMatOpsError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
]
