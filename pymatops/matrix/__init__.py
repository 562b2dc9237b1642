"""
Dense matrix manipulation module.

Provides numpy/scipy/MATLAB-style conveniences over 2D floating-point
arrays. Every function is pure: inputs are never modified and results
never share memory with inputs.

Public API:
    reshape(x, r, c)      - New shape, same column-major element order
    isdiag(x)             - Square and diagonal predicate
    vstack(m1, m2)        - Vertical concatenation
    hstack(m1, m2)        - Horizontal concatenation
    block_diag(*ms)       - Block-diagonal composition
    kron(m1, m2)          - Kronecker product
"""

from pymatops.matrix._reshape import reshape
from pymatops.matrix._isdiag import isdiag
from pymatops.matrix._stack import vstack, hstack
from pymatops.matrix._block_diag import block_diag
from pymatops.matrix._kron import kron
from pymatops.matrix._common import MATRIX_DTYPE

__all__ = [
    "reshape",
    "isdiag",
    "vstack",
    "hstack",
    "block_diag",
    "kron",
    "MATRIX_DTYPE",
]
