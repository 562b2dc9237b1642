"""
Exception hierarchy for PyMatOps.

All exceptions inherit from PyMatOpsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyMatOpsError(Exception):
    """Base exception for all PyMatOps errors."""
    pass


class ValidationError(PyMatOpsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array has the wrong number of dimensions.

    Raised when an input that must be a matrix is a scalar, a vector
    or a higher-dimensional array.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Matrix shapes are inconsistent with the requested operation.

    Raised when a reshape target does not hold the same number of
    elements as the source, or when two matrices being stacked do not
    conform along the shared axis.

    Attributes:
        operation: Name of the operation that rejected the shapes
        expected: Expected shape, extent or element count
        actual: Shape, extent or element count that was received
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual
