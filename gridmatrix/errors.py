"""
Error taxonomy for the gridmatrix package.

Every failure raised by a Matrix carries an ErrorKind, so callers can branch
on ``err.kind`` (or on the exception class) without parsing message text.
Each concrete error also derives from the closest built-in exception, except
DimensionMismatchError, which signals a mathematical precondition failure
rather than a usage mistake.
"""

from enum import Enum
from typing import Optional

__all__ = [
    "ErrorKind",
    "MatrixError",
    "InvalidDimensionError",
    "NullSourceError",
    "IndexOutOfBoundsError",
    "NullOperandError",
    "DimensionMismatchError",
]


class ErrorKind(Enum):
    """The distinct classes of failure a Matrix can report."""
    INVALID_DIMENSION = "invalid_dimension"
    NULL_SOURCE = "null_source"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    NULL_OPERAND = "null_operand"
    DIMENSION_MISMATCH = "dimension_mismatch"


class MatrixError(Exception):
    """Base exception class for gridmatrix."""
    kind: Optional[ErrorKind] = None

    def __init__(self, message: Optional[str] = None):
        if message is None:
            message = self.kind.value.replace("_", " ") if self.kind else "matrix error"
        super().__init__(message)


class InvalidDimensionError(MatrixError, ValueError):
    """Raised when a requested row or column count is zero or negative."""
    kind = ErrorKind.INVALID_DIMENSION


class NullSourceError(MatrixError, ValueError):
    """Raised when no initial grid is supplied to build a matrix from."""
    kind = ErrorKind.NULL_SOURCE


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Raised when an element coordinate falls outside the matrix."""
    kind = ErrorKind.INDEX_OUT_OF_BOUNDS


class NullOperandError(MatrixError, ValueError):
    """Raised when an arithmetic operation is given no second matrix."""
    kind = ErrorKind.NULL_OPERAND


class DimensionMismatchError(MatrixError):
    """Raised when operand shapes are incompatible for the operation."""
    kind = ErrorKind.DIMENSION_MISMATCH
