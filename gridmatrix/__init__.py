"""
gridmatrix: a small dense matrix type with defensive validation.
"""

from .core import Matrix, zeros, array
from .errors import (
    ErrorKind, MatrixError, InvalidDimensionError, NullSourceError,
    IndexOutOfBoundsError, NullOperandError, DimensionMismatchError
)
from .observability import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "zeros",
    "array",
    "ErrorKind",
    "MatrixError",
    "InvalidDimensionError",
    "NullSourceError",
    "IndexOutOfBoundsError",
    "NullOperandError",
    "DimensionMismatchError",
    "configure_logging",
]
