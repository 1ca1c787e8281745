# --- Purpose: The dense in-memory matrix and its arithmetic. ---

import logging
import numbers
from typing import Tuple

import numpy as np

from .config import DTYPE
from .errors import (
    InvalidDimensionError, NullSourceError, IndexOutOfBoundsError,
    NullOperandError, DimensionMismatchError
)

logger = logging.getLogger(__name__)


def _is_index(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Matrix:
    """
    A dense two-dimensional grid of double-precision values.

    The shape is fixed at construction; only element values change. Every
    operation validates its operands before touching any element, so a call
    that raises leaves both matrices exactly as they were.

    Attributes:
        rows: Number of rows
        columns: Number of columns
        shape: The ``(rows, columns)`` pair
    """

    __hash__ = None  # Contents are mutable
    __array_ufunc__ = None  # NumPy defers arithmetic to Matrix

    def __init__(self, rows: int, columns: int):
        """
        Create a zero-filled matrix.

        Args:
            rows: Number of rows, must be positive
            columns: Number of columns, must be positive

        Raises:
            InvalidDimensionError: If either count is zero or negative.
        """
        if not _is_index(rows) or not _is_index(columns):
            raise TypeError(
                f"Matrix dimensions must be integers, got "
                f"{type(rows).__name__} and {type(columns).__name__}"
            )
        if rows <= 0 or columns <= 0:
            raise InvalidDimensionError(
                f"Matrix dimensions must be positive, got ({rows}, {columns})"
            )

        self._data = np.zeros((int(rows), int(columns)), dtype=DTYPE)
        logger.debug(f"Created zero matrix with shape {self.shape}")

    @classmethod
    def from_array(cls, grid) -> 'Matrix':
        """
        Create a matrix holding a copy of ``grid``.

        The extents come from the grid itself, so an empty grid gives a
        matrix with zero rows or columns. ``[]`` is read as a 0x0 grid.

        Args:
            grid: Nested sequences of numbers or a 2-D NumPy array

        Raises:
            NullSourceError: If ``grid`` is None.
            InvalidDimensionError: If the grid is not rectangular and 2-D.
            TypeError: If any element is not a real number.
        """
        if grid is None:
            raise NullSourceError("Cannot build a matrix from a missing grid")

        try:
            raw = np.asarray(grid)
        except ValueError as exc:
            raise InvalidDimensionError(
                f"Grid must be a rectangular two-dimensional array: {exc}"
            ) from exc
        if raw.dtype.kind not in "biuf":
            raise TypeError(f"Grid elements must be real numbers, got dtype {raw.dtype}")

        data = np.array(raw, dtype=DTYPE, copy=True)

        if data.ndim == 1 and data.size == 0:
            data = data.reshape((0, 0))
        if data.ndim != 2:
            raise InvalidDimensionError(
                f"Grid must be two-dimensional, got {data.ndim} dimension(s)"
            )

        obj = cls._wrap(data)
        logger.debug(f"Created matrix with shape {obj.shape} from grid")
        return obj

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Return the shape of the matrix."""
        return (self.rows, self.columns)

    def _check_index(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        row, column = key
        if not _is_index(row) or not _is_index(column):
            raise TypeError(
                f"Matrix indices must be integers, got "
                f"{type(row).__name__} and {type(column).__name__}"
            )
        if row < 0 or column < 0 or row >= self.rows or column >= self.columns:
            raise IndexOutOfBoundsError(
                f"Index ({row}, {column}) is outside a matrix of shape {self.shape}"
            )
        return int(row), int(column)

    def __getitem__(self, key) -> float:
        row, column = self._check_index(key)
        return float(self._data[row, column])

    def __setitem__(self, key, value):
        row, column = self._check_index(key)
        if not isinstance(value, numbers.Real):
            raise TypeError(f"Matrix elements must be real numbers, got {type(value).__name__}")
        self._data[row, column] = value

    def _check_operand(self, other: 'Matrix', operation: str):
        if other is None:
            raise NullOperandError(f"Cannot {operation} a missing matrix")
        if not isinstance(other, Matrix):
            raise TypeError(
                f"Cannot {operation} '{type(other).__name__}', expected Matrix"
            )

    def _check_same_shape(self, other: 'Matrix', operation: str):
        if other.shape != self.shape:
            logger.debug(f"Rejected {operation}: {self.shape} vs {other.shape}")
            raise DimensionMismatchError(
                f"Shapes must match to {operation}: {self.shape} vs {other.shape}"
            )

    def add(self, other: 'Matrix') -> 'Matrix':
        """
        Add ``other`` to this matrix element by element, in place.

        Returns:
            This matrix, to allow chaining.

        Raises:
            NullOperandError: If ``other`` is None.
            DimensionMismatchError: If the shapes differ.
        """
        self._check_operand(other, "add")
        self._check_same_shape(other, "add")

        logger.debug(f"Adding matrices of shape {self.shape} in place")
        self._data += other._data
        return self

    def subtract(self, other: 'Matrix') -> 'Matrix':
        """
        Subtract ``other`` from this matrix element by element, in place.

        Returns:
            This matrix, to allow chaining.

        Raises:
            NullOperandError: If ``other`` is None.
            DimensionMismatchError: If the shapes differ.
        """
        self._check_operand(other, "subtract")
        self._check_same_shape(other, "subtract")

        logger.debug(f"Subtracting matrices of shape {self.shape} in place")
        self._data -= other._data
        return self

    def multiply(self, other: 'Matrix') -> 'Matrix':
        """
        Compute the matrix product ``self @ other``.

        Neither operand is modified. The result has shape
        ``(self.rows, other.columns)``.

        Raises:
            NullOperandError: If ``other`` is None.
            DimensionMismatchError: If ``self.columns != other.rows``.
        """
        self._check_operand(other, "multiply")
        if self.columns != other.rows:
            logger.debug(f"Rejected multiply: {self.shape} @ {other.shape}")
            raise DimensionMismatchError(
                f"Inner dimensions must match: {self.shape} @ {other.shape}"
            )

        logger.debug(f"Multiplying {self.shape} @ {other.shape}")
        product = self._data @ other._data
        return Matrix._wrap(product)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> 'Matrix':
        """Internal constructor that takes ownership of a fresh array."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    def copy(self) -> 'Matrix':
        """Return an independent matrix with the same elements."""
        return Matrix._wrap(self._data.copy())

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the elements as a NumPy array."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            raise ValueError("A Matrix cannot be viewed as an array without copying")
        data = self._data.copy()
        return data if dtype is None else data.astype(dtype)

    def __iadd__(self, other):
        if other is not None and not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other):
        if other is not None and not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __add__(self, other):
        if other is not None and not isinstance(other, Matrix):
            return NotImplemented
        return self.copy().add(other)

    def __sub__(self, other):
        if other is not None and not isinstance(other, Matrix):
            return NotImplemented
        return self.copy().subtract(other)

    def __matmul__(self, other):
        if other is not None and not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Matrix(shape={self.shape}, data={self._data.tolist()!r})"


def zeros(rows: int, columns: int) -> Matrix:
    """
    Create a zero-filled matrix.

    Example:
        >>> m = zeros(2, 3)
        >>> m.shape
        (2, 3)
    """
    return Matrix(rows, columns)


def array(grid) -> Matrix:
    """
    Create a matrix from nested lists or a NumPy array.

    Example:
        >>> m = array([[1, 2], [3, 4]])
        >>> m[1, 0]
        3.0
    """
    return Matrix.from_array(grid)
