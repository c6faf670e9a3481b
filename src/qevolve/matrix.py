from __future__ import annotations

import numbers
import operator

import numpy as np

from .errors import ConstructionError, DimensionMismatchError, IndexOutOfRangeError
from .scalar import ComplexNumber, _is_real, as_scalar
from .vector import ComplexVector


class ComplexMatrix:
    """
    Dense rows x columns matrix of complex scalars.

    ComplexMatrix(rows, columns) gives a zero matrix; ComplexMatrix(elements)
    deep-copies nested sequences (or a 2-D numpy array). The shape is fixed,
    elements may be overwritten in place through m[i, j].

    Like ComplexVector, instances are not synchronized for concurrent writers.
    """

    __slots__ = ("_elements",)
    __hash__ = None
    __array_ufunc__ = None

    def __init__(self, rows, columns=None):
        if rows is None:
            raise ConstructionError("Matrix elements cannot be None")

        if columns is not None:
            self._elements = _zeros(rows, columns)
            return

        if isinstance(rows, ComplexMatrix):
            self._elements = rows._elements.copy()
            return

        if isinstance(rows, (numbers.Number, str, bytes)):
            raise ConstructionError(
                "Expected (rows, columns) or nested sequences of scalars, "
                f"got {type(rows).__name__}"
            )

        self._elements = _from_nested(rows)

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "ComplexMatrix":
        return cls(rows, columns)

    @classmethod
    def identity(cls, dimension: int) -> "ComplexMatrix":
        if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral) or dimension <= 0:
            raise ConstructionError(f"Identity dimension must be a positive int, got {dimension!r}")
        return cls._wrap(np.eye(int(dimension), dtype=complex))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "ComplexMatrix":
        m = cls.__new__(cls)
        m._elements = data
        return m

    ## shape

    @property
    def rows(self) -> int:
        return self._elements.shape[0]

    @property
    def columns(self) -> int:
        return self._elements.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    ## element access

    def _check_index(self, key) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        i, j = operator.index(key[0]), operator.index(key[1])
        if not (0 <= i < self.rows) or not (0 <= j < self.columns):
            raise IndexOutOfRangeError(
                f"index ({i}, {j}) out of range for matrix of shape {self.shape}"
            )
        return i, j

    def __getitem__(self, key) -> ComplexNumber:
        c = self._elements[self._check_index(key)]
        return ComplexNumber(c.real, c.imag)

    def __setitem__(self, key, value) -> None:
        self._elements[self._check_index(key)] = complex(as_scalar(value))

    ## algebra

    def _require_same_shape(self, other: "ComplexMatrix", what: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Matrices must have the same shape for {what}, got {self.shape} and {other.shape}"
            )

    def __add__(self, other):
        if not isinstance(other, ComplexMatrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        return ComplexMatrix._wrap(self._elements + other._elements)

    def __sub__(self, other):
        if not isinstance(other, ComplexMatrix):
            return NotImplemented
        self._require_same_shape(other, "subtraction")
        return ComplexMatrix._wrap(self._elements - other._elements)

    def __neg__(self) -> "ComplexMatrix":
        return ComplexMatrix._wrap(-self._elements)

    def __matmul__(self, other):
        if isinstance(other, ComplexMatrix):
            if self.columns != other.rows:
                raise DimensionMismatchError(
                    f"Cannot multiply {self.shape} by {other.shape}: "
                    "columns of the first must equal rows of the second"
                )
            return ComplexMatrix._wrap(self._elements @ other._elements)

        if isinstance(other, ComplexVector):
            if self.columns != other.dimension:
                raise DimensionMismatchError(
                    f"Matrix columns ({self.columns}) must match vector dimension ({other.dimension})"
                )
            return ComplexVector._wrap(self._elements @ other._elements)

        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (ComplexMatrix, ComplexVector)):
            return self.__matmul__(other)
        if _is_real(other):
            return ComplexMatrix._wrap(self._elements * float(other))
        if isinstance(other, (ComplexNumber, numbers.Number)):
            return ComplexMatrix._wrap(self._elements * complex(as_scalar(other)))
        return NotImplemented

    def __rmul__(self, other):
        # scalar * matrix; matrix * matrix never lands here
        if isinstance(other, (ComplexNumber, numbers.Number)):
            return self.__mul__(other)
        return NotImplemented

    def conjugate_transpose(self) -> "ComplexMatrix":
        return ComplexMatrix._wrap(self._elements.conj().T.copy())

    def trace(self) -> ComplexNumber:
        if not self.is_square:
            raise DimensionMismatchError(f"Trace requires a square matrix, got {self.shape}")
        return ComplexNumber.from_complex(np.trace(self._elements))

    def is_hermitian(self, atol: float = 1e-12) -> bool:
        if not self.is_square:
            return False
        return bool(np.allclose(self._elements, self._elements.conj().T, atol=atol))

    ## copies / conversions

    def clone(self) -> "ComplexMatrix":
        return ComplexMatrix._wrap(self._elements.copy())

    copy = clone

    def to_array(self) -> np.ndarray:
        return self._elements.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, ComplexMatrix):
            return NotImplemented
        return bool(np.array_equal(self._elements, other._elements))

    def __repr__(self) -> str:
        return f"ComplexMatrix(rows={self.rows}, columns={self.columns})"

    def __str__(self) -> str:
        lines = []
        for i in range(self.rows):
            row = ", ".join(str(self[i, j]) for j in range(self.columns))
            lines.append(f"[{row}]")
        return "\n".join(lines)


def _zeros(rows, columns) -> np.ndarray:
    for name, n in (("rows", rows), ("columns", columns)):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise ConstructionError(f"{name} must be an int, got {type(n).__name__}")
        if n <= 0:
            raise ConstructionError(f"Rows and columns must be positive, got {rows}x{columns}")
    return np.zeros((int(rows), int(columns)), dtype=complex)


def _from_nested(elements) -> np.ndarray:
    if isinstance(elements, np.ndarray):
        if elements.ndim != 2:
            raise ConstructionError(f"Matrix data must be 2-D, got shape {elements.shape}")
        if elements.size == 0:
            raise ConstructionError("Matrix elements cannot be empty")
        return np.array(elements, dtype=complex)

    try:
        rows = [list(r) for r in elements]
    except TypeError as exc:
        raise ConstructionError(f"Matrix data must be a sequence of rows: {exc}") from exc

    if len(rows) == 0 or len(rows[0]) == 0:
        raise ConstructionError("Matrix elements cannot be empty")

    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ConstructionError("Matrix rows must all have the same length")

    try:
        return np.array([[complex(as_scalar(e)) for e in r] for r in rows], dtype=complex)
    except TypeError as exc:
        raise ConstructionError(f"Invalid matrix elements: {exc}") from exc
