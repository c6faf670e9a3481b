from __future__ import annotations

import numbers
import operator

import numpy as np

from .errors import ConstructionError, DimensionMismatchError, IndexOutOfRangeError
from .scalar import ComplexNumber, _is_real, as_scalar


class ComplexVector:
    """
    Fixed-dimension vector of complex scalars.

    ComplexVector(n) gives n zeros; ComplexVector(elements) copies a sequence
    of scalars (or a 1-D numpy array). The dimension never changes, elements
    may be overwritten in place through the indexer.

    Instances own their storage and are not synchronized: sharing one vector
    between threads that mutate it is up to the caller to guard.
    """

    __slots__ = ("_elements",)
    __hash__ = None
    # keeps numpy scalars on the left from broadcasting over the elements
    __array_ufunc__ = None

    def __init__(self, elements):
        if elements is None:
            raise ConstructionError("Vector elements cannot be None")

        if isinstance(elements, numbers.Integral) and not isinstance(elements, bool):
            dimension = int(elements)
            if dimension <= 0:
                raise ConstructionError(f"Dimension must be positive, got {dimension}")
            self._elements = np.zeros(dimension, dtype=complex)
            return

        if isinstance(elements, ComplexVector):
            self._elements = elements._elements.copy()
            return

        if isinstance(elements, (bool, numbers.Number, str, bytes)):
            raise ConstructionError(
                f"Expected a dimension or a sequence of scalars, got {type(elements).__name__}"
            )

        if isinstance(elements, np.ndarray):
            if elements.ndim != 1:
                raise ConstructionError(f"Vector data must be 1-D, got shape {elements.shape}")
            data = np.array(elements, dtype=complex)
        else:
            try:
                data = np.array([complex(as_scalar(e)) for e in elements], dtype=complex)
            except TypeError as exc:
                raise ConstructionError(f"Invalid vector elements: {exc}") from exc

        if data.size == 0:
            raise ConstructionError("Vector elements cannot be empty")
        self._elements = data

    @classmethod
    def from_elements(cls, *elements) -> "ComplexVector":
        return cls(elements)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "ComplexVector":
        # takes ownership of data, no copy
        v = cls.__new__(cls)
        v._elements = data
        return v

    @property
    def dimension(self) -> int:
        return self._elements.shape[0]

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self):
        for c in self._elements:
            yield ComplexNumber(c.real, c.imag)

    def _check_index(self, index) -> int:
        i = operator.index(index)
        if i < 0 or i >= self.dimension:
            raise IndexOutOfRangeError(
                f"index {i} out of range for vector of dimension {self.dimension}"
            )
        return i

    def __getitem__(self, index) -> ComplexNumber:
        c = self._elements[self._check_index(index)]
        return ComplexNumber(c.real, c.imag)

    def __setitem__(self, index, value) -> None:
        self._elements[self._check_index(index)] = complex(as_scalar(value))

    def _require_same_dimension(self, other: "ComplexVector", what: str) -> None:
        if self.dimension != other.dimension:
            raise DimensionMismatchError(
                f"Vectors must have the same dimension for {what}, "
                f"got {self.dimension} and {other.dimension}"
            )

    ## vector space operations

    def __add__(self, other):
        if not isinstance(other, ComplexVector):
            return NotImplemented
        self._require_same_dimension(other, "addition")
        return ComplexVector._wrap(self._elements + other._elements)

    def __sub__(self, other):
        if not isinstance(other, ComplexVector):
            return NotImplemented
        self._require_same_dimension(other, "subtraction")
        return ComplexVector._wrap(self._elements - other._elements)

    def __mul__(self, scalar):
        if _is_real(scalar):
            return ComplexVector._wrap(self._elements * float(scalar))
        if isinstance(scalar, (ComplexNumber, numbers.Number)):
            return ComplexVector._wrap(self._elements * complex(as_scalar(scalar)))
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "ComplexVector":
        return ComplexVector._wrap(-self._elements)

    def conjugate_transpose(self) -> "ComplexVector":
        return ComplexVector._wrap(self._elements.conj())

    def dot(self, other: "ComplexVector") -> ComplexNumber:
        """Inner product sum(conj(self[i]) * other[i]), conjugate-linear in self."""
        self._require_same_dimension(other, "dot product")
        return ComplexNumber.from_complex(np.vdot(self._elements, other._elements))

    def outer_product(self, other: "ComplexVector"):
        """Matrix with result[i, j] = self[i] * conj(other[j])."""
        from .matrix import ComplexMatrix

        return ComplexMatrix._wrap(np.outer(self._elements, other._elements.conj()))

    def norm(self) -> float:
        return float(np.sqrt(self._squared_norm()))

    def _squared_norm(self) -> float:
        e = self._elements
        return float(np.sum(e.real * e.real + e.imag * e.imag))

    def normalize(self) -> None:
        """Scale in place to unit norm. A zero vector is left unchanged."""
        magnitude_squared = self._squared_norm()
        if magnitude_squared == 0:
            return
        self._elements /= np.sqrt(magnitude_squared)

    ## copies / conversions

    def copy(self) -> "ComplexVector":
        return ComplexVector._wrap(self._elements.copy())

    clone = copy

    def to_array(self) -> np.ndarray:
        return self._elements.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return bool(np.array_equal(self._elements, other._elements))

    def __repr__(self) -> str:
        return f"ComplexVector(dimension={self.dimension})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self) + "]"
