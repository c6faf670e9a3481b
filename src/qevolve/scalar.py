from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .errors import DivideByZeroError


@dataclass(frozen=True, eq=False)
class ComplexNumber:
    """
    Immutable complex scalar (real, imag) of 64-bit floats.

    Equality is exact field-wise comparison. Callers that need a tolerance
    must compare magnitudes themselves.
    """
    real: float = 0.0
    imag: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    @classmethod
    def from_complex(cls, value) -> "ComplexNumber":
        if isinstance(value, ComplexNumber):
            return value
        c = complex(value)
        return cls(c.real, c.imag)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    @property
    def phase(self) -> float:
        return math.atan2(self.imag, self.real)

    def conjugate(self) -> "ComplexNumber":
        return ComplexNumber(self.real, -self.imag)

    def scale(self, factor: float) -> "ComplexNumber":
        # real factor: scale both parts, no complex multiply
        factor = float(factor)
        return ComplexNumber(self.real * factor, self.imag * factor)

    ## arithmetic

    def __add__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return ComplexNumber(self.real + o.real, self.imag + o.imag)

    __radd__ = __add__

    def __sub__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return ComplexNumber(self.real - o.real, self.imag - o.imag)

    def __rsub__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other):
        if _is_real(other):
            return self.scale(other)
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return ComplexNumber(
            self.real * o.real - self.imag * o.imag,
            self.real * o.imag + self.imag * o.real,
        )

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if o.magnitude == 0:
            raise DivideByZeroError(f"Cannot divide {self!r} by a zero complex number")
        if _is_real(other):
            d = float(other)
            return ComplexNumber(self.real / d, self.imag / d)
        denominator = o.real * o.real + o.imag * o.imag
        return ComplexNumber(
            (self.real * o.real + self.imag * o.imag) / denominator,
            (self.imag * o.real - self.real * o.imag) / denominator,
        )

    def __rtruediv__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __neg__(self) -> "ComplexNumber":
        return ComplexNumber(-self.real, -self.imag)

    def __pos__(self) -> "ComplexNumber":
        return self

    def __abs__(self) -> float:
        return self.magnitude

    ## comparisons / conversions

    def __eq__(self, other) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self.real == o.real and self.imag == o.imag

    def __hash__(self) -> int:
        return hash(complex(self.real, self.imag))

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __repr__(self) -> str:
        return f"ComplexNumber({self.real!r}, {self.imag!r})"

    def __str__(self) -> str:
        sign = "+" if self.imag >= 0 else "-"
        return f"{self.real}{sign}{abs(self.imag)}i"


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _coerce(value) -> ComplexNumber | None:
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, numbers.Number):
        return ComplexNumber.from_complex(value)
    return None


def as_scalar(value) -> ComplexNumber:
    """Coerce a ComplexNumber or builtin/numpy number, raising TypeError otherwise."""
    o = _coerce(value)
    if o is None:
        raise TypeError(f"Expected a complex scalar, got {type(value).__name__}")
    return o


ZERO = ComplexNumber(0.0, 0.0)
ONE = ComplexNumber(1.0, 0.0)
I = ComplexNumber(0.0, 1.0)

ComplexNumber.ZERO = ZERO
ComplexNumber.ONE = ONE
ComplexNumber.I = I
