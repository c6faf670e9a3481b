import math

import pytest

from qevolve import ComplexNumber, ZERO, ONE, I, DivideByZeroError


SAMPLES = [
    ComplexNumber(3, 4),
    ComplexNumber(-1.5, 2.25),
    ComplexNumber(0.1, -0.7),
    ComplexNumber(2, 0),
    ComplexNumber(0, -3),
]


def test_addition_and_multiplication_commute():
    for a in SAMPLES:
        for b in SAMPLES:
            assert a + b == b + a
            assert a * b == b * a


def test_double_conjugate_is_identity():
    for a in SAMPLES:
        assert a.conjugate().conjugate() == a
        assert a.conjugate() == ComplexNumber(a.real, -a.imag)


def test_self_division_is_one():
    for a in SAMPLES:
        assert a / a == ONE


def test_divide_by_zero_raises():
    with pytest.raises(DivideByZeroError):
        ComplexNumber(1, 0) / ComplexNumber(0, 0)

    # still a ZeroDivisionError for plain callers
    with pytest.raises(ZeroDivisionError):
        ComplexNumber(1, 1) / 0


def test_magnitude_and_phase():
    z = ComplexNumber(3, 4)
    assert z.magnitude == 5.0
    assert abs(z) == 5.0
    assert math.isclose(ComplexNumber(0, 1).phase, math.pi / 2)
    assert math.isclose(ComplexNumber(-1, 0).phase, math.pi)


def test_named_constants():
    assert ZERO == ComplexNumber(0, 0)
    assert ONE == ComplexNumber(1, 0)
    assert I == ComplexNumber(0, 1)
    assert I * I == -ONE
    assert ComplexNumber.I is I


def test_real_scaling_and_mixed_operands():
    z = ComplexNumber(1.5, -2)
    assert z * 2 == ComplexNumber(3, -4)
    assert 2 * z == z.scale(2)
    assert z + 1 == ComplexNumber(2.5, -2)
    assert 1 - z == ComplexNumber(-0.5, 2)
    assert z / 2 == ComplexNumber(0.75, -1)
    assert z * 1j == ComplexNumber(2, 1.5)


def test_equality_is_exact_and_matches_builtin_complex():
    assert ComplexNumber(0.1 + 0.2, 0) != ComplexNumber(0.3, 0)
    assert ComplexNumber(1, 2) == complex(1, 2)
    assert hash(ComplexNumber(1, 2)) == hash(complex(1, 2))
    assert complex(ComplexNumber(1, 2)) == 1 + 2j


def test_is_immutable():
    z = ComplexNumber(1, 2)
    with pytest.raises(AttributeError):
        z.real = 5.0
