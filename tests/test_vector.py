import numpy as np
import pytest

from qevolve import (
    ComplexNumber,
    ComplexVector,
    ConstructionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    I,
)


def test_dimension_constructor_gives_zeros():
    v = ComplexVector(3)
    assert v.dimension == 3
    assert len(v) == 3
    assert all(e == ComplexNumber(0, 0) for e in v)


def test_elements_constructor_copies_input():
    data = np.array([1, 2j], dtype=complex)
    v = ComplexVector(data)
    data[0] = 99
    assert v[0] == ComplexNumber(1, 0)
    assert v[1] == ComplexNumber(0, 2)

    w = ComplexVector.from_elements(ComplexNumber(1, 1), 2.0)
    assert w.dimension == 2
    assert w[1] == ComplexNumber(2, 0)


@pytest.mark.parametrize("bad", [0, -2, None, [], np.zeros((2, 2))])
def test_invalid_construction_raises(bad):
    with pytest.raises(ConstructionError):
        ComplexVector(bad)


def test_indexer_bounds():
    v = ComplexVector(2)
    v[1] = ComplexNumber(0, 1)
    assert v[1] == I

    for idx in (2, -1):
        with pytest.raises(IndexOutOfRangeError):
            v[idx]
        with pytest.raises(IndexOutOfRangeError):
            v[idx] = 1.0


def test_add_sub_and_mismatch():
    a = ComplexVector([1, 2])
    b = ComplexVector([1j, -1])
    assert a + b == ComplexVector([1 + 1j, 1])
    assert a - b == ComplexVector([1 - 1j, 3])

    with pytest.raises(DimensionMismatchError):
        a + ComplexVector(3)


def test_scalar_multiplication_commutes():
    v = ComplexVector([1, 1j])
    s = ComplexNumber(2, -1)
    assert v * s == s * v
    assert np.allclose((v * s).to_array(), np.array([2 - 1j, 1 + 2j]))
    assert 2 * v == ComplexVector([2, 2j])


def test_conjugate_transpose_leaves_receiver_untouched():
    v = ComplexVector([1 + 1j, -2j])
    c = v.conjugate_transpose()
    assert c == ComplexVector([1 - 1j, 2j])
    assert v == ComplexVector([1 + 1j, -2j])


def test_dot_is_conjugate_linear_in_first_argument():
    a = ComplexVector([1j, 0])
    b = ComplexVector([1, 0])
    # conj(i) * 1 = -i
    assert a.dot(b) == ComplexNumber(0, -1)
    assert b.dot(a) == ComplexNumber(0, 1)

    with pytest.raises(DimensionMismatchError):
        a.dot(ComplexVector(3))


def test_outer_product():
    a = ComplexVector([1, 1j])
    b = ComplexVector([1, 1j, 2])
    m = a.outer_product(b)

    assert m.shape == (2, 3)
    assert m[0, 1] == ComplexNumber(0, -1)
    assert m[1, 1] == ComplexNumber(1, 0)
    assert m[1, 2] == ComplexNumber(0, 2)


def test_normalize_gives_unit_norm():
    v = ComplexVector([3, 4j])
    v.normalize()
    assert np.allclose(v.to_array(), np.array([0.6, 0.8j]))

    w = ComplexVector([1 + 2j, -0.5, 3j, 7])
    w.normalize()
    assert np.isclose(sum(abs(e) ** 2 for e in w), 1.0, atol=1e-12)


def test_normalize_zero_vector_is_noop():
    v = ComplexVector(4)
    v.normalize()
    assert v == ComplexVector(4)


def test_copy_is_independent():
    v = ComplexVector([1, 2])
    c = v.copy()
    c[0] = 5
    assert v[0] == ComplexNumber(1, 0)


def test_numpy_scalar_on_the_left():
    v = ComplexVector([1, 1j])

    assert np.float64(2) * v == v * np.float64(2)
    assert np.complex128(1j) * v == v * np.complex128(1j)

    r = np.sqrt(0.5) * v
    assert isinstance(r, ComplexVector)
    assert np.allclose(r.to_array(), np.array([1, 1j]) * np.sqrt(0.5))
