import numpy as np

from .errors import ConstructionError, IndexOutOfRangeError
from .matrix import ComplexMatrix
from .vector import ComplexVector

## Pauli matrices, returned fresh so callers may mutate them

_X = np.array([
    [0, 1],
    [1, 0],
], dtype=complex)

_Y = np.array([
    [0, -1j],
    [1j, 0],
], dtype=complex)

_Z = np.array([
    [1, 0],
    [0, -1],
], dtype=complex)


def pauli_x() -> ComplexMatrix:
    return ComplexMatrix(_X)


def pauli_y() -> ComplexMatrix:
    return ComplexMatrix(_Y)


def pauli_z() -> ComplexMatrix:
    return ComplexMatrix(_Z)


def identity(dimension: int) -> ComplexMatrix:
    return ComplexMatrix.identity(dimension)


def basis_state(index: int, dimension: int) -> ComplexVector:
    if dimension <= 0:
        raise ConstructionError(f"dimension must be positive, got {dimension}")
    if index < 0 or index >= dimension:
        raise IndexOutOfRangeError(f"index must be between 0 and {dimension - 1}, got {index}")

    state = ComplexVector(dimension)
    state[index] = 1.0
    return state
