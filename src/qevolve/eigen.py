"""
Eigen-decomposition as a pluggable capability.

The evolution engine never decomposes matrices itself. It asks an EigenSolver,
and the default one reports that the capability is missing so callers can
fall back (or fail) knowingly. NumpyEigenSolver adapts numpy.linalg for
callers that want the exact propagator.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .errors import CapabilityNotImplementedError, DimensionMismatchError
from .matrix import ComplexMatrix
from .scalar import ComplexNumber
from .vector import ComplexVector


@dataclass(frozen=True)
class EigenDecomposition:
    """
    Eigenvalues paired with their eigenvectors (same order).

    Eigenvalues are always ComplexNumber. For Hermitian input solved with
    eigh they are real, so every imag part is exactly 0.0.
    """
    eigenvalues: tuple[ComplexNumber, ...]
    eigenvectors: tuple[ComplexVector, ...]

    def eigenvector_matrix(self) -> ComplexMatrix:
        """Eigenvectors as the columns of a square matrix."""
        cols = [v.to_array() for v in self.eigenvectors]
        return ComplexMatrix._wrap(np.column_stack(cols))


class EigenSolver(ABC):

    @property
    def available(self) -> bool:
        return True

    @abstractmethod
    def solve(self, matrix: ComplexMatrix) -> EigenDecomposition:
        raise NotImplementedError()


class UnavailableEigenSolver(EigenSolver):
    """Placeholder solver: every request fails with CapabilityNotImplementedError."""

    @property
    def available(self) -> bool:
        return False

    def solve(self, matrix: ComplexMatrix) -> EigenDecomposition:
        raise CapabilityNotImplementedError(
            "No eigen-decomposition backend is configured; "
            "pass solver=NumpyEigenSolver() or another EigenSolver"
        )


class NumpyEigenSolver(EigenSolver):
    """
    Dense eigen-decomposition through numpy.linalg.

    hermitian=None detects Hermitian input and uses eigh (real eigenvalues,
    orthonormal eigenvectors); otherwise eig is used.
    """

    def __init__(self, hermitian: bool | None = None, atol: float = 1e-12):
        self.hermitian = hermitian
        self.atol = atol

    def solve(self, matrix: ComplexMatrix) -> EigenDecomposition:
        if not matrix.is_square:
            raise DimensionMismatchError(
                f"Eigen-decomposition requires a square matrix, got {matrix.shape}"
            )

        A = matrix.to_array()
        hermitian = self.hermitian
        if hermitian is None:
            hermitian = matrix.is_hermitian(atol=self.atol)

        if hermitian:
            w, V = np.linalg.eigh(A)
        else:
            w, V = np.linalg.eig(A)

        values = tuple(ComplexNumber.from_complex(x) for x in w)
        vectors = tuple(ComplexVector._wrap(V[:, k].copy()) for k in range(V.shape[1]))
        return EigenDecomposition(eigenvalues=values, eigenvectors=vectors)


_UNAVAILABLE = UnavailableEigenSolver()


def default_eigen_solver() -> EigenSolver:
    return _UNAVAILABLE
