from __future__ import annotations

import logging
import numbers
import warnings
from typing import Optional

import numpy as np

from .constants import DEFAULT_STEPS, REDUCED_PLANCK_CONSTANT
from .eigen import EigenDecomposition, EigenSolver, default_eigen_solver
from .errors import CapabilityNotImplementedError, DimensionMismatchError, EigenSolverFallbackWarning
from .matrix import ComplexMatrix
from .scalar import I, ComplexNumber
from .vector import ComplexVector

logger = logging.getLogger(__name__)

# eigenvector bases worse conditioned than this are treated as defective
EIGENVECTOR_CONDITION_LIMIT = 1e10


def _require_operator_for(state: ComplexVector, operator: ComplexMatrix, name: str) -> None:
    if not operator.is_square or operator.rows != state.dimension:
        raise DimensionMismatchError(
            f"{name} must be a square matrix matching the state dimension "
            f"{state.dimension}, got shape {operator.shape}"
        )


def _require_square_pair(a: ComplexMatrix, b: ComplexMatrix, what: str) -> None:
    if not a.is_square or not b.is_square or a.rows != b.rows:
        raise DimensionMismatchError(
            f"Matrices must be square and of the same dimension for {what}, "
            f"got {a.shape} and {b.shape}"
        )


def _check_series_args(steps, hbar) -> None:
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise ValueError(f"steps must be an int, got {type(steps).__name__}")
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    if not hbar > 0:
        raise ValueError(f"hbar must be positive, got {hbar}")


def propagator(
    hamiltonian: ComplexMatrix,
    time: float,
    steps: int = DEFAULT_STEPS,
    *,
    hbar: float = REDUCED_PLANCK_CONSTANT,
) -> ComplexMatrix:
    """
    U(t) ~= exp(-i H t / hbar) as the Maclaurin series truncated after `steps` terms:

        U = sum_{k=0}^{steps} M^k / k!,   M = -i H t / hbar

    Each term is built from the previous one (T_k = T_{k-1} M / k) so the
    factorial is never formed explicitly. Accuracy improves with `steps` and
    degrades as |t| * ||H|| / hbar grows. The result is not re-unitarized.
    """
    if not hamiltonian.is_square:
        raise DimensionMismatchError(f"Hamiltonian must be square, got shape {hamiltonian.shape}")
    _check_series_args(steps, hbar)

    M = hamiltonian * (I * (-float(time) / hbar))
    U = ComplexMatrix.identity(hamiltonian.rows)
    term = ComplexMatrix.identity(hamiltonian.rows)

    for k in range(1, int(steps) + 1):
        term = (term @ M) * (1.0 / k)
        U = U + term

    return U


def time_evolve(
    initial_state: ComplexVector,
    hamiltonian: ComplexMatrix,
    time: float,
    steps: int = DEFAULT_STEPS,
    *,
    hbar: float = REDUCED_PLANCK_CONSTANT,
) -> ComplexVector:
    """
    Evolve `initial_state` under `hamiltonian` for `time` using the truncated
    series propagator. The returned state is not renormalized.
    """
    _require_operator_for(initial_state, hamiltonian, "Hamiltonian")
    logger.debug("time_evolve: dim=%d time=%g steps=%s hbar=%g",
                 initial_state.dimension, time, steps, hbar)

    U = propagator(hamiltonian, time, steps, hbar=hbar)
    return U @ initial_state


def _eigen_propagator(decomposition: EigenDecomposition, time: float, hbar: float) -> np.ndarray:
    w = np.array([complex(x) for x in decomposition.eigenvalues], dtype=complex)
    V = decomposition.eigenvector_matrix().to_array()

    condition = np.linalg.cond(V)
    if not np.isfinite(condition) or condition > EIGENVECTOR_CONDITION_LIMIT:
        raise CapabilityNotImplementedError(
            f"Hamiltonian is not diagonalizable: eigenvector basis has condition number {condition:.3g}"
        )

    phases = np.exp(-1j * w * float(time) / hbar)
    return V @ np.diag(phases) @ np.linalg.inv(V)


def time_evolve_eigen(
    initial_state: ComplexVector,
    hamiltonian: ComplexMatrix,
    time: float,
    *,
    solver: Optional[EigenSolver] = None,
    steps: int = DEFAULT_STEPS,
    hbar: float = REDUCED_PLANCK_CONSTANT,
    strict: bool = False,
) -> ComplexVector:
    """
    Evolve via eigen-decomposition: U = V diag(exp(-i w t / hbar)) V^-1.

    Without a working solver, or when the eigenvectors do not form a usable
    basis (a defective Hamiltonian), this falls back to `time_evolve` and emits
    an EigenSolverFallbackWarning, or re-raises CapabilityNotImplementedError
    when strict=True.
    """
    _require_operator_for(initial_state, hamiltonian, "Hamiltonian")
    if not hbar > 0:
        raise ValueError(f"hbar must be positive, got {hbar}")
    if solver is None:
        solver = default_eigen_solver()

    try:
        U = _eigen_propagator(solver.solve(hamiltonian), time, hbar)
    except CapabilityNotImplementedError as exc:
        if strict:
            raise
        logger.debug("time_evolve_eigen: %s; using series with steps=%s", exc, steps)
        warnings.warn(
            f"Eigen-decomposition unavailable ({exc}); falling back to the "
            f"truncated series approximation with steps={steps}",
            EigenSolverFallbackWarning,
            stacklevel=2,
        )
        return time_evolve(initial_state, hamiltonian, time, steps, hbar=hbar)

    return ComplexVector._wrap(U @ initial_state.to_array())


def expectation_value(state: ComplexVector, observable: ComplexMatrix) -> ComplexNumber:
    """
    <state| observable |state> = sum(conj(state[i]) * (observable state)[i]).

    Conjugates the bra once; state.conjugate_transpose().dot(...) would
    conjugate twice and differs for complex states.

    Returned as a complex scalar; Hermiticity of `observable` is not checked,
    so the imaginary part is for the caller to inspect or drop.
    """
    _require_operator_for(state, observable, "Observable")
    return state.dot(observable @ state)


def probability_of_measuring_state(measured_state: ComplexVector, initial_state: ComplexVector) -> float:
    """
    |<measured|initial>|^2. Inputs are not normalized here, so the value is
    only a probability when both states already have unit norm.
    """
    if measured_state.dimension != initial_state.dimension:
        raise DimensionMismatchError(
            "States must have the same dimension, "
            f"got {measured_state.dimension} and {initial_state.dimension}"
        )
    amplitude = measured_state.dot(initial_state)
    return amplitude.magnitude * amplitude.magnitude


def normalize_state(state: ComplexVector) -> None:
    state.normalize()


def commutator(a: ComplexMatrix, b: ComplexMatrix) -> ComplexMatrix:
    """[A, B] = AB - BA"""
    _require_square_pair(a, b, "commutator")
    return (a @ b) - (b @ a)


def anti_commutator(a: ComplexMatrix, b: ComplexMatrix) -> ComplexMatrix:
    """{A, B} = AB + BA"""
    _require_square_pair(a, b, "anti-commutator")
    return (a @ b) + (b @ a)


def solve_eigenvalue_problem(
    matrix: ComplexMatrix,
    *,
    solver: Optional[EigenSolver] = None,
) -> EigenDecomposition:
    if not matrix.is_square:
        raise DimensionMismatchError(f"Eigenvalue problem needs a square matrix, got {matrix.shape}")
    if solver is None:
        solver = default_eigen_solver()
    return solver.solve(matrix)


def unitarity_error(matrix: ComplexMatrix) -> float:
    """Largest entry of |U^dagger U - I|; 0 for an exactly unitary matrix."""
    if not matrix.is_square:
        raise DimensionMismatchError(f"Unitarity needs a square matrix, got {matrix.shape}")
    U = matrix.to_array()
    drift = U.conj().T @ U - np.eye(matrix.rows, dtype=complex)
    return float(np.max(np.abs(drift)))
