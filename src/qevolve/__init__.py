"""
qevolve: dense complex linear algebra and quantum state time evolution.
"""
import logging

from .constants import (
    BOLTZMANN_CONSTANT,
    DEFAULT_STEPS,
    ELECTRON_MASS,
    ELEMENTARY_CHARGE,
    JOULES_PER_ELECTRON_VOLT,
    PLANCK_CONSTANT,
    REDUCED_PLANCK_CONSTANT,
    SPEED_OF_LIGHT,
    VACUUM_PERMEABILITY,
    VACUUM_PERMITTIVITY,
)
from .eigen import (
    EigenDecomposition,
    EigenSolver,
    NumpyEigenSolver,
    UnavailableEigenSolver,
    default_eigen_solver,
)
from .errors import (
    CapabilityNotImplementedError,
    ConstructionError,
    DimensionMismatchError,
    DivideByZeroError,
    EigenSolverFallbackWarning,
    IndexOutOfRangeError,
    QEvolveError,
)
from .evolution import (
    anti_commutator,
    commutator,
    expectation_value,
    normalize_state,
    probability_of_measuring_state,
    propagator,
    solve_eigenvalue_problem,
    time_evolve,
    time_evolve_eigen,
    unitarity_error,
)
from .matrix import ComplexMatrix
from .scalar import I, ONE, ZERO, ComplexNumber
from .vector import ComplexVector
from . import operators

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # values
    "ComplexNumber", "ZERO", "ONE", "I",
    "ComplexVector", "ComplexMatrix",

    # engine
    "time_evolve", "time_evolve_eigen", "propagator",
    "expectation_value", "probability_of_measuring_state", "normalize_state",
    "commutator", "anti_commutator", "solve_eigenvalue_problem", "unitarity_error",

    # standard operators submodule
    "operators",

    # eigen capability
    "EigenSolver", "UnavailableEigenSolver", "NumpyEigenSolver",
    "EigenDecomposition", "default_eigen_solver",

    # errors
    "QEvolveError", "ConstructionError", "DimensionMismatchError",
    "DivideByZeroError", "IndexOutOfRangeError", "CapabilityNotImplementedError",
    "EigenSolverFallbackWarning",

    # constants
    "PLANCK_CONSTANT", "REDUCED_PLANCK_CONSTANT", "ELECTRON_MASS",
    "ELEMENTARY_CHARGE", "SPEED_OF_LIGHT", "BOLTZMANN_CONSTANT",
    "VACUUM_PERMITTIVITY", "VACUUM_PERMEABILITY", "JOULES_PER_ELECTRON_VOLT",
    "DEFAULT_STEPS",
]
