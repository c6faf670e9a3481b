from __future__ import annotations


class QEvolveError(Exception):
    pass


class ConstructionError(QEvolveError, ValueError):
    pass


class DimensionMismatchError(QEvolveError, ValueError):
    pass


class DivideByZeroError(QEvolveError, ZeroDivisionError):
    pass


class IndexOutOfRangeError(QEvolveError, IndexError):
    pass


class CapabilityNotImplementedError(QEvolveError, NotImplementedError):
    pass


class EigenSolverFallbackWarning(RuntimeWarning):
    """Emitted when eigen-based evolution falls back to the truncated series."""
