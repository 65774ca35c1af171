"""
Exception hierarchy for pylinreg.

All exceptions inherit from PyLinRegError to allow catching any
library-specific error. Each failure kind has its own class so callers
can branch on the cause with ``except`` rather than parsing messages.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinRegError(Exception):
    """Base exception for all pylinreg errors."""
    pass


class ValidationError(PyLinRegError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not one-dimensional.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Paired sequences differ in length.

    Attributes:
        names: Parameter names of the paired inputs
        lengths: Their lengths, in the same order
    """

    def __init__(
        self,
        message: str,
        names: tuple[str, ...] | None = None,
        lengths: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.names = names
        self.lengths = lengths


class EmptyInputError(ValidationError):
    """
    A required sequence has zero elements.

    Attributes:
        name: Parameter name of the empty input
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class NumericalError(PyLinRegError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ZeroXVarianceError(NumericalError):
    """
    x-values have no spread, so the slope is undefined.

    Raised when |n·Σx² − (Σx)²| falls below the zero-variance tolerance.

    Attributes:
        denominator: The computed denominator n·Σx² − (Σx)²
        tolerance: The threshold it was compared against
    """

    def __init__(
        self,
        message: str,
        denominator: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.denominator = denominator
        self.tolerance = tolerance


class ZeroYVarianceError(NumericalError):
    """
    y-values have no spread, so R² is undefined (0/0).

    Attributes:
        ss_tot: Total sum of squares Σ(y − ȳ)²
        tolerance: The threshold it was compared against
    """

    def __init__(
        self,
        message: str,
        ss_tot: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.ss_tot = ss_tot
        self.tolerance = tolerance
