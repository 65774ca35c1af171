"""
Core infrastructure for pylinreg.

Shared abstractions and utilities used by the regression module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numeric tolerances
"""

from pylinreg.core.result import Result
from pylinreg.core.exceptions import (
    PyLinRegError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    EmptyInputError,
    NumericalError,
    ZeroXVarianceError,
    ZeroYVarianceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLinRegError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "EmptyInputError",
    "NumericalError",
    "ZeroXVarianceError",
    "ZeroYVarianceError",
]
