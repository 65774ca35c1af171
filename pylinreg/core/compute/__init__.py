"""
Shared compute infrastructure for pylinreg.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero-variance threshold and comparison tolerance tiers
"""

from pylinreg.core.compute.timing import Timer, timed
from pylinreg.core.compute.tolerances import (
    ZERO_VARIANCE_TOL,
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ZERO_VARIANCE_TOL",
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
