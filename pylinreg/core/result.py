"""
Generic result container for pylinreg computations.

The Result class provides a standardized envelope that fit results use.
This enables shared tooling for timing, reproducibility and diagnostics
while allowing the payload to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, n, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Library versions that produced a result."""
    from pylinreg import __version__
    return {
        'pylinreg_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (slope, intercept, residuals, etc.)
        info: Structured metadata (method, sample size, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions, auto-filled unless given explicitly

    Examples:
        >>> Result(
        ...     params=LinearParams(model=model, ...),
        ...     info={'method': 'normal_equations_sums', 'n': 4},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_sums'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
