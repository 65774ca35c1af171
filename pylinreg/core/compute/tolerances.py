"""
Numeric thresholds and tolerance tiers.

ZERO_VARIANCE_TOL is the magnitude cutoff below which a variance-type
denominator is treated as zero. It is a heuristic, not a statistical
test: data on a very large or very small scale can make it too loose or
too strict, so every operation that applies it accepts a ``tol`` override.

Tolerance tiers describe comparison precision for the test suite.
"""

from dataclasses import dataclass


# Applied to n·Σx² − (Σx)² when fitting and to Σ(y − ȳ)² for R².
ZERO_VARIANCE_TOL = 1e-12


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form double precision: exact linear data reproduces to ~1 ulp
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, closed-form sums',
)

# Large-magnitude x, where n·Σx² − (Σx)² loses digits to cancellation
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, x far from the origin',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
