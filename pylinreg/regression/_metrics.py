"""
Goodness-of-fit computations for a fitted line.

All functions take the line as (slope, intercept) and a validated
RegressionDesign, so they apply equally to a freshly fitted model and to
a model scored against held-out data.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pylinreg.core.compute.tolerances import ZERO_VARIANCE_TOL
from pylinreg.core.exceptions import NumericalError, ZeroYVarianceError
from pylinreg.core.validation import check_tolerance
from pylinreg.regression.design import RegressionDesign


def fitted(slope: float, intercept: float, x: NDArray[np.float64]) -> NDArray[np.float64]:
    """Evaluate slope·x + intercept elementwise."""
    return slope * x + intercept


def residuals(slope: float, intercept: float, design: RegressionDesign) -> NDArray[np.float64]:
    """Observed minus predicted, y_i − (slope·x_i + intercept)."""
    return design.y - fitted(slope, intercept, design.x)


def sum_of_squares(v: NDArray[np.float64]) -> float:
    """Σv². Overflows to inf silently; scoring callers check the result."""
    with np.errstate(over='ignore', invalid='ignore'):
        return float(v @ v)


def residual_sum_of_squares(slope: float, intercept: float, design: RegressionDesign) -> float:
    """SS_res = Σ(y_i − ŷ_i)²."""
    with np.errstate(over='ignore', invalid='ignore'):
        r = residuals(slope, intercept, design)
    return sum_of_squares(r)


def total_sum_of_squares(design: RegressionDesign) -> float:
    """SS_tot = Σ(y_i − ȳ)²."""
    with np.errstate(over='ignore', invalid='ignore'):
        centered = design.y - design.y_mean
    return sum_of_squares(centered)


def _check_finite_score(value: float, name: str) -> float:
    if not np.isfinite(value):
        raise NumericalError(
            f"{name} is not finite ({value}); input magnitudes overflow "
            f"double precision"
        )
    return value


def mean_squared_error(slope: float, intercept: float, design: RegressionDesign) -> float:
    """
    Mean of squared residuals.

    Raises:
        NumericalError: If the squared residuals overflow
    """
    ss_res = residual_sum_of_squares(slope, intercept, design)
    return _check_finite_score(ss_res / design.n, 'MSE')


def coefficient_of_determination(
    slope: float,
    intercept: float,
    design: RegressionDesign,
    *,
    tol: float = ZERO_VARIANCE_TOL,
) -> float:
    """
    R² = 1 − SS_res / SS_tot.

    May be negative when the line fits worse than the mean of y.

    Raises:
        ZeroYVarianceError: If |SS_tot| < tol, where R² is the 0/0 form
        NumericalError: If SS_tot, SS_res or their ratio overflow
    """
    tol = check_tolerance(tol, 'tol')
    ss_tot = _check_finite_score(total_sum_of_squares(design), 'SS_tot')
    if abs(ss_tot) < tol:
        raise ZeroYVarianceError(
            f"y has zero variance (SS_tot={ss_tot:.3e} < {tol:.1e}), "
            f"R-squared is undefined",
            ss_tot=ss_tot,
            tolerance=tol,
        )
    ss_res = _check_finite_score(residual_sum_of_squares(slope, intercept, design), 'SS_res')
    return _check_finite_score(1.0 - ss_res / ss_tot, 'R-squared')


def coefficient_standard_errors(design: RegressionDesign, rss: float) -> NDArray[np.float64]:
    """
    Standard errors of [intercept, slope].

    With σ² = RSS / (n − 2) and Sxx = Σ(x − x̄)²:
        SE(slope) = sqrt(σ² / Sxx)
        SE(intercept) = sqrt(σ² (1/n + x̄² / Sxx))

    Both are NaN when there are no residual degrees of freedom (n ≤ 2).
    """
    n = design.n
    df = n - 2
    if df <= 0:
        return np.full(2, np.nan, dtype=np.float64)

    sigma_sq = rss / df
    x_mean = design.x_mean
    centered = design.x - x_mean
    sxx = float(centered @ centered)

    se_slope = np.sqrt(sigma_sq / sxx)
    se_intercept = np.sqrt(sigma_sq * (1.0 / n + x_mean * x_mean / sxx))
    return np.array([se_intercept, se_slope], dtype=np.float64)
