"""
Regression solution types.

Contains the fitted line value, the backend parameter payload and the
user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pylinreg.core.compute.tolerances import ZERO_VARIANCE_TOL
from pylinreg.core.exceptions import ValidationError
from pylinreg.core.result import Result
from pylinreg.core.validation import check_finite_scalar, check_horizon
from pylinreg.regression import _metrics
from pylinreg.regression.design import (
    RegressionDesign,
    as_prediction_input,
    forecast_positions,
)


@dataclass(frozen=True)
class LinearModel:
    """
    A fitted line y = slope·x + intercept.

    Immutable value: two models are equal when both fields are equal.
    Both fields are finite Python floats; construction rejects anything else.
    """
    slope: float
    intercept: float

    def __post_init__(self) -> None:
        # Frozen, so normalize through object.__setattr__
        object.__setattr__(self, 'slope', check_finite_scalar(self.slope, 'slope'))
        object.__setattr__(self, 'intercept', check_finite_scalar(self.intercept, 'intercept'))

    def predict(self, x: float) -> float:
        """Evaluate the line at a single x."""
        return float(self.slope * float(x) + self.intercept)

    def predict_many(self, xs: ArrayLike) -> NDArray[np.float64]:
        """Evaluate the line at each x, preserving length and order."""
        return _metrics.fitted(self.slope, self.intercept, as_prediction_input(xs))

    def mse(self, x: ArrayLike, y: ArrayLike) -> float:
        """
        Mean squared error against observed pairs.

        Raises:
            LengthMismatchError: If x and y differ in length
            EmptyInputError: If x and y are empty
            NumericalError: If the squared residuals overflow
        """
        design = RegressionDesign.from_arrays(x, y)
        return _metrics.mean_squared_error(self.slope, self.intercept, design)

    def r_squared(self, x: ArrayLike, y: ArrayLike, *, tol: float = ZERO_VARIANCE_TOL) -> float:
        """
        Coefficient of determination against observed pairs.

        Raises:
            LengthMismatchError: If x and y differ in length
            EmptyInputError: If x and y are empty
            ZeroYVarianceError: If y has no spread
            NumericalError: If the sums of squares overflow
        """
        design = RegressionDesign.from_arrays(x, y)
        return _metrics.coefficient_of_determination(
            self.slope, self.intercept, design, tol=tol
        )

    def __repr__(self) -> str:
        return f"LinearModel(slope={self.slope!r}, intercept={self.intercept!r})"


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends.
    """
    model: LinearModel
    denominator: float
    fitted_values: NDArray[np.float64]
    residuals: NDArray[np.float64]
    rss: float
    tss: float
    df_residual: int


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides convenient accessors for the
    fitted line, goodness of fit and coefficient inference.
    """
    _result: Result[LinearParams]
    _design: RegressionDesign

    # Cached computations
    _standard_errors: NDArray[np.float64] | None = None

    @property
    def model(self) -> LinearModel:
        return self._result.params.model

    @property
    def slope(self) -> float:
        return self.model.slope

    @property
    def intercept(self) -> float:
        return self.model.intercept

    @property
    def coefficients(self) -> NDArray[np.float64]:
        """[intercept, slope], in R's coefficient order."""
        return np.array([self.intercept, self.slope], dtype=np.float64)

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def fitted_values(self) -> NDArray[np.float64]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.float64]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def mse(self) -> float:
        """
        In-sample mean squared error.

        Raises:
            NumericalError: If the squared residuals overflow
        """
        return _metrics.mean_squared_error(self.slope, self.intercept, self._design)

    @property
    def tolerance(self) -> float:
        return self._result.info['tolerance']

    @property
    def r_squared(self) -> float:
        """
        In-sample R².

        Raises:
            ZeroYVarianceError: If the training y has no spread
            NumericalError: If the sums of squares overflow
        """
        return _metrics.coefficient_of_determination(
            self.slope, self.intercept, self._design, tol=self.tolerance
        )

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def residual_std_error(self) -> float:
        df = self.df_residual
        if df <= 0:
            return np.nan
        return float(np.sqrt(self.rss / df))

    @property
    def standard_errors(self) -> NDArray[np.float64]:
        """Standard errors of [intercept, slope]; NaN when n ≤ 2."""
        if self._standard_errors is None:
            self._standard_errors = _metrics.coefficient_standard_errors(
                self._design, self.rss
            )
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.float64]:
        """t-statistics for [intercept, slope]."""
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / self.standard_errors
        # Exact fits give infinite t, reported as NaN
        return np.where(np.isfinite(t), t, np.nan)

    @property
    def p_values(self) -> NDArray[np.float64]:
        """Two-sided p-values from Student's t with n − 2 degrees of freedom."""
        df = self.df_residual
        if df <= 0:
            return np.full(2, np.nan, dtype=np.float64)
        t = self.t_statistics
        return 2.0 * sp_stats.t.sf(np.abs(t), df)

    def predict(self, x: float) -> float:
        return self.model.predict(x)

    def predict_many(self, xs: ArrayLike) -> NDArray[np.float64]:
        return self.model.predict_many(xs)

    def forecast(self, k: int) -> NDArray[np.float64]:
        """
        Extrapolate the next k points after the fitted series.

        Raises:
            ValidationError: If the fit was not a series fit, or k is not a
                non-negative integer
        """
        if not self._design.is_series:
            raise ValidationError(
                "forecast: requires a series fit (fit(y) without x)"
            )
        k = check_horizon(k, 'k')
        return self.model.predict_many(forecast_positions(self.n, k))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style summary output."""
        if not (np.isfinite(self.tss) and np.isfinite(self.rss)):
            r2_str = "NA (sums of squares overflow)"
        elif abs(self.tss) < self.tolerance:
            r2_str = "NA (y has zero variance)"
        else:
            r2_str = f"{self.r_squared:.6f}"

        rse = self.residual_std_error
        rse_str = f"{rse:.6f}" if not np.isnan(rse) else "NA"

        lines = [
            "Simple Linear Regression Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"R-squared: {r2_str}",
            f"Mean Squared Error: {self.rss / self.n:.6g}",
            f"Residual Std. Error: {rse_str} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 60,
        ]

        rows = zip(
            ('(Intercept)', 'x'),
            self.coefficients,
            self.standard_errors,
            self.t_statistics,
            self.p_values,
        )
        for label, coef, se, t, pv in rows:
            se_str = f"{se:12.6f}" if not np.isnan(se) else "          NA"
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            pv_str = f"{pv:10.4g}" if not np.isnan(pv) else "        NA"
            lines.append(f"{label:<12} {coef:14.6f} {se_str} {t_str} {pv_str}")

        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self.n}, slope={self.slope:.6g}, "
            f"intercept={self.intercept:.6g})"
        )
