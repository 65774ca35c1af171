"""
CPU backend for simple linear regression.

Closed-form OLS from the accumulated sums Σx, Σy, Σxy, Σx² and n.
"""

from typing import Any
import numpy as np

from pylinreg.core.compute.timing import Timer
from pylinreg.core.compute.tolerances import ZERO_VARIANCE_TOL
from pylinreg.core.exceptions import NumericalError, ZeroXVarianceError
from pylinreg.core.result import Result
from pylinreg.core.validation import check_tolerance
from pylinreg.regression import _metrics
from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearModel, LinearParams


class CPUSumsBackend:
    """
    CPU backend solving the 2x2 normal equations in closed form.

    Algorithm:
        denom = n·Σx² − (Σx)²
        slope = (n·Σxy − Σx·Σy) / denom
        intercept = (Σy − slope·Σx) / n

    Accumulators are local to each solve() call, so one instance can be
    shared freely.
    """

    def __init__(self, tol: float = ZERO_VARIANCE_TOL):
        self.tol = check_tolerance(tol, 'tol')

    @property
    def name(self) -> str:
        return 'cpu_sums'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Fit the line.

        Args:
            design: Validated regression design

        Returns:
            Result containing LinearParams

        Raises:
            ZeroXVarianceError: If |denom| < tol (x has no spread)
            NumericalError: If the sums overflow to a non-finite line
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n

        # === Accumulate ===
        with timer.section('sums'), np.errstate(over='ignore', invalid='ignore'):
            n_f = float(n)
            sum_x = float(np.sum(x))
            sum_y = float(np.sum(y))
            sum_xy = float(np.sum(x * y))
            sum_x2 = float(np.sum(x * x))

        # === Solve ===
        with timer.section('solve'):
            denom = n_f * sum_x2 - sum_x * sum_x
            if abs(denom) < self.tol:
                raise ZeroXVarianceError(
                    f"x has zero variance (|n*sum(x^2) - sum(x)^2| = {abs(denom):.3e} "
                    f"< {self.tol:.1e}), slope is undefined",
                    denominator=denom,
                    tolerance=self.tol,
                )
            slope = (n_f * sum_xy - sum_x * sum_y) / denom
            intercept = (sum_y - slope * sum_x) / n_f

            if not (np.isfinite(slope) and np.isfinite(intercept)):
                raise NumericalError(
                    f"non-finite fit (slope={slope}, intercept={intercept}); "
                    f"input magnitudes overflow double precision"
                )

        # === Residuals and Summary Statistics ===
        # Extreme magnitudes may overflow here; scores report that as NumericalError
        with timer.section('residuals'), np.errstate(over='ignore', invalid='ignore'):
            fitted_values = _metrics.fitted(slope, intercept, x)
            residuals = y - fitted_values
            rss = _metrics.sum_of_squares(residuals)
            tss = _metrics.total_sum_of_squares(design)

        timer.stop()

        warnings: list[str] = []
        if n == 2:
            warnings.append(
                "only 2 observations: the line passes through both points, "
                "no residual degrees of freedom"
            )

        params = LinearParams(
            model=LinearModel(slope=slope, intercept=intercept),
            denominator=denom,
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=tss,
            df_residual=n - 2,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations_sums',
            'n': n,
            'denominator': denom,
            'tolerance': self.tol,
            'series': design.is_series,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
