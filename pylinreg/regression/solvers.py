"""
Solver dispatch for simple linear regression.

Public API:
    fit_xy(x, y)                  -> LinearModel
    fit_series(y)                 -> LinearModel
    predict(model, x)             -> float
    predict_many(model, xs)       -> ndarray
    mse(model, x, y)              -> float
    r_squared(model, x, y)        -> float
    forecast_from_series(y, k)    -> ndarray
    fit(x, y=None)                -> LinearSolution (full diagnostics)
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.compute.tolerances import ZERO_VARIANCE_TOL
from pylinreg.core.exceptions import ValidationError
from pylinreg.core.validation import check_horizon
from pylinreg.regression.design import RegressionDesign, forecast_positions
from pylinreg.regression.solution import LinearModel, LinearSolution
from pylinreg.regression.backends.cpu import CPUSumsBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def fit_xy(x: ArrayLike, y: ArrayLike, *, tol: float = ZERO_VARIANCE_TOL) -> LinearModel:
    """
    Fit a line to paired samples by ordinary least squares.

    Args:
        x: Independent samples
        y: Dependent samples, same length as x
        tol: Zero-variance threshold for n·Σx² − (Σx)²

    Returns:
        LinearModel minimizing Σ(y_i − slope·x_i − intercept)²

    Raises:
        LengthMismatchError: If x and y differ in length
        EmptyInputError: If x and y are empty
        ZeroXVarianceError: If all x are (effectively) identical

    Example:
        >>> model = fit_xy([1, 2, 3, 4], [2, 4, 6, 8])
        >>> model.slope, model.intercept
        (2.0, 0.0)
    """
    design = RegressionDesign.from_arrays(x, y)
    return CPUSumsBackend(tol=tol).solve(design).params.model


def fit_series(y: ArrayLike, *, tol: float = ZERO_VARIANCE_TOL) -> LinearModel:
    """
    Fit a line to a series, taking x as the positions 0, 1, ..., n-1.

    Identical to fit_xy(range(len(y)), y). A single-point series is
    rejected with ZeroXVarianceError: one point does not determine a slope.

    Raises:
        EmptyInputError: If y is empty
        ZeroXVarianceError: If y has a single element
    """
    design = RegressionDesign.from_series(y)
    return CPUSumsBackend(tol=tol).solve(design).params.model


def predict(model: LinearModel, x: float) -> float:
    """Evaluate slope·x + intercept."""
    return model.predict(x)


def predict_many(model: LinearModel, xs: ArrayLike) -> NDArray[np.float64]:
    """Evaluate the line at every x; output matches xs in length and order."""
    return model.predict_many(xs)


def mse(model: LinearModel, x: ArrayLike, y: ArrayLike) -> float:
    """Mean squared error of model against observed (x, y) pairs."""
    return model.mse(x, y)


def r_squared(
    model: LinearModel,
    x: ArrayLike,
    y: ArrayLike,
    *,
    tol: float = ZERO_VARIANCE_TOL,
) -> float:
    """
    Coefficient of determination of model against observed (x, y) pairs.

    Negative when the line does worse than predicting the mean of y.

    Raises:
        LengthMismatchError: If x and y differ in length
        EmptyInputError: If x and y are empty
        ZeroYVarianceError: If Σ(y − ȳ)² < tol
    """
    return model.r_squared(x, y, tol=tol)


def forecast_from_series(
    y: ArrayLike,
    k: int,
    *,
    tol: float = ZERO_VARIANCE_TOL,
) -> NDArray[np.float64]:
    """
    Fit a series and extrapolate its next k points.

    Predictions are taken at x = n, n+1, ..., n+k-1 where n = len(y).
    k = 0 returns an empty array.

    Raises:
        ValidationError: If k is not a non-negative integer
        EmptyInputError, ZeroXVarianceError: From fit_series, unchanged
    """
    k = check_horizon(k, 'k')
    design = RegressionDesign.from_series(y)
    model = CPUSumsBackend(tol=tol).solve(design).params.model
    return model.predict_many(forecast_positions(design.n, k))


def fit(
    x: ArrayLike,
    y: ArrayLike | None = None,
    *,
    tol: float = ZERO_VARIANCE_TOL,
    backend: BackendChoice = 'auto',
) -> LinearSolution:
    """
    Fit a simple linear regression with full diagnostics.

    With y omitted, x is taken as the series to fit against its positions
    (the fit_series form) and the solution supports forecast().

    Args:
        x: Independent samples, or the series when y is None
        y: Dependent samples
        tol: Zero-variance threshold
        backend: 'auto' or 'cpu'

    Returns:
        LinearSolution with the line, residuals, R², standard errors,
        timing and summary()

    Example:
        >>> result = fit([1, 2, 3, 4], [2.1, 3.9, 6.2, 7.8])
        >>> print(result.summary())
    """
    if y is None:
        design = RegressionDesign.from_series(x)
    else:
        design = RegressionDesign.from_arrays(x, y)

    backend_impl = _get_backend(backend, tol)
    result = backend_impl.solve(design)
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, tol: float) -> CPUSumsBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUSumsBackend(tol=tol)
    raise ValidationError(f"Unknown backend: {choice!r}")
