"""
Simple linear regression.

Ordinary least squares fit of y = slope·x + intercept over one-dimensional
data, with prediction, scoring and series forecasting.

Public API:
    fit_xy(x, y) / fit_series(y)  -> LinearModel
    predict / predict_many        evaluate the line
    mse / r_squared               score against observed pairs
    forecast_from_series(y, k)    extrapolate a series
    fit(x, y)                     -> LinearSolution with diagnostics

Example:
    >>> from pylinreg.regression import fit_xy, forecast_from_series
    >>> model = fit_xy([1, 2, 3, 4], [2, 4, 6, 8])
    >>> model.predict(5.0)
    10.0
    >>> forecast_from_series([1, 2, 3], 2)
    array([4., 5.])
"""

from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearModel, LinearParams, LinearSolution
from pylinreg.regression.solvers import (
    fit_xy,
    fit_series,
    predict,
    predict_many,
    mse,
    r_squared,
    forecast_from_series,
    fit,
)

__all__ = [
    "fit_xy",
    "fit_series",
    "predict",
    "predict_many",
    "mse",
    "r_squared",
    "forecast_from_series",
    "fit",
    "RegressionDesign",
    "LinearModel",
    "LinearParams",
    "LinearSolution",
]
