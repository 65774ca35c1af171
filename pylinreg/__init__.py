"""
pylinreg: simple linear regression for Python.

Closed-form ordinary least squares over one-dimensional data, with
prediction, mean squared error, R² and short-horizon series forecasts.

Submodules:
    regression: Fitting, prediction, scoring and forecasting
    core: Exceptions, validation, result envelope, tolerances
"""

__version__ = "0.1.0"

from pylinreg import regression
from pylinreg.regression import (
    fit_xy,
    fit_series,
    predict,
    predict_many,
    mse,
    r_squared,
    forecast_from_series,
    fit,
    LinearModel,
)

__all__ = [
    "__version__",
    "regression",
    "fit_xy",
    "fit_series",
    "predict",
    "predict_many",
    "mse",
    "r_squared",
    "forecast_from_series",
    "fit",
    "LinearModel",
]
