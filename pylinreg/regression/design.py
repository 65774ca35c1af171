"""
Regression Design.

Design wraps a validated pair of one-dimensional samples: x (independent)
and y (dependent). Everything downstream trusts it.

Construction:
    RegressionDesign.from_arrays(x, y)   # paired samples
    RegressionDesign.from_series(y)      # x = 0, 1, ..., n-1
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_not_empty,
    check_finite,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Simple regression data specification.

    Holds x and y as float64 vectors of equal, non-zero length with
    only finite values. Immutable after construction.
    """
    _x: NDArray[np.float64]
    _y: NDArray[np.float64]
    _n: int
    _is_series: bool = False

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """Build design from paired samples."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr, is_series=False)

    @classmethod
    def from_series(cls, y: ArrayLike) -> RegressionDesign:
        """
        Build design from a series, with x at the positional indices.

        A one-point series builds fine here; the fit rejects it for zero
        x-variance.
        """
        y_arr = check_array(y, 'y')
        check_1d(y_arr, 'y')
        check_not_empty(y_arr, 'y')
        x_arr = np.arange(y_arr.shape[0], dtype=np.float64)
        return cls._build(x_arr, y_arr, is_series=True)

    @classmethod
    def _build(
        cls,
        x: NDArray[np.float64],
        y: NDArray[np.float64],
        is_series: bool,
    ) -> RegressionDesign:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_not_empty(x, 'x')
        check_finite(x, 'x')
        check_finite(y, 'y')

        return cls(_x=x, _y=y, _n=x.shape[0], _is_series=is_series)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.float64]:
        """Independent samples (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.float64]:
        """Dependent samples (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def is_series(self) -> bool:
        """Whether x was synthesized from positional indices."""
        return self._is_series

    @property
    def x_mean(self) -> float:
        return float(np.sum(self._x)) / self._n

    @property
    def y_mean(self) -> float:
        return float(np.sum(self._y)) / self._n

    def __repr__(self) -> str:
        kind = "series" if self._is_series else "paired"
        return f"RegressionDesign(n={self._n}, {kind})"


def as_prediction_input(values: ArrayLike, name: str = 'xs') -> NDArray[np.float64]:
    """
    Convert a batch of x values for prediction.

    Unlike a design, an empty batch is valid and values are not checked
    for finiteness: prediction has no failure conditions of its own.
    """
    arr = check_array(values, name)
    check_1d(arr, name)
    return arr


def forecast_positions(n: int, k: int) -> NDArray[np.float64]:
    """x-coordinates n, n+1, ..., n+k-1 following a series of length n."""
    return np.arange(n, n + k, dtype=np.float64)
