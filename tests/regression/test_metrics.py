"""
Tests for mse() and r_squared().
"""

import warnings

import numpy as np
import pytest

from pylinreg.core.exceptions import (
    EmptyInputError,
    LengthMismatchError,
    NumericalError,
    ValidationError,
    ZeroYVarianceError,
)
from pylinreg.regression import LinearModel, fit_xy, mse, r_squared


# ═══════════════════════════════════════════════════════════════════════
# Mean squared error
# ═══════════════════════════════════════════════════════════════════════


class TestMSE:

    def test_perfect_fit(self, exact_line_data):
        x, y = exact_line_data
        model = fit_xy(x, y)
        assert mse(model, x, y) < 1e-12

    def test_matches_definition(self, noisy_line_data):
        x, y, _, _ = noisy_line_data
        model = fit_xy(x, y)
        expected = np.mean((y - (model.slope * x + model.intercept)) ** 2)
        assert mse(model, x, y) == pytest.approx(expected, rel=1e-12)

    def test_known_value(self):
        model = LinearModel(slope=1.0, intercept=0.0)
        # residuals 1, -1, 2
        assert mse(model, [0, 1, 2], [1, 0, 4]) == pytest.approx(2.0)

    def test_held_out_data(self):
        model = fit_xy([0, 1, 2], [0, 1, 2])
        assert mse(model, [10, 20], [10, 20]) == pytest.approx(0.0, abs=1e-20)

    def test_constant_y_is_fine(self):
        """No degeneracy case: flat y still has an MSE."""
        model = LinearModel(slope=0.0, intercept=1.0)
        assert mse(model, [1, 2, 3], [3, 3, 3]) == pytest.approx(4.0)

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            mse(LinearModel(1.0, 0.0), [1, 2], [1, 2, 3])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            mse(LinearModel(1.0, 0.0), [], [])

    def test_method_agrees(self, exact_line_data):
        x, y = exact_line_data
        model = LinearModel(1.9, 0.3)
        assert model.mse(x, y) == mse(model, x, y)

    def test_overflow_raises(self):
        model = LinearModel(slope=0.0, intercept=0.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with pytest.raises(NumericalError, match="MSE"):
                mse(model, [0, 1], [1e200, -1e200])


# ═══════════════════════════════════════════════════════════════════════
# Coefficient of determination
# ═══════════════════════════════════════════════════════════════════════


class TestRSquared:

    def test_perfect_fit(self, exact_line_data):
        x, y = exact_line_data
        model = fit_xy(x, y)
        assert abs(r_squared(model, x, y) - 1.0) < 1e-12

    def test_in_unit_interval_for_training_fit(self, noisy_line_data):
        x, y, _, _ = noisy_line_data
        model = fit_xy(x, y)
        r2 = r_squared(model, x, y)
        assert 0.0 <= r2 <= 1.0
        assert r2 > 0.99

    def test_matches_correlation_squared(self, rng):
        """For the in-sample OLS line, R² equals Pearson r²."""
        x = rng.standard_normal(100)
        y = 0.3 * x + rng.standard_normal(100)
        model = fit_xy(x, y)
        r = np.corrcoef(x, y)[0, 1]
        assert r_squared(model, x, y) == pytest.approx(r * r, rel=1e-10)

    def test_negative_for_bad_model(self):
        model = fit_xy([0, 1, 2, 3], [0, 10, 20, 30])
        r2 = r_squared(model, [0, 1, 2, 3], [5, -5, 5, -5])
        assert r2 < 0.0
        assert r2 == pytest.approx(-16.0)

    def test_mean_model_scores_zero(self):
        model = LinearModel(slope=0.0, intercept=2.0)
        assert r_squared(model, [0, 1, 2], [1, 2, 3]) == pytest.approx(0.0)

    def test_zero_y_variance(self):
        model = fit_xy([1, 2, 3], [1, 2, 3])
        with pytest.raises(ZeroYVarianceError) as exc_info:
            r_squared(model, [1, 2, 3], [3, 3, 3])
        assert exc_info.value.ss_tot == 0.0

    def test_zero_y_variance_regardless_of_x(self):
        model = LinearModel(slope=1.0, intercept=0.0)
        with pytest.raises(ZeroYVarianceError):
            r_squared(model, [5, 5, 5], [3, 3, 3])

    def test_tolerance_override(self):
        model = LinearModel(slope=0.0, intercept=1.0)
        y = [1.0, 1.0 + 1e-7, 1.0]
        with pytest.raises(ZeroYVarianceError):
            r_squared(model, [0, 1, 2], y)
        r2 = r_squared(model, [0, 1, 2], y, tol=1e-20)
        assert np.isfinite(r2)

    def test_invalid_tolerance(self):
        with pytest.raises(ValidationError, match="tol"):
            r_squared(LinearModel(1.0, 0.0), [0, 1], [0, 1], tol=-1.0)

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            r_squared(LinearModel(1.0, 0.0), [1, 2, 3], [1, 2])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            r_squared(LinearModel(1.0, 0.0), [], [])

    def test_method_agrees(self, noisy_line_data):
        x, y, _, _ = noisy_line_data
        model = LinearModel(1.4, -2.9)
        assert model.r_squared(x, y) == r_squared(model, x, y)

    def test_overflowing_total_sum_of_squares(self):
        model = LinearModel(slope=0.0, intercept=0.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with pytest.raises(NumericalError, match="SS_tot"):
                r_squared(model, [0, 1, 2], [1e200, -1e200, 0.0])

    def test_overflowing_residual_sum_of_squares(self):
        model = LinearModel(slope=0.0, intercept=1e200)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with pytest.raises(NumericalError, match="SS_res"):
                r_squared(model, [0, 1, 2], [1.0, 2.0, 3.0])
