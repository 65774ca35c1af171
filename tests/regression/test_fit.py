"""
Tests for fit_xy() and fit_series().

Covers the closed-form estimates, determinism, the series/paired
equivalence and every failure kind.
"""

import numpy as np
import pytest

from pylinreg.core.compute.tolerances import CPU_FP64, ZERO_VARIANCE_TOL, select_tolerance
from pylinreg.core.exceptions import (
    EmptyInputError,
    LengthMismatchError,
    NumericalError,
    ValidationError,
    ZeroXVarianceError,
)
from pylinreg.regression import LinearModel, fit_series, fit_xy


class TestFitXY:
    """Paired-form fitting."""

    def test_exact_line(self, exact_line_data):
        x, y = exact_line_data
        model = fit_xy(x, y)
        assert isinstance(model, LinearModel)
        assert abs(model.slope - 2.0) < 1e-12
        assert abs(model.intercept - 0.0) < 1e-12
        assert abs(model.predict(5.0) - 10.0) < 1e-12

    def test_accepts_lists(self):
        model = fit_xy([1, 2, 3, 4], [2, 4, 6, 8])
        assert model.slope == pytest.approx(2.0)

    def test_reproduces_training_points(self, rng):
        x = rng.uniform(-5.0, 5.0, 50)
        y = -0.75 * x + 4.0
        model = fit_xy(x, y)
        np.testing.assert_allclose(
            model.predict_many(x), y, rtol=CPU_FP64.rtol, atol=1e-10
        )

    def test_matches_polyfit(self, noisy_line_data):
        x, y, _, _ = noisy_line_data
        model = fit_xy(x, y)
        slope, intercept = np.polyfit(x, y, 1)
        tol = select_tolerance()
        np.testing.assert_allclose(
            [model.slope, model.intercept], [slope, intercept],
            rtol=tol.rtol, atol=tol.atol,
        )

    def test_close_to_truth(self, noisy_line_data):
        x, y, slope_true, intercept_true = noisy_line_data
        model = fit_xy(x, y)
        assert model.slope == pytest.approx(slope_true, abs=0.01)
        assert model.intercept == pytest.approx(intercept_true, abs=0.05)

    def test_negative_slope(self):
        model = fit_xy([0, 1, 2], [10, 7, 4])
        assert model.slope == pytest.approx(-3.0)
        assert model.intercept == pytest.approx(10.0)

    def test_large_offset_x(self):
        x = 1000.0 + np.arange(10.0)
        y = 3.0 * x + 1.0
        model = fit_xy(x, y)
        tol = select_tolerance(is_ill_conditioned=True)
        np.testing.assert_allclose(
            [model.slope, model.intercept], [3.0, 1.0], rtol=tol.rtol, atol=tol.atol
        )

    def test_two_points_interpolate(self):
        model = fit_xy([1.0, 3.0], [5.0, 9.0])
        assert model.slope == pytest.approx(2.0)
        assert model.intercept == pytest.approx(3.0)


class TestDeterminism:

    def test_bit_identical_refit(self, noisy_line_data):
        x, y, _, _ = noisy_line_data
        first = fit_xy(x, y)
        second = fit_xy(x, y)
        assert first.slope == second.slope
        assert first.intercept == second.intercept
        assert first == second

    def test_model_is_hashable_value(self):
        a = fit_xy([1, 2, 3], [1, 2, 3])
        b = fit_xy([1, 2, 3], [1, 2, 3])
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


class TestFitSeries:

    def test_equivalent_to_positions(self, rng):
        y = rng.standard_normal(25)
        assert fit_series(y) == fit_xy(np.arange(25), y)

    @pytest.mark.parametrize("y", [[1.0, 2.0], [3.0, 1.0, 4.0, 1.0, 5.0], [0.0] * 6])
    def test_equivalent_small(self, y):
        assert fit_series(y) == fit_xy(list(range(len(y))), y)

    def test_simple_series(self):
        model = fit_series([1.0, 2.0, 3.0])
        assert abs(model.slope - 1.0) < 1e-12
        assert abs(model.intercept - 1.0) < 1e-12

    def test_constant_series_is_valid(self):
        """Flat y is fine for fitting; only R² needs y-variance."""
        model = fit_series([4.0, 4.0, 4.0])
        assert model.slope == pytest.approx(0.0)
        assert model.intercept == pytest.approx(4.0)


# ═══════════════════════════════════════════════════════════════════════
# Failure kinds
# ═══════════════════════════════════════════════════════════════════════


class TestFitErrors:

    def test_zero_x_variance(self):
        with pytest.raises(ZeroXVarianceError) as exc_info:
            fit_xy([5, 5, 5], [1, 2, 3])
        assert exc_info.value.denominator == 0.0
        assert exc_info.value.tolerance == ZERO_VARIANCE_TOL

    def test_near_zero_x_variance(self):
        with pytest.raises(ZeroXVarianceError):
            fit_xy([1.0, 1.0 + 1e-9], [0.0, 1.0])

    def test_tolerance_override(self):
        x, y = [0.0, 1e-7], [0.0, 1.0]
        with pytest.raises(ZeroXVarianceError):
            fit_xy(x, y)
        model = fit_xy(x, y, tol=1e-20)
        assert model.slope == pytest.approx(1e7, rel=1e-6)

    def test_invalid_tolerance(self):
        with pytest.raises(ValidationError, match="tol"):
            fit_xy([1, 2], [1, 2], tol=0.0)

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            fit_xy([1, 2], [1, 2, 3])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            fit_xy([], [])

    def test_series_empty(self):
        with pytest.raises(EmptyInputError):
            fit_series([])

    def test_series_single_point(self):
        with pytest.raises(ZeroXVarianceError):
            fit_series([42.0])

    def test_single_pair(self):
        with pytest.raises(ZeroXVarianceError):
            fit_xy([3.0], [1.0])

    def test_overflow(self):
        with pytest.raises(NumericalError, match="non-finite"):
            fit_xy([0.0, 1e300], [1e300, -1e300])

    def test_errors_distinguishable(self):
        """One except clause per cause."""
        causes = []
        for x, y in [([1, 2], [1]), ([], []), ([2, 2], [1, 3])]:
            try:
                fit_xy(x, y)
            except LengthMismatchError:
                causes.append("length")
            except EmptyInputError:
                causes.append("empty")
            except ZeroXVarianceError:
                causes.append("x_variance")
        assert causes == ["length", "empty", "x_variance"]
