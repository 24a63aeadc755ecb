"""
Test cases for the statistical primitives, including variance, least squares regression, moving average, growth rate, seasonal factors and half-up rounding, covering degenerate short and constant series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.stats import (
    average_growth_rate,
    clamp_finite,
    coefficient_of_variation,
    linear_regression,
    moving_average,
    round_half_up,
    round_projection,
    seasonal_factors,
    variance,
)


def test_variance_uses_sample_denominator():
    assert variance([]) == 0.0
    assert variance([5]) == 0.0
    assert pytest.approx(variance([1, 2, 3, 4]), rel=1e-9) == 5 / 3


def test_linear_regression_perfect_trend(linear_values):
    fit = linear_regression(linear_values)
    assert pytest.approx(fit.slope, rel=1e-9) == 10.0
    assert pytest.approx(fit.intercept, rel=1e-9) == 10.0
    assert pytest.approx(fit.r2, rel=1e-9) == 1.0
    assert pytest.approx(fit.at(5), rel=1e-9) == 60.0


def test_linear_regression_short_series():
    empty = linear_regression([])
    assert (empty.slope, empty.intercept, empty.r2) == (0.0, 0.0, 0.0)

    single = linear_regression([7])
    assert (single.slope, single.intercept, single.r2) == (0.0, 7.0, 0.0)


def test_linear_regression_constant_series_has_no_fit():
    fit = linear_regression([5, 5, 5])
    assert fit.slope == pytest.approx(0.0)
    assert fit.intercept == pytest.approx(5.0)
    # nothing to explain, so r2 is reported as 0 instead of dividing by zero
    assert fit.r2 == 0.0


def test_linear_regression_noisy_fit_below_one():
    fit = linear_regression([1, 3, 2, 5, 4])
    assert 0.0 < fit.r2 < 1.0


def test_moving_average_window():
    assert moving_average([]) == 0.0
    assert moving_average([1, 2, 3, 4, 5]) == pytest.approx(4.0)
    assert moving_average([2, 4]) == pytest.approx(3.0)
    assert moving_average([1, 2, 3, 4, 5], window=2) == pytest.approx(4.5)


def test_average_growth_rate_compounding(compounding_values):
    assert average_growth_rate(compounding_values) == pytest.approx(0.1, rel=1e-6)


def test_average_growth_rate_skips_zero_previous_values():
    assert average_growth_rate([0, 10, 20]) == pytest.approx(1.0)
    assert average_growth_rate([0, 0, 5]) == 0.0
    assert average_growth_rate([5]) == 0.0
    assert average_growth_rate([]) == 0.0


def test_coefficient_of_variation_guards_zero_mean():
    assert coefficient_of_variation([]) == 0.0
    assert coefficient_of_variation([0, 0, 0]) == 0.0
    assert coefficient_of_variation([10, 10, 10]) == 0.0
    assert coefficient_of_variation([100, 200, 0, 100, 200, 0]) > 0.3


def test_seasonal_factors_neutral_for_short_series():
    assert seasonal_factors([1, 2, 3]) == [1.0] * 12
    assert seasonal_factors(list(range(11))) == [1.0] * 12


def test_seasonal_factors_detect_yearly_peak(yearly_spike_values):
    factors = seasonal_factors(yearly_spike_values)
    assert len(factors) == 12
    overall = (200 + 11 * 100) / 12
    assert factors[0] == pytest.approx(200 / overall)
    assert all(f == pytest.approx(100 / overall) for f in factors[1:])


def test_seasonal_factors_all_zero_series():
    assert seasonal_factors([0] * 12) == [1.0] * 12


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4) == 2
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3


def test_clamp_finite():
    assert clamp_finite(float("inf"), ceiling=100.0) == 100.0
    assert clamp_finite(float("-inf"), ceiling=100.0) == -100.0
    assert clamp_finite(float("nan"), ceiling=100.0) == 0.0
    assert clamp_finite(42.5, ceiling=100.0) == 42.5


def test_round_projection_saturates_at_ceiling(monkeypatch):
    monkeypatch.setattr(settings, "projection_ceiling", 1000.0)
    assert round_projection(float("inf")) == 1000
    assert round_projection(1e300) == 1000
    assert round_projection(float("nan")) == 0
    assert round_projection(2.5) == 3


def test_linear_regression_overflowing_sums_report_no_fit():
    fit = linear_regression([0.0, 1e308, 1e308])
    assert fit.r2 == 0.0
    assert round_projection(fit.at(3)) == 0
