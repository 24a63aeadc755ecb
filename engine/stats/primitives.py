"""
Statistical primitives for monthly series forecasting, including sample variance, ordinary least squares regression against the period index, trailing moving average, average period-over-period growth and month-of-year seasonal factors, each guarded so that short or degenerate series fall back to neutral values instead of raising.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from config import settings


@dataclass(frozen=True)
class Regression:
    slope: float
    intercept: float
    r2: float

    def at(self, index: float) -> float:
        return self.slope * index + self.intercept


def round_half_up(value: float) -> int:
    # halves round toward +inf, unlike round() which rounds to even
    return int(math.floor(value + 0.5))


def clamp_finite(value: float, ceiling: float | None = None) -> float:
    """
    Bring *value* into ``[-ceiling, ceiling]``.

    Overflowed intermediates (``inf``) saturate at the ceiling and undefined
    ones (``nan``, e.g. ``inf - inf``) collapse to 0, so the result can always
    be rounded to an integer.
    """
    if ceiling is None:
        ceiling = settings.projection_ceiling
    if math.isnan(value):
        return 0.0
    return min(max(value, -ceiling), ceiling)


def round_projection(value: float) -> int:
    return round_half_up(clamp_finite(value))


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.mean(np.asarray(values, dtype=float)))


def variance(values: Sequence[float]) -> float:
    if len(values) < 2:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.var(np.asarray(values, dtype=float), ddof=1))


def linear_regression(values: Sequence[float]) -> Regression:
    """
    Ordinary least squares of each value against its zero-based index.

    Series shorter than two points have no slope: the intercept is the single
    value (or 0 for an empty series) and the fit quality is 0. R² is reported
    as 0 when the series is constant, since there is no variance to explain.

    Values near the float maximum overflow the sums; the resulting ``inf`` or
    ``nan`` coefficients are passed through and clamped by the caller.
    """
    n = len(values)
    if n < 2:
        return Regression(slope=0.0, intercept=float(values[0]) if n else 0.0, r2=0.0)

    y = np.asarray(values, dtype=float)
    x = np.arange(n, dtype=float)

    with np.errstate(over="ignore", invalid="ignore"):
        sum_x = float(np.sum(x))
        sum_y = float(np.sum(y))
        sum_xy = float(np.sum(x * y))
        sum_x2 = float(np.sum(x * x))

        denominator = n * sum_x2 - sum_x * sum_x
        if denominator == 0:
            return Regression(slope=0.0, intercept=sum_y / n, r2=0.0)

        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y - slope * sum_x) / n

        mean_y = sum_y / n
        ss_total = float(np.sum((y - mean_y) ** 2))
        ss_residual = float(np.sum((y - (slope * x + intercept)) ** 2))
    # nan compares false, so an overflowed fit reports no explained variance
    r2 = 1.0 - ss_residual / ss_total if ss_total > 0 else 0.0
    if math.isnan(r2):
        r2 = 0.0

    return Regression(slope=slope, intercept=intercept, r2=r2)


def moving_average(values: Sequence[float], window: int | None = None) -> float:
    if window is None:
        window = settings.moving_average_window
    if len(values) == 0:
        return 0.0
    recent = list(values)[-max(1, window):]
    return mean(recent)


def average_growth_rate(values: Sequence[float]) -> float:
    """
    Mean of the relative change between consecutive points.

    Transitions out of a zero (or negative) value have no defined growth and
    are left out of the average rather than counted as zero.
    """
    if len(values) < 2:
        return 0.0

    rates: List[float] = []
    for prev, cur in zip(values[:-1], values[1:]):
        if prev > 0:
            rates.append((cur - prev) / prev)

    return mean(rates)


def coefficient_of_variation(values: Sequence[float]) -> float:
    m = mean(values)
    if m <= 0:
        return 0.0
    return math.sqrt(variance(values)) / m


def seasonal_factors(values: Sequence[float], period: int | None = None) -> List[float]:
    if period is None:
        period = settings.seasonal_period
    if len(values) < period:
        return [1.0] * period

    buckets: List[List[float]] = [[] for _ in range(period)]
    for idx, value in enumerate(values):
        buckets[idx % period].append(float(value))

    overall = mean(values)
    factors: List[float] = []
    for bucket in buckets:
        if not bucket or overall == 0:
            factors.append(1.0)
        else:
            factors.append(mean(bucket) / overall)
    return factors
