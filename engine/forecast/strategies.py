"""
Forecast strategies projecting a monthly series over the fixed horizon: linear trend extrapolation, trailing moving average, compounded average growth and seasonally modulated linear trend. Each strategy is a plain function from the historical values to one projection per future step.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

import numpy as np

from engine.enums import ForecastMethod
from engine.forecast import confidence as conf
from engine.forecast import interval
from engine.forecast.models import Projection
from engine.stats import (
    average_growth_rate,
    linear_regression,
    moving_average as trailing_mean,
    round_projection,
    seasonal_factors,
    variance,
)
from config import FORECAST_HORIZON, settings

Strategy = Callable[[Sequence[float]], List[Projection]]


def _steps() -> range:
    return range(1, FORECAST_HORIZON + 1)


def _compound(last: float, rate: float, step: int) -> float:
    # float ** int raises OverflowError; numpy saturates to inf for the clamp
    with np.errstate(over="ignore", invalid="ignore"):
        return float(last * np.power(1.0 + rate, step))


def linear(values: Sequence[float]) -> List[Projection]:
    n = len(values)
    fit = linear_regression(values)
    var = variance(values)
    level = conf.classify(n, fit.r2)

    out: List[Projection] = []
    for step in _steps():
        predicted = max(0, round_projection(fit.at(n + step - 1)))
        lower, upper = interval.estimate(predicted, var, n)
        out.append(Projection(step, predicted, lower, upper, level))
    return out


def moving_average(values: Sequence[float]) -> List[Projection]:
    n = len(values)
    var = variance(values)
    predicted = max(0, round_projection(trailing_mean(values)))
    level = conf.classify(n, settings.moving_average_r2)
    lower, upper = interval.estimate(predicted, var, n)
    return [Projection(step, predicted, lower, upper, level) for step in _steps()]


def growth_rate(values: Sequence[float]) -> List[Projection]:
    n = len(values)
    rate = average_growth_rate(values)
    last = float(values[-1]) if n else 0.0
    var = variance(values)
    level = conf.classify(n, linear_regression(values).r2)

    out: List[Projection] = []
    for step in _steps():
        predicted = max(0, round_projection(_compound(last, rate, step)))
        lower, upper = interval.estimate(predicted, interval.inflate_variance(var, step - 1), n)
        out.append(Projection(step, predicted, lower, upper, conf.degrade_for_step(level, step)))
    return out


def seasonal(values: Sequence[float]) -> List[Projection]:
    n = len(values)
    factors = seasonal_factors(values)
    fit = linear_regression(values)
    var = variance(values)
    level = conf.classify(n, fit.r2)

    out: List[Projection] = []
    for step in _steps():
        factor = factors[(step - 1) % len(factors)]
        predicted = max(0, round_projection(fit.at(n + step - 1) * factor))
        lower, upper = interval.estimate(predicted, var, n)
        out.append(Projection(step, predicted, lower, upper, level))
    return out


STRATEGIES: Dict[ForecastMethod, Strategy] = {
    ForecastMethod.linear: linear,
    ForecastMethod.moving_average: moving_average,
    ForecastMethod.growth_rate: growth_rate,
    ForecastMethod.seasonal: seasonal,
}
