"""
Method selection heuristics that inspect a historical series and recommend the forecast strategy whose assumptions best match it, evaluated as an ordered decision list where the first matching rule wins.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

from engine.enums import ForecastMethod
from engine.stats import average_growth_rate, coefficient_of_variation, linear_regression
from config import settings


def best_method(values: Sequence[float]) -> ForecastMethod:
    """
    Recommend a strategy for *values*.

    Rules, in order:

    * too few points to fit anything       -> moving average
    * well-fit line with modest growth     -> linear
    * growth above threshold either way    -> growth rate
    * noisy relative to its level          -> moving average
    * at least a full year of history      -> seasonal
    * otherwise                            -> linear
    """
    n = len(values)
    if n < settings.selector_min_samples:
        return ForecastMethod.moving_average

    r2 = linear_regression(values).r2
    growth = abs(average_growth_rate(values))
    cv = coefficient_of_variation(values)

    if r2 > settings.selector_linear_r2 and growth < settings.selector_growth_threshold:
        return ForecastMethod.linear
    if growth > settings.selector_growth_threshold:
        return ForecastMethod.growth_rate
    if cv > settings.selector_cv_threshold:
        return ForecastMethod.moving_average
    if n >= settings.selector_seasonal_min_samples:
        return ForecastMethod.seasonal
    return ForecastMethod.linear


def recommend(values: Sequence[float]) -> ForecastMethod:
    # with no history there is nothing to inspect, fall back to the configured default
    if len(values) == 0:
        return ForecastMethod(settings.default_method)
    return best_method(values)
