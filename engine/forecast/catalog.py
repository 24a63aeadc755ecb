"""
Human-readable catalogue of the forecast methods, used by dashboards to describe each option and what kind of series it suits.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, List

from engine.enums import ForecastMethod
from engine.forecast.models import MethodInfo

METHODS: Dict[ForecastMethod, MethodInfo] = {
    ForecastMethod.linear: MethodInfo(
        id=ForecastMethod.linear,
        name="Linear regression",
        description="Fits a straight line through the historical data",
        best_for="Steady, predictable growth",
    ),
    ForecastMethod.moving_average: MethodInfo(
        id=ForecastMethod.moving_average,
        name="Moving average",
        description="Average of the last 3 months",
        best_for="Volatile data that needs smoothing",
    ),
    ForecastMethod.growth_rate: MethodInfo(
        id=ForecastMethod.growth_rate,
        name="Growth rate",
        description="Projects the average period-over-period growth rate",
        best_for="Exponential growth",
    ),
    ForecastMethod.seasonal: MethodInfo(
        id=ForecastMethod.seasonal,
        name="Seasonality",
        description="Detects yearly patterns",
        best_for="Cyclical variations",
    ),
}


def list_methods() -> List[MethodInfo]:
    return [METHODS[m] for m in ForecastMethod]
