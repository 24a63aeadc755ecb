"""
Objective suggestions derived from forecasts: every metric of a subject is projected with the same method, optionally scaled by a percentage adjustment and rounded to a metric-specific increment, yielding one monthly target per metric.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from engine.enums import ForecastMethod
from engine.forecast.engine import generate_forecast
from engine.forecast.models import ForecastRequest, MetricSeries, ObjectiveSuggestion
from engine.stats import round_half_up
from config import OBJECTIVE_ROUNDING, OBJECTIVE_ROUNDING_DEFAULT


def rounding_increment(metric_type: str) -> int:
    return OBJECTIVE_ROUNDING.get(metric_type, OBJECTIVE_ROUNDING_DEFAULT)


def adjust_target(
    predicted: float,
    metric_type: str,
    adjustment_percent: float = 0.0,
    round_values: bool = True,
) -> int:
    value = predicted * (1 + adjustment_percent / 100)
    if round_values:
        increment = rounding_increment(metric_type)
        value = round_half_up(value / increment) * increment
    return max(0, round_half_up(value))


def suggest_objectives(
    metrics: Sequence[MetricSeries],
    subject_key: str,
    target_year: int,
    method: Optional[ForecastMethod] = None,
    adjustment_percent: float = 0.0,
    round_values: bool = True,
) -> List[ObjectiveSuggestion]:
    suggestions: List[ObjectiveSuggestion] = []
    for metric in metrics:
        request = ForecastRequest(
            series=list(metric.series),
            metric_type=metric.metric_type,
            subject_key=subject_key,
            target_year=target_year,
            method=method,
        )
        for result in generate_forecast(request):
            suggestions.append(
                ObjectiveSuggestion(
                    year=target_year,
                    month=result.step,
                    metric_type=metric.metric_type,
                    subject_key=subject_key,
                    target_value=adjust_target(
                        result.predicted,
                        metric.metric_type,
                        adjustment_percent,
                        round_values,
                    ),
                )
            )
    return suggestions
