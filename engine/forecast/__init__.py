"""
Forecast engine for monthly business metrics, including four interchangeable projection strategies (linear, moving average, growth rate, seasonal), confidence tiers and prediction intervals, automatic method selection and objective suggestions derived from the projections.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.models import (
    ForecastRequest,
    ForecastResult,
    ForecastSummary,
    HistoricalPoint,
    MethodInfo,
    MetricSeries,
    ObjectiveSuggestion,
)
from engine.forecast.engine import generate_forecast, get_best_method, summarize
from engine.forecast.selector import recommend as recommend_method
from engine.forecast.catalog import list_methods
from engine.forecast.objectives import suggest_objectives

__all__ = [
    "ForecastRequest",
    "ForecastResult",
    "ForecastSummary",
    "HistoricalPoint",
    "MethodInfo",
    "MetricSeries",
    "ObjectiveSuggestion",
    "generate_forecast",
    "get_best_method",
    "list_methods",
    "recommend_method",
    "suggest_objectives",
    "summarize",
]
