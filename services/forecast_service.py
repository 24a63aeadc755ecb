"""
Forecast service translating API request models into engine calls and engine results back into response models.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import List

from api.requests import (
    BestMethodRequest,
    ForecastRequestBody,
    HistoricalPointIn,
    ObjectiveSuggestionRequest,
)
from api.responses import (
    BestMethodResponse,
    ForecastPoint,
    ForecastResponse,
    ForecastSummaryOut,
    MethodInfoOut,
    MethodsResponse,
    ObjectiveSuggestionOut,
    ObjectiveSuggestionResponse,
)
from engine.enums import ForecastMethod
from engine.forecast import (
    ForecastRequest,
    HistoricalPoint,
    MetricSeries,
    generate_forecast,
    get_best_method,
    list_methods,
    recommend_method,
    suggest_objectives,
    summarize,
)
from config import settings

log = logging.getLogger(__name__)


def _to_series(points: List[HistoricalPointIn]) -> List[HistoricalPoint]:
    return [HistoricalPoint(period=p.period, value=p.value) for p in points]


def run_forecast(req: ForecastRequestBody) -> ForecastResponse:
    request = ForecastRequest(
        series=_to_series(req.series),
        metric_type=req.metric_type,
        subject_key=req.subject_key,
        target_year=req.target_year,
        method=req.method,
    )
    results = generate_forecast(request)
    method = results[0].method
    log.info(
        "forecast subject=%s metric=%s year=%d method=%s points=%d",
        req.subject_key, req.metric_type, req.target_year, method.value, len(req.series),
    )
    summary = summarize(results)
    return ForecastResponse(
        subject_key=req.subject_key,
        metric_type=req.metric_type,
        target_year=req.target_year,
        method=method,
        results=[ForecastPoint(**asdict(r)) for r in results],
        summary=ForecastSummaryOut(**asdict(summary)) if summary else None,
    )


def best_method(req: BestMethodRequest) -> BestMethodResponse:
    return BestMethodResponse(method=get_best_method(req.values))


def methods() -> MethodsResponse:
    return MethodsResponse(
        methods=[MethodInfoOut(**asdict(info)) for info in list_methods()],
        default_method=ForecastMethod(settings.default_method),
    )


def suggest(req: ObjectiveSuggestionRequest) -> ObjectiveSuggestionResponse:
    metrics = [MetricSeries(metric_type=m.metric_type, series=_to_series(m.series)) for m in req.metrics]

    # one method for every metric, recommended from the lead metric when not given
    method = req.method
    if method is None:
        method = recommend_method([p.value for p in metrics[0].series])

    suggestions = suggest_objectives(
        metrics,
        subject_key=req.subject_key,
        target_year=req.target_year,
        method=method,
        adjustment_percent=req.adjustment_percent,
        round_values=req.round_values,
    )
    log.info(
        "objectives subject=%s year=%d method=%s metrics=%d adjustment=%.1f%%",
        req.subject_key, req.target_year, method.value, len(metrics), req.adjustment_percent,
    )
    return ObjectiveSuggestionResponse(
        subject_key=req.subject_key,
        target_year=req.target_year,
        method=method,
        suggestions=[ObjectiveSuggestionOut(**asdict(s)) for s in suggestions],
    )
