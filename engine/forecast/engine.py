"""
Forecast engine entry point, resolving the forecast method (explicit or recommended by the selector), dispatching to the matching strategy and tagging every projection with the resolved method.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional, Sequence

from engine.enums import Confidence, ForecastMethod
from engine.forecast.models import ForecastRequest, ForecastResult, ForecastSummary
from engine.forecast.selector import best_method
from engine.forecast.strategies import STRATEGIES
from engine.stats import round_half_up
from config import FORECAST_HORIZON

log = logging.getLogger(__name__)


def _empty_forecast(method: ForecastMethod) -> List[ForecastResult]:
    return [
        ForecastResult(
            step=step,
            predicted=0,
            confidence=Confidence.low,
            method=method,
            lower_bound=0,
            upper_bound=0,
        )
        for step in range(1, FORECAST_HORIZON + 1)
    ]


def resolve_method(values: Sequence[float], method: Optional[ForecastMethod] = None) -> ForecastMethod:
    if method is not None:
        return ForecastMethod(method)
    resolved = best_method(values)
    log.debug("resolve_method: selected %s for %d points", resolved.value, len(values))
    return resolved


def generate_forecast(
    request: ForecastRequest,
    method: Optional[ForecastMethod] = None,
) -> List[ForecastResult]:
    """
    Project *request* over the fixed horizon.

    An explicit *method* argument takes precedence over ``request.method``;
    when neither is given the selector picks one. An empty series returns
    zero-valued, low-confidence results without running any strategy.
    """
    values = request.values()
    resolved = resolve_method(values, method if method is not None else request.method)

    log.debug(
        "generate_forecast subject=%s metric=%s year=%d method=%s points=%d",
        request.subject_key,
        request.metric_type,
        request.target_year,
        resolved.value,
        len(values),
    )

    if not values:
        return _empty_forecast(resolved)

    projections = STRATEGIES[resolved](values)
    return [ForecastResult.from_projection(p, resolved) for p in projections]


def get_best_method(values: Sequence[float]) -> ForecastMethod:
    return best_method([float(v) for v in values])


def summarize(results: Sequence[ForecastResult]) -> Optional[ForecastSummary]:
    if not results:
        return None

    total = sum(r.predicted for r in results)
    counts = Counter(r.confidence for r in results)
    # most frequent tier, ties resolved toward the less confident one
    headline = max(counts, key=lambda c: (counts[c], -c.rank()))

    return ForecastSummary(
        method=results[0].method,
        total_predicted=total,
        # two decimals, halves rounded up
        average_predicted=round_half_up(total * 100 / len(results)) / 100,
        confidence=headline,
    )
