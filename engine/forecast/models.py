"""
Value types exchanged with the forecast engine: historical points and requests supplied by callers, raw projections produced by strategies, and the method-tagged results returned to callers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from engine.enums import Confidence, ForecastMethod


@dataclass(frozen=True)
class HistoricalPoint:
    period: str
    value: float


@dataclass(frozen=True)
class ForecastRequest:
    series: List[HistoricalPoint]
    metric_type: str
    subject_key: str
    target_year: int
    method: Optional[ForecastMethod] = None

    def values(self) -> List[float]:
        return [float(p.value) for p in self.series]


@dataclass(frozen=True)
class Projection:
    step: int
    predicted: int
    lower_bound: int
    upper_bound: int
    confidence: Confidence


@dataclass(frozen=True)
class ForecastResult:
    step: int
    predicted: int
    confidence: Confidence
    method: ForecastMethod
    lower_bound: int
    upper_bound: int

    @classmethod
    def from_projection(cls, projection: Projection, method: ForecastMethod) -> ForecastResult:
        return cls(
            step=projection.step,
            predicted=projection.predicted,
            confidence=projection.confidence,
            method=method,
            lower_bound=projection.lower_bound,
            upper_bound=projection.upper_bound,
        )


@dataclass(frozen=True)
class ForecastSummary:
    method: ForecastMethod
    total_predicted: int
    average_predicted: float
    confidence: Confidence


@dataclass(frozen=True)
class MethodInfo:
    id: ForecastMethod
    name: str
    description: str
    best_for: str


@dataclass(frozen=True)
class ObjectiveSuggestion:
    year: int
    month: int
    metric_type: str
    subject_key: str
    target_value: int


@dataclass(frozen=True)
class MetricSeries:
    metric_type: str
    series: List[HistoricalPoint] = field(default_factory=list)
