from __future__ import annotations

from typing import Annotated, List, Optional
from pydantic import BaseModel, Field, field_validator

from engine.enums import ForecastMethod
from config import settings

# non-negative and finite, Infinity and NaN are rejected
MetricValue = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class HistoricalPointIn(BaseModel):
    period: str
    value: MetricValue


def _reject_duplicate_periods(series: List[HistoricalPointIn]) -> List[HistoricalPointIn]:
    seen: set[str] = set()
    for point in series:
        if point.period in seen:
            raise ValueError(f"duplicate period '{point.period}' in series")
        seen.add(point.period)
    return series


class ForecastRequestBody(BaseModel):
    series: List[HistoricalPointIn] = Field(default_factory=list)
    metric_type: str
    subject_key: str
    target_year: int = Field(ge=1970, le=9999)
    method: Optional[ForecastMethod] = None

    @field_validator("series")
    @classmethod
    def _unique_periods(cls, v: List[HistoricalPointIn]) -> List[HistoricalPointIn]:
        return _reject_duplicate_periods(v)


class BestMethodRequest(BaseModel):
    values: List[MetricValue] = Field(default_factory=list)


class MetricSeriesIn(BaseModel):
    metric_type: str
    series: List[HistoricalPointIn] = Field(default_factory=list)

    @field_validator("series")
    @classmethod
    def _unique_periods(cls, v: List[HistoricalPointIn]) -> List[HistoricalPointIn]:
        return _reject_duplicate_periods(v)


class ObjectiveSuggestionRequest(BaseModel):
    subject_key: str
    target_year: int = Field(ge=1970, le=9999)
    metrics: List[MetricSeriesIn] = Field(min_length=1)
    method: Optional[ForecastMethod] = None
    adjustment_percent: float = Field(
        default=0.0,
        ge=settings.objective_adjustment_min,
        le=settings.objective_adjustment_max,
    )
    round_values: bool = True
