"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from engine.enums import Confidence, ForecastMethod


class ForecastPoint(BaseModel):

    step: int
    predicted: int
    confidence: Confidence
    method: ForecastMethod
    lower_bound: int
    upper_bound: int


class ForecastSummaryOut(BaseModel):

    method: ForecastMethod
    total_predicted: int
    average_predicted: float
    confidence: Confidence


class ForecastResponse(BaseModel):

    subject_key: str
    metric_type: str
    target_year: int
    method: ForecastMethod
    results: List[ForecastPoint]
    summary: Optional[ForecastSummaryOut] = None


class BestMethodResponse(BaseModel):

    method: ForecastMethod


class MethodInfoOut(BaseModel):

    id: ForecastMethod
    name: str
    description: str
    best_for: str


class MethodsResponse(BaseModel):

    methods: List[MethodInfoOut]
    default_method: ForecastMethod


class ObjectiveSuggestionOut(BaseModel):

    year: int
    month: int
    metric_type: str
    subject_key: str
    target_value: int


class ObjectiveSuggestionResponse(BaseModel):

    subject_key: str
    target_year: int
    method: ForecastMethod
    suggestions: List[ObjectiveSuggestionOut]
