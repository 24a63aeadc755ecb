"""
Forecast routes for metric projections, method recommendation, the method catalogue and objective suggestions.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.routes.exception import handle_exceptions
from api.requests import BestMethodRequest, ForecastRequestBody, ObjectiveSuggestionRequest
from api.responses import (
    BestMethodResponse,
    ForecastResponse,
    MethodsResponse,
    ObjectiveSuggestionResponse,
)
from services import forecast_service

router = APIRouter(tags=["Forecast"])


@router.get("/forecast/methods", response_model=MethodsResponse, summary="Available forecast methods")
@handle_exceptions
async def forecast_methods() -> MethodsResponse:
    return forecast_service.methods()


@router.post("/forecast", response_model=ForecastResponse, summary="Twelve-step forecast for one metric")
@handle_exceptions
async def forecast(req: ForecastRequestBody) -> ForecastResponse:
    return forecast_service.run_forecast(req)


@router.post("/forecast/best-method", response_model=BestMethodResponse, summary="Recommend a forecast method for a series")
@handle_exceptions
async def forecast_best_method(req: BestMethodRequest) -> BestMethodResponse:
    return forecast_service.best_method(req)


@router.post(
    "/forecast/objectives",
    response_model=ObjectiveSuggestionResponse,
    summary="Monthly objective suggestions derived from forecasts",
)
@handle_exceptions
async def forecast_objectives(req: ObjectiveSuggestionRequest) -> ObjectiveSuggestionResponse:
    return forecast_service.suggest(req)
