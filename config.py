"""
Constants and configuration for the Forecast Engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict

from pydantic_settings import BaseSettings


FORECAST_HOST: str = os.getenv("FORECAST_HOST", "0.0.0.0")
FORECAST_PORT: int = int(os.getenv("FORECAST_PORT", "4323"))
FORECAST_LOG_LEVEL: str = os.getenv("FORECAST_LOG_LEVEL", "info").lower()

# fixed output window, one record per future period
FORECAST_HORIZON = 12

# rounding increments applied to suggested objectives, keyed by metric type
OBJECTIVE_ROUNDING: Dict[str, int] = {
    "revenue": 100_000,
}
OBJECTIVE_ROUNDING_DEFAULT: int = 10


class Settings(BaseSettings):
    host: str = FORECAST_HOST
    port: int = FORECAST_PORT
    log_level: str = FORECAST_LOG_LEVEL

    # method used when a caller has no preference and no history to inspect
    default_method: str = "linear"

    # moving average strategy
    moving_average_window: int = 3
    # moving average fits no trend, so it reports this placeholder fit quality
    moving_average_r2: float = 0.5

    # confidence tiers: (min samples, r2 strictly above)
    confidence_high_min_samples: int = 12
    confidence_high_r2: float = 0.7
    confidence_medium_min_samples: int = 6
    confidence_medium_r2: float = 0.4

    # interval margin = factor * sqrt(variance); wider margins for less data
    interval_factor_large: float = 1.5
    interval_factor_medium: float = 2.0
    interval_factor_small: float = 2.5
    interval_large_min_samples: int = 12
    interval_medium_min_samples: int = 6

    # growth rate strategy: variance grows by this fraction per future step
    growth_variance_step_inflation: float = 0.1
    # first step (1-based) whose confidence is downgraded one tier
    growth_degradation_start_step: int = 7

    seasonal_period: int = 12

    # projections and interval margins are clamped to this magnitude before rounding
    projection_ceiling: float = 1e15

    # method selection heuristics
    selector_min_samples: int = 3
    selector_linear_r2: float = 0.8
    selector_growth_threshold: float = 0.1
    selector_cv_threshold: float = 0.3
    selector_seasonal_min_samples: int = 12

    # objective suggestions
    objective_adjustment_min: float = -50.0
    objective_adjustment_max: float = 50.0

    model_config = {
        "env_prefix": "FORECAST_",
        "extra": "ignore",
    }


settings = Settings()
