"""
Enumerations for Forecast Methods and Confidence Tiers

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class ForecastMethod(str, Enum):
    linear = "linear"
    moving_average = "moving_average"
    growth_rate = "growth_rate"
    seasonal = "seasonal"


class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"

    def degrade(self) -> Confidence:
        # one tier down; low is the floor
        if self is Confidence.high:
            return Confidence.medium
        return Confidence.low

    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK = {
    Confidence.low: 1,
    Confidence.medium: 2,
    Confidence.high: 3,
}
