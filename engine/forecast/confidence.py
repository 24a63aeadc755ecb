"""
Confidence classification for forecasts, mapping the number of historical samples and the quality of the linear fit onto a fixed three-tier rule table.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from engine.enums import Confidence
from config import settings


def classify(sample_count: int, r2: float = 0.0) -> Confidence:
    if sample_count >= settings.confidence_high_min_samples and r2 > settings.confidence_high_r2:
        return Confidence.high
    if sample_count >= settings.confidence_medium_min_samples and r2 > settings.confidence_medium_r2:
        return Confidence.medium
    return Confidence.low


def degrade_for_step(confidence: Confidence, step: int) -> Confidence:
    # compounding growth makes the far half of the horizon one tier less reliable
    if step >= settings.growth_degradation_start_step:
        return confidence.degrade()
    return confidence
