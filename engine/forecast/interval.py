"""
Prediction interval estimation from series variance, using a margin factor that widens as the number of historical samples shrinks.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Tuple

from engine.stats import clamp_finite, round_projection
from config import settings


def _margin_factor(sample_count: int) -> float:
    if sample_count >= settings.interval_large_min_samples:
        return settings.interval_factor_large
    if sample_count >= settings.interval_medium_min_samples:
        return settings.interval_factor_medium
    return settings.interval_factor_small


def inflate_variance(variance: float, step_index: int) -> float:
    return variance * (1 + step_index * settings.growth_variance_step_inflation)


def estimate(predicted: float, variance: float, sample_count: int) -> Tuple[int, int]:
    # nan variance fails the comparison and contributes no spread
    spread = math.sqrt(variance) if variance > 0 else 0.0
    margin = clamp_finite(_margin_factor(sample_count) * spread)
    lower = max(0, round_projection(predicted - margin))
    upper = round_projection(predicted + margin)
    return lower, upper
