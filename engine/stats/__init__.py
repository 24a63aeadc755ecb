"""
Statistical primitives shared by the forecast strategies and the method selector.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.stats.primitives import (
    Regression,
    average_growth_rate,
    clamp_finite,
    coefficient_of_variation,
    linear_regression,
    mean,
    moving_average,
    round_half_up,
    round_projection,
    seasonal_factors,
    variance,
)

__all__ = [
    "Regression",
    "average_growth_rate",
    "clamp_finite",
    "coefficient_of_variation",
    "linear_regression",
    "mean",
    "moving_average",
    "round_half_up",
    "round_projection",
    "seasonal_factors",
    "variance",
]
