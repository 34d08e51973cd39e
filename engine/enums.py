"""
Enumerations for trend direction and forecastable metrics

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Trend(str, Enum):
    rising = "rising"
    falling = "falling"
    flat = "flat"

    @classmethod
    def from_slope(cls, slope: float) -> Trend:
        from config import settings

        if abs(slope) < settings.trend_flat_threshold:
            return cls.flat
        return cls.rising if slope > 0 else cls.falling


class Metric(str, Enum):
    occupancy = "occupancy"
    revenue = "revenue"
    adr = "adr"
