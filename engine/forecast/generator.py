"""
Forecast generation logic that projects a fitted linear trend forward one step per day, rescales each step by the seasonal index of its calendar month, and clamps the result into the percentage range expected by occupancy dashboards.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Sequence

from engine.forecast.seasonality import SeasonalPattern, multiplier_for
from engine.forecast.trend import DataPoint, fit, predict
from config import settings


def _clamp(value: float) -> float:
    return max(settings.forecast_min_value, min(settings.forecast_max_value, value))


def forecast(
    history: Sequence[DataPoint],
    horizon_days: int,
    seasonality: Optional[Sequence[SeasonalPattern]] = None,
    today: Optional[date] = None,
) -> List[DataPoint]:
    """Project ``horizon_days`` daily points past the end of ``history``.

    Seasonal months and date labels are counted from ``today`` (the call
    date by default), not from the last historical date.
    """
    if not history or horizon_days < 1:
        return []
    if today is None:
        today = date.today()

    model = fit(history)
    last_x = max(p.x for p in history)

    points: List[DataPoint] = []
    for i in range(1, horizon_days + 1):
        x = last_x + i
        target = today + timedelta(days=i)
        y = predict(x, model)
        if seasonality is not None:
            y *= multiplier_for(seasonality, target.month)
        points.append(DataPoint(x=x, y=_clamp(y), date=target.isoformat()))
    return points
