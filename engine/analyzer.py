"""
Forecast pipeline that turns a property's raw booking observations into a complete report: daily history, seasonal patterns, fitted trend model, seasonally scaled forecast with manual overrides, holdout accuracy and trend direction.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from engine.adjustments import AdjustmentRegistry
from engine.enums import Metric, Trend
from engine.forecast import (
    AccuracyMetrics,
    BookingObservation,
    DataPoint,
    LinearModel,
    SeasonalPattern,
    classify_trend,
    extract_seasonality,
    fit_trend,
    generate_forecast,
    holdout_accuracy,
)
from engine.history import build_history
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastReport:
    metric: Metric
    horizon_days: int
    historical: List[DataPoint]
    forecast: List[DataPoint]
    seasonal_patterns: List[SeasonalPattern]
    model: LinearModel
    accuracy: AccuracyMetrics
    trend: Trend

    def to_dict(self) -> Dict[str, Any]:
        data = dataclasses.asdict(self)
        data["metric"] = self.metric.value
        data["trend"] = self.trend.value
        return data


def summary(report: ForecastReport) -> str:
    if not report.historical:
        return "no usable history"
    parts = [
        f"{len(report.historical)} day(s) of {report.metric.value} history",
        f"trend {report.trend.value} ({report.model.equation}, r2={report.model.r2:.3f})",
        f"{len(report.forecast)} day(s) forecast",
    ]
    if report.accuracy != AccuracyMetrics.zero():
        parts.append(f"holdout MAPE {report.accuracy.mape:.1f}%")
    return ", ".join(parts)


def run(
    observations: Sequence[BookingObservation],
    horizon_days: int | None = None,
    metric: Metric = Metric.occupancy,
    adjustments: Optional[AdjustmentRegistry] = None,
    today: Optional[date] = None,
    room_count: int | None = None,
) -> ForecastReport:
    if horizon_days is None:
        horizon_days = settings.default_horizon_days
    horizon_days = min(horizon_days, settings.max_horizon_days)

    historical = build_history(observations, metric=metric, room_count=room_count)
    seasonal = extract_seasonality(observations)

    projected = generate_forecast(historical, horizon_days, seasonal, today=today)
    if adjustments is not None and len(adjustments):
        projected = adjustments.apply(projected)

    report = ForecastReport(
        metric=metric,
        horizon_days=horizon_days,
        historical=historical,
        forecast=projected,
        seasonal_patterns=seasonal,
        model=fit_trend(historical),
        accuracy=holdout_accuracy(historical),
        trend=classify_trend(historical),
    )
    log.debug("Forecast pipeline: %s", summary(report))
    return report