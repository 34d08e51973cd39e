"""
Integration tests for the forecast pipeline, running raw booking observations through history building, seasonality, forecasting, adjustments and accuracy scoring.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json
from datetime import date, timedelta

import pytest

from config import settings
from engine.adjustments import AdjustmentRegistry, ManualAdjustment
from engine.analyzer import ForecastReport, run, summary
from engine.enums import Metric, Trend
from engine.forecast.accuracy import AccuracyMetrics
from engine.forecast.seasonality import BookingObservation

TODAY = date(2026, 3, 10)


def _growing_bookings(days=20):
    start = date(2025, 6, 1)
    obs = []
    for d in range(days):
        for _ in range(d + 1):
            obs.append(BookingObservation((start + timedelta(days=d)).isoformat(), total_amount=120, nights=1))
    return obs


def test_run_builds_complete_report():
    report = run(_growing_bookings(), horizon_days=7, today=TODAY)
    assert isinstance(report, ForecastReport)
    assert report.metric == Metric.occupancy
    assert len(report.historical) == 20
    assert len(report.forecast) == 7
    assert len(report.seasonal_patterns) == 12
    assert report.trend == Trend.rising
    assert report.model.slope == pytest.approx(1.0)
    assert report.model.r2 == pytest.approx(1.0)
    assert report.accuracy.mae == pytest.approx(0.0, abs=1e-9)
    assert [p.x for p in report.forecast] == list(range(20, 27))
    assert all(0 <= p.y <= 100 for p in report.forecast)


def test_run_empty_observations():
    report = run([], horizon_days=5, today=TODAY)
    assert report.historical == []
    assert report.forecast == []
    assert report.model.r2 == 0
    assert report.accuracy == AccuracyMetrics.zero()
    assert report.trend == Trend.flat
    assert summary(report) == "no usable history"


def test_run_applies_adjustments():
    reg = AdjustmentRegistry()
    target = (TODAY + timedelta(days=2)).isoformat()
    reg.add(ManualAdjustment(date=target, original_value=0, adjusted_value=55.5, reason="event"))
    report = run(_growing_bookings(), horizon_days=3, adjustments=reg, today=TODAY)
    assert report.forecast[1].date == target
    assert report.forecast[1].y == 55.5


def test_run_caps_horizon(monkeypatch):
    monkeypatch.setattr(settings, "max_horizon_days", 4)
    report = run(_growing_bookings(), horizon_days=30, today=TODAY)
    assert report.horizon_days == 4
    assert len(report.forecast) == 4


def test_report_to_dict_is_json_friendly():
    report = run(_growing_bookings(5), metric=Metric.revenue, horizon_days=2, today=TODAY)
    data = report.to_dict()
    assert data["metric"] == "revenue"
    assert data["trend"] in {"rising", "falling", "flat"}
    json.dumps(data)
