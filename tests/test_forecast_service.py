from datetime import date, timedelta

import pytest

from engine.adjustments import ManualAdjustment
from engine.enums import Metric, Trend
from services.forecast_service import run_forecast
from store import adjustments as astore, reservations as rstore


@pytest.mark.asyncio
async def test_run_forecast_from_store(memory_store):
    start = date(2025, 9, 1)
    records = [
        {"check_in": (start + timedelta(days=d)).isoformat(), "total_amount": 100 + d, "nights": 1}
        for d in range(12)
        for _ in range(12 - d)
    ]
    await rstore.save(memory_store, "hotel", records)
    today = date(2026, 4, 1)
    await astore.upsert(memory_store, "hotel", ManualAdjustment("2026-04-03", 0, 42))

    report = await run_forecast(memory_store, "hotel", horizon_days=5, today=today)
    assert len(report.historical) == 12
    assert report.trend == Trend.falling
    assert len(report.forecast) == 5
    assert report.forecast[1].y == 42


@pytest.mark.asyncio
async def test_run_forecast_unknown_property(memory_store):
    report = await run_forecast(memory_store, "missing", metric=Metric.adr)
    assert report.forecast == []
    assert report.metric == Metric.adr
