"""
Forecast service that loads a property's reservations and manual adjustments from the injected key-value store and runs the forecasting pipeline over them.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from engine.analyzer import ForecastReport, run, summary
from engine.enums import Metric
from store import adjustments as adjustment_store, reservations as reservation_store
from store.client import KeyValueStore

log = logging.getLogger(__name__)


async def run_forecast(
    store: KeyValueStore,
    property_id: str,
    horizon_days: int | None = None,
    metric: Metric = Metric.occupancy,
    today: Optional[date] = None,
    room_count: int | None = None,
) -> ForecastReport:
    observations = await reservation_store.load_observations(store, property_id)
    adjustments = await adjustment_store.load(store, property_id)
    report = run(
        observations,
        horizon_days=horizon_days,
        metric=metric,
        adjustments=adjustments,
        today=today,
        room_count=room_count,
    )
    log.info("Forecast for property %s: %s", property_id, summary(report))
    return report
