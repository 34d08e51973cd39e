"""
Historical series construction from raw booking observations, aggregating reservations per check-in day and projecting each day onto the requested metric (occupancy, revenue or average daily rate) as an indexed series ready for trend fitting.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

from engine.enums import Metric
from engine.forecast.seasonality import BookingObservation, parse_check_in
from engine.forecast.trend import DataPoint
from config import settings

log = logging.getLogger(__name__)


@dataclass
class DailyTotals:
    bookings: int = 0
    revenue: float = 0.0
    nights: int = 0

    def value(self, metric: Metric, room_count: int) -> float:
        if metric == Metric.revenue:
            return self.revenue
        if metric == Metric.adr:
            return self.revenue / self.nights if self.nights > 0 else 0.0
        return self.bookings / room_count * 100 if room_count > 0 else 0.0


def daily_totals(observations: Iterable[BookingObservation]) -> Dict[str, DailyTotals]:
    days: Dict[str, DailyTotals] = {}
    skipped = 0
    for obs in observations:
        day = parse_check_in(obs.check_in, utc=True)
        if day is None:
            skipped += 1
            continue
        totals = days.setdefault(day.isoformat(), DailyTotals())
        totals.bookings += 1
        totals.revenue += float(obs.total_amount or 0.0)
        totals.nights += max(int(obs.nights or 0), 1)
    if skipped:
        log.debug("Skipped %d observations with unparseable check-in dates", skipped)
    return days


def build_history(
    observations: Iterable[BookingObservation],
    metric: Metric = Metric.occupancy,
    room_count: int | None = None,
) -> List[DataPoint]:
    if room_count is None:
        room_count = settings.default_room_count
    days = daily_totals(observations)
    return [
        DataPoint(x=float(index), y=days[day].value(metric, room_count), date=day)
        for index, day in enumerate(sorted(days))
    ]
