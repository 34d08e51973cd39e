"""
Seasonality extraction for booking histories, grouping observations by calendar month across years to compute average nightly rate, an occupancy proxy, and a multiplicative seasonal index relative to the twelve-month mean.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import numpy as np

from config import MONTHS, settings

log = logging.getLogger(__name__)

CheckIn = Union[str, date, datetime, None]


@dataclass(frozen=True)
class BookingObservation:
    check_in: CheckIn
    total_amount: float = 0.0
    nights: int = 1

    @property
    def nightly_rate(self) -> float:
        return float(self.total_amount) / max(int(self.nights or 0), 1)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> BookingObservation:
        amount = record.get("total_amount") or 0.0
        nights = record.get("nights") or 1
        try:
            amount = float(amount)
        except (TypeError, ValueError):
            amount = 0.0
        try:
            nights = int(nights)
        except (TypeError, ValueError):
            nights = 1
        return cls(
            check_in=record.get("check_in"),
            total_amount=amount,
            nights=nights,
        )


@dataclass(frozen=True)
class SeasonalPattern:
    month: int
    average_occupancy: float
    average_rate: float
    booking_count: int
    season_multiplier: float


def _to_day(moment: datetime, utc: bool) -> date:
    if utc and moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def parse_check_in(value: CheckIn, utc: bool = False) -> Optional[date]:
    """Calendar day of a check-in value, or ``None`` if it cannot be read.

    With ``utc`` set, offset-aware timestamps are converted to UTC first so
    that a late-evening check-in west of Greenwich lands on the next day.
    Naive timestamps and plain dates are taken as written.
    """
    if isinstance(value, datetime):
        return _to_day(value, utc)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return _to_day(datetime.fromisoformat(text), utc)
    except ValueError:
        return None


def _group_by_month(observations: Iterable[BookingObservation]) -> Dict[int, List[float]]:
    rates: Dict[int, List[float]] = {}
    for obs in observations:
        day = parse_check_in(obs.check_in)
        if day is None:
            log.debug("Skipping observation with unparseable check-in %r", obs.check_in)
            continue
        rates.setdefault(day.month, []).append(obs.nightly_rate)
    return rates


def extract(observations: Iterable[BookingObservation]) -> List[SeasonalPattern]:
    rates = _group_by_month(observations)
    days = settings.seasonality_days_per_month

    occupancy = {m: (len(rates.get(m, [])) / days) * 100 for m in MONTHS}
    overall = float(np.mean([occupancy[m] for m in MONTHS]))

    patterns: List[SeasonalPattern] = []
    for month in MONTHS:
        month_rates = rates.get(month, [])
        patterns.append(SeasonalPattern(
            month=month,
            average_occupancy=occupancy[month],
            average_rate=float(np.mean(month_rates)) if month_rates else 0.0,
            booking_count=len(month_rates),
            season_multiplier=occupancy[month] / overall if overall > 0 else 1.0,
        ))
    return patterns


def multiplier_for(patterns: Iterable[SeasonalPattern], month: int) -> float:
    return next((p.season_multiplier for p in patterns if p.month == month), 1.0)
