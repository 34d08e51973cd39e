"""
Registry for manual forecast adjustments, letting revenue managers override the projected value for specific calendar dates with a recorded reason, and applying those overrides to a generated forecast without mutating it.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence

from engine.forecast.trend import DataPoint


@dataclass(frozen=True)
class ManualAdjustment:
    date: str
    original_value: float
    adjusted_value: float
    reason: str = ""


class AdjustmentRegistry:
    def __init__(self) -> None:
        self._by_date: Dict[str, ManualAdjustment] = {}

    def add(self, adjustment: ManualAdjustment) -> None:
        # one adjustment per date; the newest wins and moves to the end
        self._by_date.pop(adjustment.date, None)
        self._by_date[adjustment.date] = adjustment

    def add_many(self, adjustments: Iterable[ManualAdjustment]) -> None:
        for adjustment in adjustments:
            self.add(adjustment)

    def remove(self, date: str) -> None:
        self._by_date.pop(date, None)

    def for_date(self, date: str) -> Optional[ManualAdjustment]:
        return self._by_date.get(date)

    def list_all(self) -> List[ManualAdjustment]:
        return list(self._by_date.values())

    def clear(self) -> None:
        self._by_date.clear()

    def apply(self, points: Sequence[DataPoint]) -> List[DataPoint]:
        adjusted: List[DataPoint] = []
        for point in points:
            adjustment = self._by_date.get(point.date) if point.date else None
            adjusted.append(replace(point, y=adjustment.adjusted_value) if adjustment else point)
        return adjusted

    def __len__(self) -> int:
        return len(self._by_date)
