"""
Test Suite for Manual Forecast Adjustments

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.adjustments import AdjustmentRegistry, ManualAdjustment
from engine.forecast.trend import DataPoint


def test_adjustment_registry_basic():
    reg = AdjustmentRegistry()
    assert reg.list_all() == []
    a1 = ManualAdjustment(date="2026-05-01", original_value=60, adjusted_value=80, reason="festival")
    a2 = ManualAdjustment(date="2026-05-02", original_value=55, adjusted_value=50)
    reg.add_many([a1, a2])
    assert len(reg) == 2
    assert reg.for_date("2026-05-01") == a1
    replacement = ManualAdjustment(date="2026-05-01", original_value=60, adjusted_value=90)
    reg.add(replacement)
    assert reg.list_all() == [a2, replacement]
    reg.remove("2026-05-02")
    reg.remove("2026-12-31")
    assert reg.list_all() == [replacement]
    reg.clear()
    assert reg.list_all() == []


def test_apply_overrides_matching_dates_only():
    reg = AdjustmentRegistry()
    reg.add(ManualAdjustment(date="2026-05-02", original_value=41, adjusted_value=99))
    points = [
        DataPoint(x=1, y=40, date="2026-05-01"),
        DataPoint(x=2, y=41, date="2026-05-02"),
        DataPoint(x=3, y=42),
    ]
    adjusted = reg.apply(points)
    assert [p.y for p in adjusted] == [40, 99, 42]
    assert adjusted[1].x == 2 and adjusted[1].date == "2026-05-02"
    assert points[1].y == 41
