"""
Trend fitting logic for historical series, using closed-form ordinary least squares to fit a line through (x, y) observations, scoring the fit with a clamped coefficient of determination, and classifying the resulting direction of travel.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from engine.enums import Trend
from config import INSUFFICIENT_DATA_EQUATION, settings


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float
    date: Optional[str] = None


@dataclass(frozen=True)
class LinearModel:
    slope: float
    intercept: float
    r2: float
    equation: str

    @classmethod
    def zero(cls) -> LinearModel:
        return cls(slope=0.0, intercept=0.0, r2=0.0, equation=INSUFFICIENT_DATA_EQUATION)


def _equation(slope: float, intercept: float) -> str:
    sp = settings.equation_slope_precision
    ip = settings.equation_intercept_precision
    return f"y = {slope:.{sp}f}x + {intercept:.{ip}f}"


def _r_squared(x: np.ndarray, y: np.ndarray, slope: float, intercept: float) -> float:
    predicted = slope * x + intercept
    ss_res = float(np.sum((y - predicted) ** 2))
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    # a constant series explains nothing, so it scores 0 rather than 1
    r2 = 1.0 - ss_res / ss_tot if ss_tot > 0 else 0.0
    return max(0.0, min(1.0, r2))


def fit(points: Sequence[DataPoint]) -> LinearModel:
    n = len(points)
    if n < 2:
        return LinearModel.zero()

    x = np.array([p.x for p in points], dtype=float)
    y = np.array([p.y for p in points], dtype=float)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    denominator = n * sum_xx - sum_x * sum_x
    if np.ptp(x) == 0 or denominator == 0:
        # every x is the same: no direction to fit, fall back to the mean level
        slope = 0.0
    else:
        slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    return LinearModel(
        slope=slope,
        intercept=intercept,
        r2=_r_squared(x, y, slope, intercept),
        equation=_equation(slope, intercept),
    )


def predict(x: float, model: LinearModel) -> float:
    return model.slope * x + model.intercept


def classify(points: Sequence[DataPoint]) -> Trend:
    if len(points) < 2:
        return Trend.flat
    return Trend.from_slope(fit(points).slope)
