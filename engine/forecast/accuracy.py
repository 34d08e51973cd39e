"""
Accuracy scoring for forecasts, comparing predicted against realized values with mean absolute, mean squared and mean absolute percentage error, plus a chronological holdout check that refits the trend on the leading share of a history and scores it on the rest.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from engine.forecast.trend import DataPoint, fit, predict
from config import settings


@dataclass(frozen=True)
class AccuracyMetrics:
    mae: float
    mse: float
    mape: float

    @classmethod
    def zero(cls) -> AccuracyMetrics:
        return cls(mae=0.0, mse=0.0, mape=0.0)


def score(predicted: Sequence[float], actual: Sequence[float]) -> AccuracyMetrics:
    if len(predicted) != len(actual) or len(predicted) == 0:
        return AccuracyMetrics.zero()

    p = np.array(predicted, dtype=float)
    a = np.array(actual, dtype=float)
    n = len(p)
    errors = np.abs(p - a)

    nonzero = a != 0
    # zero actuals drop out of the sum but still count towards n
    percent = float(np.sum(errors[nonzero] / np.abs(a[nonzero])))

    return AccuracyMetrics(
        mae=float(np.sum(errors)) / n,
        mse=float(np.sum(errors ** 2)) / n,
        mape=percent / n * 100,
    )


def holdout(
    history: Sequence[DataPoint],
    train_ratio: float | None = None,
    min_points: int | None = None,
) -> AccuracyMetrics:
    if train_ratio is None:
        train_ratio = settings.holdout_train_ratio
    if min_points is None:
        min_points = settings.holdout_min_points
    if len(history) < min_points:
        return AccuracyMetrics.zero()

    split = int(math.floor(len(history) * train_ratio))
    train, test = history[:split], history[split:]
    if not test:
        return AccuracyMetrics.zero()

    model = fit(train)
    return score([predict(p.x, model) for p in test], [p.y for p in test])
