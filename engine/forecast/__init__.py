"""
Forecasting logic for occupancy and rate series, including least-squares trend fitting, month-of-year seasonality extraction, seasonally scaled multi-day projection and post-hoc accuracy scoring.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.trend import DataPoint, LinearModel, fit as fit_trend, predict, classify as classify_trend
from engine.forecast.seasonality import BookingObservation, SeasonalPattern, extract as extract_seasonality
from engine.forecast.generator import forecast as generate_forecast
from engine.forecast.accuracy import AccuracyMetrics, score as score_accuracy, holdout as holdout_accuracy

__all__ = [
    "DataPoint", "LinearModel", "fit_trend", "predict", "classify_trend",
    "BookingObservation", "SeasonalPattern", "extract_seasonality",
    "generate_forecast",
    "AccuracyMetrics", "score_accuracy", "holdout_accuracy",
]
