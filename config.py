"""
Constants and configuration for Staycast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List

from pydantic_settings import BaseSettings


REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
RESERVATIONS_TTL: int = int(os.getenv("RESERVATIONS_TTL", "0"))
ADJUSTMENTS_TTL: int = int(os.getenv("ADJUSTMENTS_TTL", "2592000"))

KEY_PREFIX = "rm"

INSUFFICIENT_DATA_EQUATION = "insufficient data"

MONTHS: List[int] = list(range(1, 13))


class Settings(BaseSettings):
    # trend classification: |slope| below this is flat; absolute, not scale-aware
    trend_flat_threshold: float = 0.01
    equation_slope_precision: int = 4
    equation_intercept_precision: int = 2

    # seasonality: a month is approximated as this many bookable days
    seasonality_days_per_month: float = 30.0

    # forecast output is percentage bounded
    forecast_min_value: float = 0.0
    forecast_max_value: float = 100.0
    default_horizon_days: int = 30
    max_horizon_days: int = 365

    # occupancy history assumes this many rooms when the host supplies none
    default_room_count: int = 100

    # holdout accuracy
    holdout_min_points: int = 10
    holdout_train_ratio: float = 0.8

    # store
    store_redis_retry_cooldown_seconds: float = 10.0
    store_redis_op_timeout_seconds: float = 0.5
    store_fallback_max_items: int = 10_000

    model_config = {
        "env_prefix": "STAYCAST_",
        "extra": "ignore",
    }


settings = Settings()
