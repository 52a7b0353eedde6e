"""Collapse short-interval forecast points into one representative point per day."""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List

from models.observation import DailyForecast, ForecastPoint

logger = logging.getLogger(__name__)

TARGET_HOUR = 12
DEFAULT_MAX_DAYS = 5


def _distance_from_target(point: ForecastPoint) -> int:
    return abs(point.timestamp.hour - TARGET_HOUR)


def select_daily_forecasts(
    points: Iterable[ForecastPoint], max_days: int = DEFAULT_MAX_DAYS
) -> List[DailyForecast]:
    """Pick the point closest to midday for each calendar day.

    Days are keyed on each timestamp as given; no time zone conversion happens
    here. Ties keep the point seen first. Days come back in order of first
    appearance, so callers wanting chronological output must sort the input.
    """

    if max_days <= 0:
        return []

    chosen: Dict[date, ForecastPoint] = {}
    seen = 0
    for point in points:
        seen += 1
        day = point.timestamp.date()
        current = chosen.get(day)
        if current is None or _distance_from_target(point) < _distance_from_target(current):
            chosen[day] = point

    daily = [DailyForecast(day=day, point=point) for day, point in chosen.items()][:max_days]
    logger.info("Selected %s daily forecasts from %s points", len(daily), seen)
    return daily


__all__ = ["select_daily_forecasts", "TARGET_HOUR", "DEFAULT_MAX_DAYS"]
