"""Repeated calls on the same input give the same judgment."""

from datetime import datetime, timedelta, timezone

import pytest

from logic.activity_rules import generate_activities
from logic.clothing_rules import generate_clothing
from logic.daily_selection import select_daily_forecasts
from logic.severity import classify_severity
from models.observation import ForecastPoint, Observation, WeatherCondition

_START = datetime(2025, 11, 3, 0, 0, tzinfo=timezone(timedelta(hours=-5)))

_OBSERVATIONS = [
    Observation(
        location_name="Chicago",
        timestamp=_START,
        temperature=temperature,
        wind_speed=wind,
        visibility=9000,
        condition=condition,
        description=description,
    )
    for temperature, wind, condition, description in [
        (-12.0, 3.0, WeatherCondition.SNOW, "blizzard"),
        (12.0, 9.5, WeatherCondition.RAIN, "light rain"),
        (24.5, 6.0, WeatherCondition.CLOUDS, "scattered clouds"),
        (37.0, 0.0, WeatherCondition.CLEAR, "clear sky"),
    ]
]

_POINTS = [
    ForecastPoint(timestamp=_START + timedelta(hours=3 * step), temperature=5.0 + step, condition="Clouds")
    for step in range(40)
]


@pytest.mark.parametrize("observation", _OBSERVATIONS, ids=lambda obs: obs.description)
@pytest.mark.parametrize(
    "judge",
    [classify_severity, generate_activities, generate_clothing],
    ids=["severity", "activities", "clothing"],
)
def test_observation_judgments_are_repeatable(judge, observation) -> None:
    assert judge(observation) == judge(observation)


def test_daily_selection_is_repeatable() -> None:
    first = select_daily_forecasts(_POINTS)

    assert first == select_daily_forecasts(_POINTS)
    assert first == select_daily_forecasts(list(_POINTS))
