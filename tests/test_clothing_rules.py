"""Clothing guidance bands and weather accessories."""

from datetime import datetime, timezone

import pytest

from logic.clothing_rules import MAX_ACCESSORIES, generate_clothing, select_outfit_profile
from models.observation import Observation, WeatherCondition


def _observation(temperature: float, condition=WeatherCondition.CLEAR, wind_speed: float = 3.0) -> Observation:
    return Observation(
        location_name="Dublin",
        timestamp=datetime(2025, 3, 1, 12, tzinfo=timezone.utc),
        temperature=temperature,
        condition=condition,
        wind_speed=wind_speed,
    )


@pytest.mark.parametrize(
    ("temperature", "band"),
    [(35.0, "hot"), (30.0, "hot"), (29.9, "warm"), (20.0, "warm"), (10.0, "cool"), (9.9, "cold"), (-30.0, "cold")],
)
def test_select_outfit_profile_bands(temperature, band) -> None:
    assert select_outfit_profile(temperature).band == band


def test_cold_rain_puts_umbrella_first_and_waterproof_shoes_last() -> None:
    clothing = generate_clothing(_observation(5.0, condition=WeatherCondition.RAIN))

    names = [accessory.name for accessory in clothing.accessories]
    assert clothing.band == "cold"
    assert clothing.character == "🧥❄️"
    assert names[0] == "Umbrella"
    assert names[-1] == "Waterproof Shoes"
    assert "Warm Gloves" in names
    assert clothing.temperature_label == "Perfect for 5°C"


def test_hot_wet_windy_day_truncates_accessories() -> None:
    clothing = generate_clothing(_observation(32.0, condition=WeatherCondition.RAIN, wind_speed=9.0))

    names = [accessory.name for accessory in clothing.accessories]
    assert len(names) == MAX_ACCESSORIES
    assert names[0] == "Umbrella"
    assert "Windproof Jacket" not in names


def test_wind_adds_windproof_layer_on_dry_day() -> None:
    clothing = generate_clothing(_observation(15.0, wind_speed=8.5))

    assert clothing.band == "cool"
    assert clothing.accessories[-1].name == "Windproof Jacket"
    assert [category.name for category in clothing.categories] == ["Tops", "Bottoms", "Outerwear"]


def test_calm_dry_day_keeps_base_accessories() -> None:
    base = select_outfit_profile(22.0)
    clothing = generate_clothing(_observation(22.0, wind_speed=8.0))

    assert clothing.accessories == base.accessories
