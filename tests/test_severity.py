"""Severity classification and index banding."""

from datetime import datetime, timezone

import pytest

from logic.severity import AIR_QUALITY_BANDS, classify_index, classify_severity
from models.observation import Observation
from models.severity import SeverityBand


def _observation(temperature: float, description: str = "clear sky") -> Observation:
    return Observation(
        location_name="Oslo",
        timestamp=datetime(2025, 1, 10, 12, tzinfo=timezone.utc),
        temperature=temperature,
        description=description,
    )


@pytest.mark.parametrize(
    ("temperature", "description", "band", "trigger"),
    [
        (36.0, "clear sky", SeverityBand.EXTREME, "heat"),
        (-11.0, "clear sky", SeverityBand.EXTREME, "cold"),
        (38.0, "thunderstorm", SeverityBand.EXTREME, "heat"),
        (20.0, "Tornado warning", SeverityBand.EXTREME, "tornado"),
        (20.0, "thunderstorm with heavy rain", SeverityBand.SEVERE, "thunderstorm"),
        (-2.0, "light snow", SeverityBand.SEVERE, "snow"),
        (12.0, "light rain", SeverityBand.MODERATE, "light rain"),
        (8.0, "Fog", SeverityBand.MODERATE, "fog"),
        (20.0, "clear sky", SeverityBand.NORMAL, None),
        (35.0, "clear sky", SeverityBand.NORMAL, None),
        (-10.0, "clear sky", SeverityBand.NORMAL, None),
    ],
)
def test_classify_severity(temperature, description, band, trigger) -> None:
    assessment = classify_severity(_observation(temperature, description))

    assert assessment.band is band
    assert assessment.trigger == trigger


def test_advisory_text_only_outside_normal_band() -> None:
    heat = classify_severity(_observation(40.0))
    assert heat.has_advisory
    assert heat.title == "🔥 Extreme Heat Warning!"

    moderate = classify_severity(_observation(15.0, "cloudy"))
    assert moderate.has_advisory
    assert moderate.title == "🌥️ Weather Advisory"
    assert moderate.message.startswith("cloudy")

    normal = classify_severity(_observation(15.0))
    assert not normal.has_advisory
    assert normal.title is None and normal.message is None


@pytest.mark.parametrize(
    ("score", "label"),
    [
        (0, "Good"),
        (50, "Good"),
        (51, "Moderate"),
        (100, "Moderate"),
        (149, "Unhealthy for Sensitive Groups"),
        (200, "Unhealthy"),
        (350, "Unhealthy"),
    ],
)
def test_classify_index_air_quality(score, label) -> None:
    assert classify_index(score, AIR_QUALITY_BANDS).label == label


def test_classify_index_rejects_bad_tables() -> None:
    with pytest.raises(ValueError):
        classify_index(10, [])
    with pytest.raises(ValueError):
        classify_index(10, [(100, "b"), (50, "a")])
