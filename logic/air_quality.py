"""Mock air-quality and pollen generator.

There is no real measurement behind these numbers. Callers rely only on the
shape of :class:`AirQualityReport`; the randomness comes from the injected
generator so reports are reproducible under a fixed seed.
"""

from __future__ import annotations

import random
from typing import Optional

from logic.severity import AIR_QUALITY_BANDS, classify_index
from models.air_quality import AirQualityReport, PollenReading, PollutantMetric

POLLEN_LEVELS = ("Low", "Moderate", "High")

# (icon, label, minimum, span)
_POLLUTANTS = (
    ("🌫️", "PM2.5 μg/m³", 10, 50),
    ("💨", "PM10 μg/m³", 20, 100),
    ("⚠️", "NO₂ μg/m³", 50, 200),
    ("🏭", "CO μg/m³", 100, 300),
    ("☀️", "O₃ μg/m³", 50, 100),
    ("🌬️", "SO₂ μg/m³", 5, 50),
)

_POLLEN_TYPES = (
    ("Tree Pollen", "🌳"),
    ("Grass Pollen", "🌱"),
    ("Weed Pollen", "🌿"),
    ("Mold Spores", "🍄"),
)


def generate_air_quality(rng: Optional[random.Random] = None) -> AirQualityReport:
    """Build a mock report: AQI in [50, 200), six pollutants, four pollen types."""

    rng = rng or random.Random()
    aqi = 50 + rng.randrange(150)
    band = classify_index(aqi, AIR_QUALITY_BANDS)
    metrics = [
        PollutantMetric(icon=icon, value=minimum + rng.randrange(span), label=label)
        for icon, label, minimum, span in _POLLUTANTS
    ]
    pollen = [
        PollenReading(type=name, level=rng.choice(POLLEN_LEVELS), icon=icon) for name, icon in _POLLEN_TYPES
    ]
    return AirQualityReport(aqi=aqi, description=band.label, advice=band.advice, metrics=metrics, pollen=pollen)


__all__ = ["generate_air_quality", "POLLEN_LEVELS"]
