"""Threshold classification for weather alerts and bounded numeric indices."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple, TypeVar

from models.observation import Observation
from models.severity import IndexBand, SeverityAssessment, SeverityBand

logger = logging.getLogger(__name__)

EXTREME_HEAT_C = 35.0
EXTREME_COLD_C = -10.0

# Checked in this order; the first set with a substring hit wins.
SEVERITY_KEYWORDS: Tuple[Tuple[SeverityBand, Tuple[str, ...]], ...] = (
    (SeverityBand.EXTREME, ("tornado", "hurricane", "blizzard")),
    (SeverityBand.SEVERE, ("thunderstorm", "heavy rain", "snow")),
    (SeverityBand.MODERATE, ("light rain", "cloudy", "fog")),
)

AIR_QUALITY_BANDS: Tuple[Tuple[float, IndexBand], ...] = (
    (50, IndexBand("Good", "Air quality is satisfactory. Ideal for outdoor activities.")),
    (
        100,
        IndexBand(
            "Moderate",
            "Air quality is acceptable for most people. Sensitive individuals should consider "
            "limiting outdoor activities.",
        ),
    ),
    (
        150,
        IndexBand(
            "Unhealthy for Sensitive Groups",
            "Members of sensitive groups may experience health effects. Consider reducing outdoor activities.",
        ),
    ),
    (
        200,
        IndexBand("Unhealthy", "Everyone may begin to experience health effects. Limit outdoor activities."),
    ),
)

B = TypeVar("B")


def _description_advisory(band: SeverityBand, description: str) -> Tuple[str, str]:
    if band is SeverityBand.EXTREME:
        return "⚠️ Extreme Weather Alert!", f"{description} detected. Take immediate precautions."
    if band is SeverityBand.SEVERE:
        return "🌧️ Severe Weather Notice", f"{description} expected. Plan accordingly."
    return "🌥️ Weather Advisory", f"{description} in the area. Minor disruptions are possible."


def classify_severity(observation: Observation) -> SeverityAssessment:
    """Map an observation onto a severity band with at most one advisory."""

    temperature = observation.temperature
    if temperature > EXTREME_HEAT_C:
        return SeverityAssessment(
            band=SeverityBand.EXTREME,
            title="🔥 Extreme Heat Warning!",
            message="Temperature is very high. Stay hydrated and avoid outdoor activities.",
            trigger="heat",
        )
    if temperature < EXTREME_COLD_C:
        return SeverityAssessment(
            band=SeverityBand.EXTREME,
            title="🧊 Extreme Cold Warning!",
            message="Temperature is very low. Dress warmly and be cautious of ice.",
            trigger="cold",
        )

    description = observation.description.lower()
    for band, keywords in SEVERITY_KEYWORDS:
        for keyword in keywords:
            if keyword in description:
                title, message = _description_advisory(band, observation.description)
                logger.debug("Description keyword '%s' matched band %s", keyword, band.value)
                return SeverityAssessment(band=band, title=title, message=message, trigger=keyword)

    return SeverityAssessment(band=SeverityBand.NORMAL)


def classify_index(score: float, bands: Sequence[Tuple[float, B]]) -> B:
    """Return the first band whose upper bound is at least ``score``.

    Bounds must be sorted ascending. Scores above every bound map to the last
    (worst) band.
    """

    if not bands:
        raise ValueError("at least one band is required")
    bounds = [upper for upper, _ in bands]
    if any(later < earlier for earlier, later in zip(bounds, bounds[1:])):
        raise ValueError("band upper bounds must be sorted ascending")

    for upper, band in bands:
        if score <= upper:
            return band
    return bands[-1][1]


__all__ = [
    "AIR_QUALITY_BANDS",
    "EXTREME_COLD_C",
    "EXTREME_HEAT_C",
    "SEVERITY_KEYWORDS",
    "classify_index",
    "classify_severity",
]
