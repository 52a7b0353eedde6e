"""Severity bands and index classification results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SeverityBand(str, Enum):
    EXTREME = "Extreme"
    SEVERE = "Severe"
    MODERATE = "Moderate"
    NORMAL = "Normal"


@dataclass(frozen=True)
class SeverityAssessment:
    """Alert level derived from one observation.

    ``trigger`` names what fired the advisory: ``"heat"``, ``"cold"`` or the
    matched description keyword. Normal assessments carry no advisory text.
    """

    band: SeverityBand
    title: Optional[str] = None
    message: Optional[str] = None
    trigger: Optional[str] = None

    @property
    def has_advisory(self) -> bool:
        return self.band is not SeverityBand.NORMAL


@dataclass(frozen=True)
class IndexBand:
    """One labelled band of a bounded numeric index such as an AQI."""

    label: str
    advice: str


__all__ = ["SeverityBand", "SeverityAssessment", "IndexBand"]
