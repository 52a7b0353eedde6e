"""Air-quality report shape shared with the presentation layer."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class PollutantMetric:
    icon: str
    value: int
    label: str


@dataclass
class PollenReading:
    type: str
    level: str
    icon: str


@dataclass
class AirQualityReport:
    aqi: int
    description: str
    advice: str
    metrics: List[PollutantMetric] = field(default_factory=list)
    pollen: List[PollenReading] = field(default_factory=list)
