"""Observation and forecast data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional


class WeatherCondition(str, Enum):
    """Main condition category reported by the observation source."""

    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"
    MIST = "Mist"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "WeatherCondition":
        """Map a provider condition string onto the fixed enumeration."""

        if isinstance(value, WeatherCondition):
            return value
        normalized = str(value or "").strip().lower()
        return _CONDITION_ALIASES.get(normalized, cls.OTHER)


_CONDITION_ALIASES = {
    "clear": WeatherCondition.CLEAR,
    "clouds": WeatherCondition.CLOUDS,
    "cloudy": WeatherCondition.CLOUDS,
    "rain": WeatherCondition.RAIN,
    "drizzle": WeatherCondition.RAIN,
    "snow": WeatherCondition.SNOW,
    "thunderstorm": WeatherCondition.THUNDERSTORM,
    "mist": WeatherCondition.MIST,
    "fog": WeatherCondition.MIST,
    "haze": WeatherCondition.MIST,
    "smoke": WeatherCondition.MIST,
    "dust": WeatherCondition.MIST,
    "sand": WeatherCondition.MIST,
    "ash": WeatherCondition.MIST,
}


def _as_float(value: Any) -> float:
    if value is None:
        return 0.0
    return float(value)


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    return int(round(float(value)))


@dataclass(frozen=True)
class Observation:
    """One full snapshot of current conditions at a place and time.

    Missing numeric readings are stored as zero so rules never see ``None``.
    """

    location_name: str
    timestamp: datetime
    temperature: float
    country_code: str = ""
    feels_like: Optional[float] = None
    humidity: int = 0
    wind_speed: float = 0.0
    pressure: float = 0.0
    visibility: int = 0
    condition: WeatherCondition = WeatherCondition.OTHER
    description: str = ""
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None

    def __post_init__(self) -> None:
        temperature = _as_float(self.temperature)
        object.__setattr__(self, "temperature", temperature)
        feels_like = temperature if self.feels_like is None else _as_float(self.feels_like)
        object.__setattr__(self, "feels_like", feels_like)
        object.__setattr__(self, "humidity", min(max(_as_int(self.humidity), 0), 100))
        object.__setattr__(self, "wind_speed", max(_as_float(self.wind_speed), 0.0))
        object.__setattr__(self, "pressure", _as_float(self.pressure))
        object.__setattr__(self, "visibility", max(_as_int(self.visibility), 0))
        object.__setattr__(self, "condition", WeatherCondition.parse(self.condition))
        object.__setattr__(self, "description", str(self.description or ""))
        object.__setattr__(self, "country_code", str(self.country_code or ""))


@dataclass(frozen=True)
class ForecastPoint:
    """One short-interval future weather sample."""

    timestamp: datetime
    temperature: float
    feels_like: Optional[float] = None
    humidity: int = 0
    pressure: float = 0.0
    wind_speed: float = 0.0
    condition: WeatherCondition = WeatherCondition.OTHER
    description: str = ""

    def __post_init__(self) -> None:
        temperature = _as_float(self.temperature)
        object.__setattr__(self, "temperature", temperature)
        feels_like = temperature if self.feels_like is None else _as_float(self.feels_like)
        object.__setattr__(self, "feels_like", feels_like)
        object.__setattr__(self, "humidity", min(max(_as_int(self.humidity), 0), 100))
        object.__setattr__(self, "pressure", _as_float(self.pressure))
        object.__setattr__(self, "wind_speed", max(_as_float(self.wind_speed), 0.0))
        object.__setattr__(self, "condition", WeatherCondition.parse(self.condition))
        object.__setattr__(self, "description", str(self.description or ""))


@dataclass(frozen=True)
class DailyForecast:
    """The forecast point chosen to represent a calendar day."""

    day: date
    point: ForecastPoint


__all__ = ["WeatherCondition", "Observation", "ForecastPoint", "DailyForecast"]
