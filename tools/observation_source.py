"""Observation source abstractions and implementations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import requests
from pydantic import BaseModel, ValidationError, model_validator

from models.observation import ForecastPoint, Observation, WeatherCondition
from tools.errors import ObservationUnavailable
from tools.observability import instrument_tool


LOGGER = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class LocationQuery(BaseModel):
    """Either a city name or a coordinate pair."""

    city: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

    @model_validator(mode="after")
    def _require_city_or_coordinates(self) -> "LocationQuery":
        if self.city:
            self.city = self.city.strip()
        if not self.city and (self.lat is None or self.lon is None):
            raise ValueError("either city or both lat and lon are required")
        if self.lat is not None and not -90 <= self.lat <= 90:
            raise ValueError("lat must be within [-90, 90]")
        if self.lon is not None and not -180 <= self.lon <= 180:
            raise ValueError("lon must be within [-180, 180]")
        return self

    def as_params(self) -> dict:
        if self.city:
            return {"q": self.city}
        return {"lat": self.lat, "lon": self.lon}


class _Condition(BaseModel):
    main: str = "Other"
    description: str = ""


class _Main(BaseModel):
    temp: float
    feels_like: Optional[float] = None
    humidity: Optional[float] = None
    pressure: Optional[float] = None


class _Wind(BaseModel):
    speed: Optional[float] = None


class _Sys(BaseModel):
    country: str = ""
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class _CurrentResponse(BaseModel):
    name: str = ""
    dt: int
    timezone: int = 0
    main: _Main
    wind: _Wind = _Wind()
    visibility: Optional[int] = None
    weather: List[_Condition] = []
    sys: _Sys = _Sys()


class _ForecastEntry(BaseModel):
    dt: int
    main: _Main
    wind: _Wind = _Wind()
    weather: List[_Condition] = []


class _City(BaseModel):
    name: str = ""
    timezone: int = 0


class _ForecastResponse(BaseModel):
    list: List[_ForecastEntry] = []
    city: _City = _City()


def _local_time(epoch_seconds: Optional[int], offset_seconds: int) -> Optional[datetime]:
    if epoch_seconds is None:
        return None
    return datetime.fromtimestamp(epoch_seconds, tz=timezone(timedelta(seconds=offset_seconds)))


def _first_condition(conditions: List[_Condition]) -> _Condition:
    return conditions[0] if conditions else _Condition()


class ObservationSource(ABC):
    """Supplies current conditions and forecast points, or signals failure."""

    @abstractmethod
    def get_current(
        self, *, city: str | None = None, lat: float | None = None, lon: float | None = None
    ) -> Observation:
        """Return the current observation for a location."""

    @abstractmethod
    def get_forecast(
        self, *, city: str | None = None, lat: float | None = None, lon: float | None = None
    ) -> List[ForecastPoint]:
        """Return forecast points ordered by timestamp."""


class OpenWeatherObservationSource(ObservationSource):
    """OpenWeather provider with schema validation.

    Timestamps are expressed in the location's own UTC offset so calendar days
    downstream match the place being forecast. Failures raise
    :class:`ObservationUnavailable`; there is no retry.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        base_url: str = OPENWEATHER_BASE_URL,
    ) -> None:
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.base_url = base_url.rstrip("/")

    def _fetch(self, endpoint: str, query: LocationQuery) -> dict:
        if not self.api_key:
            raise ObservationUnavailable("missing_api_key")

        params = {**query.as_params(), "appid": self.api_key, "units": "metric"}
        url = f"{self.base_url}/{endpoint}"
        try:
            response = requests.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            LOGGER.error("Weather API returned an error", extra={"endpoint": endpoint, "status": status})
            reason = "location_not_found" if status == 404 else "http_error"
            raise ObservationUnavailable(reason) from exc
        except requests.JSONDecodeError as exc:
            LOGGER.error("Weather API returned invalid JSON", exc_info=exc)
            raise ObservationUnavailable("invalid_payload") from exc
        except (requests.Timeout, requests.RequestException) as exc:
            LOGGER.error("Weather API unreachable", exc_info=exc)
            raise ObservationUnavailable("request_error") from exc

    @instrument_tool("get_current_weather", input_model=LocationQuery)
    def get_current(
        self, *, city: str | None = None, lat: float | None = None, lon: float | None = None
    ) -> Observation:
        query = LocationQuery(city=city, lat=lat, lon=lon)
        payload = self._fetch("weather", query)
        try:
            parsed = _CurrentResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("Current weather payload schema validation failed", exc_info=exc)
            raise ObservationUnavailable("schema_validation") from exc

        condition = _first_condition(parsed.weather)
        return Observation(
            location_name=parsed.name or (query.city or ""),
            country_code=parsed.sys.country,
            timestamp=_local_time(parsed.dt, parsed.timezone),
            temperature=parsed.main.temp,
            feels_like=parsed.main.feels_like,
            humidity=parsed.main.humidity,
            wind_speed=parsed.wind.speed,
            pressure=parsed.main.pressure,
            visibility=parsed.visibility,
            condition=WeatherCondition.parse(condition.main),
            description=condition.description,
            sunrise=_local_time(parsed.sys.sunrise, parsed.timezone),
            sunset=_local_time(parsed.sys.sunset, parsed.timezone),
        )

    @instrument_tool("get_weather_forecast", input_model=LocationQuery)
    def get_forecast(
        self, *, city: str | None = None, lat: float | None = None, lon: float | None = None
    ) -> List[ForecastPoint]:
        query = LocationQuery(city=city, lat=lat, lon=lon)
        payload = self._fetch("forecast", query)
        try:
            parsed = _ForecastResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("Forecast payload schema validation failed", exc_info=exc)
            raise ObservationUnavailable("schema_validation") from exc

        points = []
        for entry in parsed.list:
            condition = _first_condition(entry.weather)
            points.append(
                ForecastPoint(
                    timestamp=_local_time(entry.dt, parsed.city.timezone),
                    temperature=entry.main.temp,
                    feels_like=entry.main.feels_like,
                    humidity=entry.main.humidity,
                    pressure=entry.main.pressure,
                    wind_speed=entry.wind.speed,
                    condition=WeatherCondition.parse(condition.main),
                    description=condition.description,
                )
            )
        LOGGER.info("Parsed forecast points", extra={"count": len(points)})
        return points


class MockObservationSource(ObservationSource):
    """Offline deterministic observation source for tests and local runs."""

    def __init__(
        self,
        observation: Observation | None = None,
        forecast: List[ForecastPoint] | None = None,
    ) -> None:
        base = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
        self.observation = observation or Observation(
            location_name="Lisbon",
            country_code="PT",
            timestamp=base,
            temperature=22.0,
            feels_like=21.5,
            humidity=55,
            wind_speed=4.0,
            pressure=1015,
            visibility=10000,
            condition=WeatherCondition.CLEAR,
            description="clear sky",
        )
        if forecast is None:
            forecast = [
                ForecastPoint(
                    timestamp=base + timedelta(hours=3 * step),
                    temperature=18.0 + (step % 8),
                    humidity=60,
                    pressure=1014,
                    wind_speed=3.5,
                    condition=WeatherCondition.CLOUDS if step % 5 == 0 else WeatherCondition.CLEAR,
                    description="scattered clouds" if step % 5 == 0 else "clear sky",
                )
                for step in range(40)
            ]
        self.forecast = list(forecast)

    def get_current(
        self, *, city: str | None = None, lat: float | None = None, lon: float | None = None
    ) -> Observation:
        LOGGER.info("Returning mock observation")
        return self.observation

    def get_forecast(
        self, *, city: str | None = None, lat: float | None = None, lon: float | None = None
    ) -> List[ForecastPoint]:
        LOGGER.info("Returning mock forecast", extra={"count": len(self.forecast)})
        return list(self.forecast)


__all__ = [
    "LocationQuery",
    "ObservationSource",
    "OpenWeatherObservationSource",
    "MockObservationSource",
]
