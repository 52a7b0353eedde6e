"""Skycast app bootstrap."""

from __future__ import annotations

import random

from skycast_app.config import SkycastConfig
from skycast_app.logging_config import configure_logging, get_logger
from agents.assistant_agent import WeatherAssistantAgent
from agents.weather_agent import WeatherInsightsAgent
from memory.favorites import FavoritesStore, JSONFavoritesStore
from models.observation import Observation
from tools.conversational_backend import ConversationalBackend, GeminiBackend
from tools.observation_source import ObservationSource, OpenWeatherObservationSource


LOGGER = get_logger(__name__)


class SkycastApp:
    """Wires together the collaborators, the engine and the agents."""

    def __init__(
        self,
        config: SkycastConfig | None = None,
        source: ObservationSource | None = None,
        backend: ConversationalBackend | None = None,
        favorites: FavoritesStore | None = None,
    ) -> None:
        self.config = config or SkycastConfig.from_env()
        configure_logging()

        self.rng = random.Random(self.config.random_seed)
        self.source = source or OpenWeatherObservationSource(
            api_key=self.config.openweather_api_key,
            timeout_seconds=self.config.request_timeout_seconds,
        )
        self.backend = backend or GeminiBackend(
            api_key=self.config.gemini_api_key,
            model=self.config.gemini_model,
            timeout_seconds=self.config.request_timeout_seconds,
        )
        self.favorites = favorites or JSONFavoritesStore(self.config.favorites_path)

        self.weather_agent = WeatherInsightsAgent(
            provider=self.source,
            rng=self.rng,
            forecast_days=self.config.forecast_days,
            metric=self.config.metric,
        )
        self.assistant = WeatherAssistantAgent(
            backend=self.backend, rng=self.rng, metric=self.config.metric
        )
        LOGGER.info(
            "Skycast app initialised",
            extra={"environment": self.config.environment or "local", "metric": self.config.metric},
        )

    def lookup(self, city: str | None = None, lat: float | None = None, lon: float | None = None):
        """Fetch insights for a location."""

        return self.weather_agent.get_insights(city=city, lat=lat, lon=lon)

    def chat(self, message: str, context: Observation | None = None) -> str:
        """Answer ``message`` against the observation the caller supplies."""

        response = self.assistant.handle_message(message, context=context)
        return response["message"]


__all__ = ["SkycastApp"]
