"""Weather agent that turns raw observations into structured judgments."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Sequence

from skycast_app.logging_config import get_logger, log_event, operation_context
from logic.activity_rules import generate_activities
from logic.air_quality import generate_air_quality
from logic.clothing_rules import generate_clothing
from logic.daily_selection import DEFAULT_MAX_DAYS, select_daily_forecasts
from logic.severity import classify_severity
from logic.units import share_text
from models.air_quality import AirQualityReport
from models.observation import DailyForecast, ForecastPoint, Observation
from models.recommendation import ClothingRecommendation, Recommendation
from models.severity import SeverityAssessment
from tools.observation_source import ObservationSource


LOGGER = get_logger(__name__)


@dataclass
class WeatherInsights:
    """Everything the presentation layer needs for one location."""

    observation: Observation
    daily_forecasts: List[DailyForecast]
    severity: SeverityAssessment
    activities: List[Recommendation]
    clothing: ClothingRecommendation
    air_quality: AirQualityReport
    share_text: str
    debug_summary: dict = field(default_factory=dict)


class WeatherInsightsAgent:
    """Fetches conditions through an observation source and runs every classifier."""

    def __init__(
        self,
        provider: ObservationSource,
        rng: random.Random | None = None,
        forecast_days: int = DEFAULT_MAX_DAYS,
        metric: bool = True,
    ) -> None:
        self.provider = provider
        self.rng = rng or random.Random()
        self.forecast_days = forecast_days
        self.metric = metric

    def build_insights(
        self, observation: Observation, points: Sequence[ForecastPoint]
    ) -> WeatherInsights:
        """Run the engine on already-resolved data."""

        daily = select_daily_forecasts(points, self.forecast_days)
        severity = classify_severity(observation)
        activities = generate_activities(observation)
        clothing = generate_clothing(observation)
        air_quality = generate_air_quality(self.rng)

        debug_summary = {
            "forecast_points": len(points),
            "forecast_days": len(daily),
            "severity_band": severity.band.value,
            "severity_trigger": severity.trigger,
            "activity_titles": [activity.title for activity in activities],
            "clothing_band": clothing.band,
            "aqi_band": air_quality.description,
        }
        return WeatherInsights(
            observation=observation,
            daily_forecasts=daily,
            severity=severity,
            activities=activities,
            clothing=clothing,
            air_quality=air_quality,
            share_text=share_text(observation, self.metric),
            debug_summary=debug_summary,
        )

    def get_insights(
        self,
        city: str | None = None,
        lat: float | None = None,
        lon: float | None = None,
        session_id: str | None = None,
    ) -> WeatherInsights:
        """Fetch current conditions plus forecast and derive insights.

        :class:`tools.errors.ObservationUnavailable` from the source propagates
        unchanged; nothing is computed from partial data.
        """

        with operation_context("agent:weather.get_insights", session_id=session_id) as correlation_id:
            observation = self.provider.get_current(city=city, lat=lat, lon=lon)
            points = self.provider.get_forecast(city=city, lat=lat, lon=lon)
            insights = self.build_insights(observation, points)

            log_event(
                LOGGER,
                level=logging.INFO,
                event="agent_call_completed",
                agent="weather",
                method="get_insights",
                correlation_id=correlation_id,
                severity=insights.severity.band.value,
                activities=len(insights.activities),
                forecast_days=len(insights.daily_forecasts),
            )
            return insights


__all__ = ["WeatherInsights", "WeatherInsightsAgent"]
