"""Model package exports."""

from models.air_quality import AirQualityReport, PollenReading, PollutantMetric
from models.chat import ChatHistory, ChatTurn, IntentCategory
from models.observation import DailyForecast, ForecastPoint, Observation, WeatherCondition
from models.recommendation import Accessory, ClothingCategory, ClothingRecommendation, Recommendation
from models.severity import IndexBand, SeverityAssessment, SeverityBand

__all__ = [
    "Accessory",
    "AirQualityReport",
    "ChatHistory",
    "ChatTurn",
    "ClothingCategory",
    "ClothingRecommendation",
    "DailyForecast",
    "ForecastPoint",
    "IndexBand",
    "IntentCategory",
    "Observation",
    "PollenReading",
    "PollutantMetric",
    "Recommendation",
    "SeverityAssessment",
    "SeverityBand",
    "WeatherCondition",
]
