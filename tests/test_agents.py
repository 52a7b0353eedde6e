"""Weather insights and assistant agent coverage."""

import random
from datetime import datetime, timezone

import pytest

from agents.assistant_agent import CONNECTION_NOTICE, WeatherAssistantAgent
from agents.weather_agent import WeatherInsightsAgent
from logic.intent_classifier import MISSING_CONTEXT_PROMPT, REPLY_TEMPLATES, classify_and_reply
from models.chat import ChatHistory, IntentCategory
from models.observation import Observation, WeatherCondition
from models.severity import SeverityBand
from tools.conversational_backend import StaticBackend
from tools.errors import ObservationUnavailable
from tools.observation_source import MockObservationSource, ObservationSource


class _UnavailableSource(ObservationSource):
    def get_current(self, *, city=None, lat=None, lon=None):
        raise ObservationUnavailable("request_error")

    def get_forecast(self, *, city=None, lat=None, lon=None):
        raise AssertionError("forecast should not be fetched after a failed lookup")


def test_weather_agent_builds_full_insights() -> None:
    agent = WeatherInsightsAgent(provider=MockObservationSource(), rng=random.Random(1))

    insights = agent.get_insights(city="Lisbon")

    assert insights.share_text == "Weather in Lisbon: 22°C, clear sky 🌤️"
    assert len(insights.daily_forecasts) == 5
    assert insights.daily_forecasts[0].point.timestamp.hour == 12
    assert insights.severity.band is SeverityBand.NORMAL
    assert [activity.title for activity in insights.activities] == [
        "Hiking & Nature Walk",
        "Cycling Adventure",
        "Cooking Workshop",
    ]
    assert insights.clothing.band == "warm"
    assert 50 <= insights.air_quality.aqi < 200
    assert insights.debug_summary["forecast_points"] == 40


def test_weather_agent_respects_day_count_and_units() -> None:
    agent = WeatherInsightsAgent(provider=MockObservationSource(), forecast_days=2, metric=False)

    insights = agent.get_insights(city="Lisbon")

    assert len(insights.daily_forecasts) == 2
    assert "72°F" in insights.share_text


def test_weather_agent_seeded_air_quality_is_reproducible() -> None:
    first = WeatherInsightsAgent(MockObservationSource(), rng=random.Random(5)).get_insights(city="Lisbon")
    second = WeatherInsightsAgent(MockObservationSource(), rng=random.Random(5)).get_insights(city="Lisbon")

    assert first.air_quality == second.air_quality


def test_weather_agent_propagates_source_failure() -> None:
    agent = WeatherInsightsAgent(provider=_UnavailableSource())

    with pytest.raises(ObservationUnavailable):
        agent.get_insights(city="Nowhere")


def test_assistant_prefers_backend_and_records_history() -> None:
    backend = StaticBackend(reply="Sunny vibes")
    assistant = WeatherAssistantAgent(backend=backend, rng=random.Random(0))

    response = assistant.handle_message("  hello  ")

    assert response == {"status": "ok", "agent": "assistant", "source": "backend", "message": "Sunny vibes"}
    assert backend.calls == ["hello"]
    assert [(turn.sender, turn.text) for turn in assistant.history] == [
        ("user", "hello"),
        ("assistant", "Sunny vibes"),
    ]


def test_assistant_falls_back_with_connection_notice() -> None:
    assistant = WeatherAssistantAgent(backend=StaticBackend(fail=True), rng=random.Random(9))

    response = assistant.handle_message("hello")

    expected = CONNECTION_NOTICE + classify_and_reply("hello", None, random.Random(9))
    assert response["source"] == "fallback"
    assert response["message"] == expected


def test_assistant_without_backend_uses_classifier_directly() -> None:
    assistant = WeatherAssistantAgent(rng=random.Random(2))

    assert assistant.handle_message("what should I wear")["message"] == MISSING_CONTEXT_PROMPT

    context = Observation(
        location_name="Lisbon",
        timestamp=datetime(2025, 6, 1, 12, tzinfo=timezone.utc),
        temperature=22.0,
        condition=WeatherCondition.CLEAR,
    )
    reply = assistant.handle_message("thanks!", context=context)["message"]
    assert reply in REPLY_TEMPLATES[IntentCategory.THANKS]
    assert len(assistant.history) == 4


def test_chat_history_drops_oldest_turns_past_capacity() -> None:
    history = ChatHistory(max_turns=4)
    assistant = WeatherAssistantAgent(backend=StaticBackend(reply="ok"), history=history)

    for index in range(3):
        assistant.handle_message(f"question {index}")

    assert len(history) == 4
    assert [turn.text for turn in history][0] == "question 1"
    with pytest.raises(ValueError):
        ChatHistory(max_turns=0)
