"""FastAPI surface over the Skycast app."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from agents.assistant_agent import CONNECTION_NOTICE
from logic.intent_classifier import MISSING_CONTEXT_PROMPT
from memory.favorites import InMemoryFavoritesStore
from models.chat import DEFAULT_MAX_TURNS
from server import api
from skycast_app.app import SkycastApp
from skycast_app.config import SkycastConfig
from tools.conversational_backend import StaticBackend
from tools.errors import ObservationUnavailable
from tools.observation_source import MockObservationSource, ObservationSource


class _FailingSource(ObservationSource):
    def __init__(self, reason: str) -> None:
        self.reason = reason

    def get_current(self, *, city=None, lat=None, lon=None):
        raise ObservationUnavailable(self.reason)

    def get_forecast(self, *, city=None, lat=None, lon=None):
        raise ObservationUnavailable(self.reason)


def _client(
    tmp_path: Path, source: ObservationSource | None = None, backend: StaticBackend | None = None
) -> TestClient:
    skycast = SkycastApp(
        config=SkycastConfig(favorites_path=str(tmp_path / "favorites.json"), random_seed=1),
        source=source or MockObservationSource(),
        backend=backend or StaticBackend(reply="Sunny vibes"),
        favorites=InMemoryFavoritesStore(),
    )
    api.set_skycast_app(skycast)
    return TestClient(api.app)


@pytest.fixture(autouse=True)
def _reset_app():
    yield
    api.set_skycast_app(None)


def test_healthz(tmp_path: Path) -> None:
    response = _client(tmp_path).get("/healthz")

    assert response.status_code == 200
    assert response.json()["service"] == "skycast"


def test_insights_returns_every_judgment(tmp_path: Path) -> None:
    response = _client(tmp_path).post("/insights", json={"city": "Lisbon"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["observation"]["location_name"] == "Lisbon"
    assert body["observation"]["condition"] == "Clear"
    assert len(body["daily_forecasts"]) == 5
    assert body["severity"]["band"] == "Normal"
    assert body["clothing"]["band"] == "warm"
    assert len(body["air_quality"]["metrics"]) == 6


@pytest.mark.parametrize(("reason", "status"), [("location_not_found", 404), ("request_error", 502)])
def test_insights_maps_source_failures(tmp_path: Path, reason, status) -> None:
    response = _client(tmp_path, source=_FailingSource(reason)).post("/insights", json={"city": "Atlantis"})

    assert response.status_code == status


def test_insights_rejects_out_of_range_coordinates(tmp_path: Path) -> None:
    response = _client(tmp_path).post("/insights", json={"lat": 120, "lon": 0})

    assert response.status_code == 422


def test_evaluate_runs_engine_on_supplied_data(tmp_path: Path) -> None:
    body = {
        "observation": {
            "location_name": "Miami",
            "timestamp": "2025-08-01T12:00:00-04:00",
            "temperature": 37.0,
            "wind_speed": 9.0,
            "condition": "Rain",
            "description": "heavy rain",
        },
        "forecast": [
            {"timestamp": "2025-08-01T09:00:00-04:00", "temperature": 30.0},
            {"timestamp": "2025-08-01T12:00:00-04:00", "temperature": 34.0},
            {"timestamp": "2025-08-02T15:00:00-04:00", "temperature": 33.0},
        ],
    }

    response = _client(tmp_path).post("/insights/evaluate", json=body)

    assert response.status_code == 200
    payload = response.json()
    assert payload["severity"]["trigger"] == "heat"
    assert [day["point"]["temperature"] for day in payload["daily_forecasts"]] == [34.0, 33.0]
    assert payload["clothing"]["accessories"][0]["name"] == "Umbrella"
    assert payload["share_text"] == "Weather in Miami: 37°C, heavy rain 🌤️"


def test_chat_uses_backend_reply(tmp_path: Path) -> None:
    client = _client(tmp_path)
    client.post("/insights", json={"city": "Lisbon"})

    response = client.post("/chat", json={"message": "What should I wear?"})

    assert response.status_code == 200
    assert response.json()["message"] == "Sunny vibes"
    assert response.json()["source"] == "backend"


def test_chat_accepts_explicit_context(tmp_path: Path) -> None:
    context = {
        "location_name": "Oslo",
        "timestamp": "2025-01-10T12:00:00+00:00",
        "temperature": -3.0,
        "condition": "Snow",
    }
    response = _client(tmp_path).post("/chat", json={"message": "hi", "context": context})

    assert response.status_code == 200


def test_favorites_lifecycle(tmp_path: Path) -> None:
    client = _client(tmp_path)

    assert client.post("/favorites", json={"city": "Lisbon"}).status_code == 201
    assert client.post("/favorites", json={"city": "Lisbon"}).status_code == 409
    assert client.get("/favorites").json() == {"favorites": ["Lisbon"]}
    assert client.delete("/favorites/Lisbon").json() == {"favorites": []}
    assert client.delete("/favorites/Lisbon").status_code == 404


def test_chat_without_context_ignores_earlier_lookups(tmp_path: Path) -> None:
    client = _client(tmp_path, backend=StaticBackend(fail=True))
    client.post("/insights", json={"city": "Lisbon"})

    response = client.post("/chat", json={"message": "what should I wear"})

    assert response.json()["source"] == "fallback"
    assert response.json()["message"] == CONNECTION_NOTICE + MISSING_CONTEXT_PROMPT


def test_chat_history_stays_bounded(tmp_path: Path) -> None:
    client = _client(tmp_path)

    for _ in range(101):
        client.post("/chat", json={"message": "hello"})

    assert len(api.get_skycast_app().assistant.history) == DEFAULT_MAX_TURNS
