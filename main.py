"""Simple entrypoint to run the Skycast engine locally against offline data."""

from skycast_app.app import SkycastApp
from skycast_app.config import SkycastConfig
from memory.favorites import InMemoryFavoritesStore
from tools.conversational_backend import StaticBackend
from tools.observation_source import MockObservationSource


def main() -> None:
    config = SkycastConfig.from_env()
    app = SkycastApp(
        config=config,
        source=MockObservationSource(),
        backend=StaticBackend(fail=True),
        favorites=InMemoryFavoritesStore(),
    )
    insights = app.lookup(city="Lisbon")
    print(insights.share_text)
    if insights.severity.has_advisory:
        print(f"{insights.severity.title} {insights.severity.message}")
    for day in insights.daily_forecasts:
        print(f"{day.day.isoformat()}: {day.point.temperature:.0f} {day.point.description}")
    for activity in insights.activities:
        print(f"{activity.icon} {activity.title} ({activity.rating}/5)")
    print(f"{insights.clothing.character} {insights.clothing.summary}")
    print(f"AQI {insights.air_quality.aqi}: {insights.air_quality.description}")
    print(app.chat("What should I wear today?", context=insights.observation))


if __name__ == "__main__":
    main()
