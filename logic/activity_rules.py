"""Rule table mapping current conditions onto activity suggestions.

Every rule is evaluated independently; all satisfied rules contribute, in
declaration order, and the combined list is cut to ``MAX_ACTIVITIES``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from logic.units import round_half_up
from models.observation import Observation, WeatherCondition
from models.recommendation import Recommendation

logger = logging.getLogger(__name__)

MAX_ACTIVITIES = 6


@dataclass(frozen=True)
class ActivityRule:
    """A predicate over one observation and the suggestions it yields."""

    name: str
    predicate: Callable[[Observation], bool]
    build: Callable[[Observation], Tuple[Recommendation, ...]]


def _temp_tag(observation: Observation) -> str:
    return f"{round_half_up(observation.temperature)}°C"


def _wind_tag(observation: Observation) -> str:
    return f"{observation.wind_speed:g}m/s"


def _visibility_tag(observation: Observation) -> str:
    return f"{observation.visibility / 1000:.1f}km"


def _warm_day(obs: Observation) -> Tuple[Recommendation, ...]:
    return (
        Recommendation(
            title="Beach Day",
            icon="🏖️",
            description="Perfect weather for swimming, sunbathing, and beach volleyball!",
            rating=5,
            condition_tags=("Sunny", "Warm", _temp_tag(obs)),
            style_tag="peach",
        ),
        Recommendation(
            title="Outdoor BBQ",
            icon="🍖",
            description="Great temperature for grilling and outdoor dining with friends.",
            rating=5,
            condition_tags=("Perfect Weather", _temp_tag(obs)),
            style_tag="rose",
        ),
    )


def _mild_dry_day(obs: Observation) -> Tuple[Recommendation, ...]:
    return (
        Recommendation(
            title="Hiking & Nature Walk",
            icon="🥾",
            description="Ideal conditions for exploring trails and enjoying nature.",
            rating=4,
            condition_tags=("Comfortable", "Clear Skies", _temp_tag(obs)),
            style_tag="mint",
        ),
        Recommendation(
            title="Cycling Adventure",
            icon="🚴",
            description="Perfect temperature and conditions for a bike ride.",
            rating=4,
            condition_tags=("Mild Weather", f"Wind: {_wind_tag(obs)}"),
            style_tag="lilac",
        ),
    )


def _cool_day(obs: Observation) -> Tuple[Recommendation, ...]:
    return (
        Recommendation(
            title="Photography Walk",
            icon="📸",
            description="Great lighting and comfortable temperature for outdoor photography.",
            rating=4,
            condition_tags=("Good Visibility", _visibility_tag(obs)),
            style_tag="violet",
        ),
    )


def _rainy_day(obs: Observation) -> Tuple[Recommendation, ...]:
    return (
        Recommendation(
            title="Museum Visit",
            icon="🏛️",
            description="Perfect indoor activity to stay dry and learn something new.",
            rating=4,
            condition_tags=("Rainy Day", "Indoor Activity"),
            style_tag="indigo",
        ),
        Recommendation(
            title="Cozy Reading",
            icon="📚",
            description="Ideal weather for staying in with a good book and hot tea.",
            rating=5,
            condition_tags=("Relaxing", "Indoor"),
            style_tag="blush",
        ),
    )


def _snowy_day(obs: Observation) -> Tuple[Recommendation, ...]:
    return (
        Recommendation(
            title="Winter Sports",
            icon="⛷️",
            description="Perfect conditions for skiing, snowboarding, or building snowmen!",
            rating=5,
            condition_tags=("Snowy", "Winter Fun", _temp_tag(obs)),
            style_tag="indigo",
        ),
    )


def _breezy_day(obs: Observation) -> Tuple[Recommendation, ...]:
    return (
        Recommendation(
            title="Kite Flying",
            icon="🪁",
            description="Excellent wind conditions for flying kites in the park.",
            rating=4,
            condition_tags=("Good Wind", _wind_tag(obs)),
            style_tag="lime",
        ),
    )


def _indoor_fallback(obs: Observation) -> Tuple[Recommendation, ...]:
    return (
        Recommendation(
            title="Cooking Workshop",
            icon="👨‍🍳",
            description="Learn new recipes and cooking techniques indoors.",
            rating=3,
            condition_tags=("Indoor Activity", "Any Weather"),
            style_tag="peach",
        ),
    )


ACTIVITY_RULES: Tuple[ActivityRule, ...] = (
    ActivityRule("warm", lambda o: o.temperature >= 25, _warm_day),
    ActivityRule(
        "mild_dry",
        lambda o: 15 <= o.temperature <= 25 and o.condition is not WeatherCondition.RAIN,
        _mild_dry_day,
    ),
    ActivityRule("cool", lambda o: 10 <= o.temperature <= 20, _cool_day),
    ActivityRule("rain", lambda o: o.condition is WeatherCondition.RAIN, _rainy_day),
    ActivityRule("snow", lambda o: o.condition is WeatherCondition.SNOW, _snowy_day),
    ActivityRule("breeze", lambda o: 5 < o.wind_speed < 15, _breezy_day),
    ActivityRule("indoor", lambda o: True, _indoor_fallback),
)


def generate_activities(
    observation: Observation, rules: Tuple[ActivityRule, ...] = ACTIVITY_RULES
) -> List[Recommendation]:
    """Evaluate every rule and return the first six suggestions in rule order."""

    suggestions: List[Recommendation] = []
    fired: List[str] = []
    for rule in rules:
        if rule.predicate(observation):
            fired.append(rule.name)
            suggestions.extend(rule.build(observation))
    logger.debug("Activity rules fired: %s", fired)
    return suggestions[:MAX_ACTIVITIES]


__all__ = ["ActivityRule", "ACTIVITY_RULES", "MAX_ACTIVITIES", "generate_activities"]
