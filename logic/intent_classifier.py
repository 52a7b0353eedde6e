"""Keyword-driven intent classification with canned weather replies.

This classifier is the deterministic fallback for the conversational backend.
It is total: every string input, with or without a current observation,
yields a non-empty reply.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from logic.units import round_half_up
from models.chat import IntentCategory
from models.observation import Observation, WeatherCondition

logger = logging.getLogger(__name__)

PERSONALITY_PROBABILITY = 0.3

MISSING_CONTEXT_PROMPT = (
    "🔍 I'd love to give you specific weather advice! Please search for a location first "
    "so I can provide accurate recommendations."
)

PERSONALITY_PHRASES: Tuple[str, ...] = (
    "That's a great question! 🤔",
    "Interesting! Let me think about that... 💭",
    "I love talking about weather! 🌤️",
    "Weather can be so fascinating! ⛅",
    "You're asking all the right questions! 🌟",
)

REPLY_TEMPLATES: Dict[IntentCategory, Tuple[str, ...]] = {
    IntentCategory.GREETING: (
        "Hello! 👋 I'm here to help you with all your weather needs. What would you like to know?",
        "Hi there! 🌤️ Ready to explore the weather together? How can I assist you today?",
        "Welcome! ☀️ I'm your personal weather assistant. What can I help you discover?",
    ),
    IntentCategory.WEATHER_GENERAL: (
        "🌡️ The current weather looks great! Based on the data, you can expect comfortable conditions. "
        "Would you like specific details about temperature, humidity, or wind?",
        "🌤️ Today's weather is quite pleasant! The temperature is moderate and perfect for most activities. "
        "Need suggestions for what to do?",
        "☀️ Beautiful weather today! The conditions are ideal for outdoor activities. "
        "Shall I recommend some fun things to do?",
    ),
    IntentCategory.CLOTHING: (
        "👕 Based on the current temperature, I'd recommend layering! Light clothing with an option to add "
        "a jacket would be perfect.",
        "🧥 For today's weather, you'll want to dress comfortably. Think breathable fabrics and maybe bring "
        "a light sweater just in case!",
        "👗 Perfect weather for your favorite outfit! The temperature is just right - not too hot, not too "
        "cold. You'll be comfortable in most clothing choices.",
    ),
    IntentCategory.ACTIVITIES: (
        "🏃‍♀️ Great weather for outdoor activities! How about a nice walk in the park, cycling, or maybe "
        "some outdoor sports?",
        "🏖️ The conditions are perfect for beach activities, hiking, or just enjoying time outdoors. "
        "What sounds fun to you?",
        "🚴‍♂️ With this lovely weather, you could try jogging, picnicking, outdoor photography, or visiting "
        "a local market!",
    ),
    IntentCategory.AIR_QUALITY: (
        "🌿 The air quality today is looking good! It's safe for outdoor activities and exercise. "
        "Perfect day to get some fresh air!",
        "💨 Air quality levels are moderate today. Generally fine for most people, but sensitive "
        "individuals might want to limit prolonged outdoor exposure.",
        "🍃 Excellent air quality today! Perfect conditions for outdoor workouts, running, or spending "
        "extended time outside.",
    ),
    IntentCategory.THANKS: (
        "You're very welcome! 😊 I'm always here to help with weather questions. Stay safe and enjoy your day!",
        "Happy to help! 🌟 Feel free to ask me anything else about weather, activities, or outfit "
        "suggestions anytime!",
        "My pleasure! ☀️ Hope you have a wonderful day ahead. Don't forget to check back for weather updates!",
    ),
    IntentCategory.FORECAST: (
        "📅 The 5-day forecast shows some interesting changes ahead! Expect a mix of sunny and partly "
        "cloudy days. Perfect for planning outdoor activities!",
        "🗓️ Looking at the upcoming days, you'll see stable weather patterns. Great for making weekend "
        "plans or outdoor events!",
        "📊 The extended forecast is looking quite pleasant! Temperatures will remain comfortable with "
        "minimal precipitation expected.",
    ),
    IntentCategory.HELP: (
        "🆘 I'm here to help! I can assist with:\n\n🌡️ Current weather conditions\n👕 Clothing "
        "recommendations\n🏃‍♀️ Activity suggestions\n🌿 Air quality information\n📅 Weather forecasts\n\n"
        "What would you like to explore?",
        "💡 Here's what I can help you with:\n\n• Check current weather\n• Suggest appropriate clothing\n"
        "• Recommend activities\n• Provide air quality info\n• Show weather charts and maps\n\n"
        "Just ask me anything weather-related!",
        "🌟 I'm your weather companion! I can provide:\n\n✓ Real-time weather updates\n✓ Smart outfit "
        "suggestions\n✓ Fun activity recommendations\n✓ Air quality monitoring\n✓ Weather forecasts\n\n"
        "What interests you most?",
    ),
    IntentCategory.UNKNOWN: (
        "🤔 That's an interesting question! While I specialize in weather-related topics, I'd be happy to "
        "help with forecasts, activity suggestions, or clothing recommendations.",
        "💭 I'm not sure about that specific topic, but I'm great with weather advice! Ask me about today's "
        "conditions, what to wear, or fun activities to try!",
        "🌤️ I focus on weather and related topics. Would you like to know about current conditions, air "
        "quality, clothing suggestions, or activity recommendations?",
    ),
}

CLOTHING_KEYWORDS: Tuple[str, ...] = ("wear", "clothing", "outfit", "dress")
ACTIVITY_KEYWORDS: Tuple[str, ...] = ("activity", "activities", "do", "outdoor")
TEMPERATURE_TALK_KEYWORDS: Tuple[str, ...] = ("hot", "cold", "warm")
CONDITION_TALK_KEYWORDS: Tuple[str, ...] = ("rain", "sunny", "cloudy")


@dataclass(frozen=True)
class IntentRule:
    category: IntentCategory
    keywords: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


# Priority order; the first rule with a substring hit decides the category.
INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(IntentCategory.GREETING, ("hello", "hi", "hey")),
    IntentRule(IntentCategory.WEATHER_GENERAL, ("weather", "temperature", "forecast")),
    IntentRule(IntentCategory.CLOTHING, CLOTHING_KEYWORDS),
    IntentRule(IntentCategory.ACTIVITIES, ACTIVITY_KEYWORDS),
    IntentRule(IntentCategory.AIR_QUALITY, ("air quality", "pollution", "air")),
    IntentRule(IntentCategory.THANKS, ("thank", "thanks")),
    IntentRule(IntentCategory.FORECAST, ("forecast", "5 day", "future")),
    IntentRule(IntentCategory.HELP, ("help", "what can you do", "assist")),
)


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def random_reply(category: IntentCategory, rng: random.Random) -> str:
    """Pick one template uniformly from ``category``."""

    templates = REPLY_TEMPLATES.get(category) or REPLY_TEMPLATES[IntentCategory.UNKNOWN]
    return rng.choice(templates)


def add_personality(reply: str, rng: random.Random) -> str:
    """Prefix a conversational phrase with 30% probability."""

    if rng.random() < PERSONALITY_PROBABILITY:
        return f"{rng.choice(PERSONALITY_PHRASES)} {reply}"
    return reply


def classify_intent(user_text: str) -> IntentCategory:
    """Return the first keyword category matching ``user_text``, or Unknown."""

    text = (user_text or "").lower()
    for rule in INTENT_RULES:
        if rule.matches(text):
            return rule.category
    return IntentCategory.UNKNOWN


def _clothing_advice(observation: Observation) -> str:
    temp = observation.temperature
    shown = round_half_up(temp)
    if temp > 30:
        return (
            f"🌡️ It's {shown}°C - quite hot! I'd recommend light, breathable clothing like cotton t-shirts, "
            "shorts, and sandals. Don't forget sunglasses and sunscreen! ☀️"
        )
    if temp > 20:
        return f"🌤️ Pleasant {shown}°C weather! Perfect for jeans and a t-shirt or light sweater. Comfortable and stylish! 👕"
    if temp > 10:
        return (
            f"🧥 At {shown}°C, layering is key! Try a long-sleeve shirt with a light jacket you can remove "
            "if it warms up."
        )
    return f"❄️ It's quite cold at {shown}°C! Bundle up with warm layers, a heavy coat, hat, and gloves to stay cozy! 🧣"


def _activity_advice(observation: Observation, rng: random.Random) -> str:
    temp = observation.temperature
    shown = round_half_up(temp)
    if observation.condition is WeatherCondition.RAIN:
        return (
            "🌧️ It's rainy outside! Perfect time for indoor activities like visiting a museum, reading a book, "
            "or trying a new recipe. Stay dry and cozy! 📚"
        )
    if temp > 25:
        return f"🏖️ Beautiful {shown}°C weather! Perfect for beach activities, swimming, outdoor sports, or a picnic in the park!"
    if temp > 15:
        return f"🚶‍♀️ Great {shown}°C weather for hiking, cycling, outdoor photography, or exploring local attractions! 🚴‍♂️"
    return random_reply(IntentCategory.WEATHER_GENERAL, rng)


def _context_reply(text: str, context: Optional[Observation], rng: random.Random) -> Optional[str]:
    """Answer clothing or activity questions from the current observation."""

    if context is None:
        return MISSING_CONTEXT_PROMPT
    if _contains_any(text, CLOTHING_KEYWORDS):
        return _clothing_advice(context)
    if _contains_any(text, ACTIVITY_KEYWORDS):
        return _activity_advice(context, rng)
    return None


def _observation_talk(text: str, context: Observation, rng: random.Random) -> Optional[str]:
    temp = context.temperature
    if _contains_any(text, TEMPERATURE_TALK_KEYWORDS):
        if temp > 25:
            feel = "It's quite warm"
        elif temp < 10:
            feel = "It's quite cool"
        else:
            feel = "The temperature is comfortable"
        return (
            f"🌡️ Currently it's {round_half_up(temp)}°C outside! {feel}. "
            f"{random_reply(IntentCategory.CLOTHING, rng)}"
        )
    if _contains_any(text, CONDITION_TALK_KEYWORDS):
        return (
            f"🌤️ The current weather is {context.condition.value.lower()}. "
            f"{random_reply(IntentCategory.WEATHER_GENERAL, rng)}"
        )
    return None


def classify_and_reply(
    user_text: str, context: Optional[Observation] = None, rng: Optional[random.Random] = None
) -> str:
    """Map free text plus the latest observation onto a canned reply."""

    rng = rng or random.Random()
    text = (user_text or "").lower()

    if _contains_any(text, CLOTHING_KEYWORDS) or _contains_any(text, ACTIVITY_KEYWORDS):
        reply = _context_reply(text, context, rng)
        if reply == MISSING_CONTEXT_PROMPT:
            logger.debug("Context-dependent question without an observation")
            return reply
        if reply is not None:
            return add_personality(reply, rng)

    category = classify_intent(text)
    if category is not IntentCategory.UNKNOWN:
        logger.debug("Matched intent category %s", category.value)
        return random_reply(category, rng)

    if context is not None:
        reply = _observation_talk(text, context, rng)
        if reply is not None:
            return reply

    return add_personality(random_reply(IntentCategory.UNKNOWN, rng), rng)


__all__ = [
    "INTENT_RULES",
    "IntentRule",
    "MISSING_CONTEXT_PROMPT",
    "PERSONALITY_PHRASES",
    "REPLY_TEMPLATES",
    "add_personality",
    "classify_and_reply",
    "classify_intent",
    "random_reply",
]
