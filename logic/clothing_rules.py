"""Deterministic clothing guidance from a single observation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from logic.units import round_half_up
from models.observation import Observation, WeatherCondition
from models.recommendation import Accessory, ClothingCategory, ClothingRecommendation

logger = logging.getLogger(__name__)

MAX_ACCESSORIES = 6
WINDY_THRESHOLD_MS = 8.0


@dataclass(frozen=True)
class OutfitProfile:
    """Base outfit for one temperature band."""

    band: str
    min_temperature: float
    character: str
    summary: str
    categories: Tuple[ClothingCategory, ...]
    accessories: Tuple[Accessory, ...]


_TOPS_ICON = "sports_bar"
_BOTTOMS_ICON = "sports_handball"
_FOOTWEAR_ICON = "sports_tennis"
_OUTERWEAR_ICON = "checkroom"

# Ordered warmest first; the first profile whose minimum is met wins.
OUTFIT_PROFILES: Tuple[OutfitProfile, ...] = (
    OutfitProfile(
        band="hot",
        min_temperature=30,
        character="🏖️",
        summary="Very hot weather calls for minimal, breathable clothing to stay cool and comfortable.",
        categories=(
            ClothingCategory("Tops", _TOPS_ICON, ("Tank Top", "Light T-Shirt", "Crop Top", "Sleeveless Blouse")),
            ClothingCategory("Bottoms", _BOTTOMS_ICON, ("Shorts", "Lightweight Skirt", "Linen Pants", "Capris")),
            ClothingCategory(
                "Footwear", _FOOTWEAR_ICON, ("Sandals", "Flip Flops", "Canvas Sneakers", "Breathable Shoes")
            ),
        ),
        accessories=(
            Accessory("🕶️", "Sunglasses", "UV protection"),
            Accessory("🧴", "Sunscreen", "Skin protection"),
            Accessory("🧢", "Light Hat", "Sun protection"),
            Accessory("💧", "Water Bottle", "Stay hydrated"),
        ),
    ),
    OutfitProfile(
        band="warm",
        min_temperature=20,
        character="👕",
        summary="Warm and pleasant weather perfect for light, comfortable clothing.",
        categories=(
            ClothingCategory("Tops", _TOPS_ICON, ("T-Shirt", "Light Blouse", "Polo Shirt", "Short Sleeve Shirt")),
            ClothingCategory("Bottoms", _BOTTOMS_ICON, ("Jeans", "Chinos", "Light Dress", "Casual Pants")),
            ClothingCategory("Footwear", _FOOTWEAR_ICON, ("Sneakers", "Loafers", "Canvas Shoes", "Light Boots")),
        ),
        accessories=(
            Accessory("🕶️", "Sunglasses", "Bright weather"),
            Accessory("🎒", "Light Bag", "Carry essentials"),
            Accessory("⌚", "Watch", "Style accent"),
        ),
    ),
    OutfitProfile(
        band="cool",
        min_temperature=10,
        character="🧥",
        summary="Cool weather requires layering for comfort throughout the day.",
        categories=(
            ClothingCategory("Tops", _TOPS_ICON, ("Long Sleeve Shirt", "Light Sweater", "Cardigan", "Hoodie")),
            ClothingCategory("Bottoms", _BOTTOMS_ICON, ("Jeans", "Trousers", "Leggings", "Long Pants")),
            ClothingCategory(
                "Outerwear", _OUTERWEAR_ICON, ("Light Jacket", "Windbreaker", "Denim Jacket", "Vest")
            ),
        ),
        accessories=(
            Accessory("🧣", "Light Scarf", "Extra warmth"),
            Accessory("☂️", "Umbrella", "Weather protection"),
            Accessory("👜", "Crossbody Bag", "Hands-free carrying"),
        ),
    ),
    OutfitProfile(
        band="cold",
        min_temperature=float("-inf"),
        character="🧥❄️",
        summary="Cold weather demands warm, layered clothing to stay comfortable outdoors.",
        categories=(
            ClothingCategory("Base Layer", _TOPS_ICON, ("Thermal Shirt", "Long Underwear", "Wool Base Layer")),
            ClothingCategory(
                "Outerwear", _OUTERWEAR_ICON, ("Winter Coat", "Heavy Jacket", "Puffer Jacket", "Wool Coat")
            ),
            ClothingCategory("Accessories", "style", ("Warm Hat", "Gloves", "Scarf", "Warm Socks")),
        ),
        accessories=(
            Accessory("🧤", "Warm Gloves", "Hand protection"),
            Accessory("🧣", "Thick Scarf", "Neck warmth"),
            Accessory("👢", "Winter Boots", "Foot warmth"),
            Accessory("🧢", "Warm Hat", "Head protection"),
        ),
    ),
)

RAIN_UMBRELLA = Accessory("☂️", "Umbrella", "Rain protection")
RAIN_SHOES = Accessory("🥾", "Waterproof Shoes", "Dry feet")
WINDPROOF_LAYER = Accessory("🧥", "Windproof Jacket", "Wind protection")


def select_outfit_profile(temperature: float) -> OutfitProfile:
    """Return the base outfit for the band containing ``temperature``."""

    for profile in OUTFIT_PROFILES:
        if temperature >= profile.min_temperature:
            return profile
    return OUTFIT_PROFILES[-1]


def generate_clothing(observation: Observation) -> ClothingRecommendation:
    """Choose a base outfit by temperature, then layer on weather accessories."""

    profile = select_outfit_profile(observation.temperature)
    accessories: List[Accessory] = list(profile.accessories)

    if observation.condition is WeatherCondition.RAIN:
        accessories.insert(0, RAIN_UMBRELLA)
        accessories.append(RAIN_SHOES)
    if observation.wind_speed > WINDY_THRESHOLD_MS:
        accessories.append(WINDPROOF_LAYER)

    logger.debug(
        "Clothing band %s with %s accessories before truncation", profile.band, len(accessories)
    )
    return ClothingRecommendation(
        band=profile.band,
        character=profile.character,
        summary=profile.summary,
        temperature_label=f"Perfect for {round_half_up(observation.temperature)}°C",
        categories=profile.categories,
        accessories=tuple(accessories[:MAX_ACCESSORIES]),
    )


__all__ = [
    "MAX_ACCESSORIES",
    "OUTFIT_PROFILES",
    "OutfitProfile",
    "WINDY_THRESHOLD_MS",
    "generate_clothing",
    "select_outfit_profile",
]
