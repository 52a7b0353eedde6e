"""Recommendation schemas for activities and clothing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Recommendation:
    """A suggested activity with supporting metadata."""

    title: str
    icon: str
    description: str
    rating: int
    condition_tags: Tuple[str, ...] = ()
    style_tag: str = ""

    def __post_init__(self) -> None:
        if not 1 <= self.rating <= 5:
            raise ValueError(f"rating must be between 1 and 5, got {self.rating}")
        object.__setattr__(self, "condition_tags", tuple(self.condition_tags))


@dataclass(frozen=True)
class ClothingCategory:
    name: str
    icon: str
    items: Tuple[str, ...]


@dataclass(frozen=True)
class Accessory:
    icon: str
    name: str
    reason: str


@dataclass(frozen=True)
class ClothingRecommendation:
    """Outfit profile for one temperature band plus weather-driven accessories."""

    band: str
    character: str
    summary: str
    temperature_label: str
    categories: Tuple[ClothingCategory, ...] = field(default_factory=tuple)
    accessories: Tuple[Accessory, ...] = field(default_factory=tuple)


__all__ = ["Recommendation", "ClothingCategory", "Accessory", "ClothingRecommendation"]
