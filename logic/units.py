"""Temperature unit helpers driven by an explicit unit preference."""

from __future__ import annotations

import math

from models.observation import Observation


def round_half_up(value: float) -> int:
    """Round .5 upwards, matching how temperatures are shown to users."""

    return int(math.floor(value + 0.5))


def celsius_to_fahrenheit(value_c: float) -> float:
    return value_c * 9 / 5 + 32


def unit_symbol(metric: bool = True) -> str:
    return "°C" if metric else "°F"


def format_temperature(value_c: float, metric: bool = True) -> str:
    """Format a Celsius reading in the caller's preferred unit."""

    value = value_c if metric else celsius_to_fahrenheit(value_c)
    return f"{round_half_up(value)}{unit_symbol(metric)}"


def share_text(observation: Observation, metric: bool = True) -> str:
    """One-line summary suitable for sharing or copying to a clipboard."""

    return (
        f"Weather in {observation.location_name}: "
        f"{format_temperature(observation.temperature, metric)}, {observation.description} 🌤️"
    )


__all__ = [
    "round_half_up",
    "celsius_to_fahrenheit",
    "unit_symbol",
    "format_temperature",
    "share_text",
]
