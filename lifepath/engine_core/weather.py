"""
Ambient Weather - Cosmetic effect metadata derived from narrative text.

Carried in GameState for the presentation layer only. Nothing here has
gameplay weight.
"""

from __future__ import annotations
from enum import Enum


class WeatherEffect(Enum):
    RAIN = "rain"
    SNOW = "snow"
    LEAVES = "leaves"


class SnowIntensity(Enum):
    GENTLE = "gentle"
    BLIZZARD = "blizzard"


# Checked in order; first keyword hit wins
WEATHER_KEYWORDS: tuple[tuple[WeatherEffect, tuple[str, ...]], ...] = (
    (WeatherEffect.RAIN, ("storm", "rain", "flood", "downpour")),
    (WeatherEffect.SNOW, ("snow", "winter", "cold", "frost")),
    (WeatherEffect.LEAVES, ("leaf", "leaves", "autumn", "wind")),
)

BLIZZARD_KEYWORDS: tuple[str, ...] = ("blizzard", "snowstorm", "bitter", "howling", "frozen")


def effect_from_text(text: str) -> WeatherEffect | None:
    lower = text.lower()
    for effect, keywords in WEATHER_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return effect
    return None


def snow_intensity_from_text(text: str) -> SnowIntensity:
    lower = text.lower()
    if any(keyword in lower for keyword in BLIZZARD_KEYWORDS):
        return SnowIntensity.BLIZZARD
    return SnowIntensity.GENTLE
