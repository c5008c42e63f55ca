"""
Weather adjustments applied to a live base palette.

Two stages run in fixed order, each taking the previous stage's output:
1. Cloud coverage: grey tint by tier, or a full overcast palette at >= 80%
2. Weather condition: fixed palettes for precipitation/fog, brightening for clear skies
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from skycolor.color_math import blend, brighten
from skycolor.errors import InvariantError
from skycolor.logger import logger
from skycolor.models import ColorPalette, WeatherObservation


# ============================================================================
# Cloud Stage
# ============================================================================

class CloudTier(str, Enum):
    """Cloud coverage tier."""
    CLEAR = "clear"  # < 20%
    PARTLY = "partly"  # 20-49%
    MOSTLY = "mostly"  # 50-79%
    OVERCAST = "overcast"  # >= 80%


# tier -> (tint color, primary ratio, gradient ratio)
CLOUD_TINTS: Mapping[CloudTier, tuple[str, float, float]] = MappingProxyType({
    CloudTier.PARTLY: ("#e0e0e0", 0.20, 0.15),
    CloudTier.MOSTLY: ("#b0b0b0", 0.40, 0.35),
})

OVERCAST_PALETTE = ColorPalette(
    primary="#8b8b8b",
    gradient=("#a9a9a9", "#8b8b8b", "#707070"),
)


def classify_cloud_coverage(percent: float) -> CloudTier:
    """Lower bound of every tier is inclusive: 20 is PARTLY, 50 MOSTLY, 80 OVERCAST."""
    if percent < 20:
        return CloudTier.CLEAR
    if percent < 50:
        return CloudTier.PARTLY
    if percent < 80:
        return CloudTier.MOSTLY
    return CloudTier.OVERCAST


def apply_cloud_coverage(palette: ColorPalette, percent: float) -> ColorPalette:
    """
    Tint a palette toward grey according to cloud coverage.

    Args:
        palette: Base palette for the time period
        percent: Cloud coverage (0-100)

    Returns:
        New palette (the input is returned as-is for CLEAR)
    """
    tier = classify_cloud_coverage(percent)

    if tier is CloudTier.CLEAR:
        return palette
    if tier is CloudTier.OVERCAST:
        return OVERCAST_PALETTE
    if tier not in CLOUD_TINTS:
        raise InvariantError(f"No cloud tint for tier {tier!r}")

    tint, primary_ratio, gradient_ratio = CLOUD_TINTS[tier]
    return ColorPalette(
        primary=blend(palette.primary, tint, primary_ratio),
        gradient=tuple(blend(color, tint, gradient_ratio) for color in palette.gradient),
    )


# ============================================================================
# Weather Stage
# ============================================================================

class WeatherCategory(str, Enum):
    """Condition categories, declared in match priority order."""
    RAIN = "rain"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    FOG = "fog"
    CLEAR = "clear"
    OTHER = "other"


# Checked top to bottom; first keyword hit wins ("Thundery rain" is RAIN)
CONDITION_KEYWORDS: tuple[tuple[WeatherCategory, tuple[str, ...]], ...] = (
    (WeatherCategory.RAIN, ("rain", "drizzle")),
    (WeatherCategory.THUNDERSTORM, ("thunder", "storm")),
    (WeatherCategory.SNOW, ("snow", "blizzard")),
    (WeatherCategory.FOG, ("fog", "mist", "haze")),
    (WeatherCategory.CLEAR, ("clear", "sunny")),
)

CONDITION_PALETTES: Mapping[WeatherCategory, ColorPalette] = MappingProxyType({
    WeatherCategory.RAIN: ColorPalette(
        primary="#536878",
        gradient=("#6b7b8b", "#536878", "#4a5a6a"),
    ),
    WeatherCategory.THUNDERSTORM: ColorPalette(
        primary="#2c3e50",
        gradient=("#34495e", "#2c3e50", "#1c2833"),
    ),
    WeatherCategory.SNOW: ColorPalette(
        primary="#e8eaf6",
        gradient=("#f5f5f5", "#e8eaf6", "#cfd8dc"),
    ),
    WeatherCategory.FOG: ColorPalette(
        primary="#b0bec5",
        gradient=("#cfd8dc", "#b0bec5", "#90a4ae"),
    ),
})

CLEAR_SKY_BRIGHTEN = 0.1


def classify_condition(condition_text: str) -> WeatherCategory:
    """Case-insensitive substring match against CONDITION_KEYWORDS."""
    text = (condition_text or "").lower()
    for category, keywords in CONDITION_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return WeatherCategory.OTHER


def apply_weather_condition(palette: ColorPalette, condition_text: str) -> ColorPalette:
    """
    Override or enhance a palette based on the condition text.

    CLEAR brightens the palette it receives, which is the cloud-stage output,
    not the base palette.
    """
    category = classify_condition(condition_text)

    if category is WeatherCategory.OTHER:
        return palette
    if category is WeatherCategory.CLEAR:
        return ColorPalette(
            primary=brighten(palette.primary, CLEAR_SKY_BRIGHTEN),
            gradient=tuple(brighten(color, CLEAR_SKY_BRIGHTEN) for color in palette.gradient),
        )
    if category not in CONDITION_PALETTES:
        raise InvariantError(f"No condition palette for category {category!r}")
    return CONDITION_PALETTES[category]


def adjust_palette(palette: ColorPalette, observation: WeatherObservation) -> ColorPalette:
    """Run the cloud stage, then the weather stage."""
    clouded = apply_cloud_coverage(palette, observation.cloud_coverage_percent)
    adjusted = apply_weather_condition(clouded, observation.condition_text)

    logger.debug(
        f"Adjusted palette: clouds={observation.cloud_coverage_percent}% "
        f"({classify_cloud_coverage(observation.cloud_coverage_percent).value}), "
        f"condition='{observation.condition_text}' "
        f"({classify_condition(observation.condition_text).value}), "
        f"primary {palette.primary} -> {adjusted.primary}"
    )
    return adjusted
