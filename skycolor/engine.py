"""
Sky color engine.

Orchestrates classification, palette lookup, adjustment and description for
both modes. Every function here is pure apart from debug logging; callers
own data acquisition and the fallback from live to simulated.
"""

from datetime import datetime
from typing import Optional

from skycolor.adjusters import adjust_palette
from skycolor.color_math import shift_brightness
from skycolor.config import MINUTE_VARIATION
from skycolor.description import describe_live, describe_simulated
from skycolor.logger import logger
from skycolor.models import (
    AstronomyInfo,
    ClockTime,
    ColorPalette,
    SkyColorResult,
    WeatherObservation,
)
from skycolor.palettes import live_palette, location_seed, simulated_palette
from skycolor.time_period import classify_live, classify_simulated


SIMULATED_LABEL = "Simulated"


def compute_live(
    observation: WeatherObservation,
    astronomy: Optional[AstronomyInfo] = None,
    now: Optional[datetime] = None,
    location_label: str = "",
) -> SkyColorResult:
    """
    Derive the sky color from live weather data.

    Args:
        observation: Current conditions
        astronomy: Sunrise/sunset for today, or None when unavailable
        now: Local time of the request (defaults to datetime.now())
        location_label: Display name of the location, e.g. "New York, New York"

    Returns:
        SkyColorResult with mode="live"

    Pipeline:
        classify_live -> live_palette -> cloud stage -> weather stage -> describe_live
    """
    clock = ClockTime.from_datetime(now or datetime.now())
    period = classify_live(clock, astronomy)
    palette = adjust_palette(live_palette(period), observation)

    logger.debug(
        f"Live sky color: time={clock.hour:02d}:{clock.minute:02d}, "
        f"astronomy={'yes' if astronomy else 'no'}, period={period.value}, primary={palette.primary}"
    )

    return SkyColorResult(
        primary_color=palette.primary,
        gradient_colors=palette.gradient,
        time_period=period,
        description=describe_live(period, observation.condition_text),
        source_location_label=location_label,
        mode="live",
        weather_condition=observation.condition_text,
    )


def compute_simulated(
    location_identifier: str,
    now: Optional[datetime] = None,
    location_label: str = SIMULATED_LABEL,
) -> SkyColorResult:
    """
    Derive a deterministic sky color without weather data.

    The palette is chosen by time period and location seed, then every color
    is shifted up by (minute / 60) * MINUTE_VARIATION.
    """
    clock = ClockTime.from_datetime(now or datetime.now())
    period = classify_simulated(clock)
    seed = location_seed(location_identifier)
    base = simulated_palette(period, seed)

    delta = (clock.minute / 60) * MINUTE_VARIATION
    palette = ColorPalette(
        primary=shift_brightness(base.primary, delta),
        gradient=tuple(shift_brightness(color, delta) for color in base.gradient),
    )

    logger.debug(
        f"Simulated sky color: location={location_identifier}, seed={seed}, "
        f"time={clock.hour:02d}:{clock.minute:02d}, period={period.value}, "
        f"base={base.primary}, shift={delta:.4f}, primary={palette.primary}"
    )

    return SkyColorResult(
        primary_color=palette.primary,
        gradient_colors=palette.gradient,
        time_period=period,
        description=describe_simulated(period),
        source_location_label=location_label,
        mode="simulated",
    )


def compute_sky_color(
    location_identifier: str,
    observation: Optional[WeatherObservation] = None,
    astronomy: Optional[AstronomyInfo] = None,
    now: Optional[datetime] = None,
    location_label: Optional[str] = None,
) -> SkyColorResult:
    """Live result when an observation is given, simulated result otherwise."""
    if observation is not None:
        return compute_live(observation, astronomy, now, location_label or "")
    return compute_simulated(location_identifier, now, location_label or SIMULATED_LABEL)
