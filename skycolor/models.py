"""
Value types shared by the sky color engine and the service layer.

All models are frozen: they are built once per request and never mutated.
"""

from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skycolor.color_math import HexColor
from skycolor.time_strings import parse_time_to_minutes


# ============================================================================
# Time Periods
# ============================================================================

class LiveTimePeriod(str, Enum):
    """Time-of-day buckets used with live weather data."""
    NIGHT = "night"
    DAWN = "dawn"
    EARLY_MORNING = "earlyMorning"
    LATE_MORNING = "lateMorning"
    MIDDAY = "midday"
    AFTERNOON = "afternoon"
    DUSK = "dusk"
    EVENING = "evening"


class SimulatedTimePeriod(str, Enum):
    """Time-of-day buckets used by the seeded simulated generator."""
    NIGHT = "night"
    DAWN = "dawn"
    MORNING = "morning"
    NOON = "noon"
    AFTERNOON = "afternoon"
    DUSK = "dusk"
    EVENING = "evening"


# ============================================================================
# Inputs
# ============================================================================

class ClockTime(BaseModel):
    """Local wall-clock time with minute resolution."""
    model_config = ConfigDict(frozen=True)

    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "ClockTime":
        return cls(hour=dt.hour, minute=dt.minute)

    @property
    def minutes_since_midnight(self) -> int:
        return self.hour * 60 + self.minute


class AstronomyInfo(BaseModel):
    """Sunrise/sunset for the requested day, as minutes since local midnight."""
    model_config = ConfigDict(frozen=True)

    sunrise_minutes: int = Field(..., ge=0, le=1439, description="Sunrise, minutes since midnight")
    sunset_minutes: int = Field(..., ge=0, le=1439, description="Sunset, minutes since midnight")

    # Informational only, passed through from the provider
    moon_phase: Optional[str] = None
    moon_illumination: Optional[int] = Field(None, ge=0, le=100)

    @classmethod
    def from_strings(
        cls,
        sunrise: str,
        sunset: str,
        moon_phase: Optional[str] = None,
        moon_illumination: Optional[int] = None,
    ) -> "AstronomyInfo":
        """
        Build from provider time strings such as "06:30 AM".

        Raises:
            FormatError: If either time string cannot be parsed
        """
        return cls(
            sunrise_minutes=parse_time_to_minutes(sunrise),
            sunset_minutes=parse_time_to_minutes(sunset),
            moon_phase=moon_phase,
            moon_illumination=moon_illumination,
        )


class WeatherObservation(BaseModel):
    """Current conditions normalized from the weather provider."""
    model_config = ConfigDict(frozen=True)

    is_daytime: bool
    cloud_coverage_percent: int = Field(..., ge=0, le=100, description="Cloud cover (0-100)")
    condition_text: str = Field("", description="Provider condition text, e.g. 'Partly cloudy'")
    condition_code: int = 0


# ============================================================================
# Outputs
# ============================================================================

class ColorPalette(BaseModel):
    """Primary color plus ordered gradient stops."""
    model_config = ConfigDict(frozen=True)

    primary: HexColor
    gradient: tuple[HexColor, ...] = Field(..., min_length=2, description="At least 2 gradient stops")


class SkyColorResult(BaseModel):
    """Final sky color for one request."""
    model_config = ConfigDict(frozen=True)

    primary_color: HexColor
    gradient_colors: tuple[HexColor, ...] = Field(..., min_length=2)
    time_period: LiveTimePeriod | SimulatedTimePeriod
    description: str
    source_location_label: str = ""
    mode: Literal["live", "simulated"]
    weather_condition: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _resolve_period_by_mode(cls, data):
        # Both enums share values such as "night"; plain strings follow mode
        if isinstance(data, dict) and isinstance(data.get("time_period"), str) \
                and not isinstance(data["time_period"], Enum):
            enum_cls = SimulatedTimePeriod if data.get("mode") == "simulated" else LiveTimePeriod
            if data["time_period"] in enum_cls._value2member_map_:
                data = {**data, "time_period": enum_cls(data["time_period"])}
        return data

    @model_validator(mode="after")
    def _check_period_matches_mode(self) -> "SkyColorResult":
        expected = LiveTimePeriod if self.mode == "live" else SimulatedTimePeriod
        if not isinstance(self.time_period, expected):
            raise ValueError(f"{self.mode} result requires a {expected.__name__}, got {self.time_period!r}")
        return self
