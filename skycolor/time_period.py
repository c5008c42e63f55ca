"""
Time-of-day classification for both color modes.

Simulated mode uses a fixed 7-bucket hour table. Live mode uses an 8-bucket
hour table, overridden by dawn/dusk windows around the provider's sunrise and
sunset when astronomy data is available.
"""

from typing import Optional, Sequence, TypeVar

from skycolor.config import DAWN_DUSK_WINDOW_MINUTES
from skycolor.errors import InvariantError
from skycolor.models import AstronomyInfo, ClockTime, LiveTimePeriod, SimulatedTimePeriod


Period = TypeVar("Period", LiveTimePeriod, SimulatedTimePeriod)


# ============================================================================
# Hour Tables
# ============================================================================

# (start_hour, end_hour, period): half-open [start, end); start > end wraps midnight
SIMULATED_HOUR_TABLE: tuple[tuple[int, int, SimulatedTimePeriod], ...] = (
    (22, 6, SimulatedTimePeriod.NIGHT),
    (6, 8, SimulatedTimePeriod.DAWN),
    (8, 12, SimulatedTimePeriod.MORNING),
    (12, 16, SimulatedTimePeriod.NOON),
    (16, 18, SimulatedTimePeriod.AFTERNOON),
    (18, 20, SimulatedTimePeriod.DUSK),
    (20, 22, SimulatedTimePeriod.EVENING),
)

LIVE_HOUR_TABLE: tuple[tuple[int, int, LiveTimePeriod], ...] = (
    (22, 5, LiveTimePeriod.NIGHT),
    (5, 7, LiveTimePeriod.DAWN),
    (7, 10, LiveTimePeriod.EARLY_MORNING),
    (10, 12, LiveTimePeriod.LATE_MORNING),
    (12, 15, LiveTimePeriod.MIDDAY),
    (15, 17, LiveTimePeriod.AFTERNOON),
    (17, 19, LiveTimePeriod.DUSK),
    (19, 22, LiveTimePeriod.EVENING),
)

def _hour_in_range(hour: int, start: int, end: int) -> bool:
    if start <= end:
        return start <= hour < end
    return hour >= start or hour < end

def _classify_hour(hour: int, table: Sequence[tuple[int, int, Period]]) -> Period:
    for start, end, period in table:
        if _hour_in_range(hour, start, end):
            return period
    raise InvariantError(f"Hour {hour} is not covered by any time period")

# ============================================================================
# Classifiers
# ============================================================================

def classify_simulated(clock: ClockTime) -> SimulatedTimePeriod:
    """Map a clock time to its simulated-mode bucket (hour only)."""
    return _classify_hour(clock.hour, SIMULATED_HOUR_TABLE)

def classify_live(clock: ClockTime, astronomy: Optional[AstronomyInfo] = None) -> LiveTimePeriod:
    """
    Map a clock time to its live-mode bucket.

    Args:
        clock: Local time of the observation
        astronomy: Sunrise/sunset for the day, or None to use the hour table only

    Returns:
        LiveTimePeriod

    Algorithm:
        1. With astronomy data, a time within DAWN_DUSK_WINDOW_MINUTES of
           sunrise is dawn, then within the window of sunset is dusk
           (both bounds inclusive; dawn wins if the windows overlap)
        2. Otherwise fall back to LIVE_HOUR_TABLE
    """
    if astronomy is not None:
        now = clock.minutes_since_midnight
        window = DAWN_DUSK_WINDOW_MINUTES

        if astronomy.sunrise_minutes - window <= now <= astronomy.sunrise_minutes + window:
            return LiveTimePeriod.DAWN

        if astronomy.sunset_minutes - window <= now <= astronomy.sunset_minutes + window:
            return LiveTimePeriod.DUSK

    return _classify_hour(clock.hour, LIVE_HOUR_TABLE)
