"""Human-readable labels for sky color results."""

from types import MappingProxyType
from typing import Mapping

from skycolor.errors import InvariantError
from skycolor.models import LiveTimePeriod, SimulatedTimePeriod


LIVE_LABELS: Mapping[LiveTimePeriod, str] = MappingProxyType({
    LiveTimePeriod.NIGHT: "Night",
    LiveTimePeriod.DAWN: "Dawn",
    LiveTimePeriod.EARLY_MORNING: "Morning",
    LiveTimePeriod.LATE_MORNING: "Late Morning",
    LiveTimePeriod.MIDDAY: "Midday",
    LiveTimePeriod.AFTERNOON: "Afternoon",
    LiveTimePeriod.DUSK: "Dusk",
    LiveTimePeriod.EVENING: "Evening",
})

SIMULATED_LABELS: Mapping[SimulatedTimePeriod, str] = MappingProxyType({
    SimulatedTimePeriod.NIGHT: "Night Sky",
    SimulatedTimePeriod.DAWN: "Dawn Breaking",
    SimulatedTimePeriod.MORNING: "Morning Sky",
    SimulatedTimePeriod.NOON: "Midday Sky",
    SimulatedTimePeriod.AFTERNOON: "Afternoon Sky",
    SimulatedTimePeriod.DUSK: "Dusk Setting",
    SimulatedTimePeriod.EVENING: "Evening Sky",
})


def describe_live(period: LiveTimePeriod, condition_text: str) -> str:
    """Format as "<Label> - <condition>", e.g. "Late Morning - Light rain"."""
    if not isinstance(period, LiveTimePeriod) or period not in LIVE_LABELS:
        raise InvariantError(f"No label for live time period {period!r}")
    return f"{LIVE_LABELS[period]} - {condition_text}"


def describe_simulated(period: SimulatedTimePeriod) -> str:
    """Label for a simulated period alone, e.g. "Dawn Breaking" (no weather text)."""
    if not isinstance(period, SimulatedTimePeriod) or period not in SIMULATED_LABELS:
        raise InvariantError(f"No label for simulated time period {period!r}")
    return SIMULATED_LABELS[period]


def describe_cloudiness(cloud_coverage_percent: float) -> str:
    """Coarse cloudiness label: Cloudy above 70%, Partly Cloudy above 30%, else Clear."""
    if cloud_coverage_percent > 70:
        return "Cloudy"
    if cloud_coverage_percent > 30:
        return "Partly Cloudy"
    return "Clear"
