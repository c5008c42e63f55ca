"""
Base sky palettes per time period.

Live mode has one fixed palette per LiveTimePeriod. Simulated mode has a
five-color rotation per SimulatedTimePeriod; the entry is picked by the
location seed, and its gradient comes from SIMULATED_GRADIENTS.

All tables are read-only and built once at import.
"""

import re
from types import MappingProxyType
from typing import Mapping

from skycolor.config import DEFAULT_SEED
from skycolor.errors import InvariantError
from skycolor.models import ColorPalette, LiveTimePeriod, SimulatedTimePeriod


_LEADING_DIGITS = re.compile(r"^\s*(\d+)")


# ============================================================================
# Live Palettes
# ============================================================================

LIVE_PALETTES: Mapping[LiveTimePeriod, ColorPalette] = MappingProxyType({
    LiveTimePeriod.NIGHT: ColorPalette(
        primary="#0b1426",
        gradient=("#000428", "#004e92", "#0b1426"),
    ),
    LiveTimePeriod.DAWN: ColorPalette(
        primary="#ff6b6b",
        gradient=("#ff6b6b", "#ffb347", "#87ceeb"),
    ),
    LiveTimePeriod.EARLY_MORNING: ColorPalette(
        primary="#87ceeb",
        gradient=("#e0f6ff", "#87ceeb", "#4a90e2"),
    ),
    LiveTimePeriod.LATE_MORNING: ColorPalette(
        primary="#4a90e2",
        gradient=("#87ceeb", "#4a90e2", "#1e90ff"),
    ),
    LiveTimePeriod.MIDDAY: ColorPalette(
        primary="#1e90ff",
        gradient=("#4a90e2", "#1e90ff", "#00bfff"),
    ),
    LiveTimePeriod.AFTERNOON: ColorPalette(
        primary="#4682b4",
        gradient=("#5f9ea0", "#4682b4", "#6495ed"),
    ),
    LiveTimePeriod.DUSK: ColorPalette(
        primary="#ff8e53",
        gradient=("#87ceeb", "#ff8e53", "#ff6b6b"),
    ),
    LiveTimePeriod.EVENING: ColorPalette(
        primary="#483d8b",
        gradient=("#191970", "#483d8b", "#6a5acd"),
    ),
})


# ============================================================================
# Simulated Palettes
# ============================================================================

_WARM_HORIZON = ("#ff6b6b", "#ff8e53", "#ffb347", "#ffd93d", "#ffe66d")

SIMULATED_ROTATIONS: Mapping[SimulatedTimePeriod, tuple[str, ...]] = MappingProxyType({
    SimulatedTimePeriod.NIGHT: ("#0b1426", "#1a1a2e", "#16213e", "#0f3460", "#1e3a8a"),
    SimulatedTimePeriod.DAWN: _WARM_HORIZON,
    SimulatedTimePeriod.MORNING: ("#87ceeb", "#87cefa", "#b0e0e6", "#add8e6", "#e0f6ff"),
    SimulatedTimePeriod.NOON: ("#4a90e2", "#1e90ff", "#00bfff", "#87ceeb", "#b0e0e6"),
    SimulatedTimePeriod.AFTERNOON: ("#4682b4", "#5f9ea0", "#6495ed", "#7b68ee", "#9370db"),
    SimulatedTimePeriod.DUSK: _WARM_HORIZON,
    SimulatedTimePeriod.EVENING: ("#191970", "#483d8b", "#6a5acd", "#7b68ee", "#9370db"),
})

# Two-stop gradient for every color that appears in a rotation
SIMULATED_GRADIENTS: Mapping[str, tuple[str, str]] = MappingProxyType({
    # Night
    "#0b1426": ("#000428", "#16213e"),
    "#1a1a2e": ("#0b1426", "#16213e"),
    "#16213e": ("#1a1a2e", "#0f3460"),
    "#0f3460": ("#16213e", "#1e3a8a"),
    "#1e3a8a": ("#0f3460", "#4a90e2"),
    # Dawn / dusk
    "#ff6b6b": ("#ff4757", "#ff6b6b"),
    "#ff8e53": ("#ff6b6b", "#ff8e53"),
    "#ffb347": ("#ff8e53", "#ffb347"),
    "#ffd93d": ("#ffb347", "#ffd93d"),
    "#ffe66d": ("#ffd93d", "#ffe66d"),
    # Daylight blues
    "#87ceeb": ("#4a90e2", "#7b68ee"),
    "#87cefa": ("#5f9ea0", "#b0e0e6"),
    "#b0e0e6": ("#87ceeb", "#e0f6ff"),
    "#add8e6": ("#87ceeb", "#f0f8ff"),
    "#e0f6ff": ("#b0e0e6", "#f0f8ff"),
    "#4a90e2": ("#1e90ff", "#87ceeb"),
    "#1e90ff": ("#0066cc", "#4a90e2"),
    "#00bfff": ("#0099cc", "#87ceeb"),
    # Afternoon / evening
    "#4682b4": ("#2e5a88", "#5f9ea0"),
    "#5f9ea0": ("#4682b4", "#87cefa"),
    "#6495ed": ("#4682b4", "#7b68ee"),
    "#7b68ee": ("#6a5acd", "#9370db"),
    "#9370db": ("#7b68ee", "#b0e0e6"),
    "#191970": ("#000080", "#483d8b"),
    "#483d8b": ("#191970", "#6a5acd"),
    "#6a5acd": ("#483d8b", "#7b68ee"),
})


def _build_simulated_palettes() -> Mapping[SimulatedTimePeriod, tuple[ColorPalette, ...]]:
    palettes = {}
    for period, rotation in SIMULATED_ROTATIONS.items():
        entries = []
        for color in rotation:
            if color not in SIMULATED_GRADIENTS:
                raise InvariantError(f"No gradient defined for simulated color {color}")
            entries.append(ColorPalette(primary=color, gradient=SIMULATED_GRADIENTS[color]))
        palettes[period] = tuple(entries)
    return MappingProxyType(palettes)


SIMULATED_PALETTES: Mapping[SimulatedTimePeriod, tuple[ColorPalette, ...]] = _build_simulated_palettes()


# ============================================================================
# Lookup
# ============================================================================

def location_seed(location_identifier: str) -> int:
    """
    Numeric seed for a location identifier.

    Uses the leading digits ("10001-1234" -> 10001). Identifiers without
    leading digits, or whose value is 0, use DEFAULT_SEED.
    """
    match = _LEADING_DIGITS.match(location_identifier or "")
    if match is None:
        return DEFAULT_SEED
    return int(match.group(1)) or DEFAULT_SEED


def live_palette(period: LiveTimePeriod) -> ColorPalette:
    """Base palette for a live time period."""
    if not isinstance(period, LiveTimePeriod):
        raise InvariantError(f"Expected LiveTimePeriod, got {period!r}")
    try:
        return LIVE_PALETTES[period]
    except KeyError:
        raise InvariantError(f"No live palette for time period {period!r}") from None


def simulated_palette(period: SimulatedTimePeriod, seed: int) -> ColorPalette:
    """Base palette for a simulated time period, picked by seed modulo rotation size."""
    if not isinstance(period, SimulatedTimePeriod):
        raise InvariantError(f"Expected SimulatedTimePeriod, got {period!r}")
    try:
        rotation = SIMULATED_PALETTES[period]
    except KeyError:
        raise InvariantError(f"No simulated palette for time period {period!r}") from None
    return rotation[seed % len(rotation)]
