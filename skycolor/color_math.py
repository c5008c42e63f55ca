"""
Hex color math for sky palettes.

Supports:
- Parsing and formatting of #rrggbb colors
- Linear RGB blending between two colors
- Brightening toward white and flat brightness shifts

Rounding is half-up on every channel, so 127.5 becomes 128.
"""

import math
import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from skycolor.errors import FormatError


_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


# ============================================================================
# Data Structures
# ============================================================================

class RGB(BaseModel):
    """Single RGB color."""
    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255, description="Red component (0-255)")
    g: int = Field(..., ge=0, le=255, description="Green component (0-255)")
    b: int = Field(..., ge=0, le=255, description="Blue component (0-255)")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


# ============================================================================
# Parsing / Formatting
# ============================================================================

def parse_hex(value: str) -> RGB:
    """
    Parse a 6-digit hex color into its RGB channels.

    Args:
        value: Color string, with or without leading '#'

    Returns:
        RGB with each channel 0-255

    Raises:
        FormatError: If value is not exactly 6 hex digits
    """
    if not isinstance(value, str):
        raise FormatError(f"Hex color must be a string, got {type(value).__name__}")

    match = _HEX_PATTERN.match(value)
    if match is None:
        raise FormatError(f"Invalid hex color: {value!r}")

    digits = match.group(1)
    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def _clamp_channel(value: float) -> int:
    return max(0, min(255, _round_half_up(value)))


def to_hex(color: RGB | tuple[float, float, float]) -> str:
    """
    Format RGB channels as a canonical '#rrggbb' string.

    Channels outside [0, 255] are clamped before formatting.
    """
    if isinstance(color, RGB):
        r, g, b = color.as_tuple()
    else:
        r, g, b = color

    return "#{:02x}{:02x}{:02x}".format(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def normalize_hex(value: str) -> str:
    """Canonicalize a hex color to lower-case with '#' prefix."""
    return to_hex(parse_hex(value))


# Pydantic field type for canonical hex colors
HexColor = Annotated[str, AfterValidator(normalize_hex)]


# ============================================================================
# Channel Math
# ============================================================================

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation."""
    return a * (1 - t) + b * t


def blend(color_a: str, color_b: str, ratio: float) -> str:
    """
    Blend two colors by linear per-channel interpolation.

    Args:
        color_a: Start color (returned at ratio=0.0)
        color_b: End color (returned at ratio=1.0)
        ratio: Interpolation factor (0.0-1.0)

    Example:
        blend("#000000", "#ffffff", 0.5)  # "#808080"
    """
    a = parse_hex(color_a)
    b = parse_hex(color_b)

    return to_hex((
        lerp(a.r, b.r, ratio),
        lerp(a.g, b.g, ratio),
        lerp(a.b, b.b, ratio),
    ))


def brighten(color: str, factor: float) -> str:
    """
    Move each channel toward white by factor.

    factor=0.0 leaves the color unchanged, factor=1.0 yields '#ffffff'.
    """
    c = parse_hex(color)

    return to_hex(tuple(
        min(255, _round_half_up(channel + (255 - channel) * factor))
        for channel in c.as_tuple()
    ))


def shift_brightness(color: str, delta: float) -> str:
    """
    Add delta * 255 to every channel, clamped to [0, 255].

    Used for the minute-level variation in simulated mode.
    Negative delta darkens.
    """
    c = parse_hex(color)

    return to_hex(tuple(
        max(0.0, min(255.0, channel + delta * 255))
        for channel in c.as_tuple()
    ))
