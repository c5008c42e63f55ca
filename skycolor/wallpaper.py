"""
SVG wallpaper export.

Renders a SkyColorResult as a portrait SVG: a vertical gradient from the
primary color through each gradient stop, with the description, hex value
and location printed in the middle.
"""

from html import escape

from skycolor.models import SkyColorResult

_TEXT_COLOR = "#ffffff"
_FONT_FAMILY = "Arial"


def _gradient_stops(colors: list[str]) -> str:
    """Evenly spaced <stop> elements, first at 0%, last at 100%."""
    last = len(colors) - 1
    stops = []
    for i, color in enumerate(colors):
        offset = round(i / last * 100, 2) if last else 0
        stops.append(f'<stop offset="{offset:g}%" style="stop-color:{color};stop-opacity:1" />')
    return "\n      ".join(stops)


def render_wallpaper_svg(
    result: SkyColorResult,
    location_identifier: str,
    width: int,
    height: int,
) -> str:
    """
    Render a sky color result as a standalone SVG document.

    Args:
        result: Computed sky color
        location_identifier: Zip code printed at the bottom line
        width: Image width in pixels (> 0)
        height: Image height in pixels (> 0)

    Returns:
        SVG document string

    Raises:
        ValueError: If width or height is not positive
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Wallpaper size must be positive, got {width}x{height}")

    colors = [result.primary_color, *result.gradient_colors]

    return f"""<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="skyGradient" x1="0%" y1="0%" x2="0%" y2="100%">
      {_gradient_stops(colors)}
    </linearGradient>
  </defs>
  <rect width="100%" height="100%" fill="url(#skyGradient)"/>
  <text x="50%" y="40%" text-anchor="middle" dy=".3em" font-family="{_FONT_FAMILY}" font-size="28" fill="{_TEXT_COLOR}" font-weight="bold">{escape(result.description)}</text>
  <text x="50%" y="50%" text-anchor="middle" dy=".3em" font-family="{_FONT_FAMILY}" font-size="20" fill="{_TEXT_COLOR}">{escape(result.primary_color)}</text>
  <text x="50%" y="60%" text-anchor="middle" dy=".3em" font-family="{_FONT_FAMILY}" font-size="16" fill="{_TEXT_COLOR}" opacity="0.8">Zip: {escape(location_identifier)}</text>
</svg>
"""
