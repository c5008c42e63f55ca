"""Tests for cloud and weather adjustments."""

import pytest

from skycolor.adjusters import (
    OVERCAST_PALETTE,
    CloudTier,
    WeatherCategory,
    adjust_palette,
    apply_cloud_coverage,
    apply_weather_condition,
    classify_cloud_coverage,
    classify_condition,
)
from skycolor.color_math import blend, brighten
from skycolor.models import ColorPalette, LiveTimePeriod, WeatherObservation
from skycolor.palettes import live_palette


MIDDAY = live_palette(LiveTimePeriod.MIDDAY)
NIGHT = live_palette(LiveTimePeriod.NIGHT)


def observation(cloud: int, text: str) -> WeatherObservation:
    return WeatherObservation(is_daytime=True, cloud_coverage_percent=cloud, condition_text=text, condition_code=0)


class TestClassifyCloudCoverage:
    """Tests for cloud tier selection."""

    @pytest.mark.parametrize("percent,expected", [
        (0, CloudTier.CLEAR),
        (19, CloudTier.CLEAR),
        (20, CloudTier.PARTLY),
        (49, CloudTier.PARTLY),
        (50, CloudTier.MOSTLY),
        (79, CloudTier.MOSTLY),
        (80, CloudTier.OVERCAST),
        (100, CloudTier.OVERCAST),
    ])
    def test_lower_bound_inclusive(self, percent, expected):
        """Should select tiers with half-open intervals."""
        assert classify_cloud_coverage(percent) == expected


class TestApplyCloudCoverage:
    """Tests for the cloud stage."""

    @pytest.mark.parametrize("percent", [0, 5, 19])
    def test_clear_is_identity(self, percent):
        """Should return the palette unchanged below 20%."""
        assert apply_cloud_coverage(MIDDAY, percent) is MIDDAY

    def test_partly_cloudy(self):
        """Should blend primary 20% and gradient 15% toward #e0e0e0."""
        result = apply_cloud_coverage(MIDDAY, 20)
        assert result.primary == blend(MIDDAY.primary, "#e0e0e0", 0.2)
        assert result.primary == "#45a0f9"
        assert result.gradient == tuple(blend(c, "#e0e0e0", 0.15) for c in MIDDAY.gradient)

    def test_mostly_cloudy(self):
        """Should blend primary 40% and gradient 35% toward #b0b0b0."""
        result = apply_cloud_coverage(MIDDAY, 50)
        assert result.primary == blend(MIDDAY.primary, "#b0b0b0", 0.4)
        assert result.gradient == tuple(blend(c, "#b0b0b0", 0.35) for c in MIDDAY.gradient)

    @pytest.mark.parametrize("percent", [80, 95, 100])
    def test_overcast_replaces_palette(self, percent):
        """Should discard the input palette entirely."""
        result = apply_cloud_coverage(NIGHT, percent)
        assert result == OVERCAST_PALETTE
        assert result.primary == "#8b8b8b"
        assert result.gradient == ("#a9a9a9", "#8b8b8b", "#707070")

    def test_preserves_gradient_length(self):
        """Should tint every gradient stop."""
        assert len(apply_cloud_coverage(MIDDAY, 60).gradient) == len(MIDDAY.gradient)


class TestClassifyCondition:
    """Tests for condition text matching."""

    @pytest.mark.parametrize("text,expected", [
        ("Heavy Rain", WeatherCategory.RAIN),
        ("Patchy light drizzle", WeatherCategory.RAIN),
        ("Moderate or heavy rain with thunder", WeatherCategory.RAIN),
        ("Thundery outbreaks possible", WeatherCategory.THUNDERSTORM),
        ("Storm", WeatherCategory.THUNDERSTORM),
        ("Light snow showers", WeatherCategory.SNOW),
        ("Blizzard", WeatherCategory.SNOW),
        ("Patchy light snow with thunder", WeatherCategory.THUNDERSTORM),
        ("Freezing fog", WeatherCategory.FOG),
        ("Mist", WeatherCategory.FOG),
        ("Haze", WeatherCategory.FOG),
        ("Clear", WeatherCategory.CLEAR),
        ("SUNNY", WeatherCategory.CLEAR),
        ("Partly cloudy", WeatherCategory.OTHER),
        ("Overcast", WeatherCategory.OTHER),
        ("", WeatherCategory.OTHER),
    ])
    def test_priority_order(self, text, expected):
        """Should match case-insensitively, first category wins."""
        assert classify_condition(text) == expected

    def test_none_is_other(self):
        """Should treat missing text as no match."""
        assert classify_condition(None) == WeatherCategory.OTHER


class TestApplyWeatherCondition:
    """Tests for the weather stage."""

    def test_rain_override(self):
        """Should replace the palette with steel blue."""
        result = apply_weather_condition(MIDDAY, "Light rain")
        assert result.primary == "#536878"
        assert result.gradient == ("#6b7b8b", "#536878", "#4a5a6a")

    def test_thunderstorm_override(self):
        """Should replace the palette with dark slate."""
        assert apply_weather_condition(MIDDAY, "Thunderstorm").primary == "#2c3e50"

    def test_snow_override(self):
        """Should replace the palette with pale snow colors."""
        assert apply_weather_condition(NIGHT, "Heavy snow").primary == "#e8eaf6"

    def test_fog_override(self):
        """Should replace the palette with grey-blue."""
        assert apply_weather_condition(MIDDAY, "Fog").primary == "#b0bec5"

    def test_clear_brightens_input(self):
        """Should brighten primary and every stop by 0.1."""
        result = apply_weather_condition(MIDDAY, "Sunny")
        assert result.primary == "#359bff"
        assert result.gradient == tuple(brighten(c, 0.1) for c in MIDDAY.gradient)

    def test_other_passes_through(self):
        """Should return the input palette unchanged."""
        assert apply_weather_condition(MIDDAY, "Partly cloudy") is MIDDAY
        assert apply_weather_condition(MIDDAY, "") is MIDDAY


class TestAdjustPalette:
    """Tests for the two-stage pipeline."""

    def test_clear_brightens_cloud_stage_output(self):
        """Should brighten the cloud-tinted palette, not the base palette."""
        tinted = apply_cloud_coverage(MIDDAY, 30)
        result = adjust_palette(MIDDAY, observation(30, "Clear"))
        assert result.primary == brighten(tinted.primary, 0.1)
        assert result.primary != brighten(MIDDAY.primary, 0.1)

    def test_weather_override_after_overcast(self):
        """Should let a precipitation override replace the overcast palette."""
        assert adjust_palette(MIDDAY, observation(90, "Heavy rain")).primary == "#536878"

    def test_overcast_with_neutral_condition(self):
        """Should keep the overcast palette when the condition matches nothing."""
        assert adjust_palette(MIDDAY, observation(85, "Overcast")) == OVERCAST_PALETTE

    def test_clear_sky_no_clouds(self):
        """Should only brighten when coverage is below 20%."""
        assert adjust_palette(MIDDAY, observation(0, "Sunny")).primary == "#359bff"

    def test_rain_with_clear_clouds(self):
        """Should override to steel blue even when the cloud stage is identity."""
        result = adjust_palette(MIDDAY, observation(10, "Heavy Rain"))
        assert result == ColorPalette(primary="#536878", gradient=("#6b7b8b", "#536878", "#4a5a6a"))
