"""Shared pytest fixtures for all tests."""

import pytest

from skycolor.models import AstronomyInfo, WeatherObservation


@pytest.fixture
def clear_observation():
    """Daytime observation with few clouds and a condition that matches no weather keyword."""
    return WeatherObservation(
        is_daytime=True,
        cloud_coverage_percent=10,
        condition_text="Partly cloudy",
        condition_code=1003,
    )


@pytest.fixture
def astronomy():
    """Sunrise 06:30, sunset 20:10."""
    return AstronomyInfo.from_strings("06:30 AM", "08:10 PM")
