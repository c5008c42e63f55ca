"""Tests for FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient
from datetime import date, datetime
from unittest.mock import ANY, AsyncMock, patch

from skycolor.models import AstronomyInfo, LiveTimePeriod, SimulatedTimePeriod, WeatherObservation
from skycolor.weather_service import CurrentWeather, InvalidLocationError, WeatherServiceError


LIVE_WEATHER = CurrentWeather(
    location_name="New York",
    region="New York",
    observation=WeatherObservation(
        is_daytime=True,
        cloud_coverage_percent=90,
        condition_text="Overcast",
        condition_code=1009,
    ),
    temperature_f=61.0,
    humidity=80,
)

ASTRONOMY = AstronomyInfo(sunrise_minutes=325, sunset_minutes=1231)


@pytest.fixture
def test_client():
    """Create FastAPI test client."""
    from skycolor.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def live_provider():
    """Mock weather provider returning overcast New York conditions."""
    with patch("skycolor.main.fetch_current_weather", new_callable=AsyncMock) as weather, \
         patch("skycolor.main.fetch_astronomy", new_callable=AsyncMock) as astronomy:
        weather.return_value = LIVE_WEATHER
        astronomy.return_value = ASTRONOMY
        yield weather, astronomy


class TestSkyColorEndpoint:
    """Tests for GET /sky/{zip_code}."""

    @pytest.mark.parametrize("zip_code", ["1234", "abcde", "123456", "10001-12"])
    def test_invalid_zip(self, test_client, zip_code):
        """Should reject malformed zip codes."""
        response = test_client.get(f"/sky/{zip_code}")
        assert response.status_code == 400

    def test_invalid_mode(self, test_client):
        """Should reject unknown modes."""
        response = test_client.get("/sky/10001?mode=psychedelic")
        assert response.status_code == 422

    def test_simulated_mode(self, test_client, live_provider):
        """Should return a simulated result without calling the provider."""
        weather, _ = live_provider
        response = test_client.get("/sky/10001?mode=simulated")
        assert response.status_code == 200

        data = response.json()
        assert data["mode"] == "simulated"
        assert data["source_location_label"] == "Simulated"
        assert data["time_period"] in [p.value for p in SimulatedTimePeriod]
        assert data["primary_color"].startswith("#") and len(data["primary_color"]) == 7
        assert len(data["gradient_colors"]) >= 2
        weather.assert_not_called()

    def test_live_mode(self, test_client, live_provider):
        """Should compute a live result from provider data."""
        weather, astronomy = live_provider
        response = test_client.get("/sky/10001?mode=live")
        assert response.status_code == 200

        data = response.json()
        assert data["mode"] == "live"
        assert data["source_location_label"] == "New York, New York"
        assert data["primary_color"] == "#8b8b8b"
        assert data["weather_condition"] == "Overcast"
        assert data["description"].endswith(" - Overcast")
        assert data["time_period"] in [p.value for p in LiveTimePeriod]
        weather.assert_awaited_once()
        astronomy.assert_awaited_once()

    def test_live_uses_location_clock(self, test_client, live_provider):
        """Should classify on the location's clock, not the server's."""
        weather, astronomy = live_provider
        weather.return_value = LIVE_WEATHER.model_copy(update={
            "local_time": datetime(2024, 6, 15, 6, 45),
            "tz_id": "America/New_York",
        })

        with patch("skycolor.engine.datetime") as server_clock:
            server_clock.now.return_value = datetime(2024, 6, 15, 10, 45)
            response = test_client.get("/sky/10001?mode=live")

        assert response.status_code == 200
        assert response.json()["time_period"] == LiveTimePeriod.DAWN.value
        server_clock.now.assert_not_called()
        astronomy.assert_awaited_once_with("10001", day=date(2024, 6, 15), client=ANY)

    def test_live_sunrise_window_on_location_clock(self, test_client, live_provider):
        """Should match sunrise against the location's time of day."""
        weather, astronomy = live_provider
        weather.return_value = LIVE_WEATHER.model_copy(update={"local_time": datetime(2024, 6, 15, 7, 40)})
        astronomy.return_value = AstronomyInfo.from_strings("07:20 AM", "04:30 PM")

        with patch("skycolor.engine.datetime") as server_clock:
            server_clock.now.return_value = datetime(2024, 6, 15, 12, 40)
            response = test_client.get("/sky/10001?mode=live")

        assert response.json()["time_period"] == LiveTimePeriod.DAWN.value

    def test_live_without_local_time_uses_server_clock(self, test_client, live_provider):
        """Should fall back to the server clock and date when local time is unknown."""
        _, astronomy = live_provider

        with patch("skycolor.engine.datetime") as server_clock:
            server_clock.now.return_value = datetime(2024, 6, 15, 13, 0)
            response = test_client.get("/sky/10001?mode=live")

        assert response.json()["time_period"] == LiveTimePeriod.MIDDAY.value
        astronomy.assert_awaited_once_with("10001", day=None, client=ANY)

    def test_live_without_astronomy(self, test_client, live_provider):
        """Should still return a live result when astronomy is unavailable."""
        _, astronomy = live_provider
        astronomy.return_value = None
        response = test_client.get("/sky/10001-1234?mode=live")
        assert response.status_code == 200
        assert response.json()["mode"] == "live"

    @pytest.mark.parametrize("error", [
        WeatherServiceError("provider down"),
        InvalidLocationError("Invalid zip code"),
    ])
    def test_provider_failure_falls_back(self, test_client, live_provider, error):
        """Should fall back to simulated colors when the provider fails."""
        weather, astronomy = live_provider
        weather.side_effect = error
        response = test_client.get("/sky/10001?mode=live")
        assert response.status_code == 200

        data = response.json()
        assert data["mode"] == "simulated"
        assert data["source_location_label"] == "Simulated (API Error)"
        astronomy.assert_not_called()

    def test_default_mode_from_config(self, test_client, live_provider):
        """Should use simulated mode when USE_REAL_TIME_DATA is false."""
        weather, _ = live_provider
        with patch("skycolor.main.USE_REAL_TIME_DATA", False):
            response = test_client.get("/sky/10001")
        assert response.json()["mode"] == "simulated"
        weather.assert_not_called()

    def test_default_mode_live(self, test_client, live_provider):
        """Should use live mode when USE_REAL_TIME_DATA is true."""
        with patch("skycolor.main.USE_REAL_TIME_DATA", True):
            response = test_client.get("/sky/10001")
        assert response.json()["mode"] == "live"

    def test_unexpected_error(self, test_client):
        """Should return 500 for unexpected failures."""
        with patch("skycolor.main.compute_simulated", side_effect=RuntimeError("boom")):
            response = test_client.get("/sky/10001?mode=simulated")
        assert response.status_code == 500
        assert response.json()["detail"] == "boom"


class TestWallpaperEndpoint:
    """Tests for GET /sky/{zip_code}/wallpaper.svg."""

    def test_svg_response(self, test_client):
        """Should return an SVG document."""
        response = test_client.get("/sky/10001/wallpaper.svg?mode=simulated&width=400&height=800")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith("<svg")
        assert 'width="400"' in response.text
        assert "Zip: 10001" in response.text

    def test_live_wallpaper(self, test_client, live_provider):
        """Should embed the live primary color."""
        response = test_client.get("/sky/10001/wallpaper.svg?mode=live")
        assert response.status_code == 200
        assert "#8b8b8b" in response.text

    @pytest.mark.parametrize("query", ["width=0", "height=0", "width=9000"])
    def test_invalid_size(self, test_client, query):
        """Should reject out-of-range sizes."""
        response = test_client.get(f"/sky/10001/wallpaper.svg?mode=simulated&{query}")
        assert response.status_code == 422

    def test_invalid_zip(self, test_client):
        """Should reject malformed zip codes."""
        response = test_client.get("/sky/abc/wallpaper.svg")
        assert response.status_code == 400
