"""
WeatherAPI.com client.

Fetches current conditions and sunrise/sunset for a US zip code and
normalizes them into WeatherObservation / AstronomyInfo. No retries: a
failed current-conditions fetch raises, and the caller falls back to
simulated mode. Missing astronomy data is not an error.
"""

import re
from datetime import date, datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

import httpx
from pydantic import BaseModel, ConfigDict

from skycolor.config import WEATHER_API_BASE, WEATHER_API_KEY, WEATHER_API_TIMEOUT
from skycolor.logger import logger
from skycolor.models import AstronomyInfo, WeatherObservation


_ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")

# location.localtime, e.g. "2024-06-15 6:45" (hour is not zero-padded)
LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M"


class WeatherServiceError(Exception):
    """Weather provider call failed."""


class InvalidLocationError(WeatherServiceError):
    """Provider rejected the location (HTTP 400)."""


class ApiKeyError(WeatherServiceError):
    """API key missing or rejected (HTTP 401/403)."""


class CurrentWeather(BaseModel):
    """Current conditions plus location metadata."""
    model_config = ConfigDict(frozen=True)

    location_name: str
    region: str
    observation: WeatherObservation
    temperature_f: Optional[float] = None
    humidity: Optional[int] = None

    # Wall-clock time at the location (naive); None when the provider omits it
    local_time: Optional[datetime] = None
    tz_id: Optional[str] = None

    @property
    def location_label(self) -> str:
        return f"{self.location_name}, {self.region}"


def is_valid_us_zip_code(zip_code: str) -> bool:
    """5 digits, optionally followed by -4 digits (12345 or 12345-6789)."""
    return bool(_ZIP_PATTERN.match(zip_code or ""))


def _location_local_time(localtime: Optional[str], tz_id: Optional[str]) -> Optional[datetime]:
    """
    Naive wall-clock time at the location.

    Prefers the provider's localtime string; otherwise converts the current
    time into tz_id. Unknown zones raise ZoneInfoNotFoundError (a KeyError).
    """
    if localtime:
        return datetime.strptime(localtime, LOCAL_TIME_FORMAT)
    if tz_id:
        return datetime.now(ZoneInfo(tz_id)).replace(tzinfo=None)
    return None


async def _get_json(client: httpx.AsyncClient, path: str, params: dict[str, Any]) -> dict[str, Any]:
    if not WEATHER_API_KEY:
        raise ApiKeyError("API key not configured. Set WEATHER_API_KEY.")

    url = f"{WEATHER_API_BASE}/{path}"
    try:
        response = await client.get(url, params={"key": WEATHER_API_KEY, **params})
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        if status == 400:
            raise InvalidLocationError("Invalid zip code. Please enter a valid US zip code.") from e
        if status in (401, 403):
            raise ApiKeyError("API key rejected by weather provider.") from e
        raise WeatherServiceError(f"Weather provider returned HTTP {status}") from e
    except httpx.HTTPError as e:
        raise WeatherServiceError(f"Failed to fetch weather data: {e}") from e
    except ValueError as e:
        raise WeatherServiceError("Weather provider returned invalid JSON") from e


async def fetch_current_weather(
    zip_code: str,
    client: Optional[httpx.AsyncClient] = None,
) -> CurrentWeather:
    """
    Fetch current conditions for a zip code.

    Args:
        zip_code: US zip code
        client: Shared AsyncClient (a short-lived one is created if None)

    Returns:
        CurrentWeather

    Raises:
        InvalidLocationError: Provider rejected the zip code
        ApiKeyError: Key missing or rejected
        WeatherServiceError: Any other transport or response failure
    """
    if client is None:
        async with httpx.AsyncClient(timeout=WEATHER_API_TIMEOUT) as owned_client:
            return await fetch_current_weather(zip_code, owned_client)

    data = await _get_json(client, "current.json", {"q": zip_code, "aqi": "no"})

    try:
        location = data["location"]
        current = data["current"]
        return CurrentWeather(
            location_name=location["name"],
            region=location["region"],
            observation=WeatherObservation(
                is_daytime=current["is_day"] == 1,
                cloud_coverage_percent=current["cloud"],
                condition_text=current["condition"]["text"],
                condition_code=current["condition"]["code"],
            ),
            temperature_f=current.get("temp_f"),
            humidity=current.get("humidity"),
            local_time=_location_local_time(location.get("localtime"), location.get("tz_id")),
            tz_id=location.get("tz_id"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise WeatherServiceError(f"Unexpected current weather response: {e}") from e


async def fetch_astronomy(
    zip_code: str,
    day: Optional[date] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[AstronomyInfo]:
    """
    Fetch sunrise/sunset for a zip code.

    Args:
        zip_code: US zip code
        day: Local date at the location (server's date.today() if None)
        client: Shared AsyncClient (a short-lived one is created if None)

    Returns:
        AstronomyInfo, or None if the request or parsing fails
    """
    if client is None:
        async with httpx.AsyncClient(timeout=WEATHER_API_TIMEOUT) as owned_client:
            return await fetch_astronomy(zip_code, day, owned_client)

    day = day or date.today()

    try:
        data = await _get_json(client, "astronomy.json", {"q": zip_code, "dt": day.isoformat()})
        astro = data["astronomy"]["astro"]
        return AstronomyInfo.from_strings(
            astro["sunrise"],
            astro["sunset"],
            moon_phase=astro.get("moon_phase"),
            moon_illumination=astro.get("moon_illumination"),
        )
    except (WeatherServiceError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Failed to fetch astronomy data for {zip_code}: {e}")
        return None
