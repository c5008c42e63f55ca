"""
HTTP API for sky colors.

Live mode fetches current weather and astronomy for the zip code and falls
back to the simulated generator if the weather provider fails.
"""

from contextlib import asynccontextmanager
from typing import Literal, Optional

import httpx
from fastapi import APIRouter, FastAPI, HTTPException, Query
from fastapi.responses import Response

from skycolor.config import (
    LOG_LEVEL,
    USE_REAL_TIME_DATA,
    WALLPAPER_HEIGHT,
    WALLPAPER_WIDTH,
    WEATHER_API_BASE,
    WEATHER_API_KEY,
    WEATHER_API_TIMEOUT,
)
from skycolor.engine import compute_live, compute_simulated
from skycolor.logger import logger, setup_logging
from skycolor.models import SkyColorResult
from skycolor.wallpaper import render_wallpaper_svg
from skycolor.weather_service import (
    WeatherServiceError,
    fetch_astronomy,
    fetch_current_weather,
    is_valid_us_zip_code,
)

API_ERROR_LABEL = "Simulated (API Error)"

Mode = Literal["live", "simulated"]

# Shared provider client (set during lifespan startup)
http_client: Optional[httpx.AsyncClient] = None


# ============================================================================
# FastAPI Lifespan
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Opens the shared weather provider client on startup, closes it on shutdown.
    """
    global http_client

    # uvicorn installs its own handlers at startup; take them back
    setup_logging(LOG_LEVEL)

    logger.info("SkyColor starting up")
    logger.info(
        f"Configuration: USE_REAL_TIME_DATA={USE_REAL_TIME_DATA}, "
        f"WEATHER_API_BASE={WEATHER_API_BASE}, LOG_LEVEL={LOG_LEVEL}"
    )
    if USE_REAL_TIME_DATA and not WEATHER_API_KEY:
        logger.warning("USE_REAL_TIME_DATA=true but WEATHER_API_KEY is not set; live requests will fall back to simulated")

    http_client = httpx.AsyncClient(timeout=WEATHER_API_TIMEOUT)

    yield

    logger.info("Closing weather provider client")
    await http_client.aclose()
    http_client = None
    logger.info("Shutdown complete")


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="SkyColor API",
    lifespan=lifespan,
    redoc_url=None,
    docs_url="/docs"
)

sky_router = APIRouter(
    prefix="/sky",
    tags=["Sky Color"]
)


def _validate_zip(zip_code: str) -> None:
    if not is_valid_us_zip_code(zip_code):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid zip code: {zip_code}. Please enter a valid 5-digit US zip code (e.g., 10001)"
        )


async def derive_sky_color(zip_code: str, mode: Optional[Mode] = None) -> SkyColorResult:
    """
    Compute the sky color for a zip code.

    Args:
        zip_code: Validated US zip code
        mode: "live" or "simulated" (None = USE_REAL_TIME_DATA)

    Returns:
        SkyColorResult; simulated with API_ERROR_LABEL if the provider fails
    """
    use_live = USE_REAL_TIME_DATA if mode is None else mode == "live"

    if not use_live:
        return compute_simulated(zip_code)

    try:
        weather = await fetch_current_weather(zip_code, http_client)
    except WeatherServiceError as e:
        logger.warning(f"Live weather unavailable for {zip_code}, using simulated colors: {e}")
        return compute_simulated(zip_code, location_label=API_ERROR_LABEL)

    # Sunrise/sunset are in the location's zone, so classify on its clock too
    local_now = weather.local_time
    if local_now is None:
        logger.warning(f"No local time for {zip_code}; using server clock")

    astronomy = await fetch_astronomy(
        zip_code,
        day=local_now.date() if local_now else None,
        client=http_client,
    )
    if astronomy is None:
        logger.info(f"No astronomy data for {zip_code}; classifying by hour only")

    return compute_live(weather.observation, astronomy, now=local_now, location_label=weather.location_label)


# ------------------------------------------------------------------
# Sky color
# ------------------------------------------------------------------

@sky_router.get("/{zip_code}", response_model=SkyColorResult)
async def get_sky_color(zip_code: str, mode: Optional[Mode] = None):
    """
    Get the current sky color for a US zip code.

    Returns primary color, gradient stops, time period and description.
    """
    try:
        _validate_zip(zip_code)
        logger.debug(f"Sky color request: zip={zip_code}, mode={mode}")
        return await derive_sky_color(zip_code, mode)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to compute sky color for {zip_code}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@sky_router.get("/{zip_code}/wallpaper.svg")
async def get_wallpaper(
    zip_code: str,
    mode: Optional[Mode] = None,
    width: int = Query(WALLPAPER_WIDTH, ge=1, le=8192, description="Image width in pixels"),
    height: int = Query(WALLPAPER_HEIGHT, ge=1, le=8192, description="Image height in pixels"),
):
    """Render the current sky color as an SVG wallpaper."""
    try:
        _validate_zip(zip_code)
        result = await derive_sky_color(zip_code, mode)
        svg = render_wallpaper_svg(result, zip_code, width, height)
        logger.info(f"Rendered wallpaper for {zip_code}: {width}x{height}, primary={result.primary_color}")
        return Response(content=svg, media_type="image/svg+xml")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to render wallpaper for {zip_code}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


# ============================================================================
# Register Routers
# ============================================================================

app.include_router(sky_router)
