"""
Configuration management with environment variable support.

All settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

# Load .env file from project root (one level up from skycolor/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# Live weather data (false = always use the simulated generator)
USE_REAL_TIME_DATA: bool = os.getenv("USE_REAL_TIME_DATA", "true").lower() == "true"

# Weather provider (WeatherAPI.com)
WEATHER_API_KEY: str | None = os.getenv("WEATHER_API_KEY")
WEATHER_API_BASE: str = os.getenv("WEATHER_API_BASE", "https://api.weatherapi.com/v1")
WEATHER_API_TIMEOUT: float = float(os.getenv("WEATHER_API_TIMEOUT", "10.0"))  # seconds

# Time period classification
DAWN_DUSK_WINDOW_MINUTES: int = int(os.getenv("DAWN_DUSK_WINDOW_MINUTES", "30"))  # +/- around sunrise/sunset

# Simulated mode
DEFAULT_SEED: int = int(os.getenv("DEFAULT_SEED", "10000"))  # Used for non-numeric location identifiers
MINUTE_VARIATION: float = float(os.getenv("MINUTE_VARIATION", "0.1"))  # Max brightness shift at minute 59

# Wallpaper export
WALLPAPER_WIDTH: int = int(os.getenv("WALLPAPER_WIDTH", "1080"))
WALLPAPER_HEIGHT: int = int(os.getenv("WALLPAPER_HEIGHT", "1920"))
