"""Environment driven settings for the forecast client."""
from __future__ import annotations

import os

from forecast.errors import ImproperlyConfigured


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def env_float(name: str, default: str) -> float:
    raw = env(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {name} must be a number, got {raw!r}") from exc


FORECAST_API_URL = env("FORECAST_API_URL", "https://api.open-meteo.com/v1/forecast")
FORECAST_TIMEZONE = env("FORECAST_TIMEZONE", "Asia/Tokyo")
FORECAST_HTTP_TIMEOUT = env_float("FORECAST_HTTP_TIMEOUT", "10")
TESTING_MODE = os.environ.get("TESTING_MODE", "0") == "1"
