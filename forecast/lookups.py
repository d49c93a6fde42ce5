"""Static lookup tables and the small resolvers built on top of them."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from forecast.entities import Coordinates
from forecast.errors import UnknownCityError, UnknownMetricError


TEMPERATURE_KEY = "temperature_2m"

# Field keys requested from the provider on every call, in query order.
HOURLY_FIELDS = (
    TEMPERATURE_KEY,
    "relative_humidity_2m",
    "precipitation",
    "windspeed_10m",
)

_TOKYO = Coordinates(latitude=35.6895, longitude=139.6917)
_OSAKA = Coordinates(latitude=34.6937, longitude=135.5023)
_SAPPORO = Coordinates(latitude=43.0618, longitude=141.3545)
_FUKUOKA = Coordinates(latitude=33.5902, longitude=130.4017)
_NAGOYA = Coordinates(latitude=35.1815, longitude=136.9066)

CITY_COORDINATES: Mapping[str, Coordinates] = MappingProxyType(
    {
        "Tokyo": _TOKYO,
        "Osaka": _OSAKA,
        "Sapporo": _SAPPORO,
        "Fukuoka": _FUKUOKA,
        "Nagoya": _NAGOYA,
        "東京": _TOKYO,
        "大阪": _OSAKA,
        "札幌": _SAPPORO,
        "福岡": _FUKUOKA,
        "名古屋": _NAGOYA,
    }
)

METRIC_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "temperature": TEMPERATURE_KEY,
        "humidity": "relative_humidity_2m",
        "wind_speed": "windspeed_10m",
        "precipitation": "precipitation",
        "気温": TEMPERATURE_KEY,
        "湿度": "relative_humidity_2m",
        "風速": "windspeed_10m",
        "降水量": "precipitation",
    }
)

PERIOD_48_HOURS = "48-hour"
PERIOD_7_DAYS = "7-day"

_PERIOD_ALIASES = {
    "48-hour": PERIOD_48_HOURS,
    "48時間": PERIOD_48_HOURS,
    "7-day": PERIOD_7_DAYS,
    "7日間": PERIOD_7_DAYS,
}

_FAHRENHEIT_UNITS = frozenset({"°f", "f", "fahrenheit"})


def resolve_city(city: str) -> Coordinates:
    try:
        return CITY_COORDINATES[city]
    except KeyError:
        raise UnknownCityError(city) from None


def resolve_metric(metric: str) -> str:
    try:
        return METRIC_KEYS[metric]
    except KeyError:
        raise UnknownMetricError(metric) from None


def normalize_period(period: str) -> str | None:
    """Return the canonical period name, or ``None`` when it is not recognized."""

    return _PERIOD_ALIASES.get(period)


def is_fahrenheit(unit: str | None) -> bool:
    if not unit:
        return False
    return unit.strip().lower() in _FAHRENHEIT_UNITS


__all__ = [
    "CITY_COORDINATES",
    "METRIC_KEYS",
    "HOURLY_FIELDS",
    "TEMPERATURE_KEY",
    "PERIOD_48_HOURS",
    "PERIOD_7_DAYS",
    "resolve_city",
    "resolve_metric",
    "normalize_period",
    "is_fahrenheit",
]
