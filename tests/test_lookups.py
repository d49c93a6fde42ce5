from __future__ import annotations

import pytest

from forecast.entities import Coordinates
from forecast.errors import ImproperlyConfigured, UnknownCityError, UnknownMetricError
from forecast.lookups import (
    CITY_COORDINATES,
    METRIC_KEYS,
    PERIOD_48_HOURS,
    PERIOD_7_DAYS,
    is_fahrenheit,
    normalize_period,
    resolve_city,
    resolve_metric,
)
from forecast.settings import env, env_float


def test_resolve_city():
    assert resolve_city("Tokyo") == Coordinates(latitude=35.6895, longitude=139.6917)
    assert resolve_city("札幌") == resolve_city("Sapporo")


def test_resolve_city_unknown():
    with pytest.raises(UnknownCityError, match="Kyoto"):
        resolve_city("Kyoto")


def test_resolve_metric():
    assert resolve_metric("temperature") == "temperature_2m"
    assert resolve_metric("wind_speed") == "windspeed_10m"
    assert resolve_metric("湿度") == "relative_humidity_2m"
    with pytest.raises(UnknownMetricError):
        resolve_metric("pressure")


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CITY_COORDINATES["Kyoto"] = Coordinates(35.0, 135.7)  # type: ignore[index]
    with pytest.raises(TypeError):
        METRIC_KEYS["pressure"] = "pressure_msl"  # type: ignore[index]


@pytest.mark.parametrize(
    "period, expected",
    [
        ("48-hour", PERIOD_48_HOURS),
        ("48時間", PERIOD_48_HOURS),
        ("7-day", PERIOD_7_DAYS),
        ("7日間", PERIOD_7_DAYS),
        ("monthly", None),
    ],
)
def test_normalize_period(period, expected):
    assert normalize_period(period) == expected


@pytest.mark.parametrize("unit", ["°F", "F", "fahrenheit", " Fahrenheit "])
def test_is_fahrenheit(unit):
    assert is_fahrenheit(unit)


@pytest.mark.parametrize("unit", ["°C", "C", "", None, "kelvin"])
def test_is_not_fahrenheit(unit):
    assert not is_fahrenheit(unit)


def test_env_required(monkeypatch):
    monkeypatch.delenv("FORECAST_MISSING", raising=False)
    with pytest.raises(ImproperlyConfigured, match="FORECAST_MISSING"):
        env("FORECAST_MISSING")
    assert env("FORECAST_MISSING", "fallback") == "fallback"


def test_env_float(monkeypatch):
    monkeypatch.setenv("FORECAST_HTTP_TIMEOUT_TEST", "2.5")
    assert env_float("FORECAST_HTTP_TIMEOUT_TEST", "10") == 2.5
    monkeypatch.setenv("FORECAST_HTTP_TIMEOUT_TEST", "soon")
    with pytest.raises(ImproperlyConfigured):
        env_float("FORECAST_HTTP_TIMEOUT_TEST", "10")
