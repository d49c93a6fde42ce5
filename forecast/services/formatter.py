"""Turn raw hourly forecasts into the 48-hour and 7-day display series."""
from __future__ import annotations

import asyncio
import logging
import math
from datetime import datetime
from typing import List, Optional

from ..entities import HourlySeries, ResultPoint, renumber
from ..lookups import (
    PERIOD_48_HOURS,
    PERIOD_7_DAYS,
    TEMPERATURE_KEY,
    is_fahrenheit,
    normalize_period,
    resolve_city,
    resolve_metric,
)
from ..providers.openmeteo import OpenMeteoProvider


HOURS_PER_DAY = 24
HOURLY_HORIZON = 49
WEEKLY_HORIZON = HOURS_PER_DAY * 7


class ForecastFormatter:
    """Fetch one city's hourly forecast and shape it for display.

    Each call issues exactly one provider request. Nothing is cached between
    calls, so a single instance can be shared by concurrent callers.
    """

    def __init__(self, provider: Optional[OpenMeteoProvider] = None) -> None:
        self.provider = provider or OpenMeteoProvider()
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def format(
        self,
        city: str,
        metric: str,
        period: str,
        unit: str,
        *,
        start: Optional[datetime] = None,
    ) -> List[ResultPoint]:
        coordinates = resolve_city(city)
        key = resolve_metric(metric)
        weekly = self._is_weekly(period)
        self._log.debug(
            "Fetching %s for %s (%s) period=%s unit=%s",
            key,
            city,
            coordinates,
            PERIOD_7_DAYS if weekly else PERIOD_48_HOURS,
            unit,
        )
        series = self.provider.hourly_series(coordinates, required=(key,), start=start)
        return shape(series, key, weekly=weekly, fahrenheit=is_fahrenheit(unit))

    async def aformat(
        self,
        city: str,
        metric: str,
        period: str,
        unit: str,
        *,
        start: Optional[datetime] = None,
    ) -> List[ResultPoint]:
        # Lookups fail here, before a worker thread or request is involved.
        resolve_city(city)
        resolve_metric(metric)
        return await asyncio.to_thread(self.format, city, metric, period, unit, start=start)

    # Helpers ------------------------------------------------------------
    def _is_weekly(self, period: str) -> bool:
        canonical = normalize_period(period)
        if canonical is None:
            self._log.warning("Unknown period %r, using the %s view", period, PERIOD_7_DAYS)
            return True
        return canonical == PERIOD_7_DAYS


def shape(series: HourlySeries, key: str, *, weekly: bool, fahrenheit: bool = False) -> List[ResultPoint]:
    horizon = WEEKLY_HORIZON if weekly else HOURLY_HORIZON
    times = series.times[:horizon]
    values = series.series(key)[:horizon]
    convert = fahrenheit and key == TEMPERATURE_KEY

    points = [
        ResultPoint(time=_label(idx, weekly), value=_convert(value, convert), hour=idx)
        for idx, (_, value) in enumerate(zip(times, values))
    ]
    if not weekly:
        return points
    return renumber([p for p in points if p.hour % HOURS_PER_DAY == 0])


async def fetch_forecast(
    city: str,
    metric: str,
    period: str,
    unit: str,
    *,
    start: Optional[datetime] = None,
    provider: Optional[OpenMeteoProvider] = None,
) -> List[ResultPoint]:
    """Return the display series for ``city``/``metric`` over ``period``.

    ``period`` is ``"48-hour"`` (49 hourly points labelled ``current``,
    ``+1h``...) or ``"7-day"`` (one point per day labelled ``today``,
    ``+1d``...); anything else falls back to the 7-day view. Temperatures are
    converted to Fahrenheit when ``unit`` asks for it.
    """
    return await ForecastFormatter(provider).aformat(city, metric, period, unit, start=start)


def _label(index: int, weekly: bool) -> str:
    if weekly:
        if index == 0:
            return "today"
        if index % HOURS_PER_DAY == 0:
            return f"+{index // HOURS_PER_DAY}d"
        return ""
    if index == 0:
        return "current"
    return f"+{index}h"


def _convert(value: Optional[float], fahrenheit: bool) -> float:
    # Gaps in the provider series read as zero.
    if value is None:
        value = 0.0
    if fahrenheit:
        value = value * 1.8 + 32
    return _round1(value)


def _round1(value: float) -> float:
    # Halves round toward +inf.
    return math.floor(value * 10 + 0.5) / 10


__all__ = ["ForecastFormatter", "fetch_forecast", "shape", "HOURLY_HORIZON", "WEEKLY_HORIZON"]
