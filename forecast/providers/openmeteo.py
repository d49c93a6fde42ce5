from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from .base import WeatherProvider
from ..entities import Coordinates, HourlySeries
from ..errors import MalformedResponseError
from ..lookups import HOURLY_FIELDS
from .. import settings


class OpenMeteoProvider(WeatherProvider):
    base_url = settings.FORECAST_API_URL

    def __init__(
        self,
        base_url: Optional[str] = None,
        timezone: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.timezone = timezone or settings.FORECAST_TIMEZONE
        self._log = logging.getLogger(self.__class__.__name__)

    def hourly_series(
        self,
        coordinates: Coordinates,
        required: Iterable[str] = (),
        start: Optional[datetime] = None,
    ) -> HourlySeries:
        """Fetch the raw hourly arrays for ``HOURLY_FIELDS``.

        ``required`` lists field keys that must be present, numeric and as
        long as ``time``; anything else raises ``MalformedResponseError``.
        Other fields are copied over as returned, only when they are arrays.
        """
        response = self._request("GET", self.base_url, params=self.build_params(coordinates, start))
        data = self._json(response)
        hourly = data.get("hourly")
        if not isinstance(hourly, dict):
            raise MalformedResponseError("missing hourly data")
        times = hourly.get("time")
        if not isinstance(times, list):
            raise MalformedResponseError("missing hourly.time")

        # Unrequested fields are passed through unchecked.
        values = {key: hourly[key] for key in HOURLY_FIELDS if isinstance(hourly.get(key), list)}
        for key in required:
            series = hourly.get(key)
            if series is None:
                raise MalformedResponseError(f"missing hourly.{key}")
            if not isinstance(series, list):
                raise MalformedResponseError(f"hourly.{key} is not an array")
            if len(series) != len(times):
                raise MalformedResponseError(
                    f"hourly.{key} has {len(series)} values for {len(times)} timestamps"
                )
            values[key] = [_safe_float(v) for v in series]
        return HourlySeries(times=[str(t) for t in times], values=values)

    def build_params(self, coordinates: Coordinates, start: Optional[datetime] = None) -> dict:
        params = {
            "latitude": coordinates.latitude,
            "longitude": coordinates.longitude,
            "hourly": ",".join(HOURLY_FIELDS),
            "timezone": self.timezone,
        }
        if start is not None:
            params["start_hour"] = self._format_start(start)
        return params

    # helpers ------------------------------------------------------------
    def _format_start(self, value: datetime) -> str:
        if value.tzinfo is not None:
            value = value.astimezone(ZoneInfo(self.timezone))
        return value.strftime("%Y-%m-%dT%H:00")


def _safe_float(value: Optional[object]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"non-numeric value {value!r}") from exc


__all__ = ["OpenMeteoProvider"]
