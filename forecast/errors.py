from __future__ import annotations

from typing import Optional


class ForecastError(RuntimeError):
    """Base error for everything raised while building a forecast."""


class ImproperlyConfigured(ForecastError):
    """Raised when a required setting is missing from the environment."""


class UnknownCityError(ForecastError, KeyError):
    """Raised when a city is not present in the coordinates table."""

    def __init__(self, city: str) -> None:
        super().__init__(f"unknown city: {city!r}")
        self.city = city

    def __str__(self) -> str:
        return self.args[0]


class UnknownMetricError(ForecastError, KeyError):
    """Raised when a metric has no provider field key."""

    def __init__(self, metric: str) -> None:
        super().__init__(f"unknown metric: {metric!r}")
        self.metric = metric

    def __str__(self) -> str:
        return self.args[0]


class ProviderError(ForecastError):
    """Base provider error."""


class FetchError(ProviderError):
    """Transport failure or non-success HTTP status from the provider."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuotaExceeded(FetchError):
    """Raised when a provider reports a quota/usage limit issue."""


class MalformedResponseError(ProviderError):
    """The provider answered, but not with the hourly arrays we asked for."""


__all__ = [
    "ForecastError",
    "ImproperlyConfigured",
    "UnknownCityError",
    "UnknownMetricError",
    "ProviderError",
    "FetchError",
    "QuotaExceeded",
    "MalformedResponseError",
]
