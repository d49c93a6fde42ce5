from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response

from .. import settings
from ..errors import FetchError, MalformedResponseError, ProviderError, QuotaExceeded


@dataclass
class RequestConfig:
    timeout: Optional[float] = settings.FORECAST_HTTP_TIMEOUT


class WeatherProvider:
    """Base class for HTTP providers: one request per call, no retries."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._testing_mode = settings.TESTING_MODE
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("quota exceeded", status_code=429)
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise FetchError(f"HTTP {response.status_code}", status_code=response.status_code)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise FetchError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise FetchError("request failed") from exc
        self._log_response(response)
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise MalformedResponseError("invalid json") from exc
        if not isinstance(data, dict):
            raise MalformedResponseError("expected a JSON object")
        return data

    def _log_response(self, response: Response) -> None:
        if not self._testing_mode:
            return
        self._log.info(
            "Provider request",
            extra={"url": response.url, "status": response.status_code, "body": response.text[:500]},
        )


__all__ = ["WeatherProvider", "ProviderError", "FetchError", "QuotaExceeded", "MalformedResponseError", "RequestConfig"]
