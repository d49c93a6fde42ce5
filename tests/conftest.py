from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from requests_mock import Mocker


@pytest.fixture
def requests_mock():
    with Mocker(case_sensitive=True) as mock:
        yield mock


@pytest.fixture
def make_hourly():
    """Build an Open-Meteo style payload with ``hours`` hourly entries."""

    def _make(hours: int, temperature: Optional[List[Optional[float]]] = None, **extra: list) -> Dict[str, dict]:
        hourly: Dict[str, list] = {
            "time": [f"2024-05-{1 + i // 24:02d}T{i % 24:02d}:00" for i in range(hours)],
            "temperature_2m": temperature if temperature is not None else [10.0 + i / 10 for i in range(hours)],
            "relative_humidity_2m": [50 + i % 10 for i in range(hours)],
            "precipitation": [0.0] * hours,
            "windspeed_10m": [3.33] * hours,
        }
        hourly.update(extra)
        return {"hourly": hourly}

    return _make
