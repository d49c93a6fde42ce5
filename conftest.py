from __future__ import annotations

import os


os.environ.setdefault("FORECAST_API_URL", "https://openmeteo.test/v1/forecast")
os.environ.setdefault("TESTING_MODE", "1")
