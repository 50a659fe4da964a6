from __future__ import annotations

from typing import List, Tuple

import pytest
import requests

from weather_summary.api import views
from weather_summary.core.abstractions import WeatherCondition, WeatherReport
from weather_summary.core.providers import ProviderError


OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class RecordingProvider:
    """Fake provider returning a fixed report and remembering each call."""

    name = "recording"

    def __init__(self, report: WeatherReport) -> None:
        self.report = report
        self.calls: List[Tuple[str, str]] = []

    def get_weather(self, latitude: str, longitude: str) -> WeatherReport:
        self.calls.append((latitude, longitude))
        return self.report


class FailingProvider:
    name = "failing"

    def __init__(self, message: str = "failed to fetch weather data: connection refused") -> None:
        self.message = message
        self.calls = 0

    def get_weather(self, latitude: str, longitude: str) -> WeatherReport:
        self.calls += 1
        raise ProviderError(self.message)


class _BrokenBodyResponse:
    status_code = 200

    def __enter__(self) -> "_BrokenBodyResponse":
        return self

    def __exit__(self, *exc_info) -> bool:
        return False

    @property
    def content(self) -> bytes:
        raise requests.exceptions.ChunkedEncodingError("connection broken mid-body")


class BrokenBodySession:
    """Session whose responses fail while the body is being read."""

    def get(self, url, **kwargs):
        return _BrokenBodyResponse()


def make_report(kelvin: float = 300.15, *descriptions: str) -> WeatherReport:
    return WeatherReport(
        temperature_kelvin=kelvin,
        conditions=tuple(WeatherCondition(description=text) for text in descriptions),
    )


@pytest.fixture(autouse=True)
def _reset_service_singletons():
    views.get_service_config.cache_clear()
    views.get_weather_provider.cache_clear()
    yield
    views.get_service_config.cache_clear()
    views.get_weather_provider.cache_clear()
