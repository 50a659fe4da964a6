from __future__ import annotations

from types import SimpleNamespace

import pytest
from django.core.exceptions import ImproperlyConfigured

from weather_summary import settings as project_settings
from weather_summary.api import views
from weather_summary.core.config import ServiceConfig
from weather_summary.core.providers import OpenWeatherProvider


def make_settings(**overrides) -> SimpleNamespace:
    values = {
        "OPENWEATHER_API_KEY": "abc123",
        "OPENWEATHER_BASE_URL": "https://openweather.test/weather",
        "OPENWEATHER_TIMEOUT": None,
        "PORT": 8080,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_config_from_settings() -> None:
    config = ServiceConfig.from_settings(make_settings(PORT="9000", OPENWEATHER_TIMEOUT=3.0))

    assert config == ServiceConfig(
        api_key="abc123",
        base_url="https://openweather.test/weather",
        port=9000,
        timeout=3.0,
    )


def test_config_requires_api_key() -> None:
    with pytest.raises(ImproperlyConfigured):
        ServiceConfig.from_settings(make_settings(OPENWEATHER_API_KEY=""))


def test_config_is_read_only() -> None:
    config = ServiceConfig(api_key="abc123")

    with pytest.raises(AttributeError):
        config.port = 1  # type: ignore[misc]


def test_default_provider_is_built_once_from_settings() -> None:
    first = views.get_weather_provider()
    second = views.get_weather_provider()

    assert first is second
    assert isinstance(first, OpenWeatherProvider)
    assert first.api_key == "test-key"
    assert first.base_url == "https://api.openweathermap.org/data/2.5/weather"


def test_empty_port_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "")

    assert project_settings.env_int("PORT", 8080) == 8080


def test_port_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", " 9001 ")

    assert project_settings.env_int("PORT", 8080) == 9001


def test_invalid_port_is_a_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ImproperlyConfigured):
        project_settings.env_int("PORT", 8080)
