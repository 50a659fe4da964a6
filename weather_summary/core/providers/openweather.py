"""OpenWeather weather provider."""
from __future__ import annotations

import logging
from numbers import Real
import threading
from typing import Any, List, Optional

import requests

from weather_summary.core.abstractions import WeatherCondition, WeatherProvider, WeatherReport
from weather_summary.core.config import ServiceConfig
from weather_summary.core.providers.base import (
    ProviderDecodeError,
    ProviderReadError,
    ProviderRequestError,
)


logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid JSON constant {name!r}")


class OpenWeatherProvider(WeatherProvider):
    """Integration with the OpenWeather current weather endpoint.

    The HTTP status is not inspected: whatever body comes back is decoded, and
    an error payload fails the shape check like any other malformed document.
    """

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.openweathermap.org/data/2.5/weather",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """The injected session, or one private to the calling thread."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    @classmethod
    def from_config(cls, config: ServiceConfig, session: Optional[requests.Session] = None) -> "OpenWeatherProvider":
        return cls(api_key=config.api_key, base_url=config.base_url, timeout=config.timeout, session=session)

    def get_weather(self, latitude: str, longitude: str) -> WeatherReport:  # noqa: D401
        """Return the current weather reported by OpenWeather."""
        params = {"lat": latitude, "lon": longitude, "appid": self.api_key}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            logger.error("OpenWeather request failed", exc_info=exc)
            raise ProviderRequestError(f"failed to fetch weather data: {exc}") from exc

        with response:
            try:
                body = response.content
            except requests.RequestException as exc:
                logger.error("OpenWeather response could not be read", exc_info=exc)
                raise ProviderReadError(f"failed to read response body: {exc}") from exc

            logger.debug("OpenWeather responded %s with %d bytes", response.status_code, len(body))
            try:
                data = response.json(parse_constant=_reject_constant)
            except ValueError as exc:
                logger.error("OpenWeather returned invalid JSON", exc_info=exc)
                raise ProviderDecodeError(f"failed to decode weather data: {exc}") from exc

        return self._parse_report(data)

    def _parse_report(self, data: Any) -> WeatherReport:
        if not isinstance(data, dict):
            raise self._decode_error("expected a JSON object")

        # A payload without "main" is rejected rather than read as 0 K.
        main = data.get("main")
        if not isinstance(main, dict):
            raise self._decode_error("missing 'main' object")
        temperature = main.get("temp")
        if isinstance(temperature, bool) or not isinstance(temperature, Real):
            raise self._decode_error("'main.temp' must be a number")

        return WeatherReport(
            temperature_kelvin=float(temperature),
            conditions=tuple(self._parse_conditions(data.get("weather"))),
        )

    def _parse_conditions(self, raw: Any) -> List[WeatherCondition]:
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise self._decode_error("'weather' must be a list")

        conditions = []
        for entry in raw:
            if not isinstance(entry, dict):
                raise self._decode_error("'weather' entries must be objects")
            description = entry.get("description", "")
            if not isinstance(description, str):
                raise self._decode_error("'weather.description' must be a string")
            conditions.append(WeatherCondition(description=description))
        return conditions

    def _decode_error(self, reason: str) -> ProviderDecodeError:
        logger.error("OpenWeather payload has unexpected shape: %s", reason)
        return ProviderDecodeError(f"failed to decode weather data: {reason}")
