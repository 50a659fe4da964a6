"""REST API views for weather summaries."""
from __future__ import annotations

from functools import lru_cache
import logging
from typing import Optional

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from weather_summary.core.abstractions import WeatherProvider
from weather_summary.core.config import ServiceConfig
from weather_summary.core.providers import OpenWeatherProvider, ProviderError
from weather_summary.core.services.summary import summarize


logger = logging.getLogger(__name__)

MISSING_COORDINATES = "Latitude and longitude are required"


@lru_cache(maxsize=1)
def get_service_config() -> ServiceConfig:
    return ServiceConfig.from_settings(settings)


@lru_cache(maxsize=1)
def get_weather_provider() -> WeatherProvider:
    return OpenWeatherProvider.from_config(get_service_config())


def first_param(params, name: str) -> str:
    """Return the first value of a repeated query parameter (``QueryDict.get`` returns the last)."""
    return (params.getlist(name) or [""])[0]


def plain_text(body: str, status_code: int) -> HttpResponse:
    return HttpResponse(f"{body}\n", content_type="text/plain; charset=utf-8", status=status_code)


class WeatherView(APIView):
    """Describe the current weather for the requested coordinates."""

    permission_classes = [AllowAny]
    provider: Optional[WeatherProvider] = None

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the plain-text weather summary for ``lat`` and ``long``."""
        latitude = first_param(request.query_params, "lat")
        longitude = first_param(request.query_params, "long")
        logger.info("Latitude: %s, Longitude: %s", latitude, longitude)

        if not latitude or not longitude:
            return plain_text(MISSING_COORDINATES, status.HTTP_400_BAD_REQUEST)

        provider = self.provider or get_weather_provider()
        try:
            report = provider.get_weather(latitude, longitude)
        except ProviderError as exc:
            return plain_text(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        summary = summarize(report)
        logger.info("Weather condition: %s", summary.condition)
        logger.info("Temperature in Celsius: %.2f", summary.celsius)
        logger.info("Temperature in Fahrenheit: %.2f", summary.fahrenheit)

        return plain_text(summary.render(), status.HTTP_200_OK)
