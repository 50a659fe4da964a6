from weather_summary.core.providers.base import (
    ProviderDecodeError,
    ProviderError,
    ProviderReadError,
    ProviderRequestError,
)
from weather_summary.core.providers.openweather import OpenWeatherProvider

__all__ = [
    "OpenWeatherProvider",
    "ProviderError",
    "ProviderRequestError",
    "ProviderReadError",
    "ProviderDecodeError",
]
