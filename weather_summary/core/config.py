"""Process-wide service configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from django.core.exceptions import ImproperlyConfigured


@dataclass(frozen=True)
class ServiceConfig:
    """Read-only configuration built once at startup.

    The view and the management commands construct providers from this value
    instead of reading Django settings directly, so tests can pass their own.
    """

    api_key: str
    base_url: str = "https://api.openweathermap.org/data/2.5/weather"
    port: int = 8080
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Any) -> "ServiceConfig":
        api_key = getattr(settings, "OPENWEATHER_API_KEY", "")
        if not api_key:
            raise ImproperlyConfigured("OPENWEATHER_API_KEY must be configured")
        return cls(
            api_key=api_key,
            base_url=settings.OPENWEATHER_BASE_URL,
            port=int(settings.PORT),
            timeout=settings.OPENWEATHER_TIMEOUT,
        )


__all__ = ["ServiceConfig"]
