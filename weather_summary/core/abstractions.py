"""Core abstractions for the weather domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Tuple


@dataclass(frozen=True, slots=True)
class WeatherCondition:
    """Free-text condition reported by the provider, e.g. ``clear sky``."""

    description: str


@dataclass(frozen=True, slots=True)
class WeatherReport:
    """Current weather as decoded from the provider payload.

    Temperature is kept in Kelvin, the unit the provider reports by default.
    Conditions preserve the provider's order; only the first one is shown.
    """

    temperature_kelvin: float
    conditions: Tuple[WeatherCondition, ...] = field(default_factory=tuple)


class WeatherProvider(Protocol):
    """A data source capable of returning current weather for a coordinate."""

    name: str

    def get_weather(self, latitude: str, longitude: str) -> WeatherReport:
        """Fetch the current weather for the provided coordinates."""
        ...
