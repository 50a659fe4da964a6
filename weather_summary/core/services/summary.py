"""Turn provider reports into the human-readable weather summary."""
from __future__ import annotations

from dataclasses import dataclass

from weather_summary.core.abstractions import WeatherReport
from weather_summary.core.conversions import (
    celsius_to_fahrenheit,
    kelvin_to_celsius,
    temperature_category,
    weather_condition,
)


@dataclass(frozen=True)
class WeatherSummary:
    """Derived values shown to API and CLI users."""

    condition: str
    celsius: float
    fahrenheit: float
    category: str

    def render(self) -> str:
        return (
            f"Weather condition: {self.condition}\n"
            f"Temperature: {self.celsius:.2f}ºC ({self.fahrenheit:.2f}ºF) ({self.category})"
        )


def summarize(report: WeatherReport) -> WeatherSummary:
    celsius = kelvin_to_celsius(report.temperature_kelvin)
    return WeatherSummary(
        condition=weather_condition(report),
        celsius=celsius,
        fahrenheit=celsius_to_fahrenheit(celsius),
        category=temperature_category(celsius),
    )


__all__ = ["WeatherSummary", "summarize"]
