from __future__ import annotations

from weather_summary.core.abstractions import WeatherReport

ABSOLUTE_ZERO_C = 273.15

COLD_BELOW_C = 5
HOT_ABOVE_C = 25


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - ABSOLUTE_ZERO_C


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def temperature_category(celsius: float) -> str:
    """Classify a Celsius temperature as ``cold``, ``moderate`` or ``hot``.

    Both thresholds are exclusive: 5 and 25 are still ``moderate``.
    """
    if celsius < COLD_BELOW_C:
        return "cold"
    if celsius > HOT_ABOVE_C:
        return "hot"
    return "moderate"


def weather_condition(report: WeatherReport) -> str:
    if report.conditions:
        return report.conditions[0].description
    return ""


__all__ = [
    "kelvin_to_celsius",
    "celsius_to_fahrenheit",
    "temperature_category",
    "weather_condition",
]
