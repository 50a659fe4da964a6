"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weather_summary.api.views import get_weather_provider
from weather_summary.core.providers import ProviderError
from weather_summary.core.services.summary import summarize


class Command(BaseCommand):
    help = "Print the current weather summary for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=str, required=True, help="Latitude")
        parser.add_argument("--long", type=str, required=True, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        latitude = options["lat"]
        longitude = options["long"]
        if not latitude or not longitude:
            raise CommandError("Latitude and longitude are required")

        try:
            report = get_weather_provider().get_weather(latitude, longitude)
        except ProviderError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(summarize(report).render())
