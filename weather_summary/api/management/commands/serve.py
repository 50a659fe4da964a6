"""Management command serving the weather API through uvicorn."""
from __future__ import annotations

import logging
from typing import Any

import uvicorn
from django.core.management.base import BaseCommand, CommandError

from weather_summary.api.views import get_service_config


logger = logging.getLogger(__name__)

ASGI_APP = "weather_summary.asgi:application"


class Command(BaseCommand):
    help = "Serve the weather API on the configured port"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--addr", default="0.0.0.0", help="Interface to bind (default: all)")
        parser.add_argument("--port", type=int, help="Port to bind (default: PORT setting)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        config = get_service_config()
        addr = options["addr"]
        port = options.get("port") or config.port

        logger.info("Server running on port: %s", port)
        # uvicorn exits non-zero by itself when the socket cannot be bound.
        try:
            uvicorn.run(
                ASGI_APP,
                host=addr,
                port=port,
                log_config=None,
            )
        except OSError as exc:
            raise CommandError(f"Unable to listen on {addr}:{port}: {exc}") from exc
