"""Run the weather API server: ``python -m weather_summary [--port N]``."""
from __future__ import annotations

import os
import sys


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weather_summary.settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line([sys.argv[0], "serve", *sys.argv[1:]])


if __name__ == "__main__":
    main()
