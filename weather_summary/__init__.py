"""Plain-text weather summaries for geographic coordinates."""

__version__ = "0.1.0"
