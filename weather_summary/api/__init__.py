"""HTTP API for weather summaries."""
