"""Weather summary core domain."""
