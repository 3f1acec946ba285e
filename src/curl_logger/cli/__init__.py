"""Command-line interface for fetch-curl-logger."""
