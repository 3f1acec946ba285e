"""Configuration module for fetch-curl-logger."""

from curl_logger.config.settings import (
    DEFAULT_PAYLOAD_FILENAME,
    ENV_INDENT,
    ENV_PAYLOAD_FILE,
    ENV_REDACT,
    LoggerSettings,
)

__all__ = [
    "DEFAULT_PAYLOAD_FILENAME",
    "ENV_INDENT",
    "ENV_PAYLOAD_FILE",
    "ENV_REDACT",
    "LoggerSettings",
]
