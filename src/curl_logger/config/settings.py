"""
Logger settings.

Settings are built in code or read from environment variables; nothing is
ever written back.

Environment variables:
    CURL_LOGGER_PAYLOAD_FILE: File name the JSON payload heredoc writes to.
    CURL_LOGGER_INDENT: Indentation for pretty-printed JSON bodies.
    CURL_LOGGER_REDACT: Set to 0/false/no/off to print Authorization in clear.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from curl_logger.formatter import LINE_CONTINUATION

DEFAULT_PAYLOAD_FILENAME = "fetch_payload.json"

ENV_PAYLOAD_FILE = "CURL_LOGGER_PAYLOAD_FILE"
ENV_INDENT = "CURL_LOGGER_INDENT"
ENV_REDACT = "CURL_LOGGER_REDACT"


class LoggerSettings(BaseModel):
    """Rendering options for :class:`~curl_logger.loggers.PrettyJsonLogger`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    payload_filename: str = Field(
        default=DEFAULT_PAYLOAD_FILENAME,
        min_length=1,
        description="File the generated heredoc writes the JSON body to.",
    )
    indent: int = Field(default=2, ge=0, le=16, description="JSON pretty-print indentation.")
    separator: str = Field(
        default=LINE_CONTINUATION, description="Text placed between command fragments."
    )
    redact_authorization: bool = Field(
        default=True,
        description="Rewrite Authorization secrets found in the environment as $VAR references.",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LoggerSettings:
        """Build settings from ``CURL_LOGGER_*`` environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if env.get(ENV_PAYLOAD_FILE):
            values["payload_filename"] = env[ENV_PAYLOAD_FILE]
        if env.get(ENV_INDENT):
            values["indent"] = env[ENV_INDENT]
        if env.get(ENV_REDACT):
            values["redact_authorization"] = env[ENV_REDACT]
        return cls.model_validate(values)
