"""
Fragment loggers.

A logger is any callable that takes the ordered curl fragments of one
request. Two are provided:

- :func:`plain_logger` prints the fragments as they are.
- :class:`PrettyJsonLogger` moves a JSON body into a heredoc-written payload
  file, redacts Authorization secrets that come from the environment, and
  drops a Content-Length that no longer matches the pretty-printed body.

Both write to the diagnostic stream (``sys.stderr`` unless told otherwise),
resolved on every call.
"""

from __future__ import annotations

import json
import logging
import shlex
import sys
import traceback
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TextIO

from curl_logger.config.settings import LoggerSettings
from curl_logger.formatter import (
    LINE_CONTINUATION,
    format_curl_command,
    is_header,
    unwrap_curl_data,
)
from curl_logger.redaction import redact_authorization

logger = logging.getLogger(__name__)

CurlLogger = Callable[[list[str]], None]

CONTENT_LENGTH_HEADER = "Content-Length"
HEREDOC_DELIMITER = "EOF"

_NOT_JSON = object()


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by json.loads but are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


def _emit(text: str, stream: TextIO | None) -> None:
    out = stream if stream is not None else sys.stderr
    out.write(text + "\n")
    out.flush()


def plain_logger(fragments: Sequence[str], stream: TextIO | None = None) -> None:
    """Print fragments joined by a line continuation, unmodified."""
    _emit(format_curl_command(fragments, LINE_CONTINUATION), stream)


def payload_heredoc(payload: str, filename: str) -> str:
    """Return shell text that writes *payload* to *filename*.

    The delimiter is quoted so ``$`` and backticks in the payload stay
    literal, and is numbered if the payload contains a line equal to it.
    """
    lines = payload.splitlines()
    delimiter = HEREDOC_DELIMITER
    suffix = 0
    while delimiter in lines:
        suffix += 1
        delimiter = f"{HEREDOC_DELIMITER}{suffix}"
    return f"cat > {shlex.quote(filename)} <<'{delimiter}'\n{payload}\n{delimiter}"


class PrettyJsonLogger:
    """Logger that externalizes JSON bodies and redacts Authorization secrets.

    Output for a JSON request looks like::

        cat > fetch_payload.json <<'EOF'
        {
          "a": 1
        }
        EOF
        curl -X POST 'https://api.example.com' \\
          -H "Authorization: Bearer $OPENAI_API_KEY" \\
          -d @fetch_payload.json

    A body that is not valid JSON is left inline and the parse error is
    written to the stream; logging carries on.
    """

    def __init__(
        self,
        settings: LoggerSettings | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the logger.

        Args:
            settings: Rendering options. Defaults to :class:`LoggerSettings`.
            environ: Variables searched for Authorization secrets. Defaults to
                ``os.environ``, read at call time.
            stream: Destination text stream. Defaults to ``sys.stderr``.
        """
        self._settings = settings or LoggerSettings()
        self._environ = environ
        self._stream = stream

    @property
    def settings(self) -> LoggerSettings:
        """Rendering options in effect for this logger."""
        return self._settings

    def __call__(self, fragments: Sequence[str]) -> None:
        heredoc, parts = self.render(fragments)
        if heredoc is not None:
            _emit(heredoc, self._stream)
        _emit(format_curl_command(parts, self._settings.separator), self._stream)

    def render(self, fragments: Sequence[str]) -> tuple[str | None, list[str]]:
        """Return the payload heredoc (or None) and the rewritten fragments.

        JSON parse failures are reported to the stream as they are found.
        """
        heredoc: str | None = None
        parts: list[str] = []
        for fragment in fragments:
            data = unwrap_curl_data(fragment)
            if data is None:
                parts.append(fragment)
                continue
            parsed = self._parse_json(data)
            if parsed is _NOT_JSON:
                parts.append(fragment)
                continue
            payload = json.dumps(
                parsed, indent=self._settings.indent, ensure_ascii=False, allow_nan=False
            )
            heredoc = payload_heredoc(payload, self._settings.payload_filename)
            parts.append(f"-d {shlex.quote('@' + self._settings.payload_filename)}")

        if self._settings.redact_authorization:
            parts = [redact_authorization(part, self._environ) for part in parts]

        if heredoc is not None:
            parts = [part for part in parts if not is_header(part, CONTENT_LENGTH_HEADER)]
        return heredoc, parts

    def _parse_json(self, data: str) -> Any:
        try:
            return json.loads(data, parse_constant=_reject_constant)
        except ValueError as exc:
            logger.debug("Request body is not JSON: %s", exc)
            _emit("".join(traceback.format_exception(exc)).rstrip("\n"), self._stream)
            return _NOT_JSON

