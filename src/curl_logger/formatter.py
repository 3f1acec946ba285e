"""
Curl command formatting.

Turns a :class:`~curl_logger.protocol.types.RequestDescriptor` into an ordered
list of shell fragments::

    ["curl -X POST 'https://api.example.com/v1'",
     "-H 'Content-Type: application/json'",
     "-d '{\"a\": 1}'"]

Every fragment is single-quoted. An embedded single quote is written as
``'\\''`` (close quote, escaped quote, reopen quote), and
:func:`unwrap_curl_data` reverses that exactly so loggers can recover the
original body text.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable

from curl_logger.errors import InvalidBodyTypeError
from curl_logger.protocol.types import RequestDescriptor

logger = logging.getLogger(__name__)

DATA_FLAG = "-d '"
HEADER_FLAG = "-H '"
LINE_CONTINUATION = " \\\n  "

_QUOTE = "'"
_ESCAPED_QUOTE = "'\\''"


def escape_single_quotes(text: str) -> str:
    """Escape *text* for use inside a single-quoted shell string."""
    return text.replace(_QUOTE, _ESCAPED_QUOTE)


def unescape_single_quotes(text: str) -> str:
    """Inverse of :func:`escape_single_quotes`."""
    return text.replace(_ESCAPED_QUOTE, _QUOTE)


def _unquote(fragment: str, flag: str) -> str | None:
    if not fragment.startswith(flag) or not fragment.endswith(_QUOTE):
        return None
    if len(fragment) <= len(flag):
        return None
    return unescape_single_quotes(fragment[len(flag) : -1])


def wrap_as_curl_data(data: str) -> str:
    """Return the ``-d '...'`` fragment carrying *data*."""
    return f"{DATA_FLAG}{escape_single_quotes(data)}{_QUOTE}"


def unwrap_curl_data(fragment: str) -> str | None:
    """Return the body carried by a data fragment, or None for other fragments."""
    return _unquote(fragment, DATA_FLAG)


def header_fragment(name: str, value: str) -> str:
    """Return the ``-H 'Name: value'`` fragment for one header."""
    return f"{HEADER_FLAG}{escape_single_quotes(f'{name}: {value}')}{_QUOTE}"


def parse_header_fragment(fragment: str) -> tuple[str, str] | None:
    """Split a single-quoted header fragment into (name, value).

    Returns None when *fragment* is not a header fragment, including
    headers already rewritten into double-quoted form.
    """
    inner = _unquote(fragment, HEADER_FLAG)
    if inner is None:
        return None
    name, sep, value = inner.partition(":")
    if not sep:
        return None
    return name.strip(), value[1:] if value.startswith(" ") else value


def is_header(fragment: str, name: str) -> bool:
    """Return True if *fragment* is a header fragment for *name* (case-insensitive)."""
    parsed = parse_header_fragment(fragment)
    return parsed is not None and parsed[0].lower() == name.lower()


def build_curl_fragments(request: RequestDescriptor) -> list[str]:
    """Format *request* as ordered curl fragments.

    Order is ``[invocation, header..., data?]``; headers keep their insertion
    order and are never merged or deduplicated.

    Raises:
        InvalidBodyTypeError: If the body is not a string.
    """
    body = request.body
    if body is not None and not isinstance(body, str):
        raise InvalidBodyTypeError(type(body).__name__)

    fragments = [f"curl -X {shlex.quote(request.method)} '{escape_single_quotes(request.url)}'"]
    fragments.extend(header_fragment(name, value) for name, value in request.headers)
    if body:
        fragments.append(wrap_as_curl_data(body))

    logger.debug(
        "Formatted %s %s into %d curl fragments", request.method, request.url, len(fragments)
    )
    return fragments


def format_curl_command(fragments: Iterable[str], separator: str = LINE_CONTINUATION) -> str:
    """Join fragments into one pasteable command."""
    return separator.join(fragments)
