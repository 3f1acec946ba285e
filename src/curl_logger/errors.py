"""Exception types raised by fetch-curl-logger."""

from __future__ import annotations


class CurlLoggerError(Exception):
    """Base class for errors raised while formatting a request."""


class InvalidBodyTypeError(CurlLoggerError, TypeError):
    """A request body was present but was not text.

    Bodies are never serialized on the caller's behalf: structured or binary
    payloads must be encoded to a string before the request is sent.
    """

    def __init__(self, body_type: str) -> None:
        super().__init__(f"Body must be a string, got {body_type}")
        self.body_type = body_type
