"""
Request types for fetch-curl-logger.

A request reaches the formatter either as an ``httpx.Request`` or as a URL
plus fetch-style options (method, headers, body). Both are reduced to a
:class:`RequestDescriptor` before any curl fragment is produced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from curl_logger.errors import InvalidBodyTypeError

RequestInput = httpx.Request | httpx.URL | str


def _to_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


def normalize_headers(headers: Any) -> list[tuple[str, str]]:
    """Flatten any supported header container into ordered (name, value) pairs.

    Accepts ``httpx.Headers`` (original name casing is kept), mappings, or an
    iterable of pairs. Repeated names are kept as separate entries.
    """
    if headers is None:
        return []
    if isinstance(headers, httpx.Headers):
        encoding = headers.encoding
        return [(name.decode(encoding), value.decode(encoding)) for name, value in headers.raw]
    items = headers.items() if isinstance(headers, Mapping) else headers
    return [(_to_text(name), _to_text(value)) for name, value in items]


class RequestOptions(BaseModel):
    """Fetch-style request options passed alongside a URL.

    Fields other than ``method``, ``headers`` and ``body`` are accepted and
    left for the underlying sender; the default httpx sender reads ``timeout``.
    """

    model_config = ConfigDict(extra="allow")

    method: str | None = Field(default=None, description="HTTP method, any case.")
    headers: Any = Field(default=None, description="Mapping, pair sequence or httpx.Headers.")
    body: Any = Field(default=None, description="Request body; must be a string when set.")

    @classmethod
    def coerce(cls, options: RequestOptions | Mapping[str, Any] | None) -> RequestOptions:
        """Return *options* as a :class:`RequestOptions` instance."""
        if options is None:
            return cls()
        if isinstance(options, RequestOptions):
            return options
        if isinstance(options, Mapping):
            return cls.model_validate(dict(options))
        raise TypeError(
            f"options must be a mapping or RequestOptions, got {type(options).__name__}"
        )


class RequestDescriptor(BaseModel):
    """One outgoing HTTP request, reduced to what a curl command needs."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str = Field(..., description="Absolute request URL.")
    method: str = Field(default="GET", description="Upper-cased HTTP method.")
    headers: list[tuple[str, str]] = Field(
        default_factory=list, description="Headers in insertion order, duplicates kept."
    )
    body: str | None = Field(default=None, description="Request body text.")

    @field_validator("url", mode="before")
    @classmethod
    def _url_to_text(cls, value: Any) -> Any:
        if isinstance(value, httpx.URL):
            return str(value)
        return value

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> str:
        if not value:
            return "GET"
        return str(value).upper()

    @field_validator("headers", mode="before")
    @classmethod
    def _normalize_headers(cls, value: Any) -> list[tuple[str, str]]:
        return normalize_headers(value)

    @field_validator("body", mode="before")
    @classmethod
    def _require_text_body(cls, value: Any) -> str | None:
        # Raised as-is: pydantic only wraps ValueError/AssertionError.
        if value is None or isinstance(value, str):
            return value
        raise InvalidBodyTypeError(type(value).__name__)

    @classmethod
    def from_httpx_request(cls, request: httpx.Request) -> RequestDescriptor:
        """Build a descriptor from a prepared ``httpx.Request``.

        The body must already be buffered and decode as UTF-8; streamed or
        binary bodies raise :class:`InvalidBodyTypeError`.
        """
        try:
            content = request.content
        except httpx.RequestNotRead as exc:
            raise InvalidBodyTypeError("stream") from exc
        try:
            body = content.decode("utf-8") if content else None
        except UnicodeDecodeError as exc:
            raise InvalidBodyTypeError("bytes") from exc
        return cls(url=str(request.url), method=request.method, headers=request.headers, body=body)

    @classmethod
    def from_input(
        cls,
        request: RequestInput,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> RequestDescriptor:
        """Build a descriptor from fetch-style ``(input, options)`` arguments.

        An ``httpx.Request`` without options is described from its own
        method, headers and body. When options are given they win, and only
        the URL is read from the request object.
        """
        if isinstance(request, httpx.Request) and options is None:
            return cls.from_httpx_request(request)
        url = request.url if isinstance(request, httpx.Request) else request
        opts = RequestOptions.coerce(options)
        return cls(url=str(url), method=opts.method, headers=opts.headers, body=opts.body)
