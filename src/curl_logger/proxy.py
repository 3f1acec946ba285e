"""
Fetch proxy that logs every request as a curl command.

:func:`fetch_proxy_curl_logger` returns a drop-in replacement for a
fetch-style sender ``(input, options=None) -> Awaitable[Response]``. Each call
formats and logs the request synchronously, then hands the original
arguments to the real sender and returns whatever it returns. Errors from
the sender are not caught.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from curl_logger.formatter import build_curl_fragments
from curl_logger.loggers import CurlLogger, PrettyJsonLogger
from curl_logger.protocol.types import RequestDescriptor, RequestInput, RequestOptions

_log = logging.getLogger(__name__)

RequestSender = Callable[..., Any]
FetchOptions = RequestOptions | Mapping[str, Any] | None

DEFAULT_TIMEOUT = httpx.Timeout(120.0, connect=10.0)


def build_httpx_request(request: RequestInput, options: FetchOptions = None) -> httpx.Request:
    """Turn fetch-style arguments into an ``httpx.Request``."""
    if isinstance(request, httpx.Request) and options is None:
        return request
    url = request.url if isinstance(request, httpx.Request) else request
    opts = RequestOptions.coerce(options)
    return httpx.Request(
        (opts.method or "GET").upper(),
        url,
        headers=opts.headers,
        content=opts.body,
    )


def _sender_timeout(options: FetchOptions) -> Any:
    if options is None:
        return DEFAULT_TIMEOUT
    extra = RequestOptions.coerce(options).model_extra or {}
    return extra.get("timeout", DEFAULT_TIMEOUT)


async def httpx_fetch(request: RequestInput, options: FetchOptions = None) -> httpx.Response:
    """Default sender: send one request through a short-lived ``httpx.AsyncClient``.

    A ``timeout`` option is passed to the client; other extra options are ignored.
    """
    async with httpx.AsyncClient(timeout=_sender_timeout(options)) as client:
        return await client.send(build_httpx_request(request, options))


class ProxyConfig(BaseModel):
    """Configuration for :func:`fetch_proxy_curl_logger`."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    logger: CurlLogger = Field(
        default_factory=PrettyJsonLogger,
        description="Receives the curl fragments of every request.",
    )
    fetch: RequestSender = Field(
        default=httpx_fetch,
        description="Sender the proxy delegates to after logging.",
    )


def fetch_proxy_curl_logger(
    config: ProxyConfig | None = None,
    *,
    logger: CurlLogger | None = None,
    fetch: RequestSender | None = None,
) -> Callable[..., Any]:
    """Create a fetch-style sender that logs each request as curl first.

    Args:
        config: Proxy configuration. Defaults to :class:`ProxyConfig`.
        logger: Overrides ``config.logger``.
        fetch: Overrides ``config.fetch``.

    Returns:
        ``proxy(input, options=None)``. Formatting errors such as
        :class:`~curl_logger.errors.InvalidBodyTypeError` are raised from the
        call itself, before the sender is invoked.
    """
    resolved = config or ProxyConfig()
    overrides = {
        name: value for name, value in (("logger", logger), ("fetch", fetch)) if value is not None
    }
    if overrides:
        resolved = resolved.model_copy(update=overrides)

    curl_logger = resolved.logger
    send = resolved.fetch

    def proxy(request: RequestInput, options: FetchOptions = None) -> Any:
        descriptor = RequestDescriptor.from_input(request, options)
        curl_logger(build_curl_fragments(descriptor))
        _log.debug("Delegating %s %s", descriptor.method, descriptor.url)
        return send(request, options)

    return proxy
