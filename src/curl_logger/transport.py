"""
httpx transports that log requests as curl commands.

Install one on a client to see every request it sends, including requests
made by SDKs that accept a custom client::

    client = httpx.AsyncClient(transport=AsyncCurlLoggingTransport())
    openai.AsyncOpenAI(http_client=client)
"""

from __future__ import annotations

import logging

import httpx

from curl_logger.formatter import build_curl_fragments
from curl_logger.loggers import CurlLogger, PrettyJsonLogger
from curl_logger.protocol.types import RequestDescriptor

logger = logging.getLogger(__name__)


def _log_request(request: httpx.Request, curl_logger: CurlLogger) -> None:
    descriptor = RequestDescriptor.from_httpx_request(request)
    logger.debug("Logging %s %s sent through httpx", descriptor.method, descriptor.url)
    curl_logger(build_curl_fragments(descriptor))


class CurlLoggingTransport(httpx.BaseTransport):
    """Synchronous transport wrapper for ``httpx.Client``."""

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        *,
        logger: CurlLogger | None = None,
    ) -> None:
        self._transport = transport or httpx.HTTPTransport()
        self._logger = logger or PrettyJsonLogger()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        _log_request(request, self._logger)
        return self._transport.handle_request(request)

    def close(self) -> None:
        self._transport.close()


class AsyncCurlLoggingTransport(httpx.AsyncBaseTransport):
    """Asynchronous transport wrapper for ``httpx.AsyncClient``.

    Logging completes before the inner transport is awaited.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        *,
        logger: CurlLogger | None = None,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._logger = logger or PrettyJsonLogger()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        _log_request(request, self._logger)
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        await self._transport.aclose()
