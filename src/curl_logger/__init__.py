"""fetch-curl-logger package."""

from .config.settings import DEFAULT_PAYLOAD_FILENAME, LoggerSettings
from .errors import CurlLoggerError, InvalidBodyTypeError
from .formatter import (
    LINE_CONTINUATION,
    build_curl_fragments,
    format_curl_command,
    unwrap_curl_data,
    wrap_as_curl_data,
)
from .loggers import CurlLogger, PrettyJsonLogger, plain_logger
from .protocol.types import RequestDescriptor, RequestOptions
from .proxy import ProxyConfig, fetch_proxy_curl_logger, httpx_fetch
from .redaction import redact_authorization
from .transport import AsyncCurlLoggingTransport, CurlLoggingTransport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AsyncCurlLoggingTransport",
    "CurlLogger",
    "CurlLoggerError",
    "CurlLoggingTransport",
    "DEFAULT_PAYLOAD_FILENAME",
    "InvalidBodyTypeError",
    "LINE_CONTINUATION",
    "LoggerSettings",
    "PrettyJsonLogger",
    "ProxyConfig",
    "RequestDescriptor",
    "RequestOptions",
    "build_curl_fragments",
    "fetch_proxy_curl_logger",
    "format_curl_command",
    "httpx_fetch",
    "plain_logger",
    "redact_authorization",
    "unwrap_curl_data",
    "wrap_as_curl_data",
]
