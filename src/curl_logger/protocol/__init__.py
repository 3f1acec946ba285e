"""
Request types for fetch-curl-logger.

Pydantic models describing an outgoing request in the shape the curl
formatter consumes.
"""

from curl_logger.protocol.types import (
    RequestDescriptor,
    RequestInput,
    RequestOptions,
    normalize_headers,
)

__all__ = ["RequestDescriptor", "RequestInput", "RequestOptions", "normalize_headers"]
