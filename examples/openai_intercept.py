#!/usr/bin/env python3
"""
OpenAI Request Interception Example

Every request the OpenAI SDK sends is printed to stderr as a curl command
before it goes out. The JSON body is written through a heredoc to
fetch_payload.json and the API key shows up as $OPENAI_API_KEY.

Prerequisites:
    pip install "fetch-curl-logger[examples]"
    export OPENAI_API_KEY="sk-..."

Usage:
    python examples/openai_intercept.py
"""

import asyncio
import json
import os

import httpx
from openai import AsyncOpenAI

from curl_logger import AsyncCurlLoggingTransport, PrettyJsonLogger, fetch_proxy_curl_logger


async def sdk_example():
    """Route the OpenAI SDK through a logging transport."""
    http_client = httpx.AsyncClient(
        transport=AsyncCurlLoggingTransport(logger=PrettyJsonLogger()),
    )
    async with AsyncOpenAI(http_client=http_client) as client:
        await client.chat.completions.create(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "Hello!"}],
        )


async def fetch_proxy_example():
    """Send the same request through the fetch-style proxy."""
    fetch = fetch_proxy_curl_logger(logger=PrettyJsonLogger())
    response = await fetch(
        "https://api.openai.com/v1/chat/completions",
        {
            "method": "post",
            "headers": {
                "Authorization": f"Bearer {os.environ['OPENAI_API_KEY']}",
                "Content-Type": "application/json",
            },
            "body": json.dumps(
                {"model": "gpt-4o-mini", "messages": [{"role": "user", "content": "Hello!"}]}
            ),
        },
    )
    print(f"Status: {response.status_code}")


async def main():
    if not os.getenv("OPENAI_API_KEY"):
        print("Set OPENAI_API_KEY to run this example.")
        return
    await sdk_example()
    await fetch_proxy_example()


if __name__ == "__main__":
    asyncio.run(main())
