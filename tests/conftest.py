"""Pytest configuration and shared fixtures for fetch-curl-logger tests."""

from __future__ import annotations

import io

import pytest

from curl_logger.config.settings import ENV_INDENT, ENV_PAYLOAD_FILE, ENV_REDACT
from curl_logger.loggers import PrettyJsonLogger
from curl_logger.protocol.types import RequestDescriptor


class RecordingLogger:
    """Logger that keeps every fragment list it receives."""

    def __init__(self, events: list[str] | None = None) -> None:
        self.calls: list[list[str]] = []
        self._events = events

    def __call__(self, fragments: list[str]) -> None:
        self.calls.append(list(fragments))
        if self._events is not None:
            self._events.append("log")

    @property
    def last(self) -> list[str]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def clean_logger_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CURL_LOGGER_* variables from the host out of the tests."""
    for name in (ENV_INDENT, ENV_PAYLOAD_FILE, ENV_REDACT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Create a logger that records fragments."""
    return RecordingLogger()


@pytest.fixture
def stream() -> io.StringIO:
    """Capture diagnostic output."""
    return io.StringIO()


@pytest.fixture
def environ() -> dict[str, str]:
    """Environment with one known API key."""
    return {"HOME": "/home/dev", "OPENAI_KEY": "sk-abc123"}


@pytest.fixture
def pretty_logger(stream: io.StringIO, environ: dict[str, str]) -> PrettyJsonLogger:
    """Pretty JSON logger writing to the captured stream."""
    return PrettyJsonLogger(environ=environ, stream=stream)


@pytest.fixture
def json_request() -> RequestDescriptor:
    """A POST with a compact JSON body and a stale Content-Length."""
    return RequestDescriptor(
        url="https://api.example.com/v1/chat/completions",
        method="post",
        headers=[
            ("Content-Type", "application/json"),
            ("Authorization", "Bearer sk-abc123"),
            ("Content-Length", "7"),
        ],
        body='{"a":1}',
    )


@pytest.fixture
def recording_logger_cls() -> type[RecordingLogger]:
    """Return the recording logger class for tests that share an event list."""
    return RecordingLogger
