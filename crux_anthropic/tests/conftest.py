"""Shared fixtures for the crux_anthropic test suite.

HTTP is simulated with ``httpx.MockTransport`` on an injected
``httpx.AsyncClient``; no test touches the network.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterator, List

import httpx
import pytest

from crux_anthropic.base.logging import get_logger
from crux_anthropic.base.models import Model, ModelKind, Request, RequestMessage, Role

API_URL = "https://api.example.com"
API_KEY = "sk-ant-unit"

_ENV_VARS = (
    "ANTHROPIC_API_KEY",
    "CLAUDE_API_KEY",
    "ANTHROPIC_MODEL",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_MAX_TOKENS",
    "ANTHROPIC_LOW_SPEED_TIMEOUT",
    "ANTHROPIC_SYSTEM_MESSAGE",
    "PROVIDERS_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove provider env vars so host configuration never leaks into tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def log_capture() -> Iterator[List[logging.LogRecord]]:
    """Collect records emitted on the shared ``providers`` logger."""
    records: List[logging.LogRecord] = []
    handler = logging.Handler()
    handler.emit = records.append  # type: ignore[method-assign]
    base = get_logger()
    base.addHandler(handler)
    try:
        yield records
    finally:
        base.removeHandler(handler)


def events_logged(records: List[logging.LogRecord]) -> List[dict]:
    """Decode JSON payloads from captured log records."""
    out = []
    for rec in records:
        try:
            out.append(json.loads(rec.getMessage()))
        except ValueError:
            continue
    return out


def sse(*lines: str) -> bytes:
    """Join lines into an event-stream body."""
    return ("\n".join(lines) + "\n").encode("utf-8")


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture()
def ping_request() -> Request:
    return Request(
        model=Model(ModelKind.CLAUDE_3_OPUS),
        messages=[RequestMessage(role=Role.USER, content="Ping")],
        stream=True,
        system="Respond to ping with pong",
        max_tokens=4096,
    )


async def collect(stream) -> list:
    return [item async for item in stream]
