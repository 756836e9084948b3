from __future__ import annotations

import json

import httpx
import pytest

from crux_anthropic.base.errors import ErrorCode, FrameDecodeError, ProviderError
from crux_anthropic.base.models import ModelKind, Role
from crux_anthropic.messages import AnthropicMessagesClient

from .conftest import API_KEY, API_URL, mock_client, sse

BODY = sse(
    'data: {"type":"content_block_start","index":0,"content_block":{"type":"text","text":""}}',
    'data: {"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"po"}}',
    'data: {"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"ng"}}',
    'data: {"type":"message_stop"}',
)


def recording(body: bytes, seen: list):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=body)

    return handler


@pytest.mark.asyncio
async def test_complete_text_collects_deltas():
    seen: list = []
    async with mock_client(recording(BODY, seen)) as http:
        client = AnthropicMessagesClient(api_key=API_KEY, api_url=API_URL, model="claude-3-opus", http_client=http)
        text = await client.complete_text([(Role.USER, "Ping")], system="Respond to ping with pong")
    assert text == "pong"
    body = json.loads(seen[0].content)
    assert body["model"] == "claude-3-opus-20240229"
    assert body["system"] == "Respond to ping with pong"
    assert body["messages"] == [{"role": "user", "content": "Ping"}]
    assert body["stream"] is True


@pytest.mark.asyncio
async def test_config_supplies_key_model_and_limits(monkeypatch):
    monkeypatch.setenv("CLAUDE_API_KEY", "sk-ant-from-env")
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-3-haiku")
    monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "1024")
    seen: list = []
    async with mock_client(recording(BODY, seen)) as http:
        client = AnthropicMessagesClient(api_url=API_URL, http_client=http)
        assert client.model.kind is ModelKind.CLAUDE_3_HAIKU
        assert client.provider_name == "anthropic"
        async with await client.stream([("user", "hi")]) as events:
            assert [type(e).__name__ async for e in events][-1] == "MessageStop"
    assert seen[0].headers["x-api-key"] == "sk-ant-from-env"
    assert json.loads(seen[0].content)["max_tokens"] == 1024


@pytest.mark.asyncio
async def test_missing_key_fails_before_sending():
    seen: list = []
    async with mock_client(recording(BODY, seen)) as http:
        client = AnthropicMessagesClient(api_url=API_URL, http_client=http)
        with pytest.raises(ProviderError) as info:
            await client.stream([(Role.USER, "Ping")])
    assert info.value.code is ErrorCode.AUTH
    assert seen == []


@pytest.mark.asyncio
async def test_complete_text_raises_first_stream_error():
    body = sse('data: {"type":"content_block_delta","index":0}', 'data: {"type":"message_stop"}')
    async with mock_client(recording(body, [])) as http:
        client = AnthropicMessagesClient(api_key=API_KEY, api_url=API_URL, http_client=http)
        with pytest.raises(FrameDecodeError):
            await client.complete_text([(Role.USER, "Ping")])


def test_explicit_arguments_win_over_config(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "https://env.invalid")
    client = AnthropicMessagesClient(api_key=API_KEY, api_url=API_URL, low_speed_timeout=5)
    assert client.api_url == API_URL
    assert client.model.kind is ModelKind.CLAUDE_3_5_SONNET
