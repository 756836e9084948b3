"""CLI tests: handlers run against an in-memory output stream."""
from __future__ import annotations

import io
import json

import httpx

from crux_anthropic.service.cli import cli_actions, main

from .conftest import API_KEY, mock_client, sse


def run(*argv: str) -> tuple[int, str]:
    out = io.StringIO()
    code = main(list(argv), out=out)
    return code, out.getvalue()


def test_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "anthropic-cli" in capsys.readouterr().out


def test_models_json():
    code, text = run("models", "--json")
    assert code == 0
    rows = json.loads(text)
    assert [r["alias"] for r in rows] == ["claude-3-5-sonnet", "claude-3-opus", "claude-3-sonnet", "claude-3-haiku"]
    assert rows[3]["id"] == "claude-3-haiku-20240307"


def test_models_table():
    code, text = run("models")
    assert code == 0
    assert len(text.strip().splitlines()) == 4
    assert "Claude 3 Opus" in text


def test_request_dry_run():
    code, text = run("request", "--prompt", "Ping", "--model", "claude-3-haiku", "--max-tokens", "64", "--system", "terse")
    assert code == 0
    body = json.loads(text)
    assert body["model"] == "claude-3-haiku-20240307"
    assert body["max_tokens"] == 64
    assert body["system"] == "terse"
    assert body["messages"] == [{"role": "user", "content": "Ping"}]


def test_stream_prints_text(monkeypatch):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            content=sse(
                'data: {"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"pong"}}',
                'data: {"type":"message_stop"}',
            ),
        )

    monkeypatch.setenv("ANTHROPIC_API_KEY", API_KEY)
    monkeypatch.setattr(cli_actions, "get_async_httpx_client", lambda *a, **k: mock_client(handler))
    code, text = run("stream", "--prompt", "Ping")
    assert code == 0
    assert text == "pong\n"
    assert seen[0].url.path == "/v1/messages"


def test_stream_events_mode_and_frame_errors(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=sse('data: {"type":"ping"}', "data: nope", 'data: {"type":"message_stop"}'))

    monkeypatch.setenv("ANTHROPIC_API_KEY", API_KEY)
    monkeypatch.setattr(cli_actions, "get_async_httpx_client", lambda *a, **k: mock_client(handler))
    code, text = run("stream", "--prompt", "Ping", "--events")
    lines = text.strip().splitlines()
    assert code == 1
    assert json.loads(lines[0]) == {"type": "ping"}
    assert any(line.startswith("[error]") for line in lines)
    assert json.loads(lines[-1]) == {"type": "message_stop"}


def test_stream_http_error(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", API_KEY)
    monkeypatch.setattr(
        cli_actions,
        "get_async_httpx_client",
        lambda *a, **k: mock_client(lambda r: httpx.Response(401, text="invalid x-api-key")),
    )
    code, text = run("stream", "--prompt", "Ping")
    assert code == 1
    assert text.startswith("[error]")
    assert "401 invalid x-api-key" in text


def test_stream_without_key_reports_auth_error():
    code, text = run("stream", "--prompt", "Ping")
    assert code == 1
    assert "missing_api_key" in text
