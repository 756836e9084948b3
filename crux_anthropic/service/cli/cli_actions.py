"""Subcommand handlers for anthropic-cli.

Handlers take parsed ``argparse.Namespace`` values and an output stream so
they can be tested without a terminal. Only ``stream`` performs network I/O.
"""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import TextIO

from ...base.errors import ProviderError
from ...base.events import ContentBlockDelta, ContentBlockStart
from ...base.http import aclose_all_clients, get_async_httpx_client
from ...base.models import Model, Role
from ...config import get_provider_config
from ...config.defaults import CLI_DEFAULT_HTTP_PURPOSE
from ...messages import AnthropicMessagesClient, build_request


def models_action(args: argparse.Namespace, out: TextIO) -> int:
    rows = [
        {
            "id": m.id,
            "alias": m.kind.alias,
            "display_name": m.display_name,
            "max_token_count": m.max_token_count,
        }
        for m in Model.known()
    ]
    if args.json:
        out.write(json.dumps(rows, indent=2) + "\n")
        return 0
    for row in rows:
        out.write(f"{row['id']:<32} {row['alias']:<20} {row['display_name']:<20} {row['max_token_count']}\n")
    return 0


def request_action(args: argparse.Namespace, out: TextIO) -> int:
    cfg = get_provider_config("anthropic")
    request = build_request(
        Model.from_setting(args.model or cfg["model"]),
        [(Role.USER, args.prompt)],
        system=cfg.get("system_message", "") if args.system is None else args.system,
        max_tokens=args.max_tokens or int(cfg["max_tokens"]),
    )
    out.write(request.to_wire() + "\n")
    return 0


async def _stream(args: argparse.Namespace, out: TextIO) -> int:
    client = AnthropicMessagesClient(
        model=args.model,
        low_speed_timeout=args.low_speed_timeout,
        http_client=get_async_httpx_client(None, purpose=CLI_DEFAULT_HTTP_PURPOSE),
    )
    exit_code = 0
    try:
        async with await client.stream([(Role.USER, args.prompt)], system=args.system, max_tokens=args.max_tokens) as events:
            async for item in events:
                if isinstance(item, ProviderError):
                    out.write(f"\n[error] {item}\n")
                    exit_code = 1
                elif args.events:
                    out.write(item.model_dump_json(by_alias=True) + "\n")
                elif isinstance(item, ContentBlockStart):
                    out.write(item.content_block.text)
                elif isinstance(item, ContentBlockDelta):
                    out.write(item.delta.text)
                out.flush()
    finally:
        await aclose_all_clients()
    if not args.events:
        out.write("\n")
    return exit_code


def stream_action(args: argparse.Namespace, out: TextIO) -> int:
    try:
        return asyncio.run(_stream(args, out))
    except ProviderError as e:
        out.write(f"[error] {e}\n")
        return 1


ACTIONS = {
    "models": models_action,
    "request": request_action,
    "stream": stream_action,
}

__all__ = ["models_action", "request_action", "stream_action", "ACTIONS"]
