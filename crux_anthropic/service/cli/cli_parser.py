"""CLI parser construction for anthropic-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``models``, ``request`` and ``stream`` subcommands. No I/O
        happens here.
    """
    p = argparse.ArgumentParser(prog="anthropic-cli", description="Anthropic Messages API streaming client")
    sub = p.add_subparsers(dest="cmd")

    p_models = sub.add_parser("models", help="List the known model catalog")
    p_models.add_argument("--json", action="store_true")

    def _add_request_args(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--model", default=None, help="Model id or alias (default from config)")
        sp.add_argument("--prompt", required=True)
        sp.add_argument("--system", default=None)
        sp.add_argument("--max-tokens", type=int, default=None)

    p_request = sub.add_parser("request", help="Print the request body without sending it")
    _add_request_args(p_request)

    p_stream = sub.add_parser("stream", help="Stream a completion to stdout")
    _add_request_args(p_stream)
    p_stream.add_argument("--low-speed-timeout", type=float, default=None)
    p_stream.add_argument("--events", action="store_true", help="Print raw events as JSON lines instead of text")

    return p


__all__ = ["build_parser"]
