"""anthropic-cli entry point.

Usage::

    python -m crux_anthropic.service.cli models [--json]
    python -m crux_anthropic.service.cli request --prompt "Ping"
    python -m crux_anthropic.service.cli stream --prompt "Ping" [--model claude-3-opus]
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .cli_actions import ACTIONS
from .cli_parser import build_parser


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.cmd:
        parser.print_help()
        return 2
    return ACTIONS[args.cmd](args, out or sys.stdout)


__all__ = ["main"]
