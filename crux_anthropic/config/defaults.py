"""crux_anthropic.config.defaults
==============================

Small, stable default values used by the client facade and CLI. They can be
overridden via environment variables or an external config file.

This module avoids importing from other packages to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
# Canonical id of the catalog default (Claude 3.5 Sonnet).
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-20240620"
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096
ANTHROPIC_DEFAULT_SYSTEM_MESSAGE = ""

# ---- CLI Defaults ----
CLI_DEFAULT_HTTP_PURPOSE = "cli"
CLIENT_DEFAULT_HTTP_PURPOSE = "messages"


__all__ = [
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "ANTHROPIC_DEFAULT_SYSTEM_MESSAGE",
    "CLI_DEFAULT_HTTP_PURPOSE",
    "CLIENT_DEFAULT_HTTP_PURPOSE",
]
