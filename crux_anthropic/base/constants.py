"""Wire-level constants for the Messages API.

Header names and values, the endpoint path, and the SSE data prefix live
here so the request builder and decoder share one definition.
"""
from __future__ import annotations

MESSAGES_PATH = "/v1/messages"

HEADER_API_VERSION = "Anthropic-Version"
HEADER_BETA = "Anthropic-Beta"
HEADER_API_KEY = "X-Api-Key"
HEADER_CONTENT_TYPE = "Content-Type"

API_VERSION = "2023-06-01"
BETA_FEATURES = "tools-2024-04-04"
JSON_CONTENT_TYPE = "application/json"

# Significant event-stream lines start with this prefix; everything else is skipped.
DATA_PREFIX = "data: "

# Throughput floor used by the low-speed watchdog.
LOW_SPEED_LIMIT_BYTES_PER_SECOND = 100

DEFAULT_MAX_TOKEN_COUNT = 200_000

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string

__all__ = [
    "MESSAGES_PATH",
    "HEADER_API_VERSION",
    "HEADER_BETA",
    "HEADER_API_KEY",
    "HEADER_CONTENT_TYPE",
    "API_VERSION",
    "BETA_FEATURES",
    "JSON_CONTENT_TYPE",
    "DATA_PREFIX",
    "LOW_SPEED_LIMIT_BYTES_PER_SECOND",
    "DEFAULT_MAX_TOKEN_COUNT",
    "MISSING_API_KEY_ERROR",
]
