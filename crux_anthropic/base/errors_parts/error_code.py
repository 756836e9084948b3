"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every error raised or yielded
by the client. Values are lowercase snake_case and are considered a stable
public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    OVERLOADED = "overloaded"
    PROTOCOL = "protocol"
    UNKNOWN = "unknown"


# Codes for which a caller-side retry is reasonable. Advisory only.
RETRYABLE_CODES = frozenset(
    {
        ErrorCode.TRANSIENT,
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.UNAVAILABLE,
        ErrorCode.OVERLOADED,
    }
)


__all__ = ["ErrorCode", "RETRYABLE_CODES"]
