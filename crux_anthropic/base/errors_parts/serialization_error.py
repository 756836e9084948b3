"""Outbound request body could not be serialized."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class SerializationError(ProviderError):
    """Raised before any network I/O when the request body cannot be encoded."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "failed to serialize request body"


__all__ = ["SerializationError"]
