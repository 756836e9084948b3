"""A single malformed event frame inside an otherwise healthy stream."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class FrameDecodeError(ProviderError):
    """Yielded (never raised by the decoder) in place of an undecodable frame.

    Attributes:
        line: The frame payload with the ``data: `` prefix stripped.
    """

    code: ErrorCode = ErrorCode.PROTOCOL
    message: str = "failed to decode event frame"
    line: str = ""


__all__ = ["FrameDecodeError"]
