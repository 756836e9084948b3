"""Transport-level failure (connect, send, body read, low-speed abort)."""
from __future__ import annotations

from dataclasses import dataclass

from .provider_error import ProviderError


@dataclass
class TransportError(ProviderError):
    """Raised when the HTTP exchange itself fails.

    Before a response exists this aborts the whole call. Once a stream is
    being consumed it is yielded as the final element of the sequence,
    because the body cannot be read any further.
    """


__all__ = ["TransportError"]
