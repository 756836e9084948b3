"""Non-success HTTP status carrying the raw error body."""
from __future__ import annotations

from dataclasses import dataclass

from .provider_error import ProviderError


@dataclass
class HttpStatusError(ProviderError):
    """The API answered with a non-2xx status.

    Attributes:
        status_code: Numeric HTTP status.
        body: Raw response body decoded as UTF-8 (invalid bytes replaced).
    """

    status_code: int = 0
    body: str = ""

    def __str__(self) -> str:
        return f"{self.provider}:{self.model or '-'} {self.code.value}: Failed to connect to API: {self.status_code} {self.body}"


__all__ = ["HttpStatusError"]
