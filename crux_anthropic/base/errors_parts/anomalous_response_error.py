"""Failure status whose body nevertheless decodes as a stream event."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class AnomalousResponseError(ProviderError):
    """A non-success response carried a well-formed event frame.

    This signals a protocol mismatch between client and server and is kept
    distinct from :class:`HttpStatusError` so it can be flagged separately.
    """

    code: ErrorCode = ErrorCode.PROTOCOL
    message: str = ""
    status_code: int = 0
    body: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = f"Unexpected success response while expecting an error: {self.body}"


__all__ = ["AnomalousResponseError"]
