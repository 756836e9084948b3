"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crux_anthropic.base.errors` for the stable surface.
"""

from .error_code import ErrorCode, RETRYABLE_CODES
from .provider_error import ProviderError
from .transport_error import TransportError
from .serialization_error import SerializationError
from .http_status_error import HttpStatusError
from .anomalous_response_error import AnomalousResponseError
from .frame_decode_error import FrameDecodeError
from .classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "RETRYABLE_CODES",
    "ProviderError",
    "TransportError",
    "SerializationError",
    "HttpStatusError",
    "AnomalousResponseError",
    "FrameDecodeError",
    "classify_exception",
    "classify_status",
]
