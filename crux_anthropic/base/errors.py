"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crux_anthropic.base.errors_parts`` to keep a stable import path.

``StreamError`` names the error types that may appear as values inside an
event stream instead of being raised.
"""

from typing import Union

from .errors_parts.error_code import ErrorCode, RETRYABLE_CODES
from .errors_parts.provider_error import ProviderError
from .errors_parts.transport_error import TransportError
from .errors_parts.serialization_error import SerializationError
from .errors_parts.http_status_error import HttpStatusError
from .errors_parts.anomalous_response_error import AnomalousResponseError
from .errors_parts.frame_decode_error import FrameDecodeError
from .errors_parts.classification import classify_exception, classify_status

StreamError = Union[FrameDecodeError, TransportError]

__all__ = [
    "ErrorCode",
    "RETRYABLE_CODES",
    "ProviderError",
    "TransportError",
    "SerializationError",
    "HttpStatusError",
    "AnomalousResponseError",
    "FrameDecodeError",
    "StreamError",
    "classify_exception",
    "classify_status",
]
