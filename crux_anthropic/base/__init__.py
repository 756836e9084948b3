"""Base layer: wire constants, data model, events, errors, logging, HTTP pool."""

from .errors import (
    AnomalousResponseError,
    ErrorCode,
    FrameDecodeError,
    HttpStatusError,
    ProviderError,
    SerializationError,
    StreamError,
    TransportError,
)
from .events import ResponseEvent, collect_text, decode_event
from .models import Model, ModelKind, Request, RequestMessage, Role, role_to_string, string_to_role

__all__ = [
    "AnomalousResponseError",
    "ErrorCode",
    "FrameDecodeError",
    "HttpStatusError",
    "ProviderError",
    "SerializationError",
    "StreamError",
    "TransportError",
    "ResponseEvent",
    "collect_text",
    "decode_event",
    "Model",
    "ModelKind",
    "Request",
    "RequestMessage",
    "Role",
    "role_to_string",
    "string_to_role",
]
