"""crux_anthropic: streaming client for the Anthropic Messages API.

Typical use::

    import httpx
    from crux_anthropic import Model, Request, RequestMessage, Role, stream_completion

    request = Request(
        model=Model.from_id("claude-3-opus"),
        messages=[RequestMessage(role=Role.USER, content="Ping")],
        system="Respond to ping with pong",
        max_tokens=4096,
    )
    async with httpx.AsyncClient() as http:
        async with await stream_completion(http, ANTHROPIC_API_URL, key, request) as events:
            async for item in events:
                ...
"""

from .base.errors import (
    AnomalousResponseError,
    ErrorCode,
    FrameDecodeError,
    HttpStatusError,
    ProviderError,
    SerializationError,
    StreamError,
    TransportError,
)
from .base.events import (
    ContentBlockDelta,
    ContentBlockStart,
    ContentBlockStop,
    MessageDelta,
    MessageStart,
    MessageStop,
    Ping,
    ResponseEvent,
    ResponseMessage,
    TextContentBlock,
    TextDelta,
    Usage,
    collect_text,
    decode_event,
)
from .base.models import DEFAULT_MODEL, Model, ModelKind, Request, RequestMessage, Role, role_to_string, string_to_role
from .config.defaults import ANTHROPIC_DEFAULT_BASE_URL as ANTHROPIC_API_URL
from .messages import AnthropicMessagesClient, EventStream, build_request, raise_on_error, stream_completion

__all__ = [
    "ANTHROPIC_API_URL",
    "AnomalousResponseError",
    "ErrorCode",
    "FrameDecodeError",
    "HttpStatusError",
    "ProviderError",
    "SerializationError",
    "StreamError",
    "TransportError",
    "ContentBlockDelta",
    "ContentBlockStart",
    "ContentBlockStop",
    "MessageDelta",
    "MessageStart",
    "MessageStop",
    "Ping",
    "ResponseEvent",
    "ResponseMessage",
    "TextContentBlock",
    "TextDelta",
    "Usage",
    "collect_text",
    "decode_event",
    "DEFAULT_MODEL",
    "Model",
    "ModelKind",
    "Request",
    "RequestMessage",
    "Role",
    "role_to_string",
    "string_to_role",
    "AnthropicMessagesClient",
    "EventStream",
    "build_request",
    "raise_on_error",
    "stream_completion",
]
