"""Messages API client: request assembly and the streaming decoder."""

from .client import AnthropicMessagesClient
from .request_build import MessageLike, build_request, to_request_message
from .stream import EventStream, raise_on_error, stream_completion
from .stream_helpers import StreamItem

__all__ = [
    "AnthropicMessagesClient",
    "MessageLike",
    "build_request",
    "to_request_message",
    "EventStream",
    "StreamItem",
    "raise_on_error",
    "stream_completion",
]
