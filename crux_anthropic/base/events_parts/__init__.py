"""Response event payload models (one concern per module)."""

from .content_block import ContentBlock, TextContentBlock, TextDelta
from .usage import Usage
from .response_message import ResponseMessage
from .response_event import (
    ContentBlockDelta,
    ContentBlockStart,
    ContentBlockStop,
    MessageDelta,
    MessageStart,
    MessageStop,
    Ping,
)

__all__ = [
    "ContentBlock",
    "TextContentBlock",
    "TextDelta",
    "Usage",
    "ResponseMessage",
    "MessageStart",
    "ContentBlockStart",
    "Ping",
    "ContentBlockDelta",
    "ContentBlockStop",
    "MessageDelta",
    "MessageStop",
]
