"""Response event union and frame decoding.

``ResponseEvent`` is a pydantic discriminated union over the seven event
variants keyed by the ``type`` field. :func:`decode_event` parses one frame
(the text after ``data: ``) strictly: invalid JSON, an unknown ``type`` or a
missing required field all raise ``pydantic.ValidationError``.
"""
from __future__ import annotations

from typing import Annotated, Iterable, Union

from pydantic import Field, TypeAdapter

from .events_parts import (
    ContentBlock,
    ContentBlockDelta,
    ContentBlockStart,
    ContentBlockStop,
    MessageDelta,
    MessageStart,
    MessageStop,
    Ping,
    ResponseMessage,
    TextContentBlock,
    TextDelta,
    Usage,
)

ResponseEvent = Annotated[
    Union[
        MessageStart,
        ContentBlockStart,
        Ping,
        ContentBlockDelta,
        ContentBlockStop,
        MessageDelta,
        MessageStop,
    ],
    Field(discriminator="type"),
]

EVENT_TYPES = (
    "message_start",
    "content_block_start",
    "ping",
    "content_block_delta",
    "content_block_stop",
    "message_delta",
    "message_stop",
)

_EVENT_ADAPTER: TypeAdapter[ResponseEvent] = TypeAdapter(ResponseEvent)


def decode_event(frame: Union[str, bytes]) -> ResponseEvent:
    """Decode a single JSON frame into its event variant."""
    return _EVENT_ADAPTER.validate_json(frame)


def is_event_frame(text: Union[str, bytes]) -> bool:
    """Return True when ``text`` decodes as a well-formed event frame."""
    try:
        decode_event(text)
    except ValueError:
        return False
    return True


def collect_text(events: Iterable[object]) -> str:
    """Concatenate block text from ``ContentBlockStart`` and ``ContentBlockDelta``.

    Non-event items (including in-stream errors) are ignored.
    """
    parts = []
    for ev in events:
        if isinstance(ev, ContentBlockStart):
            parts.append(ev.content_block.text)
        elif isinstance(ev, ContentBlockDelta):
            parts.append(ev.delta.text)
    return "".join(parts)


__all__ = [
    "ResponseEvent",
    "EVENT_TYPES",
    "decode_event",
    "is_event_frame",
    "collect_text",
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
