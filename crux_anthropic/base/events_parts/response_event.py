"""
Tagged event variants decoded from the response stream.

Each class pins its ``type`` discriminant with a ``Literal``. The union in
``crux_anthropic.base.events`` dispatches on that field, so a frame whose
``type`` matches none of these is rejected.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .content_block import ContentBlock, TextDelta
from .response_message import ResponseMessage
from .usage import Usage


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class MessageStart(_Event):
    type: Literal["message_start"] = "message_start"
    message: ResponseMessage


class ContentBlockStart(_Event):
    type: Literal["content_block_start"] = "content_block_start"
    index: int
    content_block: ContentBlock


class Ping(_Event):
    type: Literal["ping"] = "ping"


class ContentBlockDelta(_Event):
    type: Literal["content_block_delta"] = "content_block_delta"
    index: int
    delta: TextDelta


class ContentBlockStop(_Event):
    type: Literal["content_block_stop"] = "content_block_stop"
    index: int


class MessageDelta(_Event):
    type: Literal["message_delta"] = "message_delta"
    delta: ResponseMessage
    usage: Usage


class MessageStop(_Event):
    type: Literal["message_stop"] = "message_stop"


__all__ = [
    "MessageStart",
    "ContentBlockStart",
    "Ping",
    "ContentBlockDelta",
    "ContentBlockStop",
    "MessageDelta",
    "MessageStop",
]
