"""
Content block and text delta payloads.

Only text exists today. Each payload pins its ``type`` tag with a ``Literal``
so an unrecognized tag fails validation instead of being dropped. New
content kinds should be added as sibling models and joined into a
discriminated union.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class TextContentBlock(BaseModel):
    """Opening payload of a text content block (``content_block_start``)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"]
    text: str


class TextDelta(BaseModel):
    """Incremental text appended to a content block (``content_block_delta``)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text_delta"]
    text: str


ContentBlock = TextContentBlock

__all__ = ["ContentBlock", "TextContentBlock", "TextDelta"]
