"""Message envelope carried by ``message_start`` and ``message_delta``."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .content_block import ContentBlock
from .usage import Usage


class ResponseMessage(BaseModel):
    """Partially populated message metadata.

    Every field is optional: ``message_start`` fills in identity and model,
    ``message_delta`` typically carries only ``stop_reason`` and friends.
    The wire ``type`` key is exposed as ``message_type``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message_type: Optional[str] = Field(default=None, alias="type")
    id: Optional[str] = None
    role: Optional[str] = None
    content: Optional[List[ContentBlock]] = None
    model: Optional[str] = None
    stop_reason: Optional[str] = None
    stop_sequence: Optional[str] = None
    usage: Optional[Usage] = None


__all__ = ["ResponseMessage"]
