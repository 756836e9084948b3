"""Token accounting attached to message envelopes and message deltas."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Usage(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None


__all__ = ["Usage"]
