"""A single conversation turn sent to the API."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .role import Role


class RequestMessage(BaseModel):
    """Immutable ``(role, content)`` pair.

    Content is plain text; emptiness is not validated.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


__all__ = ["RequestMessage"]
