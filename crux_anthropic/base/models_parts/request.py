"""
Request body for ``POST /v1/messages``.

``Request`` is an immutable pydantic model. Its ``model`` field holds the full
:class:`Model` value in memory and is reduced to the wire id on
serialization.
"""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic_core import PydanticSerializationError

from ..errors import SerializationError
from .model import Model
from .request_message import RequestMessage


class Request(BaseModel):
    """Outbound completion request.

    Attributes:
        model: Target model; accepts a ``Model`` or any model setting
            (wire id, alias, or custom mapping).
        messages: Conversation turns in order.
        stream: Whether the server should answer with an event stream.
        system: System prompt (may be empty).
        max_tokens: Positive cap on generated tokens. Keeping it within
            ``model.max_token_count`` is the caller's job.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    model: Model
    messages: List[RequestMessage]
    stream: bool = True
    system: str = ""
    max_tokens: int = Field(gt=0)

    @field_validator("model", mode="before")
    @classmethod
    def _coerce_model(cls, value: Any) -> Model:
        return Model.from_setting(value)

    @field_serializer("model")
    def _serialize_model(self, model: Model) -> str:
        return model.id

    def to_wire(self) -> str:
        """Return the JSON request body.

        Raises:
            SerializationError: If the body cannot be encoded.
        """
        try:
            return self.model_dump_json()
        except (PydanticSerializationError, ValueError, TypeError) as e:
            raise SerializationError(message=f"failed to serialize request body: {e}", model=self.model.id, raw=e) from e


__all__ = ["Request"]
