"""Request assembly helpers.

Pure data assembly: no network calls and no validation of ``max_tokens``
against the model's context size.
"""

from __future__ import annotations

from typing import Iterable, Tuple, Union

from ..base.models import Model, ModelSetting, Request, RequestMessage, Role, string_to_role

MessageLike = Union[RequestMessage, Tuple[Union[Role, str], str]]


def to_request_message(item: MessageLike) -> RequestMessage:
    """Normalize a ``RequestMessage`` or ``(role, text)`` pair.

    Raises:
        ValueError: If a string role is not a valid wire role.
    """
    if isinstance(item, RequestMessage):
        return item
    role, content = item
    if not isinstance(role, Role):
        role = string_to_role(role)
    return RequestMessage(role=role, content=content)


def build_request(
    model: Union[Model, ModelSetting],
    messages: Iterable[MessageLike],
    *,
    max_tokens: int,
    system: str = "",
    stream: bool = True,
) -> Request:
    """Assemble a :class:`Request` preserving message order."""
    return Request(
        model=model,
        messages=[to_request_message(m) for m in messages],
        stream=stream,
        system=system,
        max_tokens=max_tokens,
    )


__all__ = ["MessageLike", "to_request_message", "build_request"]
