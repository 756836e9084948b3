"""Conversation roles and their wire strings."""
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


def role_to_string(role: Role) -> str:
    return role.value


def string_to_role(value: str) -> Role:
    """Parse a wire role string.

    Raises:
        ValueError: For anything other than ``"user"`` or ``"assistant"``.
    """
    for role in Role:
        if role.value == value:
            return role
    raise ValueError(f"invalid role '{value}'")


__all__ = ["Role", "role_to_string", "string_to_role"]
