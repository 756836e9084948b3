"""
Model catalog for the Messages API.

``ModelKind`` enumerates the known model families together with their wire
identifier, short alias and display name. ``Model`` is the immutable value
handed to requests: either one of the known kinds or a custom model carrying
an arbitrary name and an optional context-size override.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Union

from ..constants import DEFAULT_MAX_TOKEN_COUNT


class ModelKind(Enum):
    """Known model families plus the open ``CUSTOM`` variant."""

    CLAUDE_3_5_SONNET = ("claude-3-5-sonnet-20240620", "claude-3-5-sonnet", "Claude 3.5 Sonnet")
    CLAUDE_3_OPUS = ("claude-3-opus-20240229", "claude-3-opus", "Claude 3 Opus")
    CLAUDE_3_SONNET = ("claude-3-sonnet-20240229", "claude-3-sonnet", "Claude 3 Sonnet")
    CLAUDE_3_HAIKU = ("claude-3-haiku-20240307", "claude-3-haiku", "Claude 3 Haiku")
    CUSTOM = ("custom", "custom", "Custom")

    def __init__(self, wire_id: str, alias: str, display_name: str) -> None:
        self.wire_id = wire_id
        self.alias = alias
        self.display_name = display_name


# Prefix match order for ``Model.from_id``. "claude-3-5-sonnet" must be tried
# before any shorter family prefix that could also match it.
_PREFIX_ORDER = (
    ModelKind.CLAUDE_3_5_SONNET,
    ModelKind.CLAUDE_3_OPUS,
    ModelKind.CLAUDE_3_SONNET,
    ModelKind.CLAUDE_3_HAIKU,
)

ModelSetting = Union[str, Dict[str, Any]]


@dataclass(frozen=True)
class Model:
    """An immutable model selection.

    Attributes:
        kind: The catalog entry. Defaults to Claude 3.5 Sonnet.
        name: Wire id of a custom model. Only valid with ``ModelKind.CUSTOM``.
        max_tokens: Optional context-size override for a custom model.
    """

    kind: ModelKind = ModelKind.CLAUDE_3_5_SONNET
    name: Optional[str] = None
    max_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is ModelKind.CUSTOM:
            if not self.name:
                raise ValueError("custom model requires a non-empty name")
            if self.max_tokens is not None and self.max_tokens <= 0:
                raise ValueError("custom model max_tokens must be positive")
        elif self.name is not None or self.max_tokens is not None:
            raise ValueError(f"{self.kind.name} does not accept a name or max_tokens")

    @classmethod
    def custom(cls, name: str, max_tokens: Optional[int] = None) -> "Model":
        return cls(ModelKind.CUSTOM, name=name, max_tokens=max_tokens)

    @classmethod
    def from_id(cls, model_id: str) -> "Model":
        """Resolve a wire id by family prefix; unknown ids become custom models.

        Never raises. A blank id resolves to the default model.
        """
        if not model_id or not model_id.strip():
            return cls()
        for kind in _PREFIX_ORDER:
            if model_id.startswith(kind.alias):
                return cls(kind)
        return cls.custom(model_id)

    @classmethod
    def from_alias(cls, value: str) -> "Model":
        """Strict lookup by short alias or canonical wire id.

        Raises:
            ValueError: If ``value`` names no known model.
        """
        for kind in _PREFIX_ORDER:
            if value in (kind.alias, kind.wire_id):
                return cls(kind)
        raise ValueError(f"unknown model alias '{value}'")

    @classmethod
    def known(cls) -> Iterator["Model"]:
        """Yield every known (non-custom) model in catalog order."""
        for kind in ModelKind:
            if kind is not ModelKind.CUSTOM:
                yield cls(kind)

    @property
    def id(self) -> str:
        if self.kind is ModelKind.CUSTOM:
            return self.name or ""
        return self.kind.wire_id

    @property
    def display_name(self) -> str:
        if self.kind is ModelKind.CUSTOM:
            return self.name or ""
        return self.kind.display_name

    @property
    def max_token_count(self) -> int:
        if self.kind is ModelKind.CUSTOM and self.max_tokens is not None:
            return self.max_tokens
        return DEFAULT_MAX_TOKEN_COUNT

    def to_setting(self) -> ModelSetting:
        """Serialize for settings files.

        Known models are stored by canonical id; custom models as
        ``{"custom": {"name": ..., "max_tokens": ...}}``.
        """
        if self.kind is ModelKind.CUSTOM:
            return {"custom": {"name": self.name, "max_tokens": self.max_tokens}}
        return self.kind.wire_id

    @classmethod
    def from_setting(cls, value: Union[ModelSetting, "Model"]) -> "Model":
        """Inverse of :meth:`to_setting`. Strings also accept short aliases."""
        if isinstance(value, Model):
            return value
        if isinstance(value, str):
            try:
                return cls.from_alias(value)
            except ValueError:
                return cls.from_id(value)
        if isinstance(value, dict) and isinstance(value.get("custom"), dict):
            custom = value["custom"]
            return cls.custom(custom.get("name", ""), custom.get("max_tokens"))
        raise ValueError(f"unrecognized model setting: {value!r}")

    def __str__(self) -> str:
        return self.id


DEFAULT_MODEL = Model()

__all__ = ["Model", "ModelKind", "ModelSetting", "DEFAULT_MODEL"]
