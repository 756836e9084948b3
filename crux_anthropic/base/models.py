"""Public surface for request-side types.

Re-exports the one-class-per-file implementations under ``models_parts``.
"""

from .models_parts import (
    DEFAULT_MODEL,
    Model,
    ModelKind,
    ModelSetting,
    Request,
    RequestMessage,
    Role,
    role_to_string,
    string_to_role,
)

__all__ = [
    "DEFAULT_MODEL",
    "Model",
    "ModelKind",
    "ModelSetting",
    "Request",
    "RequestMessage",
    "Role",
    "role_to_string",
    "string_to_role",
]
