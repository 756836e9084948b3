"""Request-side data model: catalog, roles, messages and the request body."""

from .model import DEFAULT_MODEL, Model, ModelKind, ModelSetting
from .role import Role, role_to_string, string_to_role
from .request_message import RequestMessage
from .request import Request

__all__ = [
    "DEFAULT_MODEL",
    "Model",
    "ModelKind",
    "ModelSetting",
    "Role",
    "role_to_string",
    "string_to_role",
    "RequestMessage",
    "Request",
]
