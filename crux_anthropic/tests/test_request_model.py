"""Tests for roles, request messages and request wire serialization."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from crux_anthropic.base.errors import SerializationError
from crux_anthropic.base.models import Model, ModelKind, Request, RequestMessage, Role, role_to_string, string_to_role
from crux_anthropic.messages import build_request


def test_role_round_trip():
    for role in Role:
        assert string_to_role(role_to_string(role)) is role
    assert role_to_string(Role.USER) == "user"
    assert role_to_string(Role.ASSISTANT) == "assistant"


@pytest.mark.parametrize("bad", ["system", "User", "", "tool"])
def test_string_to_role_rejects_other_values(bad):
    with pytest.raises(ValueError, match="invalid role"):
        string_to_role(bad)


def test_request_wire_shape(ping_request):
    body = json.loads(ping_request.to_wire())
    assert body == {
        "model": "claude-3-opus-20240229",
        "messages": [{"role": "user", "content": "Ping"}],
        "stream": True,
        "system": "Respond to ping with pong",
        "max_tokens": 4096,
    }


def test_request_is_immutable(ping_request):
    with pytest.raises(ValidationError):
        ping_request.max_tokens = 1  # type: ignore[misc]


def test_request_accepts_model_settings():
    req = Request(model="claude-3-haiku", messages=[], max_tokens=10)
    assert req.model.kind is ModelKind.CLAUDE_3_HAIKU
    assert json.loads(req.to_wire())["model"] == "claude-3-haiku-20240307"


def test_request_rejects_non_positive_max_tokens():
    with pytest.raises(ValidationError):
        Request(model=Model(), messages=[], max_tokens=0)


def test_custom_model_serializes_to_name():
    req = Request(model=Model.custom("my-model"), messages=[], max_tokens=5)
    assert json.loads(req.to_wire())["model"] == "my-model"


def test_unserializable_body_raises_serialization_error():
    req = Request.model_construct(model=Model(), messages=[object()], stream=True, system="", max_tokens=5)
    with pytest.raises(SerializationError):
        req.to_wire()


def test_build_request_preserves_order_and_accepts_pairs():
    req = build_request(
        "claude-3-opus",
        [("user", "one"), (Role.ASSISTANT, "two"), RequestMessage(role=Role.USER, content="three")],
        system="sys",
        max_tokens=64,
    )
    assert [(m.role, m.content) for m in req.messages] == [
        (Role.USER, "one"),
        (Role.ASSISTANT, "two"),
        (Role.USER, "three"),
    ]
    assert req.stream is True
    assert req.system == "sys"


def test_build_request_rejects_unknown_role():
    with pytest.raises(ValueError):
        build_request(Model(), [("system", "x")], max_tokens=1)


def test_empty_content_is_allowed():
    assert RequestMessage(role=Role.USER, content="").content == ""
