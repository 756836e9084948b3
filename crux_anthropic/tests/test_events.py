"""Tests for strict, discriminant-driven event decoding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from crux_anthropic.base.events import (
    EVENT_TYPES,
    ContentBlockDelta,
    ContentBlockStart,
    ContentBlockStop,
    MessageDelta,
    MessageStart,
    MessageStop,
    Ping,
    collect_text,
    decode_event,
    is_event_frame,
)

MESSAGE_START = (
    '{"type":"message_start","message":{"id":"msg_1","type":"message","role":"assistant",'
    '"content":[],"model":"claude-3-opus-20240229","stop_reason":null,"stop_sequence":null,'
    '"usage":{"input_tokens":12,"output_tokens":1}}}'
)


def test_ping_has_no_payload():
    ev = decode_event('{"type":"ping"}')
    assert isinstance(ev, Ping)
    assert ev.model_dump() == {"type": "ping"}


def test_message_start_envelope():
    ev = decode_event(MESSAGE_START)
    assert isinstance(ev, MessageStart)
    assert ev.message.id == "msg_1"
    assert ev.message.message_type == "message"
    assert ev.message.content == []
    assert ev.message.usage is not None and ev.message.usage.input_tokens == 12


FRAMES = {
    "message_start": MESSAGE_START,
    "content_block_start": '{"type":"content_block_start","index":0,"content_block":{"type":"text","text":""}}',
    "ping": '{"type":"ping"}',
    "content_block_delta": '{"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"pong"}}',
    "content_block_stop": '{"type":"content_block_stop","index":0}',
    "message_delta": '{"type":"message_delta","delta":{"stop_reason":"end_turn","stop_sequence":null},"usage":{"output_tokens":5}}',
    "message_stop": '{"type":"message_stop"}',
}

VARIANTS = {
    "message_start": MessageStart,
    "content_block_start": ContentBlockStart,
    "ping": Ping,
    "content_block_delta": ContentBlockDelta,
    "content_block_stop": ContentBlockStop,
    "message_delta": MessageDelta,
    "message_stop": MessageStop,
}


@pytest.mark.parametrize("tag", EVENT_TYPES)
def test_every_variant_decodes(tag):
    ev = decode_event(FRAMES[tag])
    assert isinstance(ev, VARIANTS[tag])
    assert ev.type == tag
    assert is_event_frame(FRAMES[tag])


def test_message_delta_payload():
    delta = decode_event(FRAMES["message_delta"])
    assert delta.delta.stop_reason == "end_turn"
    assert delta.usage.output_tokens == 5
    assert delta.usage.input_tokens is None


@pytest.mark.parametrize(
    "frame",
    [
        '{"type":"error","error":{"type":"overloaded_error"}}',
        '{"type":"content_block_stop"}',
        '{"type":"message_delta","delta":{}}',
        '{"type":"content_block_delta","index":0,"delta":{"type":"input_json_delta","partial_json":"{}"}}',
        '{"type":"content_block_start","index":0,"content_block":{"type":"tool_use","id":"t"}}',
        '{"index":0}',
        "not json",
        "",
    ],
)
def test_invalid_frames_fail_explicitly(frame):
    with pytest.raises(ValidationError):
        decode_event(frame)
    assert is_event_frame(frame) is False


def test_events_are_frozen():
    ev = decode_event('{"type":"content_block_stop","index":2}')
    with pytest.raises(ValidationError):
        ev.index = 3  # type: ignore[misc]


def test_collect_text_concatenates_in_order():
    events = [
        decode_event('{"type":"content_block_start","index":0,"content_block":{"type":"text","text":"He"}}'),
        decode_event('{"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"llo"}}'),
        decode_event('{"type":"ping"}'),
        decode_event('{"type":"content_block_delta","index":0,"delta":{"type":"text_delta","text":"!"}}'),
    ]
    assert collect_text(events) == "Hello!"
