"""Structured logging helpers: canonical keys, JSON formatting, file handler."""
from __future__ import annotations

import json
import logging

from crux_anthropic.base.events import Usage
from crux_anthropic.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from crux_anthropic.base.log_support import JsonFormatter

from .conftest import events_logged


def test_child_loggers_share_the_providers_root():
    child = get_logger("anthropic.test")
    assert child.name == "providers.anthropic.test"
    assert child.propagate is True
    assert get_logger().propagate is False


def test_normalized_event_has_canonical_keys(log_capture):
    log = get_logger("providers.test")
    ctx = LogContext(model="claude-3-opus-20240229", request_id="req_1")
    normalized_log_event(
        log,
        "stream.end",
        ctx,
        phase="finalize",
        error_code="timeout",
        emitted=3,
        tokens=Usage(input_tokens=4, output_tokens=9),
        phase_override="ignored",
        errors=0,
    )
    (payload,) = events_logged(log_capture)
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload
    assert payload["provider"] == "anthropic"
    assert payload["request_id"] == "req_1"
    assert payload["tokens"] == {"input_tokens": 4, "output_tokens": 9}
    assert payload["errors"] == 0


def test_normalized_event_keeps_none_canonical_values(log_capture):
    normalized_log_event(get_logger("providers.test"), "stream.start", phase="start")
    (payload,) = events_logged(log_capture)
    assert payload["emitted"] is None
    assert payload["tokens"] is None
    assert "error_code" not in payload


def test_log_event_drops_none_fields(log_capture):
    log_event(get_logger("providers.test"), "custom", None, present=1, absent=None)
    (payload,) = events_logged(log_capture)
    assert payload == {"event": "custom", "present": 1}


def test_json_formatter_hoists_payload():
    record = logging.LogRecord("providers.x", logging.WARNING, __file__, 1, '{"event":"e","phase":"start"}', None, None)
    line = json.loads(JsonFormatter().format(record))
    assert line["event"] == "e"
    assert line["level"] == "WARNING"
    assert line["logger"] == "providers.x"
    assert "msg" not in line


def test_json_formatter_plain_message():
    record = logging.LogRecord("providers.x", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    assert json.loads(JsonFormatter().format(record))["msg"] == "hello world"


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "client.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        assert logger.level == logging.DEBUG
        log_event(get_logger("providers.file"), "to.file", None, n=1)
        for h in logger.handlers:
            h.flush()
        lines = path.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["event"] == "to.file"
        configure_logger(file_path=str(path))
        assert sum(1 for h in logger.handlers if getattr(h, "baseFilename", None)) == 1
    finally:
        configure_logger(level=logging.INFO, file_path=None)
    assert not any(getattr(h, "baseFilename", None) for h in logger.handlers)
