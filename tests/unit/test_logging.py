from __future__ import annotations

import json
import logging

import pytest

from versioned_greeter.common.config import get_settings
from versioned_greeter.common.logging import (
    JsonFormatter,
    _build_formatter,
    get_project_logger,
    setup_logging,
)


@pytest.fixture()
def log_settings():
    s = get_settings()
    keys = ["log_format", "log_level"]
    snapshot = {k: getattr(s, k) for k in keys}
    try:
        yield s
    finally:
        for k, v in snapshot.items():
            setattr(s, k, v)


@pytest.fixture()
def bare_root():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    for h in handlers:
        root.removeHandler(h)
    try:
        yield root
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in handlers:
            root.addHandler(h)
        root.setLevel(level)


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="versioned-greeter",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_includes_payload() -> None:
    line = JsonFormatter().format(
        _record("greet_decode_failed", payload={"version": "v1", "adapter": "v1"})
    )
    data = json.loads(line)
    assert data["level"] == "WARNING"
    assert data["logger"] == "versioned-greeter"
    assert data["msg"] == "greet_decode_failed"
    assert data["payload"] == {"version": "v1", "adapter": "v1"}
    assert data["ts"].endswith("Z")


def test_json_formatter_skips_non_dict_payload() -> None:
    data = json.loads(JsonFormatter().format(_record("x", payload="nope")))
    assert "payload" not in data


def test_project_logger_name() -> None:
    assert get_project_logger().name == "versioned-greeter"


def test_text_format_uses_plain_formatter(log_settings) -> None:
    log_settings.log_format = "text"
    formatter = _build_formatter()
    assert not isinstance(formatter, JsonFormatter)
    assert "greet_decode_failed" in formatter.format(_record("greet_decode_failed"))


def test_json_format_is_default(log_settings) -> None:
    log_settings.log_format = "json"
    assert isinstance(_build_formatter(), JsonFormatter)


def test_setup_logging_is_idempotent(log_settings, bare_root) -> None:
    log_settings.log_level = "debug"

    setup_logging()
    setup_logging()

    assert len(bare_root.handlers) == 1
    assert bare_root.level == logging.DEBUG
