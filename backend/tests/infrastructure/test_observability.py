"""Structured Logging — JSON formatter fields and log_call behavior.

Tests cover:
    - JSONFormatter emits base fields and only the extras that are set
    - Exceptions are rendered into the "exception" field
    - log_call returns results unchanged and logs unexpected errors at ERROR
"""

import json
import logging
import sys

import pytest

from client_registry.infrastructure.observability import JSONFormatter, log_call


def _record(msg="hello", exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "client_registry.test", logging.INFO, __file__, 1, msg, None, exc_info,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "client_registry.test"
    assert log["message"] == "hello"
    assert "timestamp" in log
    assert "error_code" not in log


def test_json_formatter_includes_set_extras():
    log = json.loads(JSONFormatter().format(
        _record(error_code="DUPLICATE_ID", path="/v1/clients/create"),
    ))
    assert log["error_code"] == "DUPLICATE_ID"
    assert log["path"] == "/v1/clients/create"


def test_json_formatter_renders_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record(exc_info=sys.exc_info())
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


class _Widget:
    @log_call("Test")
    def double(self, x):
        return x * 2

    @log_call("Test")
    def explode(self):
        raise RuntimeError("kaput")


def test_log_call_returns_result_and_preserves_name():
    assert _Widget().double(21) == 42
    assert _Widget.double.__name__ == "double"


def test_log_call_logs_unexpected_error_with_traceback(caplog):
    with caplog.at_level(logging.INFO, logger=__name__):
        with pytest.raises(RuntimeError, match="kaput"):
            _Widget().explode()
    failure = caplog.records[-1]
    assert failure.levelno == logging.ERROR
    assert failure.exc_info is not None
    assert failure.operation == "Test._Widget.explode"
