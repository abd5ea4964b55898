"""Tests for environment settings and JSON log formatting."""

from __future__ import annotations

import json
import logging

from json_http_errors.config import Settings
from json_http_errors.logging import JsonFormatter


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("INCLUDE_STACK", "DEFAULT_FORMAT", "INDENT"):
            monkeypatch.delenv(f"JSON_HTTP_ERRORS_{name}", raising=False)
        s = Settings()
        assert s.include_stack is False
        assert s.default_format == "json"
        assert s.indent == 2

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("JSON_HTTP_ERRORS_INCLUDE_STACK", "1")
        monkeypatch.setenv("JSON_HTTP_ERRORS_DEFAULT_FORMAT", "table")
        monkeypatch.setenv("JSON_HTTP_ERRORS_INDENT", "4")
        s = Settings()
        assert s.include_stack is True
        assert s.default_format == "table"
        assert s.indent == 4

    def test_bad_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("JSON_HTTP_ERRORS_INCLUDE_STACK", "false")
        monkeypatch.setenv("JSON_HTTP_ERRORS_INDENT", "wide")
        s = Settings()
        assert s.include_stack is False
        assert s.indent == 2


def test_json_formatter_includes_extras() -> None:
    record = logging.LogRecord(
        name="json_http_errors.options",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="dropped_option",
        args=None,
        exc_info=None,
    )
    record.field = "title"

    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "json_http_errors.options"
    assert payload["message"] == "dropped_option"
    assert payload["field"] == "title"
    assert "status_code" not in payload


def test_configure_logging_is_idempotent(monkeypatch) -> None:
    from json_http_errors import logging as jlog

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setattr(jlog, "_CONFIGURED", False)
    try:
        jlog.configure_logging(level="debug")
        jlog.configure_logging(level="error")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
