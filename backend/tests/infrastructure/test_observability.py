"""Structured logging — JSON formatter output."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 1, "Blog created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "app.test"
    assert out["message"] == "Blog created"
    assert "timestamp" in out


def test_json_formatter_includes_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(blog_id="b1", user_id="u1", unrelated="x"),
    ))
    assert out["blog_id"] == "b1"
    assert out["user_id"] == "u1"
    assert "unrelated" not in out


def test_setup_logging_installs_handler_and_level():
    previous_level = logging.root.level
    handler = setup_logging("WARNING", "json")
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
