"""Structured Logging: verifies JSON output and handler setup."""

import json
import logging

from listkeeper.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "listkeeper.test", logging.ERROR, __file__, 1, "store failed", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "ERROR"
    assert out["logger"] == "listkeeper.test"
    assert out["message"] == "store failed"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(
            error_code="DATABASE_ERROR", error_category="database",
            item_id=7, unrelated="x",
        ),
    ))
    assert out["error_code"] == "DATABASE_ERROR"
    assert out["error_category"] == "database"
    assert out["item_id"] == 7
    assert "unrelated" not in out


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.INFO
