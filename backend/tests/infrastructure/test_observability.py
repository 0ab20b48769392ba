"""Structured Logging - JSON formatter output and setup idempotence."""

import json
import logging

from orders_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "orders_api.test", logging.INFO, __file__, 1, "Order %s", (7,), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "orders_api.test"
    assert log["message"] == "Order 7"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(order_id=7, error_code="ORDER_NOT_FOUND"),
    ))
    assert log["order_id"] == 7
    assert log["error_code"] == "ORDER_NOT_FOUND"


def test_json_formatter_omits_missing_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "order_id" not in log


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    level = root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        root.removeHandler(second)
        root.setLevel(level)
