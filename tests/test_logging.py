"""Tests for structured logging helpers."""
import json
import logging

from pythonjsonlogger.json import JsonFormatter

from garden_calendar.shared.utils.logging import JSONFormatter, get_logger, log_context


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("garden_calendar.test", logging.WARNING, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_request_context_and_extra_fields():
    formatter = JSONFormatter()

    with log_context(request_id="req-1", user_id="user-1"):
        line = json.loads(formatter.format(_record(extra_fields={"entry_id": "tomato"})))

    assert line["message"] == "hello"
    assert line["level"] == "WARNING"
    assert line["request_id"] == "req-1"
    assert line["user_id"] == "user-1"
    assert line["extra"] == {"entry_id": "tomato"}


def test_log_context_generates_request_id():
    with log_context() as request_id:
        assert request_id


def test_structured_logger_passes_keyword_fields(caplog):
    logger = get_logger("garden_calendar.test.structured")

    with caplog.at_level(logging.INFO, logger="garden_calendar.test.structured"):
        logger.info("Scheduled", entry_id="tomato", planting_date="2025-03-15")

    assert caplog.records[-1].extra_fields == {"entry_id": "tomato", "planting_date": "2025-03-15"}


def test_json_formatter_builds_on_current_python_json_logger():
    assert issubclass(JSONFormatter, JsonFormatter)
