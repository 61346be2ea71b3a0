"""
Tests for the logging setup.
"""
import json
import logging
import sys

from calcapp.logging_setup import JSONFormatter


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        name="calcapp.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "calcapp.test"
        assert entry["msg"] == "hello"
        assert "ts" in entry

    def test_extra_fields_merged(self):
        entry = json.loads(JSONFormatter().format(
            _record(request_id="abc123", operation="divide")
        ))

        assert entry["request_id"] == "abc123"
        assert entry["operation"] == "divide"

    def test_builtin_attributes_excluded(self):
        entry = json.loads(JSONFormatter().format(_record()))

        assert "pathname" not in entry
        assert "lineno" not in entry

    def test_exception_included(self):
        try:
            raise ValueError("Cannot divide by zero")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        entry = json.loads(JSONFormatter().format(record))

        assert "ValueError: Cannot divide by zero" in entry["exc"]
