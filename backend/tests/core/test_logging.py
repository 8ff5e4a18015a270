"""
Tests for core/logging module

Formatters, secret redaction, correlation context and the LogTimer
context manager.
"""

import json
import logging
import sys
from unittest.mock import MagicMock

import pytest

from app.core.logging import (
    StructuredFormatter,
    DevelopmentFormatter,
    LoggerAdapter,
    setup_logging,
    get_logger,
    set_request_id,
    set_project_id,
    clear_context,
    LogTimer,
    request_id_var,
    project_id_var,
)


def _record(msg="Test message", level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord(
        name="test.module",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test suite for StructuredFormatter"""

    def test_format_basic_log(self):
        """Basic record becomes one JSON object"""
        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert parsed["logger"] == "test.module"
        assert parsed["line"] == 42
        assert "timestamp" in parsed
        assert "extra" not in parsed

    def test_format_with_extra_fields(self):
        """Fields passed through extra= land under 'extra'"""
        parsed = json.loads(StructuredFormatter().format(
            _record(component="json2video", status_code=201)
        ))

        assert parsed["extra"] == {"component": "json2video", "status_code": 201}

    def test_sensitive_extra_fields_are_redacted(self):
        """Keys that look like credentials never reach the log output"""
        parsed = json.loads(StructuredFormatter().format(
            _record(api_key="sk-live-1234567890", headers={"x-api-key": "abc", "accept": "json"})
        ))

        assert parsed["extra"]["api_key"] == "***REDACTED***"
        assert parsed["extra"]["headers"]["x-api-key"] == "***REDACTED***"
        assert parsed["extra"]["headers"]["accept"] == "json"

    def test_correlation_ids_are_included(self):
        """Request and project ids from context appear in every record"""
        set_request_id("req-1")
        set_project_id("proj-1")

        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["request_id"] == "req-1"
        assert parsed["project_id"] == "proj-1"

    def test_non_serializable_extra_falls_back_to_str(self):
        """Objects without a JSON form are stringified"""
        parsed = json.loads(StructuredFormatter().format(_record(payload=object())))

        assert parsed["extra"]["payload"].startswith("<object object")

    def test_format_with_exception(self):
        """Exception info is rendered as type, message and traceback"""
        try:
            raise ValueError("Test exception")
        except ValueError:
            exc_info = sys.exc_info()

        parsed = json.loads(StructuredFormatter().format(
            _record("Error occurred", level=logging.ERROR, exc_info=exc_info)
        ))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "Test exception"
        assert "Traceback" in parsed["exception"]["traceback"]


class TestDevelopmentFormatter:
    """Test suite for DevelopmentFormatter"""

    def test_format_basic_log(self):
        result = DevelopmentFormatter().format(_record())

        assert "Test message" in result
        assert "INFO" in result

    def test_format_shows_correlation_context(self):
        set_request_id("abcdef1234567890")
        set_project_id("project-xyz")

        result = DevelopmentFormatter().format(_record())

        assert "req:abcdef12" in result
        assert "project:project-xyz" in result

    def test_format_different_levels(self):
        formatter = DevelopmentFormatter()

        for level_name, level in [
            ("DEBUG", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
        ]:
            result = formatter.format(_record(f"{level_name} message", level=level))
            assert f"{level_name} message" in result


class TestLoggerAdapter:
    """Test suite for LoggerAdapter"""

    def test_process_adds_bound_context(self):
        adapter = LoggerAdapter(MagicMock(), extra={"component": "word_generator"})

        msg, kwargs = adapter.process("Test message", {})

        assert msg == "Test message"
        assert kwargs["extra"] == {"component": "word_generator"}

    def test_call_extra_is_merged_with_bound_context(self):
        adapter = LoggerAdapter(MagicMock(), extra={"component": "word_generator"})

        _, kwargs = adapter.process("Test message", {"extra": {"topic": "animals"}})

        assert kwargs["extra"] == {"component": "word_generator", "topic": "animals"}


class TestSetupLogging:
    """Test suite for setup_logging function"""

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_setup_logging_with_level(self):
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_json_mode(self):
        setup_logging(use_json=True)

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, StructuredFormatter)

    def test_setup_logging_file_handler_is_json(self, tmp_path):
        log_file = tmp_path / "logs" / "app.jsonl"

        setup_logging(log_file=log_file)

        formatters = [type(h.formatter) for h in logging.getLogger().handlers]
        assert formatters == [DevelopmentFormatter, StructuredFormatter]
        assert log_file.parent.exists()
        setup_logging()


class TestGetLogger:
    """Test suite for get_logger function"""

    def test_get_logger_with_extra(self):
        logger = get_logger("test.module", component="test_component")

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"component": "test_component"}


class TestContextVariables:
    """Test suite for context variable functions"""

    def test_set_request_id(self):
        set_request_id("req-123")

        assert request_id_var.get() == "req-123"

    def test_set_project_id(self):
        set_project_id("proj-456")

        assert project_id_var.get() == "proj-456"

    def test_clear_context(self):
        set_request_id("req-123")
        set_project_id("proj-456")

        clear_context()

        assert request_id_var.get() is None
        assert project_id_var.get() is None


class TestLogTimer:
    """Test suite for LogTimer context manager"""

    def test_log_timer_records_duration(self):
        mock_logger = MagicMock()

        with LogTimer(mock_logger, "test_operation") as timer:
            pass

        assert timer.duration is not None and timer.duration >= 0
        completed = mock_logger.log.call_args
        assert "Completed: test_operation" in completed[0][1]
        assert "duration_seconds" in completed[1]["extra"]

    def test_log_timer_with_exception(self):
        mock_logger = MagicMock()

        with pytest.raises(ValueError):
            with LogTimer(mock_logger, "failing_operation"):
                raise ValueError("Test error")

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["extra"]["error"] == "Test error"

    def test_log_timer_custom_level(self):
        mock_logger = MagicMock()

        with LogTimer(mock_logger, "debug_operation", level=logging.DEBUG):
            pass

        assert mock_logger.log.call_args[0][0] == logging.DEBUG
