"""Tests for structured logging configuration."""

import json
import logging
from unittest.mock import patch

from blocklist.app.core.logging import (
    ContextFilter,
    JSONFormatter,
    get_log_context,
    get_logger,
    get_logging_config,
    setup_logging,
)


def _record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Test JSON formatter for structured logging."""

    def test_basic_json_format(self):
        """Test basic JSON formatting."""
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["source"]["file"] == "test.py"
        assert data["source"]["line"] == 1

    def test_json_format_with_context(self):
        """Test JSON formatting with compile context fields."""
        record = _record("loaded 3 entries")
        record.command = "compile"
        record.target = "uBlockOrigin"
        record.entry_count = 3
        record.features = ["Base"]

        data = json.loads(JSONFormatter().format(record))

        assert data["command"] == "compile"
        assert data["target"] == "uBlockOrigin"
        assert data["entry_count"] == 3
        assert data["features"] == ["Base"]

    def test_json_format_skips_empty_context(self):
        """Test context fields defaulted to None are left out."""
        record = _record()
        ContextFilter().filter(record)

        data = json.loads(JSONFormatter().format(record))

        assert "command" not in data
        assert "extra" not in data

    def test_json_format_with_extra_fields(self):
        """Test JSON formatting with extra custom fields."""
        record = _record()
        record.custom_field = "custom_value"

        data = json.loads(JSONFormatter().format(record))

        assert data["extra"]["custom_field"] == "custom_value"

    def test_json_format_with_exception(self):
        """Test JSON formatting with exception info."""
        import sys

        try:
            raise ValueError("Test error")
        except ValueError:
            record = _record("Error occurred", logging.ERROR, sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        exception_text = "".join(data["exception"])
        assert "ValueError" in exception_text
        assert "Test error" in exception_text


class TestContextFilter:
    """Test context filter for adding default fields."""

    def test_adds_default_fields(self):
        record = _record()

        assert ContextFilter().filter(record) is True
        for field in ContextFilter.CONTEXT_DEFAULTS:
            assert getattr(record, field) is None

    def test_preserves_existing_values(self):
        record = _record()
        record.target = "uBlackList"

        ContextFilter().filter(record)

        assert record.target == "uBlackList"


class TestGetLoggingConfig:
    """Test logging configuration generation."""

    def test_default_text_format(self):
        with patch("blocklist.app.core.logging.settings") as mock_settings:
            mock_settings.log_format = "text"
            mock_settings.log_level = "WARNING"

            config = get_logging_config()

        assert "json" not in config["formatters"]
        assert config["handlers"]["console"]["formatter"] == "standard"
        assert config["loggers"]["blocklist"]["level"] == "WARNING"

    def test_debug_level(self):
        with patch("blocklist.app.core.logging.settings") as mock_settings:
            mock_settings.log_format = "text"
            mock_settings.log_level = "DEBUG"

            config = get_logging_config()

        assert config["formatters"] == {"standard": {"format": "%(message)s"}}
        assert config["handlers"]["console"]["level"] == "DEBUG"

    def test_json_format(self):
        with patch("blocklist.app.core.logging.settings") as mock_settings:
            mock_settings.log_format = "json"
            mock_settings.log_level = "WARNING"

            config = get_logging_config()

        assert config["handlers"]["console"]["formatter"] == "json"

    def test_level_override(self):
        """Test an explicit level wins over settings, as --verbose does."""
        with patch("blocklist.app.core.logging.settings") as mock_settings:
            mock_settings.log_format = "text"
            mock_settings.log_level = "WARNING"

            config = get_logging_config("info")

        assert config["handlers"]["console"]["level"] == "INFO"
        assert config["loggers"]["blocklist"]["level"] == "INFO"

    def test_context_filter_added(self):
        config = get_logging_config()

        assert "context" in config["filters"]
        assert "context" in config["handlers"]["console"]["filters"]


class TestLoggerHelpers:
    """Test get_logger and get_log_context."""

    def test_get_logger_default_name(self):
        assert get_logger().name == "blocklist"

    def test_context_filters_none(self):
        context = get_log_context(command="check", target=None, entry_count=4)

        assert context == {"command": "check", "entry_count": 4}


def test_json_logging_output(capsys):
    """Test actual JSON logging output."""
    with patch("blocklist.app.core.logging.settings") as mock_settings:
        mock_settings.log_format = "json"
        mock_settings.log_level = "INFO"

        setup_logging()
        get_logger("blocklist.integration").info(
            "Integration test",
            extra=get_log_context(command="compile", target="uBlackList"),
        )

    data = json.loads(capsys.readouterr().out.strip())
    setup_logging()

    assert data["level"] == "INFO"
    assert data["logger"] == "blocklist.integration"
    assert data["command"] == "compile"
    assert data["target"] == "uBlackList"
