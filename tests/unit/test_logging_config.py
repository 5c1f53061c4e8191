"""
Unit tests for logging_config module.
"""

import json
import logging
import logging.handlers
import sys
from datetime import date

from weekendly.utils.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    get_logger,
    setup_logging,
)


def make_record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Tests for JSONFormatter class."""

    def test_json_formatter_basic(self):
        """Test basic JSON formatting."""
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["logger"] == "test"
        assert data["module"] == "test"
        assert data["line"] == 10
        assert "T" in data["timestamp"]

    def test_json_formatter_with_exception(self):
        """Test JSON formatting with exception."""
        try:
            raise ValueError("Test error")
        except ValueError:
            record = make_record("Error occurred", logging.ERROR, sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_json_formatter_extra_fields(self):
        """Test that extra fields are included and dates stringified."""
        record = make_record()
        record.component = "detector"
        record.window_start = date(2025, 8, 1)

        data = json.loads(JSONFormatter().format(record))

        assert data["component"] == "detector"
        assert data["window_start"] == "2025-08-01"


class TestColoredFormatter:
    """Tests for ColoredFormatter class."""

    def test_colored_formatter_adds_color(self):
        """Test that the level name is colored."""
        result = ColoredFormatter(fmt="%(levelname)s - %(message)s").format(make_record())
        assert "\033[32mINFO\033[0m" in result

    def test_colored_formatter_preserves_levelname(self):
        """Test that original levelname is preserved."""
        record = make_record()
        ColoredFormatter(fmt="%(levelname)s").format(record)
        assert record.levelname == "INFO"

    def test_colored_formatter_unknown_level(self):
        """Test that custom level names are left uncolored."""
        record = make_record(level=25)
        record.levelname = "NOTICE"
        assert ColoredFormatter(fmt="%(levelname)s").format(record) == "NOTICE"


class TestSetupLogging:
    """Tests for setup_logging function."""

    def teardown_method(self):
        """Clean up logging handlers after each test."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)

    def test_setup_logging_basic(self):
        """Test basic logging setup."""
        setup_logging(level="INFO")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1

    def test_setup_logging_invalid_level(self):
        """Test with invalid level (should default to INFO)."""
        setup_logging(level="INVALID")
        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self):
        """Test JSON console format."""
        setup_logging(level="INFO", json_format=True)
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_setup_logging_no_console(self):
        """Test without console output."""
        setup_logging(level="INFO", console_output=False)
        assert logging.getLogger().handlers == []

    def test_setup_logging_no_console_at_debug(self):
        """Test that the setup message itself doesn't install a fallback handler."""
        setup_logging(level="DEBUG", console_output=False)
        logging.getLogger("weekendly.test").debug("Scanning window")
        assert logging.getLogger().handlers == []

    def test_setup_logging_console_on_stderr(self):
        """Test that console logs go to stderr, keeping stdout for command output."""
        setup_logging(level="warning")

        handler = logging.getLogger().handlers[0]
        assert handler.stream is sys.stderr
        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_with_file(self, tmp_path):
        """Test logging to a rotating JSON file."""
        log_file = tmp_path / "logs" / "weekendly.log"

        setup_logging(level="INFO", log_file=str(log_file), console_output=False, max_bytes=1024)
        logging.getLogger("weekendly.test").info("Long weekend found")

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        assert handler.maxBytes == 1024
        handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "Long weekend found"

    def test_setup_logging_clears_handlers(self):
        """Test that existing handlers are replaced."""
        root_logger = logging.getLogger()
        dummy = logging.NullHandler()
        root_logger.addHandler(dummy)

        setup_logging(level="INFO")

        assert dummy not in root_logger.handlers


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_extra_fields(self):
        """Test getting logger with extra fields."""
        logger = get_logger(__name__, {"component": "holiday_service"})

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra["component"] == "holiday_service"

    def test_get_logger_no_extra_fields(self):
        """Test getting logger without extra fields."""
        assert get_logger(__name__).extra == {}
