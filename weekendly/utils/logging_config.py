"""
Logging configuration for Weekendly.

Console logs are colored for humans (or JSON with ``json_logs``) and always
go to stderr so ``--format json`` output on stdout stays parseable. The
optional log file is always JSON lines, rotated by size.
"""

import copy
import json
import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from weekendly.config import VALID_LOG_LEVELS

LOG_FILE_MAX_BYTES = 1048576  # 1MB
LOG_FILE_BACKUP_COUNT = 3

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"

# Whatever a bare LogRecord carries; anything else arrived through ``extra``.
RESERVED_RECORD_FIELDS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys: timestamp, level, logger, message, module, function, line, plus
    exception when present and every field passed via ``extra`` (for
    example the ``component`` that ``get_logger`` attaches).
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in RESERVED_RECORD_FIELDS and not key.startswith("_")
        )

        # Dates in ``extra`` (window bounds, holiday dates) become ISO strings
        return json.dumps(payload, default=str)


class ColoredFormatter(logging.Formatter):
    """Terminal formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        # Color a copy; other handlers share the original record
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def _resolve_level(level: str) -> int:
    name = (level or "").strip().upper()
    return getattr(logging, name) if name in VALID_LOG_LEVELS else logging.INFO


def _console_handler(json_format: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    return handler


def _file_handler(log_file: str, max_bytes: int, backup_count: int) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
    console_output: bool = True,
    max_bytes: int = LOG_FILE_MAX_BYTES,
    backup_count: int = LOG_FILE_BACKUP_COUNT,
) -> None:
    """
    Configure the root logger from settings.

    Replaces any handlers already installed, so calling it twice (once per
    CLI invocation in tests) doesn't duplicate output.

    Args:
        level: Log level name; unknown names fall back to INFO
        json_format: Emit JSON instead of colored text on the console
        log_file: Optional path of a rotating JSON-lines log file
        console_output: Attach the stderr handler
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep

    Examples:
        >>> setup_logging(level="DEBUG")
        >>> setup_logging(log_file="logs/weekendly.log", console_output=False)
    """
    numeric_level = _resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if console_output:
        root_logger.addHandler(_console_handler(json_format))

    if log_file:
        root_logger.addHandler(_file_handler(log_file, max_bytes, backup_count))

    logging.getLogger(__name__).debug(
        f"Logging configured: level={logging.getLevelName(numeric_level)}, "
        f"json_format={json_format}, log_file={log_file}, console_output={console_output}"
    )


def get_logger(name: str, extra_fields: Dict[str, Any] | None = None) -> logging.LoggerAdapter:
    """
    Get a logger that stamps ``extra_fields`` onto every record.

    Examples:
        >>> logger = get_logger(__name__, {"component": "holiday_service"})
        >>> logger.debug("Scanning window")
        # JSON output includes "component": "holiday_service"
    """
    return logging.LoggerAdapter(logging.getLogger(name), extra_fields or {})
