"""Structured logging configuration for the compiler.

This module provides a structured logging setup using Python's standard
logging module with optional JSON formatting for machine consumption.
"""

import json
import logging
import logging.config
import sys
from datetime import datetime
from typing import Any, Dict, Optional

from blocklist.app.core.config import settings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON objects, one per line, so batch runs can be
    collected by log aggregation tooling.

    Attributes:
        fields: List of fields to include in JSON output
    """

    # Standard fields always included
    STANDARD_FIELDS = ["name", "levelname", "message", "timestamp"]

    # Contextual fields for compile/check runs
    CONTEXT_FIELDS = [
        "command",       # compile | check
        "target",        # uBlackList | uBlockOrigin
        "input_file",    # Entry source path
        "output_file",   # Compiled output path
        "features",      # Requested feature flags
        "entry_count",   # Number of parsed entries
        "header_count",  # Number of header attributes
    ]

    def __init__(
        self,
        fields: Optional[list] = None,
        datefmt: Optional[str] = None,
    ):
        """Initialize JSON formatter.

        Args:
            fields: Custom fields to include (defaults to all standard + context)
            datefmt: Date format string (ISO8601 by default)
        """
        super().__init__(datefmt=datefmt)
        self.fields = fields or (self.STANDARD_FIELDS + self.CONTEXT_FIELDS)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string representation of the log record
        """
        log_data: Dict[str, Any] = {}

        record.message = record.getMessage()

        log_data["timestamp"] = datetime.now().astimezone().isoformat()
        log_data["level"] = record.levelname
        log_data["logger"] = record.name
        log_data["message"] = record.message

        log_data["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }

        for field in self.CONTEXT_FIELDS:
            if hasattr(record, field):
                value = getattr(record, field)
                if value is not None:
                    log_data[field] = value

        # Anything else passed through extra=
        for key, value in record.__dict__.items():
            if key not in (
                "name", "msg", "args", "levelname", "levelno", "pathname",
                "filename", "module", "exc_info", "exc_text", "stack_info",
                "lineno", "funcName", "created", "msecs", "relativeCreated",
                "thread", "threadName", "processName", "process", "message",
                "asctime", "timestamp", "logger", "level", "source",
                "taskName",
            ):
                if key not in self.CONTEXT_FIELDS:
                    log_data.setdefault("extra", {})[key] = value

        if record.exc_info and record.exc_info != (None, None, None):
            import traceback
            log_data["exception"] = traceback.format_exception(*record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


class ContextFilter(logging.Filter):
    """Logging filter that adds contextual fields to log records.

    Adds ``None`` defaults for the compile/check context fields so format
    strings referencing them never fail.
    """

    CONTEXT_DEFAULTS = {
        "command": None,
        "target": None,
        "input_file": None,
        "output_file": None,
        "features": None,
        "entry_count": None,
        "header_count": None,
    }

    def filter(self, record: logging.LogRecord) -> bool:
        for field, default in self.CONTEXT_DEFAULTS.items():
            if not hasattr(record, field):
                setattr(record, field, default)
        return True


def get_logging_config(level: Optional[str] = None) -> Dict[str, Any]:
    """Get logging configuration dictionary.

    Args:
        level: Overrides ``settings.log_level`` when given

    Returns:
        Logging configuration dict compatible with logging.config.dictConfig
    """
    log_format = getattr(settings, "log_format", "text").lower()
    log_level = (level or getattr(settings, "log_level", "WARNING")).upper()

    # Verbose echo is plain text; JSON is for collecting batch runs
    formatters = {"standard": {"format": "%(message)s"}}
    default_formatter = "standard"
    if log_format == "json":
        formatters["json"] = {"()": "blocklist.app.core.logging.JSONFormatter"}
        default_formatter = "json"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": default_formatter,
            "stream": sys.stdout,
            "filters": ["context"],
        },
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": {
            "context": {
                "()": "blocklist.app.core.logging.ContextFilter",
            },
        },
        "handlers": handlers,
        "loggers": {
            "blocklist": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging for one compiler invocation."""
    logging.config.dictConfig(get_logging_config(level))


def get_logger(name: str = "blocklist") -> logging.Logger:
    """Get a logger instance with the specified name.

    Args:
        name: Logger name, defaults to "blocklist"

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_log_context(
    command: Optional[str] = None,
    target: Optional[str] = None,
    input_file: Optional[str] = None,
    output_file: Optional[str] = None,
    **extra
) -> Dict[str, Any]:
    """Create a log context dictionary for use with extra parameter.

    Args:
        command: Subcommand name
        target: Compile target dialect
        input_file: Entry source path
        output_file: Compiled output path
        **extra: Additional custom fields

    Returns:
        Dictionary suitable for passing as extra= parameter to logging calls

    Example:
        >>> logger.info(
        ...     "loaded %d entries",
        ...     12,
        ...     extra=get_log_context(command="compile", entry_count=12),
        ... )
    """
    context = {
        "command": command,
        "target": target,
        "input_file": input_file,
        "output_file": output_file,
    }
    context.update(extra)
    return {k: v for k, v in context.items() if v is not None}
