"""
Standardized logging configuration for the shortcode/longcode library.

Provides:
- JSON-formatted logs for machine consumption
- Human-readable console logs for development
- Log categories for filtering
- Optional rotating log file

The library itself only ever calls ``logging.getLogger(__name__)``;
``setup_logging`` is for applications and the command line entry point.

Usage:
    >>> from config.logging_config import setup_logging, get_logger
    >>> setup_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.debug("Matched rule", extra={"rule": "barrier"})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path


# Log categories for filtering
class LogCategory:
    """Standard log categories."""

    PARSE = "[PARSE]"  # Shortcode grammar decisions
    LONGCODE = "[LONGCODE]"  # Token assembly
    CATALOG = "[CATALOG]"  # Template catalog loading
    REGISTRY = "[REGISTRY]"  # Instrument / contract-type data


class JsonFormatter(logging.Formatter):
    """
    JSON log formatter for structured logging.

    Example output:
        {"timestamp": "2024-01-01T12:00:00+00:00", "level": "DEBUG",
         "logger": "longcode.parser", "message": "[PARSE] Matched rule barrier",
         "rule": "barrier"}
    """

    # Standard LogRecord attributes to exclude from extra fields
    _EXCLUDED_ATTRS = frozenset([
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    ])

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Structured extras
        for key, value in record.__dict__.items():
            if key not in self._EXCLUDED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ColorFormatter(logging.Formatter):
    """
    Colored console formatter for human-readable output.

    Uses ANSI colors: DEBUG=gray, INFO=green, WARNING=yellow,
    ERROR=red, CRITICAL=bold red
    """

    COLORS = {
        "DEBUG": "\033[90m",  # Gray
        "INFO": "\033[92m",  # Green
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[1;91m",  # Bold Red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Format a copy so other handlers see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(colored)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | str | None = None,
    max_bytes: int = 10_000_000,
    backup_count: int = 5,
) -> Path | None:
    """
    Configure logging for an application using the library.

    Console output goes to stderr so that command line output on stdout
    stays machine readable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format for console output
        log_file: Optional path to a rotating log file (always JSON)
        max_bytes: Max file size before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)

    Returns:
        Path to log file if file logging enabled, None otherwise
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    if json_format:
        console_handler.setFormatter(JsonFormatter())
    else:
        console_handler.setFormatter(
            ColorFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    root_logger.addHandler(console_handler)

    actual_log_file: Path | None = None
    if log_file:
        actual_log_file = Path(log_file)
        actual_log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            actual_log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setFormatter(JsonFormatter())
        root_logger.addHandler(file_handler)

        root_logger.info(f"Logging initialized. Writing to {actual_log_file}")

    return actual_log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the standard configuration.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
