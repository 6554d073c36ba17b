"""
Logging configuration for the pull request title validator.

Configures structured logging based on environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
- LOG_FORMAT: json, detailed, simple

JSON is the default so the GitHub Actions log carries one record per line.
"""

import os
import sys
import logging
import json
from datetime import datetime
from typing import Optional

DEFAULT_LOG_FORMAT = "json"


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Fields passed as ``extra={"extra_data": {...}}`` are emitted under "extra".
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data, default=str)


class KeyValueFormatter(logging.Formatter):
    """Plain-text formatter that appends extra_data as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = getattr(record, "extra_data", None)
        if extra:
            pairs = " ".join(f"{key}={value!r}" for key, value in extra.items())
            line = f"{line} {pairs}"
        return line


def configure_logging(
    level: Optional[str] = None,
    format_style: Optional[str] = None
) -> None:
    """
    Configure logging for the validator.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to LOG_LEVEL env var or INFO.
        format_style: Format style (json, detailed, simple).
                     Defaults to LOG_FORMAT env var or json.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = (format_style or os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT)).lower()

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        sys.stderr.write(f"Warning: Invalid LOG_LEVEL '{log_level}', defaulting to INFO\n")
        log_level = "INFO"

    numeric_level = getattr(logging, log_level)

    if log_format == "json":
        formatter = JSONFormatter()
    elif log_format == "detailed":
        formatter = KeyValueFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:  # simple or unknown
        formatter = KeyValueFormatter(
            fmt="%(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging configured: level={log_level}, format={log_format}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
