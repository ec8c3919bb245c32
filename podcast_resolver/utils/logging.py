"""Structured JSON logging shared by every resolver component."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# Third-party loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "mcp", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """
    Render log records as single-line JSON objects.

    Each line carries timestamp, level, component and message, plus the
    optional context, execution time, error type and exception text attached
    through ``log_with_context`` or ``extra``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON string.

        Args:
            record: Log record to format

        Returns:
            JSON string representation of log record
        """
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra context if present
        if hasattr(record, "context"):
            log_data["context"] = record.context

        # Add execution time if present
        if hasattr(record, "execution_time_ms"):
            log_data["execution_time_ms"] = record.execution_time_ms

        # Add resolver error kind if present
        if hasattr(record, "error_type"):
            log_data["error_type"] = record.error_type

        # default=str keeps odd context values (URLs, enums) from breaking a log line
        return json.dumps(log_data, default=str)


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging for the resolver.

    Replaces any handler on the root logger with a single stderr handler
    using ``JSONFormatter``. stdout stays free for the stdio MCP transport.

    Args:
        log_level: Logging level name (ERROR, WARNING, INFO, DEBUG)
    """
    # Convert string level to logging constant
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create stderr handler with JSON formatter
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter())

    root_logger.addHandler(handler)

    # Suppress noisy third-party loggers
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific component.

    Args:
        name: Component name (e.g., "RSSParser", "PodcastResolver")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    context: Optional[Dict[str, Any]] = None,
    execution_time_ms: Optional[float] = None,
    error_type: Optional[str] = None
) -> None:
    """
    Log message with additional structured fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, logging.ERROR, etc.)
        message: Log message
        context: Optional context dictionary
        execution_time_ms: Optional execution time in milliseconds
        error_type: Optional error kind (InvalidInput, NotFound, ...)
    """
    extra: Dict[str, Any] = {}

    if context:
        extra["context"] = context

    if execution_time_ms is not None:
        extra["execution_time_ms"] = execution_time_ms

    if error_type:
        extra["error_type"] = error_type

    logger.log(level, message, extra=extra)
