"""
Centralized logging for the bitevo engine.

This module provides console logging, optional structured JSON file logging,
and correlation IDs for tying every record of a run together.
"""

import functools
import logging
import logging.handlers
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import json


class CorrelationFilter(logging.Filter):
    """Adds correlation ID to log records for run tracing."""

    def __init__(self):
        super().__init__()
        self.correlation_id = None

    def filter(self, record):
        record.correlation_id = self.correlation_id or "-"
        return True

    def set_correlation_id(self, correlation_id: Optional[str]):
        """Set the correlation ID for the current context."""
        self.correlation_id = correlation_id


class StructuredFormatter(logging.Formatter):
    """Formats log records as structured JSON lines."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if getattr(record, 'correlation_id', "-") != "-":
            log_entry["correlation_id"] = record.correlation_id

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


# Shared by every handler installed by setup_logging
_correlation_filter = CorrelationFilter()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    enable_console: bool = True,
    enable_file: bool = False,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up centralized logging for bitevo.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_file_size: Maximum size of log file before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    root_logger.handlers.clear()

    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s'
    )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        console_handler.addFilter(_correlation_filter)
        root_logger.addHandler(console_handler)

    # File handler with rotation
    if enable_file:
        if log_file is None:
            log_file = Path("logs") / "bitevo.log"
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count
        )
        file_handler.setFormatter(StructuredFormatter())
        file_handler.addFilter(_correlation_filter)
        root_logger.addHandler(file_handler)

    logger = get_logger(__name__)
    logger.debug("Logging initialized", extra={
        "extra_fields": {
            "log_level": level,
            "log_file": str(log_file) if log_file else None,
            "enable_console": enable_console,
            "enable_file": enable_file
        }
    })

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger
    """
    return logging.getLogger(name)


def set_correlation_id(correlation_id: Optional[str]):
    """
    Set the correlation ID for the current logging context.

    Args:
        correlation_id: Unique identifier for tracking a run, or None to clear it
    """
    _correlation_filter.set_correlation_id(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Return the correlation ID currently attached to log records."""
    return _correlation_filter.correlation_id


def generate_correlation_id() -> str:
    """
    Generate a new correlation ID.

    Returns:
        Unique correlation ID string
    """
    return str(uuid.uuid4())


def log_with_correlation(func):
    """
    Decorator that tags every record logged during the call with a fresh
    correlation ID.

    Args:
        func: Function to decorate

    Returns:
        Decorated function
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        previous_id = get_correlation_id()
        correlation_id = generate_correlation_id()
        set_correlation_id(correlation_id)

        logger = get_logger(func.__module__)
        logger.debug(f"Starting {func.__name__}", extra={
            "extra_fields": {"function": func.__name__}
        })

        try:
            result = func(*args, **kwargs)
            logger.debug(f"Completed {func.__name__}", extra={
                "extra_fields": {
                    "function": func.__name__,
                    "result_type": type(result).__name__
                }
            })
            return result
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {str(e)}", extra={
                "extra_fields": {
                    "function": func.__name__,
                    "error_type": type(e).__name__
                }
            }, exc_info=True)
            raise
        finally:
            set_correlation_id(previous_id)

    return wrapper
