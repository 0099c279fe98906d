"""Logging configuration for the application."""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from starlette.requests import Request

LOGGER_NAME = "bookstore"

# Extra record attributes promoted to top-level keys in JSON output
STRUCTURED_FIELDS = ("error", "method", "endpoint")


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]
        message = super().format(record)
        fields = " ".join(
            f"{key}={getattr(record, key)}"
            for key in STRUCTURED_FIELDS
            if hasattr(record, key)
        )
        level = f"{color}{record.levelname}{reset}"
        message = message.replace(record.levelname, level, 1)
        return f"{message} {fields}" if fields else message


class JSONFormatter(logging.Formatter):
    """Formatter emitting one JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in STRUCTURED_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "console":
        handler.setFormatter(
            ColoredFormatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    else:
        handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class ErrorSink(Protocol):
    """
    Interface accepted by the application for failure diagnostics.
    """

    def error(self, message: str, exc: BaseException, request: Request) -> None:
        ...

    def fatal(self, message: str, exc: BaseException) -> None:
        ...


class RequestErrorLogger:
    """Diagnostic sink for request failures with structured fields.

    Handlers and exception handlers receive an instance through the
    application state rather than importing a module-level logger, so
    tests can swap in a recording implementation.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger("http")

    def error(self, message: str, exc: BaseException, request: Request) -> None:
        """Log a request failure with error, method and endpoint fields."""
        self.logger.error(
            message,
            extra={
                "error": str(exc),
                "method": request.method,
                "endpoint": request.url.path,
            },
        )

    def fatal(self, message: str, exc: BaseException) -> None:
        """Log an unrecoverable failure outside of any request."""
        self.logger.critical(message, extra={"error": str(exc)})
