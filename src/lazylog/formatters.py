"""
Log formatters for the stdlib backend.

Provides a console pattern showing level, logger name and marker, structured
JSON output, and Rich terminal output when rich is installed.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

try:
    from rich.console import Console
    from rich.logging import RichHandler

    rich_available = True
except ImportError:
    rich_available = False

CONSOLE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s %(marker)s - %(message)s"
CONSOLE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def marker_name(record: logging.LogRecord) -> str:
    marker = getattr(record, "marker", None)
    return marker.name if marker is not None else ""


class MarkerFormatter(logging.Formatter):
    """Formatter accepting ``%(marker)s`` for records with or without a marker."""

    def format(self, record: logging.LogRecord) -> str:
        original = getattr(record, "marker", None)
        record.marker = marker_name(record)
        try:
            return super().format(record)
        finally:
            record.marker = original


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str = "lazylog", version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.thread,
            "thread_name": record.threadName,
        }

        marker = marker_name(record)
        if marker:
            log_entry["marker"] = marker

        context = getattr(record, "context", None)
        if context:
            log_entry["context"] = context

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


def create_console_formatter() -> logging.Formatter:
    """Create a console formatter for human-readable output."""
    return MarkerFormatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)


def create_rich_handler() -> logging.Handler:
    """Create a Rich handler for enhanced terminal output."""
    if not rich_available:
        raise ImportError("Rich library not available. Install with: pip install lazylog[rich]")

    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )


def create_structured_formatter(
    service_name: str = "lazylog", version: str = "unknown"
) -> StructuredFormatter:
    """Create a structured JSON formatter."""
    return StructuredFormatter(service_name, version)
