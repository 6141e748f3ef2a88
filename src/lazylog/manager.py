"""
Centralized logging configuration and management.

Provides the LoggingManager singleton that wires handlers onto the root
stdlib logger and hands out LazyLogger instances.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from .config import LoggingConfig
from .context import ContextFilter
from .formatters import (
    MarkerFormatter,
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)
from .loggers import LazyLogger, get_logger


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Configure the logging backend.

        The new handlers are built first. The root logger and the stored
        config are left as they were if any of them cannot be created.
        """
        handlers: List[logging.Handler] = []
        try:
            for output in config.output:
                if output == "console":
                    handlers.append(self._create_console_handler(config))
                elif output == "file":
                    handlers.append(self._create_file_handler(config))
        except Exception:
            for handler in handlers:
                handler.close()
            raise

        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        for handler in self.handlers:
            handler.close()
        self.handlers.clear()

        root_logger.setLevel(config.level)
        for handler in handlers:
            self._install(handler, config)
        self.config = config

    def _create_console_handler(self, config: LoggingConfig) -> logging.Handler:
        """Create console handler."""
        if config.format_type == "rich":
            handler = create_rich_handler()
            handler.setFormatter(MarkerFormatter("%(marker)s %(message)s"))
        elif config.format_type == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:  # console format
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(create_console_formatter())

        return handler

    def _create_file_handler(self, config: LoggingConfig) -> logging.Handler:
        """Create file handler with rotation."""
        if not config.file_path:
            config.file_path = Path("logs/lazylog.log")

        config.file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )

        if config.format_type == "json":
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:
            handler.setFormatter(create_console_formatter())

        return handler

    def _install(self, handler: logging.Handler, config: LoggingConfig):
        handler.setLevel(config.level)
        handler.addFilter(ContextFilter())
        logging.getLogger().addHandler(handler)
        self.handlers.append(handler)

    def get_logger(self, name: str) -> LazyLogger:
        """Get a LazyLogger for name."""
        return get_logger(name)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging backend."""
    logging_manager.configure(config)
