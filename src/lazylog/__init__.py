"""
lazylog

Lazy logging facade over the standard library ``logging`` module.

Messages are passed as zero-argument callables and only built when the level
is enabled; a producer that raises is logged as
``Log message invocation failed: ...`` instead of propagating.

This package is organised as:
- loggers: LazyLogger, the level-gated handle around a stdlib logger
- loggable: class, instance and module level logger owners
- messages: failure-safe producer evaluation and ``{}`` templates
- markers: named markers and a marker filter
- context: diagnostic context attached to records
- config, settings, manager, formatters: backend wiring
"""

from .config import LoggingConfig
from .context import ContextFilter, get_logging_context, with_logging_context
from .exceptions import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    LazyLogError,
)
from .formatters import MarkerFormatter, StructuredFormatter
from .levels import TRACE, Level
from .loggable import Loggable, Logging, NamedLogging, logger, resolve_name
from .loggers import LazyLogger, get_logger
from .manager import LoggingManager, configure_logging, logging_manager
from .markers import Marker, MarkerFilter, get_marker
from .messages import BraceMessage, format_message, to_string_safe
from .settings import LoggingSettings, configure_from_settings, load_settings

__version__ = "0.1.0"

__all__ = [
    # Loggers
    "LazyLogger",
    "get_logger",
    "logger",
    "Logging",
    "NamedLogging",
    "Loggable",
    "resolve_name",
    # Levels and markers
    "Level",
    "TRACE",
    "Marker",
    "MarkerFilter",
    "get_marker",
    # Messages
    "to_string_safe",
    "BraceMessage",
    "format_message",
    # Context
    "with_logging_context",
    "get_logging_context",
    "ContextFilter",
    # Configuration
    "LoggingConfig",
    "LoggingSettings",
    "LoggingManager",
    "logging_manager",
    "configure_logging",
    "configure_from_settings",
    "load_settings",
    # Formatters
    "MarkerFormatter",
    "StructuredFormatter",
    # Errors
    "LazyLogError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
