"""
lazylog exception hierarchy.

Exception Hierarchy:
    LazyLogError (base)
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError

Failures raised by deferred message producers are never surfaced through this
hierarchy; they are turned into log entries by lazylog.messages.
"""

from .base import ExceptionContext, LazyLogError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

__all__ = [
    "ExceptionContext",
    "LazyLogError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
