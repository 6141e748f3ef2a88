"""
Configuration-related exceptions.

Raised while building the logging backend configuration from code, TOML files
or environment variables.
"""

from typing import Any, List

from .base import ExceptionContext, LazyLogError


class ConfigurationError(LazyLogError):
    """Base class for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        help_text = f"Please check the configuration for '{field}' and ensure it matches the expected format: {expected}"
        context = ExceptionContext(
            help_text=help_text,
            error_code="CONFIG_INVALID",
            context={"field": field},
        )
        super().__init__(message, context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        context = ExceptionContext(
            help_text="Please check the [logging] table of your configuration file and the LAZYLOG_* environment variables",
            error_code="CONFIG_VALIDATION",
        )
        super().__init__(message, context)
