"""
Base exception classes for lazylog.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Guidance and details attached to a lazylog error."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)


class LazyLogError(Exception):
    """Base exception for all lazylog errors.

    Attributes:
        message: The error message
        help_text: How to correct the offending setting, if known
        error_code: Stable code such as ``CONFIG_INVALID``
        context: Details such as the offending field
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = dict(context.context)
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.help_text:
            parts.append(f"Help: {self.help_text}")
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items() if v is not None)
        if details:
            parts.append(f"Context: {details}")
        return "\n".join(parts)
