"""
Diagnostic logging context.

Key/value pairs pushed with with_logging_context are visible to every record
emitted inside the block on the same thread or asyncio task. ContextFilter
copies them onto records as ``record.context`` so formatters can print them.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Mapping, Optional

_context: ContextVar[Dict[str, Any]] = ContextVar("lazylog_context", default={})


def get_logging_context() -> Dict[str, Any]:
    """Copy of the current context."""
    return dict(_context.get())


@contextmanager
def with_logging_context(values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Iterator[Dict[str, Any]]:
    """Add values to the logging context for the duration of the block.

    Keys mapped to None are removed for the block. The previous context is
    restored on exit, whether or not the block raised.
    """
    merged = dict(_context.get())
    for key, value in {**(values or {}), **kwargs}.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    token = _context.set(merged)
    try:
        yield dict(merged)
    finally:
        _context.reset(token)


class ContextFilter(logging.Filter):
    """Attach the current logging context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_logging_context()
        return True
