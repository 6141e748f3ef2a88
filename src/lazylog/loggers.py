"""
Lazy logger handle wrapping one stdlib logger.

LazyLogger exposes one method per severity. Each accepts either a deferred
message producer, evaluated only when the level is enabled, or a ``{}``
template with positional arguments that the backend substitutes when the
record is formatted:

    log.debug(lambda: f"state: {expensive_dump()}")
    log.warn(lambda: "retrying", exc=error, marker=get_marker("NET"))
    log.info("Message: {}", value)
"""

import logging
from typing import Any, Optional

from .levels import Level
from .markers import CATCHING, ENTRY, EXIT, THROWING, Marker
from .messages import BraceMessage, count_placeholders, to_string_safe

_MISSING = object()


class LazyLogger:
    """Level-gated facade over a ``logging.Logger``."""

    # caller -> level method -> _dispatch -> _emit -> Logger.log
    _STACKLEVEL = 4

    def __init__(self, underlying: logging.Logger):
        self._logger = underlying

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def underlying_logger(self) -> logging.Logger:
        """The stdlib logger receiving the records."""
        return self._logger

    def is_enabled(self, level: int, marker: Optional[Marker] = None) -> bool:
        """Whether a record at level would be processed.

        The stdlib gates on level only; marker is accepted so that call sites
        read the same for every overload.
        """
        return self._logger.isEnabledFor(level)

    @property
    def is_trace_enabled(self) -> bool:
        return self.is_enabled(Level.TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self.is_enabled(Level.DEBUG)

    @property
    def is_info_enabled(self) -> bool:
        return self.is_enabled(Level.INFO)

    @property
    def is_warn_enabled(self) -> bool:
        return self.is_enabled(Level.WARN)

    @property
    def is_error_enabled(self) -> bool:
        return self.is_enabled(Level.ERROR)

    def trace(self, msg: Any, *args: Any, exc: Optional[BaseException] = None,
              marker: Optional[Marker] = None) -> None:
        self._dispatch(Level.TRACE, msg, args, exc, marker)

    def debug(self, msg: Any, *args: Any, exc: Optional[BaseException] = None,
              marker: Optional[Marker] = None) -> None:
        self._dispatch(Level.DEBUG, msg, args, exc, marker)

    def info(self, msg: Any, *args: Any, exc: Optional[BaseException] = None,
             marker: Optional[Marker] = None) -> None:
        self._dispatch(Level.INFO, msg, args, exc, marker)

    def warn(self, msg: Any, *args: Any, exc: Optional[BaseException] = None,
             marker: Optional[Marker] = None) -> None:
        self._dispatch(Level.WARN, msg, args, exc, marker)

    def error(self, msg: Any, *args: Any, exc: Optional[BaseException] = None,
              marker: Optional[Marker] = None) -> None:
        self._dispatch(Level.ERROR, msg, args, exc, marker)

    warning = warn

    def entry(self, *args: Any) -> None:
        """Trace method entry with its arguments."""
        template = "entry with (" + ", ".join("{}" for _ in args) + ")"
        self._dispatch(Level.TRACE, template, args, None, ENTRY)

    def exit(self, result: Any = _MISSING) -> Any:
        """Trace method exit, returning result unchanged."""
        if result is _MISSING:
            self._dispatch(Level.TRACE, "exit", (), None, EXIT)
            return None
        self._dispatch(Level.TRACE, "exit with ({})", (result,), None, EXIT)
        return result

    def throwing(self, exc: BaseException) -> BaseException:
        """Log an exception about to be raised and return it.

            raise log.throwing(ValueError("bad input"))
        """
        self._dispatch(Level.ERROR, "throwing", (), exc, THROWING)
        return exc

    def catching(self, exc: BaseException) -> None:
        """Log an exception that was caught and handled."""
        self._dispatch(Level.ERROR, "catching", (), exc, CATCHING)

    def _dispatch(self, level: int, msg: Any, args: tuple,
                  exc: Optional[BaseException], marker: Optional[Marker]) -> None:
        if callable(msg) and args:
            raise TypeError("deferred message producers take no positional arguments")
        if not self.is_enabled(level, marker):
            return

        if callable(msg):
            self._emit(level, to_string_safe(msg), exc, marker)
            return

        if (exc is None and args and isinstance(args[-1], BaseException)
                and isinstance(msg, str) and count_placeholders(msg) < len(args)):
            exc = args[-1]
            args = args[:-1]
        self._emit(level, BraceMessage(msg, args), exc, marker)

    def _emit(self, level: int, msg: Any, exc: Optional[BaseException],
              marker: Optional[Marker]) -> None:
        self._logger.log(
            level,
            msg,
            exc_info=exc,
            extra={"marker": marker},
            stacklevel=self._STACKLEVEL,
        )

    def __repr__(self) -> str:
        return f"<LazyLogger {self.name} ({logging.getLevelName(self._logger.getEffectiveLevel())})>"


def get_logger(name: str) -> LazyLogger:
    """Wrap the stdlib logger registered under name."""
    return LazyLogger(logging.getLogger(name))
