"""
Severity levels understood by lazylog.

The stdlib has no TRACE level, so one is registered below DEBUG when this
module is imported.
"""

import logging
from enum import IntEnum
from typing import Union

from .exceptions import InvalidConfigurationError

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class Level(IntEnum):
    """Ordered severities: TRACE < DEBUG < INFO < WARN < ERROR."""

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


_ALIASES = {
    "WARNING": Level.WARN,
    "FATAL": Level.ERROR,
    "CRITICAL": Level.ERROR,
}


def to_level(level: Union[str, int]) -> int:
    """Convert a level name or number to the stdlib integer value."""
    if isinstance(level, int):
        return int(level)
    name = str(level).strip().upper()
    if name in Level.__members__:
        return int(Level[name])
    if name in _ALIASES:
        return int(_ALIASES[name])
    raise InvalidConfigurationError(
        "level", level, "one of TRACE, DEBUG, INFO, WARN, ERROR"
    )
