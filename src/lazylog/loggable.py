"""
Ways for a class, an instance or a module to own a LazyLogger.

- ``Logging`` is placed in a class body and names the logger after the class
  declaring it. Subclasses inheriting the attribute share the declaring
  class's logger and name.
- ``NamedLogging`` is the same with an explicit name.
- ``Loggable`` is an instance mixin naming the logger after the runtime type.
- ``logger()`` names the logger after the code calling it.

    class Downloader:
        logger = Logging()

        def run(self):
            self.logger.info(lambda: f"downloading {self.url}")
"""

import inspect
import threading
from types import FrameType
from typing import Any, Optional

from .loggers import LazyLogger, get_logger
from .messages import strip_locals

DEFAULT_NAME = "root"

_instance_lock = threading.Lock()


def qualified_name(cls: type) -> str:
    """``module.QualName`` for a class."""
    parts = strip_locals(cls.__qualname__.split("."))
    if not parts:
        parts = [cls.__name__]
    return ".".join([cls.__module__] + parts)


def resolve_name(owner: Any) -> str:
    """Logger name for a string, a class or an instance."""
    if isinstance(owner, str):
        return owner
    if isinstance(owner, type):
        return qualified_name(owner)
    return qualified_name(type(owner))


def name_from_frame(frame: Optional[FrameType]) -> str:
    """Logger name for the declaration executing in frame.

    A class body resolves to the class, a method or nested function to the
    innermost enclosing class, and module-level code to the module.
    """
    if frame is None:
        return DEFAULT_NAME
    module = frame.f_globals.get("__name__", DEFAULT_NAME)

    namespace = frame.f_locals
    if "__module__" in namespace and "__qualname__" in namespace:
        parts = strip_locals(str(namespace["__qualname__"]).split("."))
        return ".".join([module] + parts)

    qualname = getattr(frame.f_code, "co_qualname", None)
    if not qualname or qualname == "<module>":
        return module
    parts = strip_locals(qualname.split(".")[:-1])
    return ".".join([module] + parts)


def logger(name: Optional[str] = None) -> LazyLogger:
    """Create a LazyLogger named name, or after the calling declaration.

    Called in a method, the name is the class defining that method, not the
    runtime type of ``self``.
    """
    if name is None:
        frame = inspect.currentframe()
        try:
            name = name_from_frame(frame.f_back if frame is not None else None)
        finally:
            del frame
    return get_logger(name)


class Logging:
    """Class-level logger owner.

    The handle is created on first access and reused afterwards. Without an
    explicit name the logger is named after the class whose body holds this
    object; outside a class body it falls back to the creating module.
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name
        self._owner_name: Optional[str] = None
        self._logger: Optional[LazyLogger] = None
        self._lock = threading.Lock()

        frame = inspect.currentframe()
        try:
            caller = frame.f_back if frame is not None else None
            while caller is not None and caller.f_code.co_name == "__init__" and \
                    isinstance(caller.f_locals.get("self"), Logging):
                caller = caller.f_back
            self._module = caller.f_globals.get("__name__", DEFAULT_NAME) if caller else DEFAULT_NAME
        finally:
            del frame

    def __set_name__(self, owner: type, attr: str) -> None:
        if self._owner_name is None:
            self._owner_name = qualified_name(owner)

    @property
    def name(self) -> str:
        return self._name or self._owner_name or self._module

    @property
    def logger(self) -> LazyLogger:
        if self._logger is None:
            with self._lock:
                if self._logger is None:
                    self._logger = get_logger(self.name)
        return self._logger

    def __get__(self, instance: Any, owner: Optional[type] = None) -> LazyLogger:
        return self.logger

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class NamedLogging(Logging):
    """Class-level logger owner with an explicit name."""

    def __init__(self, name: str):
        if not name:
            raise ValueError("NamedLogging requires a logger name")
        super().__init__(name)


class Loggable:
    """Mixin giving each instance a logger named after its runtime type.

    Set ``logger_name`` on a class to use an explicit name instead.
    """

    logger_name: Optional[str] = None

    @property
    def logger(self) -> LazyLogger:
        cached = self.__dict__.get("_lazylog_logger")
        if cached is None:
            with _instance_lock:
                cached = self.__dict__.get("_lazylog_logger")
                if cached is None:
                    cached = get_logger(self.logger_name or resolve_name(self))
                    self.__dict__["_lazylog_logger"] = cached
        return cached
