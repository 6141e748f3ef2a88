"""
Pytest configuration and shared fixtures for lazylog tests.
"""

import io
import logging
import os

import pytest

from lazylog import TRACE, MarkerFormatter
from lazylog.manager import LoggingManager

PATTERN = "%(levelname)-5s %(name)s %(marker)s - %(message)s"


class RecordingHandler(logging.Handler):
    """Handler keeping every record it receives."""

    def __init__(self):
        super().__init__(level=logging.NOTSET)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    def messages(self):
        return [record.getMessage() for record in self.records]


@pytest.fixture
def root_at_trace():
    """Open the root logger to every level for the duration of a test."""
    root = logging.getLogger()
    original_level = root.level
    root.setLevel(TRACE)
    yield root
    root.setLevel(original_level)


@pytest.fixture
def recorder(root_at_trace):
    """Collect records reaching the root logger."""
    handler = RecordingHandler()
    root_at_trace.addHandler(handler)
    yield handler
    root_at_trace.removeHandler(handler)


@pytest.fixture
def writer(root_at_trace):
    """Render records through a level/name/marker/message pattern into a buffer."""
    buffer = io.StringIO()
    handler = logging.StreamHandler(buffer)
    handler.setFormatter(MarkerFormatter(PATTERN))
    root_at_trace.addHandler(handler)
    yield buffer
    root_at_trace.removeHandler(handler)


@pytest.fixture
def fresh_manager():
    """A LoggingManager with its singleton state and root handlers restored afterwards."""
    original_instance = LoggingManager._instance
    original_initialized = LoggingManager._initialized
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level

    LoggingManager._instance = None
    LoggingManager._initialized = False
    manager = LoggingManager()
    yield manager

    for handler in manager.handlers:
        handler.close()
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)
    LoggingManager._instance = original_instance
    LoggingManager._initialized = original_initialized


@pytest.fixture
def clean_environment():
    """Ensure LAZYLOG_* environment variables do not leak into tests."""
    env_vars = ["LAZYLOG_LEVEL", "LAZYLOG_FORMAT", "LAZYLOG_OUTPUT", "LAZYLOG_FILE_PATH"]
    original_env = {}
    for var in env_vars:
        if var in os.environ:
            original_env[var] = os.environ.pop(var)

    yield

    for var in env_vars:
        os.environ.pop(var, None)
    os.environ.update(original_env)
