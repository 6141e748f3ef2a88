"""
Tests for LoggingConfig and level conversion.
"""

import logging
from pathlib import Path

import pytest

from lazylog.config import LoggingConfig, create_default_config
from lazylog.exceptions import InvalidConfigurationError
from lazylog.levels import TRACE, Level, to_level


@pytest.mark.unit
class TestLevels:
    """Test level ordering and conversion."""

    def test_ordering(self):
        assert Level.TRACE < Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR

    def test_trace_registered_with_stdlib(self):
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_values_match_stdlib(self):
        assert Level.WARN == logging.WARNING
        assert Level.ERROR == logging.ERROR

    @pytest.mark.parametrize("name,expected", [
        ("trace", TRACE),
        ("DEBUG", logging.DEBUG),
        (" info ", logging.INFO),
        ("WARN", logging.WARNING),
        ("warning", logging.WARNING),
        ("critical", logging.ERROR),
    ])
    def test_names(self, name, expected):
        assert to_level(name) == expected

    def test_integers_pass_through(self):
        assert to_level(25) == 25

    def test_unknown_name(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            to_level("LOUD")

        assert exc_info.value.field == "level"


@pytest.mark.unit
class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_initialization(self):
        config = LoggingConfig()

        assert config.level == logging.INFO
        assert config.format_type == "console"
        assert config.output == ["console"]
        assert config.file_path is None
        assert config.max_file_size == 10 * 1024 * 1024
        assert config.backup_count == 5
        assert config.service_name == "lazylog"
        assert config.version == "unknown"

    def test_level_string(self):
        assert LoggingConfig(level="TRACE").level == TRACE

    def test_multiple_outputs(self):
        assert LoggingConfig(output=["console", "file"]).output == ["console", "file"]

    def test_file_path_converted(self):
        assert LoggingConfig(file_path="/tmp/app.log").file_path == Path("/tmp/app.log")

    def test_invalid_format(self):
        with pytest.raises(InvalidConfigurationError):
            LoggingConfig(format_type="xml")

    def test_invalid_output(self):
        with pytest.raises(InvalidConfigurationError):
            LoggingConfig(output=["console", "syslog"])

    def test_create_default_config_independence(self):
        config1 = create_default_config()
        config2 = create_default_config()

        assert config1 is not config2
        config1.service_name = "modified"
        assert config2.service_name == "lazylog"
