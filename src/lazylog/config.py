"""
Logging configuration management.

Describes how the stdlib backend should be wired: level, output format and
destinations.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .exceptions import InvalidConfigurationError
from .levels import to_level

FORMAT_TYPES = ("console", "json", "rich")
OUTPUTS = ("console", "file")


class LoggingConfig:
    """Configuration for the logging backend."""

    def __init__(
        self,
        level: Union[str, int] = logging.INFO,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[
            str, List[str]
        ] = "console",  # "console", "file", ["console", "file"]
        file_path: Optional[Path] = None,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        service_name: str = "lazylog",
        version: str = "unknown",
    ):
        self.level = to_level(level)
        if format_type not in FORMAT_TYPES:
            raise InvalidConfigurationError(
                "format_type", format_type, ", ".join(FORMAT_TYPES)
            )
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        for destination in self.output:
            if destination not in OUTPUTS:
                raise InvalidConfigurationError("output", destination, ", ".join(OUTPUTS))
        self.file_path = Path(file_path) if file_path is not None else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version


def create_default_config() -> LoggingConfig:
    """Create a default logging configuration."""
    return LoggingConfig(
        level=logging.INFO,
        format_type="console",
        output="console",
        service_name="lazylog",
        version="unknown",
    )
