"""
Validated logging settings loaded from TOML files and environment variables.

Example configuration file:
    [logging]
    level = "DEBUG"
    format = "json"
    output = ["console", "file"]
    file_path = "logs/app.log"

Environment variables override the file:
    LAZYLOG_LEVEL, LAZYLOG_FORMAT, LAZYLOG_OUTPUT (comma separated),
    LAZYLOG_FILE_PATH
"""

import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import FORMAT_TYPES, OUTPUTS, LoggingConfig
from .exceptions import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .manager import configure_logging


class LogLevel(str, Enum):
    """Valid logging levels."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LoggingSettings(BaseModel):
    """Logging settings."""
    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        10 * 1024 * 1024,
        ge=1024,
        description="Maximum log file size in bytes"
    )
    backup_count: int = Field(
        5,
        ge=1,
        le=20,
        description="Number of backup log files to keep"
    )

    model_config = {
        "extra": "forbid",
        "str_strip_whitespace": True,
    }

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            if v == "WARNING":
                return "WARN"
        return v

    @field_validator('format')
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in FORMAT_TYPES:
            raise ValueError(f"format must be one of: {', '.join(FORMAT_TYPES)}")
        return v

    @field_validator('output')
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        for output in v:
            if output not in OUTPUTS:
                raise ValueError(f"output must contain only: {', '.join(OUTPUTS)}")
        return v

    def to_logging_config(self, service_name: str = "lazylog", version: str = "unknown") -> LoggingConfig:
        """Convert to the backend configuration."""
        return LoggingConfig(
            level=self.level.value,
            format_type=self.format,
            output=list(self.output),
            file_path=self.file_path,
            max_file_size=self.max_file_size,
            backup_count=self.backup_count,
            service_name=service_name,
            version=version,
        )


class EnvironmentSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    lazylog_level: Optional[str] = Field(None, alias="LAZYLOG_LEVEL")
    lazylog_format: Optional[str] = Field(None, alias="LAZYLOG_FORMAT")
    lazylog_output: Optional[str] = Field(None, alias="LAZYLOG_OUTPUT")
    lazylog_file_path: Optional[str] = Field(None, alias="LAZYLOG_FILE_PATH")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )

    def apply(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Return data with environment overrides applied."""
        data = dict(data)
        if self.lazylog_level:
            data["level"] = self.lazylog_level
        if self.lazylog_format:
            data["format"] = self.lazylog_format
        if self.lazylog_output:
            data["output"] = [o.strip() for o in self.lazylog_output.split(",") if o.strip()]
        if self.lazylog_file_path:
            data["file_path"] = self.lazylog_file_path
        return data


def _load_toml_file(config_file: Path) -> Dict[str, Any]:
    """Read the [logging] table of a TOML file."""
    try:
        with open(config_file, 'rb') as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except PermissionError as e:
        raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}")
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigurationError(str(config_file), str(e), "valid TOML format")

    section = data.get("logging", {})
    if not isinstance(section, dict):
        raise InvalidConfigurationError("logging", section, "a [logging] table")
    return section


def load_settings(config_file: Optional[Path] = None) -> LoggingSettings:
    """Load logging settings from an optional TOML file and the environment."""
    data: Dict[str, Any] = {}
    if config_file is not None:
        data = _load_toml_file(Path(config_file))

    data = EnvironmentSettings().apply(data)

    try:
        return LoggingSettings(**data)
    except ValidationError as e:
        raise ConfigurationValidationError(
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e


def configure_from_settings(
    config_file: Optional[Path] = None,
    service_name: str = "lazylog",
    version: str = "unknown",
) -> LoggingSettings:
    """Load settings and apply them to the logging backend."""
    settings = load_settings(config_file)
    configure_logging(settings.to_logging_config(service_name, version))
    return settings
