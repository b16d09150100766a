"""Dataclass-based Settings for gofr-dotenv

Typed configuration for the loader itself, read from environment variables
under a parameterized prefix (default: GOFR_DOTENV).

Design principles:
- Environment variable overrides with sensible defaults
- Type-safe settings with validation
- Cached per prefix, resettable for tests
"""

import codecs
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from gofr_dotenv.exceptions import ConfigurationError
from gofr_dotenv.logger import DEFAULT_LOGGER_NAME, Logger, create_logger

DEFAULT_PREFIX = "GOFR_DOTENV"
DEFAULT_ENV_FILE = ".env"
DEFAULT_ENCODING = "utf-8"

LOG_FORMATS = ("console", "json")


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (console or json)
    """

    level: str = "INFO"
    format: str = "console"

    def __post_init__(self):
        self.level = self.level.upper()
        self.format = self.format.lower()
        if not isinstance(logging.getLevelName(self.level), int):
            raise ConfigurationError(
                f"Unknown log level: {self.level}", details={"level": self.level}
            )
        if self.format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format: {self.format}",
                details={"format": self.format, "allowed": list(LOG_FORMATS)},
            )

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)

    @property
    def json_format(self) -> bool:
        return self.format == "json"

    def create_logger(self, name: str = DEFAULT_LOGGER_NAME) -> Logger:
        """Build a logger with this level and format."""
        return create_logger(name=name, level=self.level_number, json_format=self.json_format)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_PREFIX) -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_FORMAT: Log format
        """
        return cls(
            level=os.environ.get(f"{prefix}_LOG_LEVEL", "INFO"),
            format=os.environ.get(f"{prefix}_LOG_FORMAT", "console"),
        )


@dataclass
class DotenvSettings:
    """Loader settings

    Attributes:
        default_file: File loaded when no path is passed to load()/overload()
        encoding: Text encoding of env files (a leading UTF-8 BOM is always dropped)
        log: Logging settings
        prefix: Environment variable prefix used
    """

    default_file: str = DEFAULT_ENV_FILE
    encoding: str = DEFAULT_ENCODING
    log: LogSettings = field(default_factory=LogSettings)
    prefix: str = DEFAULT_PREFIX

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Validate settings for consistency

        Raises:
            ConfigurationError: If settings are invalid
        """
        if not self.default_file or not self.default_file.strip():
            raise ConfigurationError(
                "Default env file name must not be empty",
                details={"variable": f"{self.prefix}_DEFAULT_FILE"},
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown encoding: {self.encoding}",
                details={"variable": f"{self.prefix}_ENCODING"},
            ) from e

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_PREFIX) -> "DotenvSettings":
        """
        Load settings from environment variables

        Args:
            prefix: Environment variable prefix (default: GOFR_DOTENV)

        Environment variables:
            {prefix}_DEFAULT_FILE: Default env file (default: .env)
            {prefix}_ENCODING: File encoding (default: utf-8)
            {prefix}_LOG_LEVEL: Logging level (default: INFO)
            {prefix}_LOG_FORMAT: Log format (default: console)
        """
        return cls(
            default_file=os.environ.get(f"{prefix}_DEFAULT_FILE", DEFAULT_ENV_FILE),
            encoding=os.environ.get(f"{prefix}_ENCODING", DEFAULT_ENCODING),
            log=LogSettings.from_env(prefix),
            prefix=prefix,
        )


# Global settings storage per prefix
_global_settings: dict[str, DotenvSettings] = {}


def get_settings(prefix: str = DEFAULT_PREFIX, reload: bool = False) -> DotenvSettings:
    """
    Get or create settings instance for a given prefix

    Args:
        prefix: Environment variable prefix
        reload: If True, reload settings from environment

    Returns:
        DotenvSettings instance for the given prefix
    """
    if prefix not in _global_settings or reload:
        _global_settings[prefix] = DotenvSettings.from_env(prefix=prefix)

    return _global_settings[prefix]


def reset_settings(prefix: Optional[str] = None) -> None:
    """Reset settings (primarily for testing)

    Args:
        prefix: Specific prefix to reset, or None to reset all
    """
    if prefix:
        _global_settings.pop(prefix, None)
    else:
        _global_settings.clear()
