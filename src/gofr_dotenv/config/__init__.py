"""Configuration Module for gofr-dotenv

Typed settings for the loader, read from GOFR_DOTENV_* environment variables.

Example:
    from gofr_dotenv.config import get_settings

    settings = get_settings()
    settings.default_file  # ".env" unless GOFR_DOTENV_DEFAULT_FILE is set
"""

from gofr_dotenv.config.settings import (
    DEFAULT_ENCODING,
    DEFAULT_ENV_FILE,
    DEFAULT_PREFIX,
    DotenvSettings,
    LogSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    # Dataclass settings
    "DotenvSettings",
    "LogSettings",
    # Singleton
    "get_settings",
    "reset_settings",
    # Defaults
    "DEFAULT_PREFIX",
    "DEFAULT_ENV_FILE",
    "DEFAULT_ENCODING",
]
