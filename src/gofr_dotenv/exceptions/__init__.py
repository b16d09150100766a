"""Exceptions raised by gofr-dotenv.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from gofr_dotenv.exceptions import (
        DotenvError,
        EnvFileNotFoundError,
        EnvFilePermissionError,
        ParseError,
        MissingKeysError,
        ConfigurationError,
    )
"""

from gofr_dotenv.exceptions.base import (
    ConfigurationError,
    DotenvError,
    EnvFileNotFoundError,
    EnvFilePermissionError,
    EnvFileReadError,
    MissingKeysError,
    ParseError,
)

__all__ = [
    # Base exception
    "DotenvError",
    # File access
    "EnvFileNotFoundError",
    "EnvFilePermissionError",
    "EnvFileReadError",
    # Content
    "ParseError",
    "MissingKeysError",
    # Settings
    "ConfigurationError",
]
