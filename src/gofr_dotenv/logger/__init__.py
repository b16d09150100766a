"""
gofr-dotenv Logger Module

Logging for the env loader with session tracking, structured output and
optional JSON formatting. The loader only ever logs file paths and key
names, never values.

Usage:
    from gofr_dotenv.logger import get_logger, create_logger

    logger = get_logger()
    logger.debug("Applied env file", path="/app/.env", keys=3)

    logger = create_logger(level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name ("gofr-dotenv" -> GOFR_DOTENV)
"""

import logging
import os
from typing import Optional

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

DEFAULT_LOGGER_NAME = "gofr-dotenv"


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "gofr-dotenv" -> "GOFR_DOTENV"
        "my-app" -> "MY_APP"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters left as None are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON.

    Args:
        name: Logger name
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Logger:
    """Get a logger configured from environment variables.

    Example:
        # export GOFR_DOTENV_LOG_LEVEL=DEBUG
        logger = get_logger()
    """
    return create_logger(name=name)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    # Interface
    "Logger",
    # Implementation
    "StructuredLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
]
