"""
Logger interface for gofr-dotenv.

Abstract base class defining the logging contract used by the loader,
the snapshot holder and the instrumenters.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for logging interface.

    Callers pass structured fields as keyword arguments. The loader only
    passes paths, counts and key names, so an implementation may ship
    fields to a shared log store without leaking secrets.

    Example:
        class ListLogger(Logger):
            def debug(self, message: str, **kwargs: Any) -> None:
                self.records.append(("DEBUG", message, kwargs))
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional key-value pairs to include in the log
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the current session ID.

        Returns:
            The unique session identifier for this logger instance.
        """
