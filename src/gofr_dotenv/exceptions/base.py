"""Base exception classes for gofr-dotenv.

All gofr-dotenv exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

File errors also derive from the matching builtin (FileNotFoundError,
PermissionError) so callers can handle them exactly like a failed open().
"""

from typing import Any, Dict, Iterable, Optional


class DotenvError(Exception):
    """Base exception for all gofr-dotenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "FILE_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class EnvFileNotFoundError(DotenvError, FileNotFoundError):
    """Raised when an env file does not exist.

    ``load()`` and ``overload()`` swallow this error for the offending file;
    ``load_strict()`` lets it propagate.
    """

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        self.path = path
        super().__init__(
            code="FILE_NOT_FOUND",
            message=f"Env file not found: {path}",
            details={"path": path, **(details or {})},
        )
        self.filename = path


class EnvFilePermissionError(DotenvError, PermissionError):
    """Raised when an env file exists but cannot be read."""

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        self.path = path
        super().__init__(
            code="PERMISSION_DENIED",
            message=f"Env file is not readable: {path}",
            details={"path": path, **(details or {})},
        )
        self.filename = path


class EnvFileReadError(DotenvError, OSError):
    """Raised when an env file exists but reading it fails for another reason.

    Covers a path that names a directory, and other OS-level read failures.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            code="READ_ERROR",
            message=f"Env file could not be read: {path}",
            details={"path": path, "reason": reason},
        )
        self.filename = path


class ParseError(DotenvError, ValueError):
    """Raised for malformed env file content.

    Attributes:
        line_number: 1-based line where the problem starts (None if unknown)
        line: Offending source text (None if unknown)
    """

    def __init__(
        self,
        message: str,
        code: str = "INVALID_LINE",
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        path: Optional[str] = None,
    ):
        self.line_number = line_number
        self.line = line
        self.path = path
        details: Dict[str, Any] = {}
        if path is not None:
            details["path"] = path
        if line_number is not None:
            details["line_number"] = line_number
        if line is not None:
            details["line"] = line
        super().__init__(code=code, message=message, details=details)

    def with_path(self, path: str) -> "ParseError":
        """Return a copy of this error annotated with the file it came from."""
        return ParseError(
            self.message,
            code=self.code,
            line_number=self.line_number,
            line=self.line,
            path=path,
        )


class MissingKeysError(DotenvError):
    """Raised by ``require_keys()`` when required variables are not set."""

    def __init__(self, keys: Iterable[str]):
        self.keys = list(keys)
        super().__init__(
            code="MISSING_KEYS",
            message=f"Missing required configuration key(s): {', '.join(self.keys)}",
            details={"keys": self.keys},
        )


class ConfigurationError(DotenvError):
    """Raised when gofr-dotenv's own settings are invalid."""

    def __init__(
        self, message: str, code: str = "INVALID_SETTING", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)
