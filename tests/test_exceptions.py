"""Tests for the exception hierarchy.

These tests verify:
1. Exception structure (code, message, details)
2. Inheritance hierarchy, including the builtin bases
3. String representation
4. Dictionary conversion for JSON serialization
"""

import pytest

from gofr_dotenv.exceptions import (
    ConfigurationError,
    DotenvError,
    EnvFileNotFoundError,
    EnvFilePermissionError,
    EnvFileReadError,
    MissingKeysError,
    ParseError,
)


class TestDotenvError:
    """Tests for base DotenvError class."""

    def test_basic_construction(self):
        error = DotenvError("TEST_CODE", "Test message")

        assert error.code == "TEST_CODE"
        assert error.message == "Test message"
        assert error.details == {}

    def test_construction_with_details(self):
        error = DotenvError("TEST_CODE", "Test message", details={"key1": "value1"})
        assert error.details == {"key1": "value1"}

    def test_str_without_details(self):
        assert str(DotenvError("TEST_CODE", "Test message")) == "TEST_CODE: Test message"

    def test_str_with_details(self):
        result = str(DotenvError("TEST_CODE", "Test message", details={"foo": "bar"}))
        assert result == "TEST_CODE: Test message (details: {'foo': 'bar'})"

    def test_to_dict(self):
        error = DotenvError("CODE", "msg", details={"a": 1})
        assert error.to_dict() == {"code": "CODE", "message": "msg", "details": {"a": 1}}

    def test_args_contains_message(self):
        assert "The error message" in DotenvError("CODE", "The error message").args


class TestEnvFileNotFoundError:
    """Missing env files."""

    def test_structure(self):
        error = EnvFileNotFoundError("/app/.env")

        assert error.code == "FILE_NOT_FOUND"
        assert error.path == "/app/.env"
        assert error.filename == "/app/.env"
        assert error.details == {"path": "/app/.env"}
        assert "/app/.env" in str(error)

    def test_builtin_base(self):
        with pytest.raises(FileNotFoundError):
            raise EnvFileNotFoundError("/app/.env")

    def test_is_os_error_and_dotenv_error(self):
        error = EnvFileNotFoundError("/app/.env")
        assert isinstance(error, OSError)
        assert isinstance(error, DotenvError)


class TestEnvFilePermissionError:
    def test_structure(self):
        error = EnvFilePermissionError("/app/.env")

        assert error.code == "PERMISSION_DENIED"
        assert isinstance(error, PermissionError)
        assert error.to_dict()["details"] == {"path": "/app/.env"}


class TestEnvFileReadError:
    def test_structure(self):
        error = EnvFileReadError("/app/.env", "Is a directory")

        assert error.code == "READ_ERROR"
        assert error.filename == "/app/.env"
        assert error.details == {"path": "/app/.env", "reason": "Is a directory"}
        assert isinstance(error, OSError)


class TestParseError:
    """Malformed content."""

    def test_defaults(self):
        error = ParseError("bad line")

        assert error.code == "INVALID_LINE"
        assert error.line_number is None
        assert error.details == {}
        assert isinstance(error, ValueError)

    def test_details_include_location(self):
        error = ParseError("bad", line_number=3, line="oops")
        assert error.details == {"line_number": 3, "line": "oops"}

    def test_with_path(self):
        error = ParseError("bad", code="UNTERMINATED_QUOTE", line_number=3, line='A="x')

        located = error.with_path("/app/.env")

        assert located.path == "/app/.env"
        assert located.code == "UNTERMINATED_QUOTE"
        assert located.line_number == 3
        assert located.details["path"] == "/app/.env"
        assert error.path is None


class TestMissingKeysError:
    def test_lists_keys(self):
        error = MissingKeysError(["A", "B"])

        assert error.keys == ["A", "B"]
        assert error.code == "MISSING_KEYS"
        assert "A, B" in error.message


class TestConfigurationError:
    def test_default_code(self):
        error = ConfigurationError("bad setting")
        assert error.code == "INVALID_SETTING"
        assert isinstance(error, DotenvError)


class TestExceptionHierarchy:
    """Every exception can be caught as DotenvError."""

    @pytest.mark.parametrize(
        "error",
        [
            EnvFileNotFoundError("/x"),
            EnvFilePermissionError("/x"),
            EnvFileReadError("/x", "Is a directory"),
            ParseError("bad"),
            MissingKeysError(["A"]),
            ConfigurationError("bad"),
        ],
    )
    def test_caught_as_base(self, error):
        with pytest.raises(DotenvError):
            raise error
