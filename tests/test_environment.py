"""Tests for Environment, a single parsed env file."""

import os
import stat
import sys

import pytest

from gofr_dotenv.environment import Environment
from gofr_dotenv.exceptions import (
    EnvFileNotFoundError,
    EnvFilePermissionError,
    EnvFileReadError,
    ParseError,
)
from gofr_dotenv.parser import Parser


class TestConstruction:
    """Reading and parsing on construction."""

    def test_parses_eagerly(self, fixtures_dir):
        env = Environment(fixtures_dir / "plain.env")

        assert dict(env) == {
            "PLAIN": "true",
            "OPTION_A": "1",
            "OPTION_B": "2",
            "OPTION_C": "3",
            "OPTION_D": "4",
            "OPTION_E": "5",
        }
        assert len(env) == 6
        assert env["OPTION_C"] == "3"

    def test_keeps_raw_bytes(self, fixtures_dir):
        env = Environment(fixtures_dir / "bom.env")

        assert env.raw.startswith(b"\xef\xbb\xbf")
        assert dict(env) == {"BOM": "UTF-8"}

    def test_filename_is_string(self, fixtures_dir):
        env = Environment(fixtures_dir / "bom.env")
        assert env.filename == str(fixtures_dir / "bom.env")

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.env"

        with pytest.raises(EnvFileNotFoundError) as exc_info:
            Environment(path)

        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value, FileNotFoundError)

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="file permissions are not enforced",
    )
    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "secret.env"
        path.write_text("SECRET=1\n")
        path.chmod(0)

        try:
            with pytest.raises(EnvFilePermissionError) as exc_info:
                Environment(path)
        finally:
            path.chmod(stat.S_IRUSR | stat.S_IWUSR)

        assert isinstance(exc_info.value, PermissionError)
        assert exc_info.value.code == "PERMISSION_DENIED"

    def test_directory(self, tmp_path):
        with pytest.raises(EnvFileReadError) as exc_info:
            Environment(tmp_path)

        assert isinstance(exc_info.value, OSError)
        assert exc_info.value.details["path"] == str(tmp_path)
        assert exc_info.value.details["reason"]

    def test_parse_error_names_file(self, fixtures_dir):
        with pytest.raises(ParseError) as exc_info:
            Environment(fixtures_dir / "invalid.env")

        assert exc_info.value.path == str(fixtures_dir / "invalid.env")
        assert exc_info.value.details["line_number"] == 2

    def test_construction_does_not_touch_environ(self, fixtures_dir):
        Environment(fixtures_dir / "plain.env")
        assert "PLAIN" not in os.environ

    def test_custom_parser(self, tmp_path):
        path = tmp_path / "raw.env"
        path.write_text('A=1\nB="$A"\n')

        env = Environment(path, parser=Parser(substitutions=()))

        assert env["B"] == "$A"

    def test_encoding(self, tmp_path):
        path = tmp_path / "latin.env"
        path.write_bytes("NAME=café\n".encode("latin-1"))

        assert Environment(path, encoding="latin-1")["NAME"] == "café"

    def test_overwrite_changes_substitution_precedence(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUB_HOST", "env")
        path = tmp_path / "sub.env"
        path.write_text("SUB_HOST=file\nSUB_URL=$SUB_HOST\n")

        assert Environment(path)["SUB_URL"] == "env"
        assert Environment(path, overwrite=True)["SUB_URL"] == "file"

    def test_is_read_only(self, fixtures_dir):
        env = Environment(fixtures_dir / "bom.env")
        with pytest.raises(TypeError):
            env["BOM"] = "changed"  # type: ignore[index]

    def test_repr_lists_keys_not_values(self, fixtures_dir):
        text = repr(Environment(fixtures_dir / "bom.env"))
        assert "BOM" in text
        assert "UTF-8" not in text


class TestApply:
    """Non-destructive apply()."""

    def test_sets_missing_keys(self, fixtures_dir):
        result = Environment(fixtures_dir / "plain.env").apply()

        assert os.environ["PLAIN"] == "true"
        assert result["OPTION_A"] == "1"

    def test_skips_existing_keys(self, fixtures_dir, monkeypatch):
        monkeypatch.setenv("OPTION_A", "predefined")

        result = Environment(fixtures_dir / "plain.env").apply()

        assert os.environ["OPTION_A"] == "predefined"
        assert "OPTION_A" not in result
        assert len(result) == 5

    def test_result_in_file_order(self, fixtures_dir):
        result = Environment(fixtures_dir / "plain.env").apply()
        assert list(result) == ["PLAIN", "OPTION_A", "OPTION_B", "OPTION_C", "OPTION_D", "OPTION_E"]


class TestApplyOverride:
    """Destructive apply_override()."""

    def test_overwrites_existing_keys(self, fixtures_dir, monkeypatch):
        monkeypatch.setenv("OPTION_A", "predefined")

        result = Environment(fixtures_dir / "plain.env").apply_override()

        assert os.environ["OPTION_A"] == "1"
        assert len(result) == 6

    def test_result_is_a_copy(self, fixtures_dir):
        env = Environment(fixtures_dir / "bom.env")
        result = env.apply_override()
        result["BOM"] = "changed"

        assert env["BOM"] == "UTF-8"
