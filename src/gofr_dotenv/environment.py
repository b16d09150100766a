"""A single parsed env file and the two ways of applying it to os.environ."""

import os
from typing import Dict, Iterator, Mapping, Optional, Union

from gofr_dotenv.exceptions import (
    EnvFileNotFoundError,
    EnvFilePermissionError,
    EnvFileReadError,
    ParseError,
)
from gofr_dotenv.parser import Parser

PathLike = Union[str, "os.PathLike[str]"]


class Environment(Mapping[str, str]):
    """The ordered key/value pairs parsed from one env file.

    The file is read and parsed eagerly on construction. Instances are
    read-only mappings; use ``apply()`` or ``apply_override()`` to write the
    pairs into ``os.environ``.

    Args:
        filename: Path of the env file
        overwrite: Whether the pairs are meant to replace existing variables.
            Only affects which side wins during ``${VAR}`` substitution.
        encoding: Text encoding of the file (default: the parser's)
        parser: Parser to use (default: a new ``Parser``)

    Raises:
        EnvFileNotFoundError: If the file does not exist
        EnvFilePermissionError: If the file cannot be read
        EnvFileReadError: If the path is a directory or reading fails otherwise
        ParseError: If the content is malformed
    """

    def __init__(
        self,
        filename: PathLike,
        overwrite: bool = False,
        encoding: Optional[str] = None,
        parser: Optional[Parser] = None,
    ) -> None:
        self.filename = os.fspath(filename)
        self.overwrite = overwrite
        if parser is None:
            parser = Parser() if encoding is None else Parser(encoding=encoding)
        self.parser = parser
        self.raw = self._read()
        try:
            self._pairs = self.parser.parse(self.raw, overwrite=overwrite)
        except ParseError as e:
            raise e.with_path(self.filename) from e

    def _read(self) -> bytes:
        try:
            with open(self.filename, "rb") as f:
                return f.read()
        except FileNotFoundError as e:
            raise EnvFileNotFoundError(self.filename) from e
        except PermissionError as e:
            raise EnvFilePermissionError(self.filename) from e
        except OSError as e:
            raise EnvFileReadError(self.filename, e.strerror or str(e)) from e

    def __getitem__(self, key: str) -> str:
        return self._pairs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.filename!r}, keys={list(self._pairs)!r})"

    def apply(self) -> Dict[str, str]:
        """Set every pair whose key is not yet defined in os.environ.

        Returns:
            The pairs that were written, in file order.
        """
        applied: Dict[str, str] = {}
        for key, value in self._pairs.items():
            if key in os.environ:
                continue
            os.environ[key] = value
            applied[key] = value
        return applied

    def apply_override(self) -> Dict[str, str]:
        """Set every pair, replacing existing values.

        Returns:
            All pairs, in file order.
        """
        for key, value in self._pairs.items():
            os.environ[key] = value
        return dict(self._pairs)


__all__ = ["Environment"]
