"""Parser for .env files.

Turns the raw bytes of an env file into an ordered ``dict`` of key/value
pairs. Parsing is pure: it reads the live environment for variable
substitution but never writes to it.

Supported syntax:

    # comment
    PLAIN=value               # inline comment after whitespace
    export EXPORTED=value
    SPACED = value
    YAML_STYLE: value
    SINGLE='literal $NOT_EXPANDED'
    DOUBLE="line one\\nline two ${PLAIN}"
    MULTI="first
    second"
    export PLAIN              # only valid once PLAIN was assigned above
"""

import os
import re
from collections import ChainMap
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from gofr_dotenv.config import DEFAULT_ENCODING
from gofr_dotenv.exceptions import ParseError
from gofr_dotenv.substitutions import Substitution, VariableSubstitution

UTF8_BOM = b"\xef\xbb\xbf"

_ASSIGNMENT = re.compile(
    r"""
    \A\s*
    (?:export\s+)?
    (?P<key>[\w.]+)
    (?:\s*=\s*|:\s+)
    (?P<rest>.*)
    \Z
    """,
    re.VERBOSE | re.ASCII,
)
_EXPORT = re.compile(r"\A\s*export(?P<keys>(?:\s+[\w.]+)+)\s*(?:\#.*)?\Z", re.ASCII)
_INLINE_COMMENT = re.compile(r"(?:\A|\s)#.*\Z", re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}

QUOTES = ("'", '"')


def _unescape(value: str) -> str:
    r"""Resolve backslash escapes of a double-quoted value.

    ``\$`` is kept so that substitutions can tell it from a reference.
    """

    def replace(match: "re.Match[str]") -> str:
        char = match.group(1)
        if char == "$":
            return match.group(0)
        return _ESCAPES.get(char, char)

    return _ESCAPE.sub(replace, value)


def _find_closing_quote(buffer: str, quote: str) -> int:
    index = 1
    while index < len(buffer):
        char = buffer[index]
        if char == "\\" and quote == '"':
            index += 2
            continue
        if char == quote:
            return index
        index += 1
    return -1


class Parser:
    """Parses env file content into ordered key/value pairs.

    Args:
        substitutions: Expansions run on unquoted and double-quoted values,
            in order. Defaults to ``(VariableSubstitution(),)``.
        encoding: Encoding used to decode bytes input.
    """

    def __init__(
        self,
        substitutions: Optional[Sequence[Substitution]] = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if substitutions is None:
            substitutions = (VariableSubstitution(),)
        self.substitutions = tuple(substitutions)
        self.encoding = encoding

    def decode(self, data: Union[bytes, str]) -> str:
        """Decode ``data`` to text, dropping a leading byte-order-mark."""
        if isinstance(data, str):
            return data[1:] if data.startswith("\ufeff") else data
        if data.startswith(UTF8_BOM):
            data = data[len(UTF8_BOM):]
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise ParseError(
                f"Content is not valid {self.encoding}: {e.reason}",
                code="INVALID_ENCODING",
            ) from e

    def parse(
        self,
        data: Union[bytes, str],
        overwrite: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, str]:
        """Parse ``data`` into an ordered dict; the last assignment of a key wins.

        Args:
            data: Raw file content
            overwrite: Whether the pairs will replace existing variables. Decides
                whether file values (True) or the environment (False) win when
                substituting references.
            environ: Environment visible to substitutions (default: os.environ)

        Raises:
            ParseError: On malformed content
        """
        text = self.decode(data)
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        env = os.environ if environ is None else environ

        pairs: Dict[str, str] = {}
        lookup: Mapping[str, str] = ChainMap(pairs, env) if overwrite else ChainMap(env, pairs)

        index = 0
        while index < len(lines):
            line_number = index + 1
            line = lines[index]
            index += 1

            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue

            match = _ASSIGNMENT.match(line)
            if match:
                key, rest = match.group("key"), match.group("rest")
                if rest[:1] in QUOTES:
                    value, index = self._parse_quoted(rest, lines, index, line_number, lookup)
                else:
                    value = self._expand(_INLINE_COMMENT.sub("", rest).strip(), lookup)
                pairs[key] = value
                continue

            match = _EXPORT.match(line)
            if match:
                unset = [key for key in match.group("keys").split() if key not in pairs]
                if unset:
                    raise ParseError(
                        f"Line {line_number} exports unset variable(s): {', '.join(unset)}",
                        code="UNSET_VARIABLE",
                        line_number=line_number,
                        line=line,
                    )
                continue

            raise ParseError(
                f"Line {line_number} doesn't match KEY=VALUE format",
                line_number=line_number,
                line=line,
            )

        return pairs

    def _parse_quoted(
        self,
        rest: str,
        lines: List[str],
        index: int,
        line_number: int,
        lookup: Mapping[str, str],
    ) -> Tuple[str, int]:
        """Read a quoted value, consuming further lines until the quote closes.

        Returns the processed value and the index of the next unread line.
        """
        quote = rest[0]
        buffer = rest
        end = _find_closing_quote(buffer, quote)
        while end == -1:
            if index >= len(lines):
                raise ParseError(
                    f"Line {line_number} has an unterminated {quote} quoted value",
                    code="UNTERMINATED_QUOTE",
                    line_number=line_number,
                    line=lines[line_number - 1],
                )
            buffer = f"{buffer}\n{lines[index]}"
            index += 1
            end = _find_closing_quote(buffer, quote)

        trailing = buffer[end + 1:].strip()
        if trailing and not trailing.startswith("#"):
            raise ParseError(
                f"Line {line_number} has unexpected characters after a quoted value",
                line_number=line_number,
                line=lines[line_number - 1],
            )

        inner = buffer[1:end]
        if quote == "'":
            return inner, index
        return self._expand(_unescape(inner), lookup), index

    def _expand(self, value: str, lookup: Mapping[str, str]) -> str:
        for substitution in self.substitutions:
            value = substitution(value, lookup)
        return value


def parse_bytes(
    data: Union[bytes, str],
    overwrite: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Parse env file content with the default parser. See ``Parser.parse``."""
    return Parser().parse(data, overwrite=overwrite, environ=environ)


__all__ = ["Parser", "parse_bytes", "UTF8_BOM"]
