"""Value substitutions applied by the parser.

A substitution is a callable taking the raw value and the mapping of
variables visible to that line, and returning the expanded value. The
parser runs them in order on unquoted and double-quoted values; single
quoted values are never expanded.
"""

import re
from abc import ABC, abstractmethod
from typing import Mapping


class Substitution(ABC):
    """Interface for value substitutions."""

    @abstractmethod
    def __call__(self, value: str, env: Mapping[str, str]) -> str:
        """Expand ``value`` using the variables in ``env``."""


class VariableSubstitution(Substitution):
    """Expands ``$NAME`` and ``${NAME}`` references.

    Unknown names expand to an empty string. ``\\$`` produces a literal
    ``$`` and a ``$`` not followed by a name is left as is.

    Example:
        >>> VariableSubstitution()("${HOST}:$PORT", {"HOST": "db", "PORT": "5432"})
        'db:5432'
    """

    PATTERN = re.compile(
        r"""
        (?P<escape>\\)?          # escaped with a backslash?
        \$                       # literal $
        (?:
            \{(?P<braced>\w+)\}  # ${NAME}
            |
            (?P<bare>\w+)        # $NAME
        )?
        """,
        re.VERBOSE | re.ASCII,
    )

    def __call__(self, value: str, env: Mapping[str, str]) -> str:
        def replace(match: "re.Match[str]") -> str:
            if match.group("escape"):
                return match.group(0)[1:]
            name = match.group("braced") or match.group("bare")
            if name is None:
                return match.group(0)
            return env.get(name, "")

        return self.PATTERN.sub(replace, value)


__all__ = ["Substitution", "VariableSubstitution"]
