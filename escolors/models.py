"""Common types: exit codes, errors and parsed data file nodes."""

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .logging_setup import get_logger

__all__ = [
    "ColorError",
    "ColorParseError",
    "DataNode",
    "ExitCode",
]


class ColorError(Exception):
    """Base class for escolors errors."""


class ColorParseError(ColorError):
    """Raised in strict mode when a hex color can't be decoded."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    USAGE_ERROR = 1  # No arguments, or a flag is missing its value
    NO_MATCH = 2  # Arguments didn't match any invocation
    FILE_ERROR = 3  # Input file can't be read
    PARSE_ERROR = 4  # Inline value can't be parsed


@dataclass
class DataNode:
    """One logical line of a data file.

    Indented lines following a node are stored in `children`.
    """

    tokens: list[str]
    line_number: int = 0
    children: list["DataNode"] = field(default_factory=list)

    def size(self) -> int:
        """Return the number of tokens."""
        return len(self.tokens)

    def token(self, index: int) -> str:
        """Return the token at `index`, or an empty string if there is none."""
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return ""

    def value(self, index: int) -> float:
        """Return the token at `index` as a number.

        Anything which is not a finite number (nan, inf, digit separators...)
        is reported and read as 0.
        """
        text = self.token(index)
        try:
            if "_" in text:
                raise ValueError(text)
            number = float(text)
            if not math.isfinite(number):
                raise ValueError(text)
        except ValueError:
            get_logger("datafile").warning("line %d: cannot convert value to a number: %r", self.line_number, text)
            return 0.0
        return number
