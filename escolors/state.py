"""Process-wide run options.

Set once by the command line dispatcher, read by the logging setup and the
record converters.
"""

import os
from dataclasses import dataclass

__all__ = [
    "RunOptions",
    "is_debug",
    "options",
    "set_debug",
]


@dataclass
class RunOptions:
    """Options affecting a whole run."""

    debug: bool = bool(os.environ.get("DEBUG"))
    strict: bool = False  # reject bad hex digits instead of reading them as 0


options = RunOptions()


def is_debug() -> bool:
    """Return the current debug state."""
    return options.debug


def set_debug(value: bool) -> None:
    """Set the debug state."""
    options.debug = value
