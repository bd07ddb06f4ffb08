"""Reader for Endless Sky style data files.

Each non blank line is a node made of whitespace separated tokens. A token may
be quoted with double quotes or backticks to hold spaces. Lines starting with
``#`` are comments, and indented lines are children of the line above them::

    color "Shield Blue" .4 .6 1. 0.
        # a comment
        note "child node"
"""

from __future__ import annotations

from pathlib import Path

from .logging_setup import get_logger
from .models import DataNode

__all__ = ["load_data_file", "parse_data", "tokenize"]

_QUOTES = ('"', "`")
_COMMENT = "#"


def tokenize(line: str) -> list[str]:
    """Split a line into tokens, removing the quotes around quoted tokens.

    Args:
        line: a single line, without its line terminator
    """
    tokens: list[str] = []
    pos = 0
    end = len(line)
    while pos < end:
        if line[pos].isspace():
            pos += 1
            continue
        if line[pos] in _QUOTES:
            closing = line.find(line[pos], pos + 1)
            if closing == -1:
                closing = end
            tokens.append(line[pos + 1 : closing])
            pos = closing + 1
        else:
            start = pos
            while pos < end and not line[pos].isspace():
                pos += 1
            tokens.append(line[start:pos])
    return tokens


def _indentation(line: str) -> int:
    """Return the number of leading whitespace characters."""
    return len(line) - len(line.lstrip())


def parse_data(text: str) -> list[DataNode]:
    """Parse data file contents into the list of its top level nodes.

    Args:
        text: the whole file contents
    """
    roots: list[DataNode] = []
    # (indentation, node) for the current chain of parents
    stack: list[tuple[int, DataNode]] = []

    for line_number, line in enumerate(text.splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT):
            continue
        node = DataNode(tokenize(line), line_number)
        depth = _indentation(line)
        while stack and stack[-1][0] >= depth:
            stack.pop()
        if stack:
            stack[-1][1].children.append(node)
        else:
            roots.append(node)
        stack.append((depth, node))
    return roots


def load_data_file(path: str | Path) -> list[DataNode]:
    """Read and parse a data file.

    Raises:
        OSError: the file can't be read
    """
    log = get_logger("datafile")
    with open(path, encoding="utf-8") as f:
        nodes = parse_data(f.read())
    log.debug("Loaded %d node(s) from %s", len(nodes), path)
    return nodes
