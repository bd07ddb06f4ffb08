"""Conversion of whole color records into output lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .constants import COLOR_KEYWORD, ES_RECORD_MIN_TOKENS, HTML_RECORD_MIN_TOKENS, RGB_CHANNELS
from .converter import format_fraction, fractions_to_hex, hex_to_fractions
from .logging_setup import get_logger
from .models import ColorParseError, DataNode

__all__ = [
    "convert_es_nodes",
    "convert_html_nodes",
    "es_record_to_html",
    "html_record_to_es",
]


def es_record_to_html(name: str, channels: Sequence[float]) -> str | None:
    """Format an Endless Sky color as an HTML color line.

    Example: ("Red", [1, 0, 0]) -> '"Red" #FF0000'

    Args:
        name: the color name
        channels: red, green, blue and an optional alpha (dropped)

    Returns:
        The output line, or None when there are fewer than 3 channels
    """
    if len(channels) < RGB_CHANNELS:
        get_logger("records").debug("Skipping %r: %d value(s) given", name, len(channels))
        return None
    return f'"{name}" {fractions_to_hex(channels)}'


def html_record_to_es(name: str, hex_color: str, strict: bool = False) -> str | None:
    """Format an HTML color as an Endless Sky color line.

    Example: ("Red", "#FF0000") -> 'color"Red" 1 0 0'

    An unreadable hex value still yields a line, holding no values,
    unless `strict` is set: the record is then skipped.

    Args:
        name: the color name
        hex_color: the "#rrggbb" value
        strict: skip records with a malformed hex value

    Returns:
        The output line, or None if the record is skipped
    """
    log = get_logger("records")
    try:
        fractions = hex_to_fractions(hex_color, strict)
    except ColorParseError as e:
        log.warning("Skipping %r: %s", name, e)
        return None
    if not fractions:
        log.warning("Invalid HTML color for %r: %r", name, hex_color)
    return f'{COLOR_KEYWORD}"{name}"' + "".join(f" {format_fraction(v)}" for v in fractions)


def _color_nodes(nodes: Iterable[DataNode], min_tokens: int) -> Iterable[DataNode]:
    """Yield the `color` nodes having at least `min_tokens` tokens."""
    for node in nodes:
        if node.token(0) != COLOR_KEYWORD:
            continue
        if node.size() < min_tokens:
            get_logger("records").debug("line %d: ignoring incomplete color %s", node.line_number, node.tokens)
            continue
        yield node


def convert_es_nodes(nodes: Iterable[DataNode]) -> list[str]:
    """Convert Endless Sky `color <name> <r> <g> <b> [<a>]` nodes to HTML lines."""
    results = []
    for node in _color_nodes(nodes, ES_RECORD_MIN_TOKENS):
        # r, g, b and the optional alpha
        channels = [node.value(i) for i in range(2, min(node.size(), ES_RECORD_MIN_TOKENS + 1))]
        line = es_record_to_html(node.token(1), channels)
        if line is not None:
            results.append(line)
    return results


def convert_html_nodes(nodes: Iterable[DataNode], strict: bool = False) -> list[str]:
    """Convert `color <name> #rrggbb` nodes to Endless Sky lines."""
    results = []
    for node in _color_nodes(nodes, HTML_RECORD_MIN_TOKENS):
        line = html_record_to_es(node.token(1), node.token(2), strict)
        if line is not None:
            results.append(line)
    return results
