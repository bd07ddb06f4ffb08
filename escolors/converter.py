"""Color value conversions between fractional RGB and HTML hex codes."""

import math
from collections.abc import Sequence

from .constants import HEX_PREFIX, HTML_COLOR_LENGTH, MAX_BYTE, MIN_BYTE, RGB_CHANNELS
from .hexcodec import byte_to_hex, hex_pair_to_byte
from .models import ColorParseError

__all__ = ["format_fraction", "fraction_to_byte", "fractions_to_hex", "hex_to_fractions"]


def fraction_to_byte(channel: float) -> int:
    """Scale a fraction to 0-255, truncating toward zero and clamping."""
    scaled = channel * MAX_BYTE
    if math.isnan(scaled):
        return MIN_BYTE
    return int(min(max(scaled, MIN_BYTE), MAX_BYTE))


def fractions_to_hex(channels: Sequence[float]) -> str:
    """Convert red, green & blue fractions to a "#RRGGBB" string.

    Values outside of [0, 1] are clamped, an alpha channel is ignored.

    Args:
        channels: at least 3 fractions, in red, green, blue order
    """
    if len(channels) < RGB_CHANNELS:
        msg = f"expected at least {RGB_CHANNELS} channels, got {len(channels)}"
        raise ValueError(msg)
    return HEX_PREFIX + "".join(byte_to_hex(fraction_to_byte(c)) for c in channels[:RGB_CHANNELS])


def hex_to_fractions(hex_color: str, strict: bool = False) -> list[float]:
    """Convert a "#rrggbb" string to red, green & blue fractions.

    Anything after the sixth digit is ignored.

    Args:
        hex_color: the color to decode
        strict: raise ColorParseError instead of returning an empty list

    Returns:
        The three fractions, or an empty list if `hex_color` is malformed
    """
    if not hex_color.startswith(HEX_PREFIX) or len(hex_color) < HTML_COLOR_LENGTH:
        if strict:
            raise ColorParseError(hex_color, "expected '#' followed by 6 hex digits")
        return []
    return [hex_pair_to_byte(hex_color[i : i + 2], strict) / MAX_BYTE for i in range(1, HTML_COLOR_LENGTH, 2)]


def format_fraction(value: float) -> str:
    """Format a fraction with up to 6 significant digits, e.g. 1.0 -> "1"."""
    return f"{value:g}"
