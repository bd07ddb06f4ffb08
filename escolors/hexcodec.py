"""Conversion between single bytes and two digit hex strings."""

from .constants import HEX_DIGITS
from .models import ColorParseError

__all__ = ["byte_to_hex", "hex_digit_value", "hex_pair_to_byte"]

# (first character, last character, value of the first character)
_DIGIT_RANGES = (
    ("0", "9", 0),
    ("A", "F", 10),
    ("a", "f", 10),
)


def byte_to_hex(value: int) -> str:
    """Encode a byte (0-255) as two uppercase hex digits, e.g. 10 -> "0A"."""
    high, low = divmod(value, 16)
    return HEX_DIGITS[high] + HEX_DIGITS[low]


def hex_digit_value(char: str) -> int | None:
    """Return the value of a single hex digit, or None if `char` isn't one."""
    for first, last, base in _DIGIT_RANGES:
        if first <= char <= last:
            return ord(char) - ord(first) + base
    return None


def hex_pair_to_byte(pair: str, strict: bool = False) -> int:
    """Decode two hex digits into an integer (0-255).

    Unknown characters count as 0, unless `strict` is set.

    Args:
        pair: the two characters to decode, high digit first
        strict: raise ColorParseError on anything which isn't a hex digit

    Returns:
        The decoded value
    """
    result = 0
    for char in pair:
        digit = hex_digit_value(char)
        if digit is None:
            if strict:
                raise ColorParseError(pair, "invalid hex digit")
            digit = 0
        result = result * 16 + digit
    return result
