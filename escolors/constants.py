"""Shared constants for escolors."""

__all__ = [
    "ALPHA_CHANNEL_INDEX",
    "COLOR_KEYWORD",
    "ES_RECORD_MIN_TOKENS",
    "HEX_DIGITS",
    "HEX_PREFIX",
    "HTML_COLOR_LENGTH",
    "HTML_RECORD_MIN_TOKENS",
    "MAX_BYTE",
    "MIN_BYTE",
    "RGB_CHANNELS",
]

# Digit table used to encode a nibble
HEX_DIGITS = "0123456789ABCDEF"

MIN_BYTE = 0
MAX_BYTE = 255

HEX_PREFIX = "#"
HTML_COLOR_LENGTH = 7  # "#" + rr + gg + bb

RGB_CHANNELS = 3
ALPHA_CHANNEL_INDEX = 3

# Data file records
COLOR_KEYWORD = "color"
ES_RECORD_MIN_TOKENS = 2 + RGB_CHANNELS  # color <name> <r> <g> <b>
HTML_RECORD_MIN_TOKENS = 3  # color <name> #rrggbb
