import math

import pytest

from escolors.converter import format_fraction, fraction_to_byte, fractions_to_hex, hex_to_fractions
from escolors.models import ColorError, ColorParseError


class TestFractionsToHex:
    """Tests for fractions_to_hex."""

    def test_primary_colors(self):
        assert fractions_to_hex([1, 0, 0]) == "#FF0000"
        assert fractions_to_hex([0, 1, 0]) == "#00FF00"
        assert fractions_to_hex([0, 0, 1]) == "#0000FF"

    def test_clamping(self):
        # 0.5 * 255 = 127.5, truncated to 127
        assert fractions_to_hex([-1.0, 2.0, 0.5]) == "#00FF7F"
        assert fractions_to_hex([-1e300, 1e300, float("inf")]) == "#00FFFF"

    def test_truncates(self):
        assert fractions_to_hex([0.999, 0.001, 0.9]) == "#FE00E5"

    def test_alpha_ignored(self):
        assert fractions_to_hex([0.4, 0.6, 1.0, 0.0]) == fractions_to_hex([0.4, 0.6, 1.0])

    def test_too_few_channels(self):
        with pytest.raises(ValueError):
            fractions_to_hex([1.0, 0.0])

    def test_nan(self):
        assert fraction_to_byte(float("nan")) == 0
        assert fractions_to_hex([float("nan"), 1, 1]) == "#00FFFF"


class TestHexToFractions:
    """Tests for hex_to_fractions."""

    def test_decode(self):
        assert hex_to_fractions("#FF0000") == [1.0, 0.0, 0.0]
        r, g, b = hex_to_fractions("#008080")
        assert r == 0.0
        assert math.isclose(g, 128 / 255)
        assert math.isclose(b, 128 / 255)

    def test_trailing_characters_ignored(self):
        assert hex_to_fractions("#FF0000AA") == [1.0, 0.0, 0.0]
        assert hex_to_fractions("#00FF00 junk") == [0.0, 1.0, 0.0]

    def test_malformed(self):
        assert hex_to_fractions("123456") == []
        assert hex_to_fractions("#12") == []
        assert hex_to_fractions("") == []
        assert hex_to_fractions("#12345") == []

    def test_malformed_strict(self):
        for value in ("123456", "#12", "#GG0000"):
            with pytest.raises(ColorParseError):
                hex_to_fractions(value, strict=True)

    def test_parse_error_is_a_color_error(self):
        with pytest.raises(ColorError):
            hex_to_fractions("#12", strict=True)

    def test_bad_digits_lenient(self):
        assert hex_to_fractions("#GG0000") == [0.0, 0.0, 0.0]


def test_hex_round_trip_normalizes_case():
    for value in ("#abcdef", "#000000", "#FFFFFF", "#7f7F01", "#123456", "#fedcba"):
        assert fractions_to_hex(hex_to_fractions(value)) == value.upper()


def test_every_byte_round_trips():
    for value in range(256):
        assert fraction_to_byte(value / 255) == value


def test_fraction_round_trip_tolerance():
    steps = 97
    for i in range(steps + 1):
        fraction = i / steps
        decoded = hex_to_fractions(fractions_to_hex([fraction, 1 - fraction, fraction / 2]))
        for original, result in zip([fraction, 1 - fraction, fraction / 2], decoded, strict=True):
            assert abs(original - result) <= 1 / 255 + 1e-12


def test_format_fraction():
    assert format_fraction(1.0) == "1"
    assert format_fraction(0.0) == "0"
    assert format_fraction(0.5) == "0.5"
    assert format_fraction(128 / 255) == "0.501961"
    assert format_fraction(127 / 255) == "0.498039"


def test_truncates_just_below_a_whole_number():
    # 0.9999999999999 * 255 = 254.99999999997
    assert fractions_to_hex([0.9999999999999, 0, 0]) == "#FE0000"
    assert fraction_to_byte(0.9999999999999) == 254
