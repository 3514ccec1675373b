"""Tests for nsdebug.colors — namespace hashing and palette selection."""

import pytest

from nsdebug.colors import (
    BASIC_COLORS,
    EXTENDED_COLORS,
    ansi_color_code,
    color_index,
    namespace_hash,
    select_color,
)


def _reference_hash(text):
    """Unbounded hash*31+code, wrapped to signed 32 bits once at the end."""
    data = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        value = value * 31 + (data[i] | data[i + 1] << 8)
    return ((value + 2**31) % 2**32) - 2**31


class TestNamespaceHash:
    """Test the signed 32-bit namespace hash."""

    def test_known_values(self):
        """Short inputs never overflow: plain hash*31 + code."""
        assert namespace_hash("") == 0
        assert namespace_hash("a") == 97
        assert namespace_hash("ab") == 97 * 31 + 98

    def test_wraps_to_negative(self):
        """Long inputs wrap around into negative values."""
        assert namespace_hash("zzzzzzzz") == -1910022912

    def test_uses_utf16_code_units(self):
        """Astral characters hash as their surrogate pair."""
        assert namespace_hash("\U0001F600") == 0xD83D * 31 + 0xDE00

    @pytest.mark.parametrize("name", [
        "app:http:client", "x" * 200, "worker:42:queue:retry", "ünïcødé:ns",
    ])
    def test_matches_reference(self, name):
        """Per-step wraparound agrees with wrapping once at the end."""
        result = namespace_hash(name)
        assert result == _reference_hash(name)
        assert -2**31 <= result < 2**31


class TestSelectColor:
    """Test palette selection."""

    def test_basic_palette(self):
        """Known names land on known colors."""
        assert select_color("") == BASIC_COLORS[0] == 6
        assert select_color("a") == BASIC_COLORS[1] == 2
        assert select_color("ab") == BASIC_COLORS[3] == 4

    def test_negative_hash_uses_absolute_value(self):
        """abs() keeps the index inside the palette."""
        assert color_index("zzzzzzzz", len(BASIC_COLORS)) == 0

    def test_deterministic(self):
        """Repeated calls give the same color."""
        colors = {select_color("app:db") for _ in range(10)}
        assert len(colors) == 1

    def test_extended_palette(self):
        """Any palette can be substituted."""
        assert select_color("a", EXTENDED_COLORS) == EXTENDED_COLORS[97 % len(EXTENDED_COLORS)]

    def test_result_in_palette(self):
        for name in ["a", "b:c", "d:e:f", "long:namespace:with:parts"]:
            assert select_color(name) in BASIC_COLORS
            assert select_color(name, EXTENDED_COLORS) in EXTENDED_COLORS


class TestAnsiColorCode:
    """Test escape sequence construction."""

    def test_basic_color(self):
        assert ansi_color_code(6) == "\x1b[36"

    def test_extended_color(self):
        assert ansi_color_code(196) == "\x1b[38;5;196"
