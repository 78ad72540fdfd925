"""Tests for termbanner.styles — glyph table lookups."""

import pytest

from termbanner.styles import Style, BORDER_STYLES, get_border_chars, parse_style


class TestStyleTable:
    @pytest.mark.parametrize("style,top_left", [
        (Style.SIMPLE, "┌"),
        (Style.DOUBLE, "╔"),
        (Style.BOLD, "┏"),
        (Style.ROUND, "╭"),
        (Style.ASCII, "+"),
    ])
    def test_top_left_glyph(self, style, top_left):
        assert BORDER_STYLES[style].top_left == top_left

    def test_every_style_has_eight_glyphs(self):
        for style in Style:
            chars = BORDER_STYLES[style]
            assert len(chars) == 8
            assert all(len(g) == 1 for g in chars)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BORDER_STYLES[Style.SIMPLE] = BORDER_STYLES[Style.ASCII]


class TestLookup:
    def test_parse_by_name(self):
        assert parse_style("round") is Style.ROUND
        assert parse_style("ASCII") is Style.ASCII

    def test_parse_unknown(self):
        assert parse_style("invalid") is None
        assert get_border_chars("invalid") is None

    def test_get_border_chars(self):
        assert get_border_chars(Style.DOUBLE).vertical == "║"
