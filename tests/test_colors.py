"""Tests for termbanner.colors — palette and ANSI stripping."""

from termbanner.colors import C, COLOR_PRIMARY_GREEN, strip_ansi, visible_len


class TestPalette:
    def test_basic_codes(self):
        assert C.RESET == "\033[0m"
        assert C.RED == "\033[31m"
        assert C.WHITE == "\033[37m"
        assert C.BOLD == "\033[1m"

    def test_primary_green_is_truecolor(self):
        assert COLOR_PRIMARY_GREEN == "\033[38;2;0;255;0m"


class TestStripAnsi:
    def test_strip_ansi(self):
        assert strip_ansi(f"{C.RED}┌──┐{C.RESET}") == "┌──┐"
        assert strip_ansi(f"{C.PRIMARY_GREEN}x{C.RESET}") == "x"

    def test_visible_len(self):
        assert visible_len(f"{C.BOLD}{C.BLUE} hi {C.RESET}") == 4
