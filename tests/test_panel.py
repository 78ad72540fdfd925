"""Tests for termbanner.panel.BannerPanel — rich rendering bridge."""

import io

from rich.text import Text

from termbanner.banner import Banner, Alignment
from termbanner.colors import C, strip_ansi
from termbanner.panel import BannerPanel


class TestBannerPanel:
    def test_empty_panel_is_framed(self):
        panel = BannerPanel(Banner(width=10))
        assert panel.lines() == ["┌────────┐", "└────────┘"]

    def test_rows_in_order(self):
        panel = (BannerPanel(Banner(width=20))
                 .add_title("STATUS")
                 .add_separator()
                 .add_key_value("CPU", "45%", 6)
                 .add_text("right", Alignment.RIGHT)
                 .add_empty())
        lines = panel.lines()
        assert len(lines) == 7
        assert lines[1] == "│      STATUS      │"
        assert lines[2] == "├" + "─" * 18 + "┤"
        assert lines[3].startswith("│ CPU:   45%")
        assert lines[4] == "│            right │"
        assert lines[5] == "│" + " " * 18 + "│"

    def test_render_strips_to_plain_text(self):
        panel = BannerPanel(Banner(width=12, border_color=C.CYAN, bold=True)).add_title("hi")
        text = panel.render()
        assert isinstance(text, Text)
        assert text.plain.splitlines() == [strip_ansi(l) for l in panel.lines()]

    def test_banner_stream_restored(self):
        stream = io.StringIO()
        banner = Banner(width=10, stream=stream)
        BannerPanel(banner).add_title("x").lines()
        assert banner.stream is stream
        assert stream.getvalue() == ""

    def test_clear(self):
        panel = BannerPanel().add_title("x")
        panel.clear()
        assert panel.rows == []
