"""BannerPanel — a banner as a rich renderable, for Live/Layout dashboards."""

import io

from rich.text import Text

from .banner import Banner, Alignment


class BannerPanel:
    """Collects banner rows and replays them through a Banner on render().

    Rows are framed by a top and bottom line. The banner's own stream is
    left untouched; rendering always goes to an in-memory buffer.
    """

    def __init__(self, banner: Banner | None = None):
        self.banner = banner or Banner()
        self.rows: list[tuple] = []

    def add_title(self, text: str) -> "BannerPanel":
        self.rows.append(("text", text, Alignment.CENTER))
        return self

    def add_text(self, text: str, align: Alignment = Alignment.LEFT) -> "BannerPanel":
        self.rows.append(("text", text, align))
        return self

    def add_key_value(self, key: str, value, padding: int = 12) -> "BannerPanel":
        self.rows.append(("kv", key, value, padding))
        return self

    def add_separator(self) -> "BannerPanel":
        self.rows.append(("sep",))
        return self

    def add_empty(self) -> "BannerPanel":
        self.rows.append(("empty",))
        return self

    def clear(self):
        self.rows.clear()

    def lines(self) -> list[str]:
        """Raw output lines, ANSI codes included, no trailing newlines."""
        buf = io.StringIO()
        saved = self.banner.stream
        self.banner.set_stream(buf)
        try:
            self._draw()
        finally:
            self.banner.set_stream(saved)
        return buf.getvalue().splitlines()

    def _draw(self):
        b = self.banner
        b.print_top_line()
        for row in self.rows:
            kind = row[0]
            if kind == "text":
                b.print_text_with_alignment(row[1], row[2])
            elif kind == "kv":
                b.print_key_value(row[1], row[2], row[3])
            elif kind == "sep":
                b.print_separator_line()
            else:
                b.print_empty_line()
        b.print_bottom_line()

    def render(self) -> Text:
        return Text.from_ansi("\n".join(self.lines()))
