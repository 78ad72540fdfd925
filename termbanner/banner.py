"""
Bordered text banners for tools and scripts.
Usage:
    from termbanner import Banner, Style, Alignment, C

    b = Banner().set_style(Style.DOUBLE).set_border_color(C.CYAN).set_bold(True)
    b.print_top_line()
    b.print_centered_text("MY SERVICE")
    b.print_separator_line()
    b.print_key_value("Version", "2.5.0", 12)
    b.print_bottom_line()

    # Or the one-shot helpers:
    print_simple("MY APPLICATION", "Version 1.0.0")
"""

import logging
import sys
from enum import Enum

from .colors import C
from .styles import Style, BORDER_STYLES, parse_style

log = logging.getLogger(__name__)

__all__ = [
    "Alignment", "Banner", "apply_color",
    "center_text", "left_align_text", "right_align_text",
    "print_simple", "print_colorized",
]

DEFAULT_WIDTH = 80
DEFAULT_STYLE = Style.SIMPLE


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ── Text helpers ──────────────────────────────────────────────────────

def apply_color(color, text):
    """Wrap text in a color code and RESET. Empty color returns text as-is."""
    if color:
        return f"{color}{text}{C.RESET}"
    return text


def left_align_text(text, width):
    """Pad text on the right to width; truncate if it doesn't fit."""
    if len(text) >= width:
        return text[:max(0, width)]
    return text + ' ' * (width - len(text))


def right_align_text(text, width):
    """Pad text on the left to width; truncate if it doesn't fit."""
    if len(text) >= width:
        return text[:max(0, width)]
    return ' ' * (width - len(text)) + text


def center_text(text, width):
    """Center text in width. An odd leftover space goes on the right."""
    if len(text) >= width:
        return text[:max(0, width)]
    total = width - len(text)
    left = total // 2
    right = total - left
    return f"{' ' * left}{text}{' ' * right}"


_ALIGNERS = {
    Alignment.LEFT: left_align_text,
    Alignment.CENTER: center_text,
    Alignment.RIGHT: right_align_text,
}


# ── Banner ────────────────────────────────────────────────────────────

class Banner:
    """A fixed-width box drawn one line at a time.

    Every print_* call writes exactly one newline-terminated line to the
    output stream. Setters return self so configuration can be chained.
    Not thread-safe: serialize access to a shared instance.
    """

    def __init__(self, width=DEFAULT_WIDTH, style=DEFAULT_STYLE,
                 border_color="", text_color="", bold=False, stream=None):
        self.width = DEFAULT_WIDTH
        self.style = DEFAULT_STYLE
        self.border_color = ""
        self.text_color = ""
        self.bold = False
        self.stream = None
        self._borders = BORDER_STYLES[DEFAULT_STYLE]

        self.set_width(width)
        self.set_style(style)
        self.set_border_color(border_color)
        self.set_text_color(text_color)
        self.set_bold(bold)
        self.set_stream(stream)

    def __repr__(self):
        return (f"Banner(width={self.width}, style={self.style.value!r}, "
                f"border_color={self.border_color!r}, "
                f"text_color={self.text_color!r}, bold={self.bold})")

    # ── Configuration ─────────────────────────────────────────────────

    def set_width(self, width: int) -> "Banner":
        self.width = width
        return self

    def set_style(self, style) -> "Banner":
        """Switch border style. Unknown styles are ignored."""
        parsed = parse_style(style)
        if parsed is None:
            log.debug("Ignoring unknown border style: %r", style)
            return self
        self.style = parsed
        self._borders = BORDER_STYLES[parsed]
        return self

    def set_border_color(self, color: str) -> "Banner":
        self.border_color = color or ""
        return self

    def set_text_color(self, color: str) -> "Banner":
        self.text_color = color or ""
        return self

    def set_bold(self, bold: bool) -> "Banner":
        self.bold = bool(bold)
        return self

    def set_stream(self, stream) -> "Banner":
        """Write to stream instead of stdout. None means current sys.stdout."""
        self.stream = stream
        return self

    @property
    def borders(self):
        return self._borders

    # ── Border lines ──────────────────────────────────────────────────

    def print_top_line(self):
        b = self._borders
        self._print_rule(b.top_left, b.top_right)

    def print_bottom_line(self):
        b = self._borders
        self._print_rule(b.bottom_left, b.bottom_right)

    def print_separator_line(self):
        b = self._borders
        self._print_rule(b.left_join, b.right_join)

    def _print_rule(self, left, right):
        fill = self._borders.horizontal * max(0, self.width - 2)
        self._emit(apply_color(self.border_color, f"{left}{fill}{right}"))

    # ── Text lines ────────────────────────────────────────────────────

    def print_text(self, text):
        self.print_text_with_alignment(text, Alignment.LEFT)

    def print_centered_text(self, text):
        self.print_text_with_alignment(text, Alignment.CENTER)

    def print_right_text(self, text):
        self.print_text_with_alignment(text, Alignment.RIGHT)

    def print_empty_line(self):
        self.print_text("")

    def print_text_with_alignment(self, text, align=Alignment.LEFT):
        """Print one bordered text line.

        The inner width is width - 4: a border glyph and one space of
        padding on each side. Longer text is cut to fit; nothing wraps.
        """
        inner_width = max(0, self.width - 4)
        text = str(text)
        if len(text) > inner_width:
            text = text[:inner_width]

        aligner = _ALIGNERS.get(align, left_align_text)
        padded = aligner(text, inner_width)

        text_color = self.text_color
        if self.bold:
            text_color = C.BOLD + text_color

        edge = apply_color(self.border_color, self._borders.vertical)
        content = apply_color(text_color, f" {padded} ")
        self._emit(f"{edge}{content}{edge}")

    def print_key_value(self, key, value, padding=0):
        """Print 'key:' padded to at least `padding` columns, then the value."""
        label = f"{key}:".ljust(padding)
        self.print_text(f"{label} {value}")

    # also reachable as Banner.apply_color
    apply_color = staticmethod(apply_color)

    # ── Output ────────────────────────────────────────────────────────

    def _emit(self, line):
        out = self.stream if self.stream is not None else sys.stdout
        print(line, file=out)


# ── One-shot banners ──────────────────────────────────────────────────

def _print_title_block(b, title, subtitle):
    b.print_top_line()
    if title:
        b.print_centered_text(title)
    if subtitle:
        b.print_centered_text(subtitle)
    b.print_bottom_line()


def print_simple(title, subtitle="", stream=None):
    """Print a plain default-width banner with a centered title/subtitle."""
    _print_title_block(Banner(stream=stream), title, subtitle)


def print_colorized(title, subtitle="", border_color="", text_color="", stream=None):
    """Print a bold banner with colored border and text."""
    b = (Banner(stream=stream)
         .set_border_color(border_color)
         .set_text_color(text_color)
         .set_bold(True))
    _print_title_block(b, title, subtitle)
