"""
Border style table — the 8 glyphs each box style is drawn with.
Usage:
    from termbanner.styles import Style, get_border_chars
"""

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class Style(str, Enum):
    SIMPLE = "simple"
    DOUBLE = "double"
    BOLD = "bold"
    ROUND = "round"
    ASCII = "ascii"


class BorderChars(NamedTuple):
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    left_join: str
    right_join: str


# Read-only after import
BORDER_STYLES = MappingProxyType({
    #                         TL   TR   BL   BR   H    V    LJ   RJ
    Style.SIMPLE: BorderChars("┌", "┐", "└", "┘", "─", "│", "├", "┤"),
    Style.DOUBLE: BorderChars("╔", "╗", "╚", "╝", "═", "║", "╠", "╣"),
    Style.BOLD:   BorderChars("┏", "┓", "┗", "┛", "━", "┃", "┣", "┫"),
    Style.ROUND:  BorderChars("╭", "╮", "╰", "╯", "─", "│", "├", "┤"),
    Style.ASCII:  BorderChars("+", "+", "+", "+", "-", "|", "+", "+"),
})


def parse_style(value) -> Style | None:
    """Coerce a Style or its string name to Style. Returns None if unknown."""
    if isinstance(value, Style):
        return value
    try:
        return Style(str(value).lower())
    except ValueError:
        return None


def get_border_chars(style) -> BorderChars | None:
    """Glyphs for a style (enum or name), or None if the style is unknown."""
    parsed = parse_style(style)
    if parsed is None:
        return None
    return BORDER_STYLES[parsed]
