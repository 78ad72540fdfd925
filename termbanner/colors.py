"""
ANSI color palette and escape-aware length helpers.
Usage:
    from termbanner import C, COLOR_RED, strip_ansi, visible_len
"""

import re

# SGR escape sequences only — enough to measure what the banner emits
_ANSI_RE = re.compile(r'\033\[[0-9;]*m')

# ANSI color codes
class C:
    RESET         = '\033[0m'
    RED           = '\033[31m'
    GREEN         = '\033[32m'
    YELLOW        = '\033[33m'
    BLUE          = '\033[34m'
    PURPLE        = '\033[35m'
    CYAN          = '\033[36m'
    WHITE         = '\033[37m'
    BOLD          = '\033[1m'
    BRIGHT_GREEN  = '\033[92m'
    PRIMARY_GREEN = '\033[38;2;0;255;0m'  # #00FF00 brand green, 24-bit

COLOR_RESET         = C.RESET
COLOR_RED           = C.RED
COLOR_GREEN         = C.GREEN
COLOR_YELLOW        = C.YELLOW
COLOR_BLUE          = C.BLUE
COLOR_PURPLE        = C.PURPLE
COLOR_CYAN          = C.CYAN
COLOR_WHITE         = C.WHITE
COLOR_BOLD          = C.BOLD
COLOR_BRIGHT_GREEN  = C.BRIGHT_GREEN
COLOR_PRIMARY_GREEN = C.PRIMARY_GREEN

__all__ = [
    "C", "strip_ansi", "visible_len",
    "COLOR_RESET", "COLOR_RED", "COLOR_GREEN", "COLOR_YELLOW", "COLOR_BLUE",
    "COLOR_PURPLE", "COLOR_CYAN", "COLOR_WHITE", "COLOR_BOLD",
    "COLOR_BRIGHT_GREEN", "COLOR_PRIMARY_GREEN",
]


def strip_ansi(text):
    """Remove all SGR escape sequences from text."""
    return _ANSI_RE.sub('', str(text))


def visible_len(text):
    """Length of text once ANSI codes are stripped.

    Counts code points, not terminal cells: wide glyphs (emoji, CJK) count
    as one, matching how the banner truncates and pads.
    """
    return len(strip_ansi(text))
