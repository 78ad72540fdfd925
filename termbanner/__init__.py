"""
termbanner — Bordered, colored text banners for terminal tools.
Five border styles, ANSI border/text colors, bold, and left/center/right text.

Usage:
    from termbanner import Banner, Style, C, print_simple
    from termbanner.panel import BannerPanel
"""

from .colors import *
from .styles import Style, BorderChars, BORDER_STYLES
from .banner import *

__version__ = "1.0.0"
