"""
Showcase of every banner style and helper.
Usage:
    python3 -m termbanner
    TERMBANNER_DEBUG=1 python3 -m termbanner   # debug logging
"""

import logging
import os

from .banner import Banner, print_simple, print_colorized
from .colors import C
from .styles import Style

log = logging.getLogger(__name__)

STYLE_SHOWCASE = [
    ("Simple Style", Style.SIMPLE, C.GREEN),
    ("Double Style", Style.DOUBLE, C.BLUE),
    ("Bold Style",   Style.BOLD,   C.RED),
    ("Round Style",  Style.ROUND,  C.PURPLE),
    ("ASCII Style",  Style.ASCII,  ""),
]


def custom_banner():
    """Double-bordered banner with a key-value details block."""
    b = (Banner()
         .set_style(Style.DOUBLE)
         .set_border_color(C.CYAN)
         .set_text_color(C.WHITE)
         .set_bold(True))
    b.print_top_line()
    b.print_centered_text("CUSTOM APPLICATION")
    b.print_centered_text("Enterprise Edition")
    b.print_separator_line()
    b.print_key_value("Version", "2.5.0", 12)
    b.print_key_value("Environment", "Production", 12)
    b.print_key_value("Port", "8080", 12)
    b.print_bottom_line()


def style_gallery():
    """One 60-wide banner per border style, all three alignments."""
    for name, style, color in STYLE_SHOWCASE:
        print(f"\n{name}:")
        b = Banner(width=60).set_style(style).set_border_color(color)
        b.print_top_line()
        b.print_centered_text("Demo Application")
        b.print_separator_line()
        b.print_text("Left aligned text")
        b.print_centered_text("Center aligned text")
        b.print_right_text("Right aligned text")
        b.print_bottom_line()


def monitor_banner():
    """Status-board layout mixing empty lines, separators and key-values."""
    b = Banner(width=70, style=Style.BOLD, border_color=C.PURPLE, text_color=C.CYAN)
    b.print_top_line()
    b.print_empty_line()
    b.print_centered_text("SERVICE MONITOR")
    b.print_empty_line()
    b.print_separator_line()
    b.print_text("Status: Online")
    b.print_text("Requests: 1,234,567")
    b.print_text("Uptime: 99.99%")
    b.print_separator_line()
    b.print_key_value("CPU", "45%", 10)
    b.print_key_value("Memory", "2.3GB", 10)
    b.print_key_value("Disk", "120GB", 10)
    b.print_bottom_line()


def main():
    level = logging.DEBUG if os.environ.get("TERMBANNER_DEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    log.debug("Rendering banner showcase")

    print("\n=== Simple Banner ===")
    print_simple("MY APPLICATION", "Version 1.0.0")

    print("\n=== Colorized Banner ===")
    print_colorized("AWESOME SERVICE", "High Performance Server", C.PURPLE, C.YELLOW)

    print("\n=== Custom Banner with Details ===")
    custom_banner()

    print("\n=== Different Styles ===")
    style_gallery()

    print("\n=== Complex Layout ===")
    monitor_banner()


if __name__ == "__main__":
    main()
