"""
Colour helpers shared by consumers: section colour parsing and the radiation traffic light.
"""

from __future__ import annotations

from simplemed.domains.models import Safety

NHS_BLUE = 0xFF005EB8
NHS_GREEN = 0xFF00703C
NHS_AMBER = 0xFFFFB81C
NHS_RED = 0xFFDA291C

RADIATION_COLORS: dict[str, int] = {
    "green": NHS_GREEN,
    "amber": NHS_AMBER,
    "red": NHS_RED,
}

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_hex_color(value: str | None) -> int:
    """
    Parse "#RRGGBB" or "#AARRGGBB" (leading '#' optional) into an ARGB integer.

    Six digits get full opacity. Anything unparseable returns NHS blue.
    """
    hex_str = (value or "").strip()
    if hex_str.startswith("#"):
        hex_str = hex_str[1:]
    if not hex_str or not set(hex_str) <= _HEX_DIGITS:
        return NHS_BLUE
    if len(hex_str) == 6:
        return int("FF" + hex_str, 16)
    if len(hex_str) == 8:
        return int(hex_str, 16)
    return NHS_BLUE


def radiation_color(level: str | None) -> int:
    """ARGB colour for a radiation level; unknown levels are green."""
    return RADIATION_COLORS[Safety(radiation_level=level or "").traffic_light]


def to_css_hex(argb: int) -> str:
    """ARGB integer as a "#RRGGBB" string (alpha dropped)."""
    return f"#{argb & 0xFFFFFF:06X}"
