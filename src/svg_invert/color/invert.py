"""
invert.py
=========

Does: Invert a color literal channel by channel (255 - c for RGB, alpha kept)
      and format it as canonical '#RRGGBBAA'.
Returns: The inverted literal, or 'currentColor' untouched.
Used By: color.cache.ColorCache on cache misses.
"""

from __future__ import annotations

from svg_invert.color.parse import RGBA, parse_color

__all__ = ["CURRENT_COLOR", "invert_color", "invert_rgba", "format_rgba"]
__docformat__ = "google"

CURRENT_COLOR = "currentColor"


def invert_rgba(rgba: RGBA) -> RGBA:
    """Does: Complement RGB channels, pass alpha through."""
    r, g, b, a = rgba
    return 255 - r, 255 - g, 255 - b, a


def format_rgba(rgba: RGBA) -> str:
    """Does: Render RGBA as uppercase '#RRGGBBAA'."""
    return "#{:02X}{:02X}{:02X}{:02X}".format(*rgba)


def invert_color(literal: str) -> str:
    """
    Does: Invert one color literal.
    Returns: '#RRGGBBAA' for any parseable literal; 'currentColor' as-is since it
             names the inherited color rather than a value.
    Raises: UnparseableColor (a ColorError) when the literal cannot be parsed.
    """
    if literal == CURRENT_COLOR:
        return literal
    return format_rgba(invert_rgba(parse_color(literal)))
