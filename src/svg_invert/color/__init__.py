"""
color package.
==============

Does: Parse color literals, invert them, and memoize inversions.
"""

from .cache import CacheInfo, ColorCache
from .invert import CURRENT_COLOR, format_rgba, invert_color, invert_rgba
from .parse import RGBA, parse_color

__all__ = [
    "RGBA",
    "parse_color",
    "CURRENT_COLOR",
    "invert_color",
    "invert_rgba",
    "format_rgba",
    "CacheInfo",
    "ColorCache",
]

__docformat__ = "google"
