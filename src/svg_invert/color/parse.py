"""
parse.py
========

Does: Turn a CSS/SVG color literal into an RGBA tuple of 8-bit channels.
      Hex literals go through matplotlib.colors, named colors through webcolors,
      rgb()/rgba()/hsl()/hsla() functions through the regex parser below.
Returns: RGBA (tuple[int, int, int, int]) or raises UnparseableColor.
Used By: color.invert.invert_color.
"""

from __future__ import annotations

import colorsys
import logging
import re
from functools import lru_cache
from typing import List, Optional, Tuple

from svg_invert.errors import UnparseableColor

__all__ = ["RGBA", "parse_color", "to_channel"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGBA = Tuple[int, int, int, int]

_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNC_RE = re.compile(r"^(rgba?|hsla?)\(\s*(.*?)\s*\)$")
_NUMBER_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?)(%|deg)?$")


# =============================================================================
# 1) CHANNEL HELPERS
# =============================================================================

def to_channel(unit: float) -> int:
    """Does: Map a 0..1 float to 0..255, clamping and rounding half up."""
    unit = min(max(unit, 0.0), 1.0)
    return int(unit * 255 + 0.5)


def _number(token: str) -> Optional[Tuple[float, Optional[str]]]:
    m = _NUMBER_RE.match(token)
    if not m:
        return None
    return float(m.group(1)), m.group(2)


def _alpha(token: str) -> Optional[float]:
    parsed = _number(token)
    if parsed is None:
        return None
    value, unit = parsed
    if unit == "%":
        return value / 100
    if unit is None:
        return value
    return None


def _split_args(body: str) -> Optional[List[str]]:
    """Does: Split function arguments in either comma or space/slash syntax."""
    if "," in body:
        if "/" in body:
            return None
        return [a.strip() for a in body.split(",")]
    if body.count("/") > 1:
        return None
    color_part, _, alpha_part = body.partition("/")
    args = color_part.split()
    if alpha_part.strip():
        args.append(alpha_part.strip())
    elif "/" in body:
        return None
    return args


# =============================================================================
# 2) FORM PARSERS
# =============================================================================

def _parse_hex(text: str) -> RGBA:
    from matplotlib.colors import to_rgba  # lazy import

    r, g, b, a = to_rgba(text)
    return to_channel(r), to_channel(g), to_channel(b), to_channel(a)


@lru_cache(maxsize=1)
def _named_lookup():
    from webcolors import name_to_rgb  # lazy import

    return name_to_rgb


def _parse_named(text: str) -> Optional[RGBA]:
    if text == "transparent":
        return 0, 0, 0, 0
    try:
        rgb = _named_lookup()(text)
    except ValueError:
        return None
    return rgb.red, rgb.green, rgb.blue, 255


def _parse_rgb_function(args: List[str]) -> Optional[RGBA]:
    channels: List[int] = []
    for token in args[:3]:
        parsed = _number(token)
        if parsed is None:
            return None
        value, unit = parsed
        if unit == "%":
            channels.append(to_channel(value / 100))
        elif unit is None:
            channels.append(to_channel(value / 255))
        else:
            return None
    alpha = _alpha(args[3]) if len(args) == 4 else 1.0
    if alpha is None:
        return None
    return channels[0], channels[1], channels[2], to_channel(alpha)


def _parse_hsl_function(args: List[str]) -> Optional[RGBA]:
    hue = _number(args[0])
    if hue is None or hue[1] == "%":
        return None
    sat = _number(args[1])
    light = _number(args[2])
    if sat is None or light is None or sat[1] == "deg" or light[1] == "deg":
        return None
    s = min(max(sat[0] / 100, 0.0), 1.0)
    lt = min(max(light[0] / 100, 0.0), 1.0)
    r, g, b = colorsys.hls_to_rgb((hue[0] % 360) / 360, lt, s)
    alpha = _alpha(args[3]) if len(args) == 4 else 1.0
    if alpha is None:
        return None
    return to_channel(r), to_channel(g), to_channel(b), to_channel(alpha)


def _parse_function(text: str) -> Optional[RGBA]:
    m = _FUNC_RE.match(text)
    if not m:
        return None
    name, body = m.groups()
    args = _split_args(body)
    if args is None or len(args) not in (3, 4):
        return None
    if name.startswith("rgb"):
        return _parse_rgb_function(args)
    return _parse_hsl_function(args)


# =============================================================================
# 3) ENTRY POINT
# =============================================================================

def parse_color(literal: str) -> RGBA:
    """
    Does: Parse a color literal (hex, CSS name, rgb()/hsl() function).
    Returns: (r, g, b, a) with 0-255 channels.
    Raises: UnparseableColor when no form matches.
    """
    text = literal.strip().lower()
    if _HEX_RE.match(text):
        return _parse_hex(text)

    rgba = _parse_function(text) if "(" in text else _parse_named(text)
    if rgba is None:
        logger.debug("Could not parse color literal %r", literal)
        raise UnparseableColor(literal)
    return rgba
