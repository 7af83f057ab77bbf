"""
svg_invert
==========

Does: Root package of the SVG color inverter.
Returns: Exposes the one-shot helpers, the reusable SvgInverter and the error types.
Used by: The `svg-invert` CLI and library callers.
"""

from svg_invert.color import ColorCache, invert_color, parse_color
from svg_invert.config import InvertConfig, load_invert_config
from svg_invert.errors import (
    ColorError,
    InvertSvgError,
    ReadError,
    UnparseableColor,
    WriteError,
)
from svg_invert.pipeline import SvgInverter, invert_svg, invert_svg_bytes

__all__ = [
    "SvgInverter",
    "invert_svg",
    "invert_svg_bytes",
    "invert_color",
    "parse_color",
    "ColorCache",
    "InvertConfig",
    "load_invert_config",
    "InvertSvgError",
    "ReadError",
    "WriteError",
    "ColorError",
    "UnparseableColor",
]
__version__ = "0.1.0"
__docformat__ = "google"
