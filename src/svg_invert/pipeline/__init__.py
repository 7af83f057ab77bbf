"""
pipeline package.
=================

Does: Attribute rewriting, event translation and the streaming orchestrator.
"""

from .attributes import COLOR_ATTRIBUTES, is_color_attribute, rewrite_attributes
from .orchestrator import SvgInverter, invert_svg, invert_svg_bytes
from .translate import translate_event

__all__ = [
    "COLOR_ATTRIBUTES",
    "is_color_attribute",
    "rewrite_attributes",
    "translate_event",
    "SvgInverter",
    "invert_svg",
    "invert_svg_bytes",
]

__docformat__ = "google"
