"""
attributes.py
=============

Does: Rewrite the color-bearing attributes (`fill`, `stroke`) of one element
      through the color cache; every other attribute is kept as the same object.
Returns: A new attribute tuple of the same length and order.
Used By: pipeline.translate.translate_event.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Tuple

from svg_invert.color.cache import ColorCache
from svg_invert.markup.events import Attribute, QName

__all__ = ["COLOR_ATTRIBUTES", "is_color_attribute", "rewrite_attributes"]
__docformat__ = "google"

COLOR_ATTRIBUTES: FrozenSet[str] = frozenset({"fill", "stroke"})


def is_color_attribute(name: QName) -> bool:
    """Does: True when the local name is `fill` or `stroke`, whatever the namespace."""
    return name.local_name in COLOR_ATTRIBUTES


def rewrite_attributes(attributes: Iterable[Attribute], cache: ColorCache) -> Tuple[Attribute, ...]:
    return tuple(
        Attribute(a.name, cache.lookup_or_compute(a.value)) if is_color_attribute(a.name) else a
        for a in attributes
    )
