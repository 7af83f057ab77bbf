"""
cache.py
========

Does: Memoize color inversion per SvgInverter instance.
      Failed inversions are cached as pass-through (the literal maps to itself).
Returns: ColorCache.lookup_or_compute(literal) -> inverted literal.
Used By: pipeline.attributes.rewrite_attributes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import NamedTuple

from svg_invert.color.invert import invert_color
from svg_invert.errors import ColorError
from svg_invert.utils.log import debug

__all__ = ["CacheInfo", "ColorCache"]
__docformat__ = "google"

log = logging.getLogger(__name__)


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    size: int


class ColorCache:
    """
    Thread-safe literal -> inverted literal mapping.

    Entries are never evicted and never replaced: concurrent misses on the same
    key may both call the inverter, but only the first stored value is kept and
    returned to every caller.
    """

    def __init__(self, inverter: Callable[[str], str] = invert_color):
        self._inverter = inverter
        self._lock = threading.RLock()
        self._entries: dict[str, str] = {}
        self._hits = 0
        self._misses = 0

    def lookup_or_compute(self, literal: str) -> str:
        with self._lock:
            cached = self._entries.get(literal)
            if cached is not None:
                self._hits += 1
                return cached

        # computed outside the lock; duplicates under a race are identical
        try:
            value = self._inverter(literal)
        except ColorError as e:
            debug(f"pass-through for {literal!r}: {e}", topic="color")
            value = literal

        with self._lock:
            self._misses += 1
            stored = self._entries.setdefault(literal, value)
        log.debug("Color cache MISS → STORED: %r -> %r", literal, stored)
        debug(f"{literal!r} -> {stored!r}", topic="cache")
        return stored

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._entries))

    def __contains__(self, literal: object) -> bool:
        with self._lock:
            return literal in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        hits, misses, size = self.info()
        return f"ColorCache(size={size}, hits={hits}, misses={misses})"
