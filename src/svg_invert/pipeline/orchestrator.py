# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Drive one inversion run: pull events from the reader, translate each one,
      and hand every non-suppressed result to the writer, in input order.
      The first ReadError or WriteError ends the run; nothing is retried.
Returns:
  - SvgInverter(cache, config).invert(source, sink) -> None
  - SvgInverter.invert_bytes(data) -> bytes
  - invert_svg(source, sink) / invert_svg_bytes(data): one-shot helpers with a fresh cache
Used by: CLI, library callers processing one or many documents.
"""

import io
import logging
from typing import BinaryIO, Optional, Union

from svg_invert.color.cache import ColorCache
from svg_invert.config import InvertConfig
from svg_invert.markup.reader import read_events
from svg_invert.markup.writer import EventWriter
from svg_invert.pipeline.translate import translate_event
from svg_invert.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "SvgInverter",
    "invert_svg",
    "invert_svg_bytes",
]

Source = Union[BinaryIO, bytes, bytearray]


class SvgInverter:
    """
    Inverts `fill`/`stroke` colors of XML documents.

    One instance owns one ColorCache. Reusing the instance for several documents
    (from one thread or many) shares the cache, so colors seen before are not
    recomputed.
    """

    def __init__(self, cache: Optional[ColorCache] = None, config: Optional[InvertConfig] = None):
        self._cache = cache if cache is not None else ColorCache()
        self._config = config or InvertConfig()

    @property
    def cache(self) -> ColorCache:
        return self._cache

    @property
    def config(self) -> InvertConfig:
        return self._config

    def invert(self, source: Source, sink: BinaryIO) -> None:
        """
        Does: Stream `source` to `sink` with inverted colors.
        Raises: ReadError (malformed/unreadable input), WriteError (sink failure).
        """
        writer = EventWriter(sink, self._config)
        read = 0
        for event in read_events(source, chunk_size=self._config.chunk_size):
            read += 1
            out = translate_event(event, self._cache)
            if out is None:
                continue
            writer.write(out)
        writer.close()

        hits, misses, size = self._cache.info()
        logger.debug(
            "Inverted document: %d events read, %d written (cache hits=%d misses=%d size=%d)",
            read, writer.events_written, hits, misses, size,
        )
        debug(f"run done: read={read} written={writer.events_written} cache={size}", topic="pipeline")

    def invert_bytes(self, data: Union[bytes, bytearray]) -> bytes:
        sink = io.BytesIO()
        self.invert(data, sink)
        return sink.getvalue()


def invert_svg(source: Source, sink: BinaryIO, config: Optional[InvertConfig] = None) -> None:
    """Shortcut for SvgInverter(config=config).invert(source, sink)."""
    SvgInverter(config=config).invert(source, sink)


def invert_svg_bytes(data: Union[bytes, bytearray], config: Optional[InvertConfig] = None) -> bytes:
    return SvgInverter(config=config).invert_bytes(data)
