"""
translate.py
============

Does: Map one input event to the event the writer should receive, if any.
      - StartElement: attributes rewritten, namespaces kept in order
      - EndElement: name dropped (the writer tracks open elements)
      - StartDocument: redeclared with an explicit encoding
      - Whitespace, EndDocument: suppressed (output is re-indented)
      - everything else: passed through verbatim
Returns: XmlEvent | None
Used By: pipeline.orchestrator.SvgInverter.
"""

from __future__ import annotations

from typing import Optional

from svg_invert.color.cache import ColorCache
from svg_invert.markup.events import (
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    StartDocument,
    StartElement,
    Whitespace,
    XmlEvent,
)
from svg_invert.markup.writer import DEFAULT_ENCODING
from svg_invert.pipeline.attributes import rewrite_attributes

__all__ = ["translate_event"]
__docformat__ = "google"


def translate_event(event: XmlEvent, cache: ColorCache) -> Optional[XmlEvent]:
    """
    Does: Translate one structural event.
    Returns: The output event, or None when the event is not emitted.
    Raises: TypeError for objects that are not XML events.
    """
    if isinstance(event, StartElement):
        return StartElement(
            event.name,
            rewrite_attributes(event.attributes, cache),
            tuple(event.namespaces),
        )
    if isinstance(event, EndElement):
        return EndElement()
    if isinstance(event, (Characters, Comment, CData, ProcessingInstruction)):
        return event
    if isinstance(event, StartDocument):
        return StartDocument(
            version=event.version,
            encoding=event.encoding or DEFAULT_ENCODING,
            standalone=event.standalone,
        )
    if isinstance(event, (Whitespace, EndDocument)):
        return None
    raise TypeError(f"not an XML event: {event!r}")
