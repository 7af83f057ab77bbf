"""
markup package.
===============

Does: XML event model plus the streaming reader (expat) and the indenting writer.
"""

from .events import (
    Attribute,
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    QName,
    StartDocument,
    StartElement,
    Whitespace,
    XmlEvent,
)
from .reader import read_events
from .writer import EventWriter

__all__ = [
    "QName",
    "Attribute",
    "StartDocument",
    "EndDocument",
    "StartElement",
    "EndElement",
    "Characters",
    "Whitespace",
    "Comment",
    "CData",
    "ProcessingInstruction",
    "XmlEvent",
    "read_events",
    "EventWriter",
]

__docformat__ = "google"
