"""
events.py
=========

Does: Define the structural XML event model shared by reader, translator and writer.
      XmlEvent is a closed union; every consumer handles each variant explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

__all__ = [
    "QName",
    "Attribute",
    "Namespace",
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
    "EVENT_TYPES",
]
__docformat__ = "google"


@dataclass(frozen=True)
class QName:
    local_name: str
    namespace: Optional[str] = None
    prefix: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.prefix}:{self.local_name}" if self.prefix else self.local_name


@dataclass(frozen=True)
class Attribute:
    name: QName
    value: str


# (prefix, uri); prefix None is the default namespace
Namespace = Tuple[Optional[str], str]


@dataclass(frozen=True)
class StartDocument:
    version: str = "1.0"
    encoding: Optional[str] = None
    standalone: Optional[bool] = None


@dataclass(frozen=True)
class EndDocument:
    pass


@dataclass(frozen=True)
class StartElement:
    name: QName
    attributes: Tuple[Attribute, ...] = ()
    namespaces: Tuple[Namespace, ...] = field(default=())


@dataclass(frozen=True)
class EndElement:
    name: Optional[QName] = None


@dataclass(frozen=True)
class Characters:
    text: str


@dataclass(frozen=True)
class Whitespace:
    text: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class CData:
    text: str


@dataclass(frozen=True)
class ProcessingInstruction:
    name: str
    data: Optional[str] = None


XmlEvent = Union[
    StartDocument,
    EndDocument,
    StartElement,
    EndElement,
    Characters,
    Whitespace,
    Comment,
    CData,
    ProcessingInstruction,
]

EVENT_TYPES = (
    StartDocument,
    EndDocument,
    StartElement,
    EndElement,
    Characters,
    Whitespace,
    Comment,
    CData,
    ProcessingInstruction,
)
