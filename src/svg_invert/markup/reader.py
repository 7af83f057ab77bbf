"""
reader.py
=========

Does: Tokenize an XML byte stream into structural events, lazily.
      expat is fed chunk by chunk; handlers queue events that are yielded after
      each chunk, so memory stays bounded by the chunk size and the text runs.
Returns: read_events(source) -> Iterator[XmlEvent]
         (StartDocument first, EndDocument last).
Used By: pipeline.orchestrator.SvgInverter.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator, List, Optional, Union
from xml.parsers import expat

from svg_invert.config import DEFAULT_CHUNK_SIZE
from svg_invert.errors import ReadError
from svg_invert.markup.events import (
    Attribute,
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    Namespace,
    ProcessingInstruction,
    QName,
    StartDocument,
    StartElement,
    Whitespace,
    XmlEvent,
)
from svg_invert.utils.log import debug

__all__ = ["DEFAULT_CHUNK_SIZE", "split_name", "read_events"]
__docformat__ = "google"

_NS_SEP = " "
_XML_WHITESPACE = " \t\r\n"


def split_name(raw: str) -> QName:
    """Does: Split an expat 'uri local prefix' triplet into a QName."""
    parts = raw.split(_NS_SEP)
    if len(parts) == 3:
        return QName(parts[1], parts[0], parts[2])
    if len(parts) == 2:
        return QName(parts[1], parts[0])
    return QName(raw)


class _EventCollector:
    """Expat handler set; turns callbacks into queued XmlEvent objects."""

    def __init__(self, parser: "expat.XMLParserType"):
        self.events: List[XmlEvent] = []
        self._started = False
        self._text: List[str] = []
        self._cdata: Optional[List[str]] = None
        self._namespaces: List[Namespace] = []

        parser.XmlDeclHandler = self.xml_decl
        parser.StartNamespaceDeclHandler = self.start_namespace
        parser.StartElementHandler = self.start_element
        parser.EndElementHandler = self.end_element
        parser.CharacterDataHandler = self.characters
        parser.CommentHandler = self.comment
        parser.StartCdataSectionHandler = self.start_cdata
        parser.EndCdataSectionHandler = self.end_cdata
        parser.ProcessingInstructionHandler = self.processing_instruction

    # ── helpers ──────────────────────────────────────────────────────────────
    def _emit(self, event: XmlEvent) -> None:
        if not self._started:
            self._started = True
            self.events.append(StartDocument())
        self.flush_text()
        self.events.append(event)

    def flush_text(self) -> None:
        if not self._text:
            return
        text = "".join(self._text)
        self._text = []
        if text.strip(_XML_WHITESPACE):
            self.events.append(Characters(text))
        else:
            self.events.append(Whitespace(text))

    def take(self) -> List[XmlEvent]:
        events, self.events = self.events, []
        return events

    # ── expat callbacks ──────────────────────────────────────────────────────
    def xml_decl(self, version: Optional[str], encoding: Optional[str], standalone: int) -> None:
        self._started = True
        self.events.append(
            StartDocument(
                version=version or "1.0",
                encoding=encoding,
                standalone=None if standalone == -1 else bool(standalone),
            )
        )

    def start_namespace(self, prefix: Optional[str], uri: Optional[str]) -> None:
        self._namespaces.append((prefix, uri or ""))

    def start_element(self, name: str, attrs: List[str]) -> None:
        attributes = tuple(
            Attribute(split_name(attrs[i]), attrs[i + 1]) for i in range(0, len(attrs), 2)
        )
        namespaces, self._namespaces = tuple(self._namespaces), []
        self._emit(StartElement(split_name(name), attributes, namespaces))

    def end_element(self, name: str) -> None:
        self._emit(EndElement(split_name(name)))

    def characters(self, data: str) -> None:
        if self._cdata is not None:
            self._cdata.append(data)
        else:
            self._text.append(data)

    def comment(self, data: str) -> None:
        self._emit(Comment(data))

    def start_cdata(self) -> None:
        self.flush_text()
        self._cdata = []

    def end_cdata(self) -> None:
        text = "".join(self._cdata or ())
        self._cdata = None
        self._emit(CData(text))

    def processing_instruction(self, target: str, data: str) -> None:
        self._emit(ProcessingInstruction(target, data or None))


def _create_parser() -> "expat.XMLParserType":
    parser = expat.ParserCreate(namespace_separator=_NS_SEP)
    parser.namespace_prefixes = True
    parser.ordered_attributes = True
    parser.specified_attributes = True
    parser.buffer_text = True
    return parser


def _read_error(e: expat.ExpatError) -> ReadError:
    return ReadError(expat.ErrorString(e.code), line=e.lineno, column=e.offset)


def read_events(
    source: Union[BinaryIO, bytes, bytearray],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[XmlEvent]:
    """
    Does: Yield structural events from an XML byte stream.
    Raises: ReadError on malformed XML or when reading the source fails.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(bytes(source))
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    parser = _create_parser()
    collector = _EventCollector(parser)
    total = 0

    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as e:
            raise ReadError(f"cannot read input: {e}") from e
        if not chunk:
            break
        if not isinstance(chunk, (bytes, bytearray)):
            raise ReadError(f"expected a binary stream, got {type(chunk).__name__} chunks")
        total += len(chunk)
        try:
            parser.Parse(chunk, False)
        except expat.ExpatError as e:
            raise _read_error(e) from e
        yield from collector.take()

    try:
        parser.Parse(b"", True)
    except expat.ExpatError as e:
        raise _read_error(e) from e
    collector.flush_text()
    yield from collector.take()
    debug(f"read {total} bytes", topic="reader")
    yield EndDocument()
