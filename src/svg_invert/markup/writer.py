"""
writer.py
=========

Does: Serialize structural events to an indented XML byte stream.
      The writer keeps its own open-element stack, so EndElement needs no name.
Returns: EventWriter(sink, config).write(event) / .close()
Used By: pipeline.orchestrator.SvgInverter.
"""

from __future__ import annotations

import codecs
import logging
from typing import BinaryIO, List, Optional
from xml.sax.saxutils import escape

from svg_invert.config import InvertConfig
from svg_invert.errors import WriteError
from svg_invert.markup.events import (
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
from svg_invert.utils.log import debug

__all__ = ["DEFAULT_ENCODING", "EventWriter", "escape_attribute", "escape_text"]
__docformat__ = "google"

log = logging.getLogger(__name__)

DEFAULT_ENCODING = "UTF-8"

# per-element indentation flags
_WROTE_MARKUP = 1
_WROTE_TEXT = 2

_ATTR_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


def escape_text(text: str) -> str:
    return escape(text)


def escape_attribute(value: str) -> str:
    return escape(value, _ATTR_ENTITIES)


class EventWriter:
    """
    Indenting XML emitter.

    Markup (start tags, comments, processing instructions) goes on its own line,
    indented by depth, unless the enclosing element already received text. A
    closing tag gets its own line only when the element holds markup and no
    text. An element closed right after it was opened is written as `<x />`.
    """

    def __init__(self, sink: BinaryIO, config: Optional[InvertConfig] = None):
        self._sink = sink
        self._config = config or InvertConfig()
        self._encoder: Optional[codecs.IncrementalEncoder] = None
        self._stack: List[QName] = []
        self._flags: List[int] = [0]
        self._pending_start = False
        self.events_written = 0

    # ── low level ────────────────────────────────────────────────────────────
    def _write(self, text: str) -> None:
        if self._encoder is None:
            self._set_encoding(DEFAULT_ENCODING)
        try:
            self._sink.write(self._encoder.encode(text))
        except (OSError, ValueError) as e:
            raise WriteError(f"cannot write output: {e}") from e

    def _set_encoding(self, encoding: str) -> None:
        try:
            factory = codecs.getincrementalencoder(encoding)
        except LookupError as e:
            raise WriteError(f"unsupported output encoding {encoding!r}") from e
        self._encoder = factory(errors="xmlcharrefreplace")

    def _mark(self, flag: int) -> None:
        self._flags[-1] |= flag

    def _newline(self, level: int) -> None:
        self._write(self._config.line_separator + self._config.indent_string * level)

    def _before_markup(self) -> None:
        flags = self._flags[-1]
        if (
            self._config.perform_indent
            and not flags & _WROTE_TEXT
            and (self._stack or flags & _WROTE_MARKUP)
        ):
            self._newline(len(self._stack))

    def _close_pending_start(self) -> None:
        if self._pending_start:
            self._pending_start = False
            self._write(">")

    def _ensure_declaration(self) -> None:
        if self._encoder is None:
            self._start_document(StartDocument(encoding=DEFAULT_ENCODING))

    # ── event handlers ───────────────────────────────────────────────────────
    def _start_document(self, event: StartDocument) -> None:
        if self._encoder is not None:
            raise WriteError("document declaration must come first")
        encoding = event.encoding or DEFAULT_ENCODING
        self._set_encoding(encoding)
        decl = f'<?xml version="{event.version}" encoding="{encoding}"'
        if event.standalone is not None:
            decl += ' standalone="yes"' if event.standalone else ' standalone="no"'
        self._write(decl + "?>")
        self._mark(_WROTE_MARKUP)

    def _start_element(self, event: StartElement) -> None:
        self._ensure_declaration()
        self._close_pending_start()
        self._before_markup()
        self._mark(_WROTE_MARKUP)

        parts = ["<", str(event.name)]
        for prefix, uri in event.namespaces:
            attr = f"xmlns:{prefix}" if prefix else "xmlns"
            parts.append(f' {attr}="{escape_attribute(uri)}"')
        for attribute in event.attributes:
            parts.append(f' {attribute.name}="{escape_attribute(attribute.value)}"')
        self._write("".join(parts))

        self._stack.append(event.name)
        self._flags.append(0)
        if self._config.normalize_empty_elements:
            self._pending_start = True
        else:
            self._write(">")

    def _end_element(self, event: EndElement) -> None:
        if not self._stack:
            raise WriteError("end element without a matching start element")
        name = self._stack.pop()
        flags = self._flags.pop()
        if event.name is not None and str(event.name) != str(name):
            raise WriteError(f"end element </{event.name}> does not match <{name}>")

        if self._pending_start:
            self._pending_start = False
            self._write(" />" if self._config.pad_self_closing else "/>")
        else:
            if self._config.perform_indent and flags & _WROTE_MARKUP and not flags & _WROTE_TEXT:
                self._newline(len(self._stack))
            self._write(f"</{name}>")
        self._mark(_WROTE_MARKUP)

    def _characters(self, text: str) -> None:
        self._close_pending_start()
        self._write(text)
        self._mark(_WROTE_TEXT)

    def _comment(self, event: Comment) -> None:
        self._ensure_declaration()
        self._close_pending_start()
        self._before_markup()
        text = event.text
        if self._config.autopad_comments:
            if not text.startswith(" "):
                text = " " + text
            if not text.endswith(" "):
                text += " "
        self._write(f"<!--{text}-->")
        self._mark(_WROTE_MARKUP)

    def _processing_instruction(self, event: ProcessingInstruction) -> None:
        self._ensure_declaration()
        self._close_pending_start()
        self._before_markup()
        if event.data:
            self._write(f"<?{event.name} {event.data}?>")
        else:
            self._write(f"<?{event.name}?>")
        self._mark(_WROTE_MARKUP)

    # ── public API ───────────────────────────────────────────────────────────
    def write(self, event: XmlEvent) -> None:
        """Does: Serialize one event. Raises WriteError on sink or nesting failures."""
        if isinstance(event, StartDocument):
            self._start_document(event)
        elif isinstance(event, StartElement):
            self._start_element(event)
        elif isinstance(event, EndElement):
            self._end_element(event)
        elif isinstance(event, Characters):
            self._characters(escape_text(event.text))
        elif isinstance(event, CData):
            self._characters("<![CDATA[" + event.text.replace("]]>", "]]]]><![CDATA[>") + "]]>")
        elif isinstance(event, Comment):
            self._comment(event)
        elif isinstance(event, ProcessingInstruction):
            self._processing_instruction(event)
        elif isinstance(event, (Whitespace, EndDocument)):
            return
        else:
            raise TypeError(f"not an XML event: {event!r}")
        self.events_written += 1

    def close(self) -> None:
        """Does: Check every element was closed and flush the sink."""
        if self._stack:
            names = ", ".join(str(n) for n in self._stack)
            raise WriteError(f"unclosed elements at end of document: {names}")
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            try:
                flush()
            except (OSError, ValueError) as e:
                raise WriteError(f"cannot flush output: {e}") from e
        debug(f"wrote {self.events_written} events", topic="writer")
        log.debug("EventWriter closed after %d events", self.events_written)
