"""
DOCX parser.

Reads the paragraphs of ``word/document.xml`` as plain strings and renders
them as lightweight HTML blocks. The part is consumed as a flat stream of
start/end/character tokens driven through a three-state machine.
"""

from __future__ import annotations

import html
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Union

from ..exceptions import (
    BadContainerError,
    DocumentPartMissingError,
    MalformedXMLError,
    PackageUnreadableError,
)
from ..utils.xml_utils import XML_SPACE_ATTRIBUTE, local_name
from .package_reader import PackageReader

logger = logging.getLogger(__name__)

DOCUMENT_PART = "word/document.xml"


@dataclass(frozen=True)
class StartElement:
    name: str
    attrs: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EndElement:
    name: str


@dataclass(frozen=True)
class CharData:
    text: str


Token = Union[StartElement, EndElement, CharData]


class ParserState(Enum):
    OUTSIDE = "outside"
    IN_PARAGRAPH = "in_paragraph"
    IN_TEXT = "in_text"


def iter_tokens(data: bytes, part_name: str = DOCUMENT_PART) -> Iterator[Token]:
    """
    Turn XML bytes into a flat token stream.

    Element names are local names. The text directly inside an element is
    emitted just before its end token, which keeps it inside the element for
    leaf nodes such as ``<w:t>``.
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    try:
        parser.feed(data)
        parser.close()
    except ET.ParseError as exc:
        raise MalformedXMLError("Malformed document part", part_name=part_name, details=str(exc)) from exc

    for event, element in parser.read_events():
        name = local_name(element.tag)
        if event == "start":
            yield StartElement(name, dict(element.attrib))
        else:
            if element.text:
                yield CharData(element.text)
            yield EndElement(name)


class ParagraphCollector:
    """State machine collecting paragraph text from a token stream."""

    def __init__(self):
        self.state = ParserState.OUTSIDE
        self.paragraphs: List[str] = []
        self._buffer: List[str] = []
        self._preserve_space = False

    def feed(self, token: Token) -> None:
        if isinstance(token, StartElement):
            self._start(token)
        elif isinstance(token, EndElement):
            self._end(token)
        elif self.state is ParserState.IN_TEXT:
            text = token.text
            if not self._preserve_space:
                text = text.replace("\r", "")
            self._buffer.append(text)

    def _start(self, token: StartElement) -> None:
        if token.name == "p":
            if self.state is not ParserState.OUTSIDE:
                # Nested paragraph (text box content): close the outer one first.
                self._flush()
            self.state = ParserState.IN_PARAGRAPH
        elif self.state is ParserState.OUTSIDE:
            return
        elif token.name == "t":
            self.state = ParserState.IN_TEXT
            self._preserve_space = token.attrs.get(XML_SPACE_ATTRIBUTE) == "preserve"
        elif token.name == "br":
            self._buffer.append("\n")

    def _end(self, token: EndElement) -> None:
        if token.name == "t" and self.state is ParserState.IN_TEXT:
            self.state = ParserState.IN_PARAGRAPH
        elif token.name == "p" and self.state is not ParserState.OUTSIDE:
            self._flush()
            self.state = ParserState.OUTSIDE

    def _flush(self) -> None:
        text = "".join(self._buffer).replace("\r", "").strip()
        if text:
            self.paragraphs.append(text)
        self._buffer = []


def paragraphs_to_html(paragraphs: List[str]) -> str:
    """Render paragraphs as concatenated ``<p>`` blocks, line breaks as ``<br />``."""
    blocks = []
    for paragraph in paragraphs:
        escaped = html.escape(paragraph).replace("\n", "<br />")
        blocks.append(f"<p>{escaped}</p>")
    return "".join(blocks)


class DOCXParser:
    """Parser for word-processing packages."""

    def __init__(self, data: bytes):
        """
        Initialize DOCX parser.

        Args:
            data: Package bytes
        """
        self.data = data

    def parse(self) -> List[str]:
        """
        Decode the package into paragraphs.

        Empty paragraphs are dropped.

        Returns:
            Non-empty paragraph strings in document order
        """
        try:
            package = PackageReader(self.data)
        except BadContainerError as exc:
            raise PackageUnreadableError("Cannot open document package", exc.details) from exc

        with package:
            document = package.read(DOCUMENT_PART)
        if document is None:
            raise DocumentPartMissingError("Document part is missing", part_name=DOCUMENT_PART)

        collector = ParagraphCollector()
        for token in iter_tokens(document):
            collector.feed(token)

        logger.debug(f"Decoded {len(collector.paragraphs)} paragraphs")
        return collector.paragraphs

    def to_html(self) -> str:
        """Decode the package into HTML paragraph blocks."""
        return paragraphs_to_html(self.parse())


def decode_docx(data: bytes) -> str:
    """Decode document package bytes into HTML paragraph blocks."""
    return DOCXParser(data).to_html()
