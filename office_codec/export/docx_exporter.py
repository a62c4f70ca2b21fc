"""
DOCX exporter.

Writes paragraphs as a minimal word-processing package: content types, the
root relationship and ``word/document.xml``.
"""

from __future__ import annotations

import logging
import zipfile
from typing import List

from ..exceptions import EntrySerializationError, WriteFailureError
from ..parser.relationships import OFFICE_DOCUMENT_TYPE
from ..utils.xml_utils import NAMESPACES, XML_DECLARATION, escape_xml_text
from .package_writer import CONTENT_TYPES_PART, PackageWriter, content_types_xml, relationships_xml

logger = logging.getLogger(__name__)

DOCUMENT_PART = "word/document.xml"
ROOT_RELS_PART = "_rels/.rels"

DOCUMENT_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"

# US Letter with one inch margins, in twips.
SECTION_PROPERTIES = (
    '<w:sectPr><w:pgSz w:w="12240" w:h="15840"/>'
    '<w:pgMar w:top="1440" w:right="1440" w:bottom="1440" w:left="1440"/></w:sectPr>'
)


class DOCXExporter:
    """
    Exports paragraphs to DOCX bytes.
    """

    def __init__(self, paragraphs: List[str], compression: int = zipfile.ZIP_DEFLATED):
        """
        Initialize DOCX exporter.

        Args:
            paragraphs: Paragraph texts; ``\\n`` marks a line break
            compression: Zip compression method
        """
        self.paragraphs = list(paragraphs) or [""]
        self.compression = compression

    def export_to_bytes(self) -> bytes:
        """
        Serialize the paragraphs.

        Returns:
            Package bytes
        """
        writer = PackageWriter(self.compression)
        try:
            writer.add_entry(CONTENT_TYPES_PART, content_types_xml([(DOCUMENT_PART, DOCUMENT_CONTENT_TYPE)]))
            writer.add_entry(ROOT_RELS_PART, relationships_xml([("rId1", OFFICE_DOCUMENT_TYPE, DOCUMENT_PART)]))
            writer.add_entry(DOCUMENT_PART, self.document_xml())
            data = writer.finish()
        except WriteFailureError as exc:
            raise EntrySerializationError("Cannot serialize document", str(exc)) from exc

        logger.debug(f"Encoded document with {len(self.paragraphs)} paragraphs")
        return data

    def document_xml(self) -> str:
        """Build ``word/document.xml``."""
        parts = [XML_DECLARATION, f'<w:document xmlns:w="{NAMESPACES["w"]}">', "<w:body>"]
        parts.extend(self._paragraph_xml(paragraph) for paragraph in self.paragraphs)
        parts.append(SECTION_PROPERTIES)
        parts.append("</w:body></w:document>")
        return "".join(parts)

    @staticmethod
    def _paragraph_xml(paragraph: str) -> str:
        text = paragraph.replace("\r", "")
        if not text:
            return "<w:p/>"

        runs = []
        for index, line in enumerate(text.split("\n")):
            if index:
                runs.append("<w:r><w:br/></w:r>")
            if line:
                runs.append(f"<w:r><w:t>{escape_xml_text(line)}</w:t></w:r>")
        return f"<w:p>{''.join(runs)}</w:p>"


def encode_docx(paragraphs: List[str], compression: int = zipfile.ZIP_DEFLATED) -> bytes:
    """Encode paragraphs into document package bytes."""
    return DOCXExporter(paragraphs, compression).export_to_bytes()
