"""
Public API for the Office package codec.

Four pure functions, bytes in and model or bytes out:

    from office_codec import decode_spreadsheet, encode_spreadsheet

    workbook = decode_spreadsheet(data)
    data = encode_spreadsheet(workbook)

Nothing is read from or written to disk; callers own size limits on input.
"""

from __future__ import annotations

import zipfile

from .export.docx_exporter import DOCXExporter
from .export.xlsx_exporter import XLSXExporter
from .models.workbook import Workbook
from .parser.docx_parser import DOCXParser
from .parser.html_parser import DEFAULT_NORMALIZER, HTMLNormalizer
from .parser.xlsx_parser import XLSXParser


def decode_spreadsheet(data: bytes) -> Workbook:
    """
    Decode an XLSX package.

    Args:
        data: Package bytes

    Returns:
        Workbook with sheets in declared order and dense string rows

    Raises:
        OfficeCodecError: any subclass; no partial workbook is returned
    """
    return XLSXParser(data).parse()


def encode_spreadsheet(workbook: Workbook, compression: int = zipfile.ZIP_DEFLATED) -> bytes:
    """
    Encode a workbook as an XLSX package.

    Empty cells are not written; a workbook without sheets gives a valid
    empty package.

    Args:
        workbook: Workbook to encode
        compression: Zip compression method

    Returns:
        Package bytes
    """
    return XLSXExporter(workbook, compression).export_to_bytes()


def decode_document_to_text(data: bytes) -> str:
    """
    Decode a DOCX package into ``<p>`` blocks.

    Args:
        data: Package bytes

    Returns:
        HTML-escaped paragraphs, line breaks as ``<br />``; ``""`` when the
        document has no text
    """
    return DOCXParser(data).to_html()


def encode_document_from_text(text: str, normalizer: HTMLNormalizer = DEFAULT_NORMALIZER,
                              compression: int = zipfile.ZIP_DEFLATED) -> bytes:
    """
    Encode HTML or plain text as a DOCX package.

    Args:
        text: Content; ``<p>``-style blocks and blank lines separate paragraphs
        normalizer: Normalization rules
        compression: Zip compression method

    Returns:
        Package bytes holding at least one paragraph
    """
    return DOCXExporter(normalizer.to_paragraphs(text), compression).export_to_bytes()
