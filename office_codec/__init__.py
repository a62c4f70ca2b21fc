"""
office_codec - Office package codec.

Converts between an in-memory row/paragraph model and the zip-based XML
formats used by spreadsheets (XLSX) and word-processing documents (DOCX).

Quick Start:
    from office_codec import Sheet, Workbook, decode_spreadsheet, encode_spreadsheet

    data = encode_spreadsheet(Workbook([Sheet("S1", [["a", "b"]])]))
    workbook = decode_spreadsheet(data)
"""

from .version import __version__, __version_info__

from .api import (
    decode_document_to_text,
    decode_spreadsheet,
    encode_document_from_text,
    encode_spreadsheet,
)
from .exceptions import (
    BadContainerError,
    DescriptorMissingError,
    DocumentPartMissingError,
    EntrySerializationError,
    MalformedSharedStringsError,
    MalformedSheetXMLError,
    MalformedXMLError,
    MissingPartError,
    NoSheetsDeclaredError,
    OfficeCodecError,
    PackageUnreadableError,
    PartReadError,
    RelationshipsMissingError,
    SheetUnreadableError,
    StructureError,
    UnresolvedSheetTargetError,
    WriteFailureError,
)
from .models.workbook import Row, Sheet, Workbook
from .parser.html_parser import DEFAULT_NORMALIZER, SINGLE_LINE_NORMALIZER, HTMLNormalizer
from .utils.cell_address import cell_reference, column_index_of, column_letters_of

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # Codec API
    "decode_spreadsheet",
    "encode_spreadsheet",
    "decode_document_to_text",
    "encode_document_from_text",

    # Models
    "Row",
    "Sheet",
    "Workbook",

    # Configuration
    "HTMLNormalizer",
    "DEFAULT_NORMALIZER",
    "SINGLE_LINE_NORMALIZER",

    # Cell addresses
    "cell_reference",
    "column_index_of",
    "column_letters_of",

    # Exceptions
    "OfficeCodecError",
    "BadContainerError",
    "PackageUnreadableError",
    "PartReadError",
    "SheetUnreadableError",
    "MissingPartError",
    "DescriptorMissingError",
    "DocumentPartMissingError",
    "MalformedXMLError",
    "MalformedSharedStringsError",
    "MalformedSheetXMLError",
    "StructureError",
    "NoSheetsDeclaredError",
    "RelationshipsMissingError",
    "UnresolvedSheetTargetError",
    "WriteFailureError",
    "EntrySerializationError",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()
