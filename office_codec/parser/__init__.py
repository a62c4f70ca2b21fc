"""
Parser module for reading Office packages.

This module contains the components that open packages and decode their
parts into the in-memory models.
"""

from .docx_parser import DOCXParser, decode_docx
from .html_parser import DEFAULT_NORMALIZER, SINGLE_LINE_NORMALIZER, HTMLNormalizer
from .package_reader import PackageReader
from .relationships import RelationshipsParser
from .shared_strings import parse_shared_strings
from .xlsx_parser import XLSXParser, decode_xlsx

__all__ = [
    "DOCXParser",
    "decode_docx",
    "DEFAULT_NORMALIZER",
    "SINGLE_LINE_NORMALIZER",
    "HTMLNormalizer",
    "PackageReader",
    "RelationshipsParser",
    "parse_shared_strings",
    "XLSXParser",
    "decode_xlsx",
]
