"""
Export module for writing Office packages.

This module contains the package writer and the encoders built on it.
"""

from .docx_exporter import DOCXExporter, encode_docx
from .package_writer import PackageWriter
from .xlsx_exporter import XLSXExporter, encode_xlsx

__all__ = [
    "DOCXExporter",
    "encode_docx",
    "PackageWriter",
    "XLSXExporter",
    "encode_xlsx",
]
