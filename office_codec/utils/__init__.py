"""
Utils module for Office package helpers.
"""

from .cell_address import cell_reference, column_index_of, column_letters_of
from .logger import get_logger, setup_logging
from .xml_utils import (
    NAMESPACES,
    escape_cell_text,
    escape_xml_attribute,
    escape_xml_text,
    get_local_attribute,
    local_name,
    unescape_cell_text,
)

__all__ = [
    "cell_reference",
    "column_index_of",
    "column_letters_of",
    "get_logger",
    "setup_logging",
    "NAMESPACES",
    "escape_cell_text",
    "escape_xml_attribute",
    "escape_xml_text",
    "unescape_cell_text",
    "get_local_attribute",
    "local_name",
]
