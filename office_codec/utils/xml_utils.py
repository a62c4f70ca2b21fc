"""
XML utilities for Office packages.

Namespace constants shared by the parsers and exporters, plus text escaping
and tag helpers.
"""

import re
import xml.etree.ElementTree as ET
from typing import Optional
from xml.sax.saxutils import escape

NAMESPACES = {
    "main": "http://schemas.openxmlformats.org/spreadsheetml/2006/main",
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "rels": "http://schemas.openxmlformats.org/package/2006/relationships",
    "ct": "http://schemas.openxmlformats.org/package/2006/content-types",
    "xml": "http://www.w3.org/XML/1998/namespace",
}

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

XML_SPACE_ATTRIBUTE = f"{{{NAMESPACES['xml']}}}space"

# Characters XML 1.0 cannot carry at all, not even as character references.
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

_TEXT_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_TEXT_ENTITIES_KEEP_CR = {'"': "&quot;", "'": "&apos;", "\r": "&#13;"}
# Attribute-value normalization turns raw tabs and line breaks into spaces.
_ATTRIBUTE_ENTITIES = {'"': "&quot;", "'": "&apos;", "\t": "&#9;", "\n": "&#10;", "\r": "&#13;"}

# SpreadsheetML carries characters XML cannot (and lone surrogates) as _xHHHH_.
_CELL_ESCAPED_CHARS = r"\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff"
_CELL_ESCAPE_PATTERN = re.compile(
    rf"[{_CELL_ESCAPED_CHARS}]|_(?=x[0-9A-Fa-f]{{4}}(?:_|[{_CELL_ESCAPED_CHARS}]))"
)
_CELL_UNESCAPE_PATTERN = re.compile(r"_x([0-9A-Fa-f]{4})_")


def escape_xml_text(text: str, keep_carriage_returns: bool = False) -> str:
    """
    Escape text for use as XML character data.

    Args:
        text: Raw text
        keep_carriage_returns: Write ``\\r`` as ``&#13;`` so parsers do not
            fold it into a newline

    Returns:
        Escaped text with characters illegal in XML removed
    """
    cleaned = _INVALID_XML_CHARS.sub("", text)
    entities = _TEXT_ENTITIES_KEEP_CR if keep_carriage_returns else _TEXT_ENTITIES
    return escape(cleaned, entities)


def escape_xml_attribute(text: str) -> str:
    """
    Escape text for use inside a double-quoted attribute value.

    Tabs and line breaks are written as character references so they read
    back unchanged.
    """
    return escape(_INVALID_XML_CHARS.sub("", text), _ATTRIBUTE_ENTITIES)


def _cell_escape(match: re.Match) -> str:
    return f"_x{ord(match.group()):04X}_"


def escape_cell_text(text: str) -> str:
    """
    Apply SpreadsheetML ``_xHHHH_`` escapes.

    Characters XML cannot carry become ``_xHHHH_``; an underscore that would
    otherwise start such a sequence becomes ``_x005F_``. The result still
    needs XML escaping.
    """
    return _CELL_ESCAPE_PATTERN.sub(_cell_escape, text)


def unescape_cell_text(text: str) -> str:
    """Resolve SpreadsheetML ``_xHHHH_`` escapes."""
    return _CELL_UNESCAPE_PATTERN.sub(lambda match: chr(int(match.group(1), 16)), text)


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from an ElementTree tag."""
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def get_local_attribute(element: ET.Element, name: str) -> Optional[str]:
    """
    Get an attribute by local name, whatever its namespace.

    Args:
        element: Element to inspect
        name: Local attribute name (``"id"`` matches ``r:id``)

    Returns:
        Attribute value or None
    """
    if name in element.attrib:
        return element.attrib[name]
    for key, value in element.attrib.items():
        if local_name(key) == name:
            return value
    return None
