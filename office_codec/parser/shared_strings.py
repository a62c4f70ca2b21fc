"""Shared-string table parser for spreadsheet packages."""

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

from ..exceptions import MalformedSharedStringsError
from ..utils.xml_utils import local_name, unescape_cell_text

logger = logging.getLogger(__name__)

SHARED_STRINGS_PART = "xl/sharedStrings.xml"


def string_item_text(item: ET.Element) -> str:
    """
    Get the text of a string item (``<si>`` or an inline ``<is>``).

    The direct ``<t>`` child wins; when it is missing or empty the texts of the
    rich-text runs (``<r><t>``) are joined instead. ``_xHHHH_`` escapes are
    resolved per text node.
    """
    direct = ""
    runs: List[str] = []
    for child in item:
        name = local_name(child.tag)
        if name == "t" and not direct:
            direct = unescape_cell_text(child.text or "")
        elif name == "r":
            for grandchild in child:
                if local_name(grandchild.tag) == "t":
                    runs.append(unescape_cell_text(grandchild.text or ""))
    if direct:
        return direct
    return "".join(runs)


def parse_shared_strings(data: Optional[bytes], part_name: str = SHARED_STRINGS_PART) -> List[str]:
    """
    Parse a shared-string part.

    Args:
        data: Part bytes, or None when the package has no shared strings
        part_name: Part name, for error reporting

    Returns:
        Strings in table order
    """
    if data is None:
        return []

    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise MalformedSharedStringsError("Malformed shared-string part", part_name=part_name,
                                          details=str(exc)) from exc

    strings = [string_item_text(item) for item in root if local_name(item.tag) == "si"]
    logger.debug(f"Loaded {len(strings)} shared strings")
    return strings
