"""
XLSX parser.

Decodes a spreadsheet package into a :class:`Workbook` of dense string rows.
Sheets are resolved through the workbook relationships, never by guessing
worksheet file names.
"""

from __future__ import annotations

import logging
import string
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..exceptions import (
    BadContainerError,
    DescriptorMissingError,
    MalformedSheetXMLError,
    MalformedXMLError,
    NoSheetsDeclaredError,
    PackageUnreadableError,
    PartReadError,
    RelationshipsMissingError,
    SheetUnreadableError,
    UnresolvedSheetTargetError,
)
from ..models.workbook import Row, Sheet, Workbook
from ..utils.cell_address import MAX_COLUMN, MAX_COLUMN_LETTERS, column_index_of
from ..utils.xml_utils import get_local_attribute, local_name, unescape_cell_text
from .package_reader import PackageReader
from .relationships import (
    OFFICE_DOCUMENT_TYPE,
    ROOT_RELATIONSHIPS_PART,
    SHARED_STRINGS_TYPE,
    RelationshipsParser,
    find_target_by_type,
    relationships_part_for,
)
from .shared_strings import SHARED_STRINGS_PART, parse_shared_strings, string_item_text

logger = logging.getLogger(__name__)

WORKBOOK_PART = "xl/workbook.xml"


@dataclass
class DeclaredSheet:
    """A ``<sheet>`` entry of the workbook descriptor."""

    name: str
    relationship_id: str
    ordinal: int


class XLSXParser:
    """
    Parser for spreadsheet packages.

    One instance decodes one buffer; :meth:`parse` either returns the whole
    workbook or raises.
    """

    def __init__(self, data: bytes):
        """
        Initialize XLSX parser.

        Args:
            data: Package bytes
        """
        self.data = data
        self.shared_strings: List[str] = []

    def parse(self) -> Workbook:
        """
        Decode the package.

        Returns:
            Workbook with sheets in declared order
        """
        try:
            package = PackageReader(self.data)
        except BadContainerError as exc:
            raise PackageUnreadableError("Cannot open spreadsheet package", exc.details) from exc

        with package:
            descriptor_part = self._find_descriptor_part(package)
            descriptor = package.read(descriptor_part)
            if descriptor is None:
                raise DescriptorMissingError("Workbook descriptor is missing", part_name=descriptor_part)
            declared = self.parse_descriptor(descriptor, descriptor_part)

            rels_part = relationships_part_for(descriptor_part)
            rels_xml = package.read(rels_part)
            if rels_xml is None:
                raise RelationshipsMissingError("Workbook relationships are missing", rels_part)
            relationships = RelationshipsParser(descriptor_part).parse(rels_xml)

            # Shared strings come after the relationships: their part name is a
            # relationship target.
            shared_part = find_target_by_type(relationships, SHARED_STRINGS_TYPE) or SHARED_STRINGS_PART
            self.shared_strings = parse_shared_strings(package.read(shared_part), shared_part)

            workbook = Workbook()
            for info in sorted(declared, key=lambda item: item.ordinal):
                relationship = relationships.get(info.relationship_id)
                if relationship is None:
                    raise UnresolvedSheetTargetError(
                        f"Sheet {info.name!r} has no relationship target",
                        relationship_id=info.relationship_id,
                    )
                target = relationship.target
                rows = self.parse_sheet(self._read_sheet(package, target), target)
                workbook.sheets.append(Sheet(name=info.name, rows=rows))
                logger.debug(f"Decoded sheet {info.name!r} from {target} ({len(rows)} rows)")

        return workbook

    def _find_descriptor_part(self, package: PackageReader) -> str:
        root_rels = package.read(ROOT_RELATIONSHIPS_PART)
        if root_rels is None:
            return WORKBOOK_PART
        relationships = RelationshipsParser().parse(root_rels)
        return find_target_by_type(relationships, OFFICE_DOCUMENT_TYPE) or WORKBOOK_PART

    def _read_sheet(self, package: PackageReader, part_name: str) -> bytes:
        try:
            data = package.read(part_name)
        except PartReadError as exc:
            raise SheetUnreadableError(f"Cannot read worksheet {part_name}", part_name=part_name,
                                       details=exc.details) from exc
        if data is None:
            raise SheetUnreadableError(f"Worksheet {part_name} is missing", part_name=part_name)
        return data

    def parse_descriptor(self, data: bytes, part_name: str = WORKBOOK_PART) -> List[DeclaredSheet]:
        """
        Parse the ``<sheets>`` list of a workbook descriptor.

        Args:
            data: Descriptor bytes
            part_name: Descriptor part name, for error reporting

        Returns:
            Declared sheets in descriptor order
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise MalformedXMLError("Malformed workbook descriptor", part_name=part_name,
                                    details=str(exc)) from exc

        declared: List[DeclaredSheet] = []
        for container in root:
            if local_name(container.tag) != "sheets":
                continue
            for element in container:
                if local_name(element.tag) != "sheet":
                    continue
                position = len(declared) + 1
                declared.append(DeclaredSheet(
                    name=element.get("name", ""),
                    relationship_id=get_local_attribute(element, "id") or "",
                    ordinal=self._parse_ordinal(element.get("sheetId"), position),
                ))

        if not declared:
            raise NoSheetsDeclaredError("Workbook declares no sheets")
        return declared

    @staticmethod
    def _parse_ordinal(value: Optional[str], fallback: int) -> int:
        try:
            return int((value or "").strip())
        except ValueError:
            return fallback

    def parse_sheet(self, data: bytes, part_name: str = "") -> List[Row]:
        """
        Parse a worksheet part into dense rows.

        Args:
            data: Worksheet bytes
            part_name: Worksheet part name, for error reporting

        Returns:
            One row per ``<row>`` element, in document order
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise MalformedSheetXMLError(f"Malformed worksheet {part_name}", part_name=part_name,
                                         details=str(exc)) from exc

        return [
            self._parse_row(element, part_name)
            for element in root.iter()
            if local_name(element.tag) == "row"
        ]

    def _parse_row(self, element: ET.Element, part_name: str = "") -> Row:
        row: Row = []
        for cell in element:
            if local_name(cell.tag) != "c":
                continue
            column = self._column_of(cell.get("r", ""), part_name)
            if column > len(row):
                row.extend([""] * (column - len(row)))
            row[column - 1] = self._cell_value(cell)
        return row

    @staticmethod
    def _column_of(reference: str, part_name: str) -> int:
        letters = len(reference) - len(reference.lstrip(string.ascii_letters))
        column = column_index_of(reference) if letters <= MAX_COLUMN_LETTERS else MAX_COLUMN + 1
        if column > MAX_COLUMN:
            raise MalformedSheetXMLError(f"Cell reference {reference[:32]!r} is past the last column",
                                         part_name=part_name)
        return column

    def _cell_value(self, cell: ET.Element) -> str:
        cell_type = cell.get("t", "")
        children: Dict[str, ET.Element] = {}
        for child in cell:
            children.setdefault(local_name(child.tag), child)

        if cell_type == "inlineStr":
            inline = children.get("is")
            return string_item_text(inline) if inline is not None else ""

        value = children.get("v")
        raw = unescape_cell_text(value.text or "") if value is not None else ""
        if cell_type != "s":
            return raw

        try:
            index = int(raw.strip())
        except ValueError:
            return ""
        if 0 <= index < len(self.shared_strings):
            return self.shared_strings[index]
        return ""


def decode_xlsx(data: bytes) -> Workbook:
    """Decode spreadsheet package bytes into a workbook."""
    return XLSXParser(data).parse()
