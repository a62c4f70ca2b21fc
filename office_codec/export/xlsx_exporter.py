"""
XLSX exporter.

Writes a :class:`Workbook` as a minimal spreadsheet package. Cells are written
as inline strings, so no shared-string table is produced.
"""

from __future__ import annotations

import logging
import zipfile
from typing import List

from ..exceptions import EntrySerializationError, WriteFailureError
from ..models.workbook import Sheet, Workbook
from ..parser.relationships import OFFICE_DOCUMENT_TYPE, WORKSHEET_TYPE
from ..utils.cell_address import cell_reference
from ..utils.xml_utils import (
    NAMESPACES,
    XML_DECLARATION,
    escape_cell_text,
    escape_xml_attribute,
    escape_xml_text,
)
from .package_writer import CONTENT_TYPES_PART, PackageWriter, content_types_xml, relationships_xml

logger = logging.getLogger(__name__)

WORKBOOK_PART = "xl/workbook.xml"
WORKBOOK_RELS_PART = "xl/_rels/workbook.xml.rels"
ROOT_RELS_PART = "_rels/.rels"

WORKBOOK_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml"
WORKSHEET_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.worksheet+xml"


def worksheet_part(position: int) -> str:
    """Part name of the worksheet at 1-based position."""
    return f"xl/worksheets/sheet{position}.xml"


class XLSXExporter:
    """
    Exports a workbook to XLSX bytes.
    """

    def __init__(self, workbook: Workbook, compression: int = zipfile.ZIP_DEFLATED):
        """
        Initialize XLSX exporter.

        Args:
            workbook: Workbook to export
            compression: Zip compression method
        """
        self.workbook = workbook
        self.compression = compression

    def export_to_bytes(self) -> bytes:
        """
        Serialize the workbook.

        Empty cells are not written, so trailing empty cells of a row do not
        survive a round trip.

        Returns:
            Package bytes
        """
        sheets = self.workbook.sheets
        writer = PackageWriter(self.compression)
        try:
            writer.add_entry(CONTENT_TYPES_PART, self._content_types_xml(len(sheets)))
            writer.add_entry(ROOT_RELS_PART, relationships_xml([("rId1", OFFICE_DOCUMENT_TYPE, WORKBOOK_PART)]))
            writer.add_entry(WORKBOOK_PART, self._workbook_xml(sheets))
            writer.add_entry(WORKBOOK_RELS_PART, self._workbook_rels_xml(len(sheets)))
            for position, sheet in enumerate(sheets, 1):
                writer.add_entry(worksheet_part(position), self._sheet_xml(sheet))
            data = writer.finish()
        except WriteFailureError as exc:
            raise EntrySerializationError("Cannot serialize workbook", str(exc)) from exc

        logger.debug(f"Encoded workbook with {len(sheets)} sheets")
        return data

    def _content_types_xml(self, sheet_count: int) -> str:
        overrides = [(WORKBOOK_PART, WORKBOOK_CONTENT_TYPE)]
        overrides.extend(
            (worksheet_part(position), WORKSHEET_CONTENT_TYPE) for position in range(1, sheet_count + 1)
        )
        return content_types_xml(overrides)

    def _workbook_xml(self, sheets: List[Sheet]) -> str:
        parts = [
            XML_DECLARATION,
            f'<workbook xmlns="{NAMESPACES["main"]}" xmlns:r="{NAMESPACES["r"]}">',
            "<sheets>",
        ]
        for position, sheet in enumerate(sheets, 1):
            parts.append(
                f'<sheet name="{escape_xml_attribute(sheet.name)}" sheetId="{position}" r:id="rId{position}"/>'
            )
        parts.append("</sheets></workbook>")
        return "".join(parts)

    def _workbook_rels_xml(self, sheet_count: int) -> str:
        return relationships_xml([
            (f"rId{position}", WORKSHEET_TYPE, f"worksheets/sheet{position}.xml")
            for position in range(1, sheet_count + 1)
        ])

    def _sheet_xml(self, sheet: Sheet) -> str:
        parts = [XML_DECLARATION, f'<worksheet xmlns="{NAMESPACES["main"]}">', "<sheetData>"]
        for row_number, row in enumerate(sheet.rows, 1):
            parts.append(f'<row r="{row_number}">')
            for column, value in enumerate(row, 1):
                if value is None or value == "":
                    continue
                parts.append(self._cell_xml(cell_reference(row_number, column), str(value)))
            parts.append("</row>")
        parts.append("</sheetData></worksheet>")
        return "".join(parts)

    @staticmethod
    def _cell_xml(reference: str, value: str) -> str:
        space = ' xml:space="preserve"' if value != value.strip() else ""
        text = escape_xml_text(escape_cell_text(value), keep_carriage_returns=True)
        return f'<c r="{reference}" t="inlineStr"><is><t{space}>{text}</t></is></c>'


def encode_xlsx(workbook: Workbook, compression: int = zipfile.ZIP_DEFLATED) -> bytes:
    """Encode a workbook into spreadsheet package bytes."""
    return XLSXExporter(workbook, compression).export_to_bytes()
