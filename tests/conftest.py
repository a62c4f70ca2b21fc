"""
Pytest configuration for office_codec
"""

import logging
import sys

import pytest

from tests.builders import MAIN_NS, make_package, sheet_xml, workbook_rels_xml, workbook_xml


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()
    package_logger = logging.getLogger("office_codec")
    package_logger.handlers.clear()
    package_logger.propagate = True


@pytest.fixture
def build_package():
    """Factory building an in-memory zip package from a dict of parts."""
    return make_package


@pytest.fixture
def simple_xlsx_parts():
    """Parts of a one-sheet workbook with shared and inline strings."""
    return {
        "xl/workbook.xml": workbook_xml([("Data", 1, "rId1")]),
        "xl/_rels/workbook.xml.rels": workbook_rels_xml([("rId1", "worksheets/sheet1.xml")]),
        "xl/sharedStrings.xml": (
            f'<sst xmlns="{MAIN_NS}"><si><t>alpha</t></si><si><t>beta</t></si></sst>'
        ),
        "xl/worksheets/sheet1.xml": sheet_xml(
            '<row r="1"><c r="A1" t="s"><v>0</v></c><c r="C1" t="s"><v>1</v></c></row>'
            '<row r="2"><c r="B2"><v>42</v></c><c r="D2" t="inlineStr"><is><t>inline</t></is></c></row>'
        ),
    }
