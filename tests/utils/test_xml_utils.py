"""
Tests for XML escaping helpers.
"""

import pytest

from office_codec.utils.xml_utils import (
    escape_cell_text,
    escape_xml_attribute,
    escape_xml_text,
    unescape_cell_text,
)


class TestEscapeXml:
    """Test cases for text and attribute escaping."""

    def test_text(self):
        assert escape_xml_text('<a> & "b" \'c\'') == "&lt;a&gt; &amp; &quot;b&quot; &apos;c&apos;"

    def test_text_carriage_returns(self):
        assert escape_xml_text("a\rb") == "a\rb"
        assert escape_xml_text("a\rb", keep_carriage_returns=True) == "a&#13;b"

    def test_attribute_whitespace_references(self):
        """Test tabs and line breaks become character references."""
        assert escape_xml_attribute('a\tb\nc\rd "e"') == "a&#9;b&#10;c&#13;d &quot;e&quot;"

    def test_illegal_characters_removed(self):
        assert escape_xml_text("a\x01b") == "ab"
        assert escape_xml_attribute("a\x0bb") == "ab"


class TestCellEscapes:
    """Test cases for SpreadsheetML _xHHHH_ escapes."""

    @pytest.mark.parametrize("text, escaped", [
        ("a\x01b", "a_x0001_b"),
        ("\x00", "_x0000_"),
        ("\ufffe", "_xFFFE_"),
        ("_x0041_", "_x005F_x0041_"),
        ("_x0041\x01", "_x005F_x0041_x0001_"),
        ("plain_text x_1234", "plain_text x_1234"),
        ("tab\tand\nnewline", "tab\tand\nnewline"),
    ])
    def test_escape(self, text, escaped):
        assert escape_cell_text(text) == escaped
        assert unescape_cell_text(escaped) == text

    def test_unescape_lower_case_hex(self):
        assert unescape_cell_text("_x000a_") == "\n"

    def test_incomplete_sequences_untouched(self):
        assert unescape_cell_text("_x00_ _x12345 _xZZZZ_") == "_x00_ _x12345 _xZZZZ_"

    def test_lone_surrogate(self):
        assert escape_cell_text("\ud800") == "_xD800_"
        assert unescape_cell_text("_xD800_") == "\ud800"
