"""
Tests for the shared-string table parser.
"""

import pytest

from office_codec.exceptions import MalformedSharedStringsError, MalformedXMLError
from office_codec.parser.shared_strings import parse_shared_strings
from tests.builders import MAIN_NS


def sst(items):
    return f'<sst xmlns="{MAIN_NS}">{items}</sst>'.encode("utf-8")


class TestParseSharedStrings:
    """Test cases for parse_shared_strings."""

    def test_absent_part_is_empty_table(self):
        """Test a missing part yields an empty table, not an error."""
        assert parse_shared_strings(None) == []

    def test_plain_items_keep_order(self):
        """Test plain items in table order."""
        assert parse_shared_strings(sst("<si><t>one</t></si><si><t>two</t></si>")) == ["one", "two"]

    def test_rich_text_runs_are_joined(self):
        """Test items made of runs take the run texts."""
        data = sst('<si><r><rPr><b/></rPr><t>bold</t></r><r><t xml:space="preserve"> tail</t></r></si>')

        assert parse_shared_strings(data) == ["bold tail"]

    def test_direct_text_wins_over_runs(self):
        """Test the direct text node has priority."""
        assert parse_shared_strings(sst("<si><t>direct</t><r><t>run</t></r></si>")) == ["direct"]

    def test_empty_direct_text_falls_back_to_runs(self):
        """Test an empty direct text node does not hide the runs."""
        assert parse_shared_strings(sst("<si><t/><r><t>run</t></r></si>")) == ["run"]

    def test_empty_items_keep_their_index(self):
        """Test empty items still occupy a slot."""
        assert parse_shared_strings(sst("<si/><si><t>x</t></si>")) == ["", "x"]

    def test_phonetic_text_ignored(self):
        """Test text nested deeper than one level is not used."""
        assert parse_shared_strings(sst("<si><t>kanji</t><rPh><t>kana</t></rPh></si>")) == ["kanji"]

    def test_escaped_characters_resolved(self):
        """Test _xHHHH_ escapes are resolved in direct text and in runs."""
        data = sst("<si><t>a_x0001_b</t></si><si><r><t>_x005F_x0041_</t></r><r><t>_x0009_</t></r></si>")

        assert parse_shared_strings(data) == ["a\x01b", "_x0041_\t"]

    def test_malformed(self):
        """Test malformed XML raises MalformedSharedStringsError."""
        with pytest.raises(MalformedSharedStringsError) as exc_info:
            parse_shared_strings(b"<sst><si>")
        assert isinstance(exc_info.value, MalformedXMLError)
        assert exc_info.value.kind == "MalformedSharedStrings"
