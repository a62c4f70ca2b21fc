"""
Tests for the command-line interface.
"""

import json

import pytest

from office_codec.cli import (
    EXIT_CODEC_ERROR,
    EXIT_INPUT_TOO_LARGE,
    EXIT_OK,
    create_parser,
    main,
    workbook_from_json,
    workbook_to_json,
)
from office_codec.export.docx_exporter import encode_docx
from office_codec.models.workbook import Sheet, Workbook
from office_codec.parser.docx_parser import DOCXParser
from office_codec.parser.xlsx_parser import decode_xlsx


@pytest.fixture
def workbook_json(tmp_path):
    path = tmp_path / "book.json"
    path.write_text(json.dumps({"sheets": [
        {"name": "People", "rows": [["Name", "Age"], ["Ada", 36, None]]},
        {"name": "Empty"},
    ]}), encoding="utf-8")
    return path


class TestParser:
    """Test cases for the argument parser."""

    def test_defaults(self):
        args = create_parser().parse_args(["docx2html", "in.docx"])

        assert args.log_level == "WARNING"
        assert args.max_bytes == 10 * 1024 * 1024
        assert args.output is None

    def test_encoders_require_output(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["json2xlsx", "in.json"])


class TestCommands:
    """Run commands end to end on temporary files."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_OK
        assert "office-codec" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["version"]) == EXIT_OK
        assert "office-codec v1.0.0" in capsys.readouterr().out

    def test_json2xlsx_then_xlsx2json(self, tmp_path, workbook_json, capsys):
        """Test a workbook survives JSON -> XLSX -> JSON."""
        xlsx_path = tmp_path / "book.xlsx"

        assert main(["json2xlsx", str(workbook_json), "-o", str(xlsx_path)]) == EXIT_OK
        workbook = decode_xlsx(xlsx_path.read_bytes())
        assert workbook.sheets[0].rows == [["Name", "Age"], ["Ada", "36"]]

        assert main(["xlsx2json", str(xlsx_path)]) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"sheets": [
            {"name": "People", "rows": [["Name", "Age"], ["Ada", "36"]]},
            {"name": "Empty", "rows": []},
        ]}

    def test_xlsx2json_to_file(self, tmp_path, workbook_json):
        xlsx_path = tmp_path / "book.xlsx"
        json_path = tmp_path / "out.json"
        main(["json2xlsx", str(workbook_json), "-o", str(xlsx_path), "--stored"])

        assert main(["xlsx2json", str(xlsx_path), "-o", str(json_path)]) == EXIT_OK
        assert json.loads(json_path.read_text(encoding="utf-8"))["sheets"][0]["name"] == "People"

    def test_html2docx_then_docx2html(self, tmp_path):
        """Test text survives HTML -> DOCX -> HTML."""
        source = tmp_path / "notes.html"
        source.write_text("<p>Hello<br>world</p><p>Bye &amp; thanks</p>", encoding="utf-8")
        docx_path = tmp_path / "notes.docx"
        html_path = tmp_path / "notes.out.html"

        assert main(["html2docx", str(source), "-o", str(docx_path)]) == EXIT_OK
        assert main(["docx2html", str(docx_path), "-o", str(html_path)]) == EXIT_OK
        assert html_path.read_text(encoding="utf-8") == "<p>Hello<br />world</p><p>Bye &amp; thanks</p>"

    def test_html2docx_join_lines(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("one\ntwo", encoding="utf-8")
        docx_path = tmp_path / "notes.docx"

        assert main(["html2docx", str(source), "-o", str(docx_path), "--join-lines"]) == EXIT_OK
        assert DOCXParser(docx_path.read_bytes()).parse() == ["one two"]

    def test_docx2html_stdout(self, tmp_path, capsys):
        path = tmp_path / "doc.docx"
        path.write_bytes(encode_docx(["a", "b"]))

        assert main(["docx2html", str(path)]) == EXIT_OK
        assert capsys.readouterr().out == "<p>a</p><p>b</p>\n"


class TestFailures:
    """Exit codes and error reporting."""

    def test_codec_error_reports_kind(self, tmp_path, capsys):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a package")

        assert main(["xlsx2json", str(path)]) == EXIT_CODEC_ERROR
        assert "error: PackageUnreadable:" in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        assert main(["docx2html", str(tmp_path / "absent.docx")]) == EXIT_CODEC_ERROR
        assert "error:" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        assert main(["json2xlsx", str(path), "-o", str(tmp_path / "x.xlsx")]) == EXIT_CODEC_ERROR

    def test_input_too_large(self, tmp_path, capsys):
        path = tmp_path / "big.docx"
        path.write_bytes(encode_docx(["x" * 100]))

        assert main(["--max-bytes", "10", "docx2html", str(path)]) == EXIT_INPUT_TOO_LARGE
        assert "limit is 10" in capsys.readouterr().err

    def test_limit_disabled(self, tmp_path):
        path = tmp_path / "doc.docx"
        path.write_bytes(encode_docx(["x"]))

        assert main(["--max-bytes", "0", "docx2html", str(path), "-o", str(tmp_path / "o.html")]) == EXIT_OK


class TestJsonMapping:
    """Test cases for the JSON workbook mapping."""

    def test_from_json_stringifies(self):
        workbook = workbook_from_json({"sheets": [{"name": 5, "rows": [[1, None, "x"]]}]})

        assert workbook == Workbook([Sheet("5", [["1", "", "x"]])])

    def test_to_json(self):
        assert workbook_to_json(Workbook([Sheet("S", [["a"]])])) == {"sheets": [{"name": "S", "rows": [["a"]]}]}
