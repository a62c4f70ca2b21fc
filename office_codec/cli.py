"""
Command-line interface for office_codec.

Usage:
    office-codec xlsx2json workbook.xlsx --output workbook.json
    office-codec json2xlsx workbook.json --output workbook.xlsx
    office-codec docx2html document.docx --output document.html
    office-codec html2docx document.html --output document.docx
    office-codec version
"""

import argparse
import json
import logging
import sys
import zipfile
from pathlib import Path
from typing import List, Optional

from .api import (
    decode_document_to_text,
    decode_spreadsheet,
    encode_document_from_text,
    encode_spreadsheet,
)
from .exceptions import OfficeCodecError
from .models.workbook import Sheet, Workbook
from .parser.html_parser import DEFAULT_NORMALIZER, SINGLE_LINE_NORMALIZER
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 10 * 1024 * 1024

EXIT_OK = 0
EXIT_CODEC_ERROR = 1
EXIT_INPUT_TOO_LARGE = 2


class InputTooLargeError(Exception):
    """Input file exceeds the configured byte ceiling."""


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="office-codec",
        description="Convert between XLSX/DOCX packages and plain rows or paragraphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  office-codec xlsx2json workbook.xlsx -o workbook.json
  office-codec json2xlsx workbook.json -o workbook.xlsx
  office-codec docx2html document.docx
  office-codec html2docx notes.html -o notes.docx
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help="Refuse input files larger than this many bytes, 0 disables (default: 10 MiB)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    xlsx2json = subparsers.add_parser("xlsx2json", help="Decode an XLSX workbook to JSON")
    xlsx2json.add_argument("input", help="Input XLSX file")
    xlsx2json.add_argument("-o", "--output", help="Output JSON file (default: stdout)")

    json2xlsx = subparsers.add_parser("json2xlsx", help="Encode JSON sheets as an XLSX workbook")
    json2xlsx.add_argument("input", help='Input JSON file: {"sheets": [{"name": ..., "rows": [[...]]}]}')
    json2xlsx.add_argument("-o", "--output", required=True, help="Output XLSX file")
    json2xlsx.add_argument("--stored", action="store_true", help="Write entries without compression")

    docx2html = subparsers.add_parser("docx2html", help="Decode a DOCX document to HTML paragraphs")
    docx2html.add_argument("input", help="Input DOCX file")
    docx2html.add_argument("-o", "--output", help="Output HTML file (default: stdout)")

    html2docx = subparsers.add_parser("html2docx", help="Encode HTML or plain text as a DOCX document")
    html2docx.add_argument("input", help="Input HTML or text file")
    html2docx.add_argument("-o", "--output", required=True, help="Output DOCX file")
    html2docx.add_argument("--stored", action="store_true", help="Write entries without compression")
    html2docx.add_argument(
        "--join-lines",
        action="store_true",
        help="Join lines of a paragraph with spaces instead of line breaks"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def read_input(path: Path, max_bytes: int) -> bytes:
    """Read an input file, enforcing the byte ceiling."""
    size = path.stat().st_size
    if max_bytes and size > max_bytes:
        raise InputTooLargeError(f"{path} is {size} bytes, limit is {max_bytes}")
    return path.read_bytes()


def write_output(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.info(f"Saved: {output}")
    else:
        sys.stdout.write(text)
        sys.stdout.write("\n")


def workbook_to_json(workbook: Workbook) -> dict:
    return {"sheets": [{"name": sheet.name, "rows": sheet.rows} for sheet in workbook.sheets]}


def workbook_from_json(payload: dict) -> Workbook:
    """Build a workbook from ``{"sheets": [{"name": ..., "rows": [[...]]}]}``."""
    sheets = []
    for entry in payload.get("sheets", []):
        rows = [["" if cell is None else str(cell) for cell in row] for row in entry.get("rows", [])]
        sheets.append(Sheet(name=str(entry.get("name", "")), rows=rows))
    return Workbook(sheets=sheets)


def _compression(args) -> int:
    return zipfile.ZIP_STORED if getattr(args, "stored", False) else zipfile.ZIP_DEFLATED


def cmd_xlsx2json(args) -> int:
    """Handle xlsx2json command."""
    workbook = decode_spreadsheet(read_input(Path(args.input), args.max_bytes))
    write_output(json.dumps(workbook_to_json(workbook), ensure_ascii=False, indent=2), args.output)
    return EXIT_OK


def cmd_json2xlsx(args) -> int:
    """Handle json2xlsx command."""
    raw = read_input(Path(args.input), args.max_bytes)
    workbook = workbook_from_json(json.loads(raw.decode("utf-8")))
    Path(args.output).write_bytes(encode_spreadsheet(workbook, _compression(args)))
    logger.info(f"Saved: {args.output} ({len(workbook.sheets)} sheets)")
    return EXIT_OK


def cmd_docx2html(args) -> int:
    """Handle docx2html command."""
    html_content = decode_document_to_text(read_input(Path(args.input), args.max_bytes))
    write_output(html_content, args.output)
    return EXIT_OK


def cmd_html2docx(args) -> int:
    """Handle html2docx command."""
    text = read_input(Path(args.input), args.max_bytes).decode("utf-8")
    normalizer = SINGLE_LINE_NORMALIZER if args.join_lines else DEFAULT_NORMALIZER
    Path(args.output).write_bytes(encode_document_from_text(text, normalizer, _compression(args)))
    logger.info(f"Saved: {args.output}")
    return EXIT_OK


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"office-codec v{__version__}")
    return EXIT_OK


COMMANDS = {
    "xlsx2json": cmd_xlsx2json,
    "json2xlsx": cmd_json2xlsx,
    "docx2html": cmd_docx2html,
    "html2docx": cmd_html2docx,
    "version": cmd_version,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    setup_logging(args.log_level)

    try:
        return COMMANDS[args.command](args)
    except InputTooLargeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INPUT_TOO_LARGE
    except OfficeCodecError as exc:
        print(f"error: {exc.kind}: {exc}", file=sys.stderr)
        return EXIT_CODEC_ERROR
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CODEC_ERROR
