"""
Entry point for running office_codec as a module.

Usage:
    python -m office_codec xlsx2json workbook.xlsx --output workbook.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
