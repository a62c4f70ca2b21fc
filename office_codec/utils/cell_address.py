"""
Cell address helpers.

Converts between 1-based column numbers and spreadsheet column letters
(``1 -> "A"``, ``27 -> "AA"``) and builds ``B2`` style references.
"""

from __future__ import annotations

import string

_ALPHABET_SIZE = 26

# Last column of a worksheet (XFD).
MAX_COLUMN = 16384
MAX_COLUMN_LETTERS = 3


def column_index_of(reference: str) -> int:
    """
    Get the 1-based column index of a cell reference.

    Only the leading letters are read, case-insensitively, so ``"aa10"`` and
    ``"AA"`` both give 27. A reference without leading letters gives 1.

    Args:
        reference: Cell reference such as ``"B2"``

    Returns:
        Column index, at least 1
    """
    index = 0
    for char in reference or "":
        if char not in string.ascii_letters:
            break
        index = index * _ALPHABET_SIZE + (ord(char.upper()) - ord("A") + 1)
    return index if index > 0 else 1


def column_letters_of(index: int) -> str:
    """
    Get the column letters for a 1-based column index.

    Args:
        index: Column index, at least 1

    Returns:
        Column letters in bijective base 26
    """
    if index < 1:
        raise ValueError(f"Column index must be >= 1, got {index}")

    letters = []
    while index > 0:
        index, remainder = divmod(index - 1, _ALPHABET_SIZE)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def cell_reference(row: int, column: int) -> str:
    """Build a cell reference from 1-based row and column numbers."""
    if row < 1:
        raise ValueError(f"Row number must be >= 1, got {row}")
    return f"{column_letters_of(column)}{row}"
