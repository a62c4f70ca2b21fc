"""Workbook model: ordered sheets holding rows of string cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

Row = List[str]


@dataclass
class Sheet:
    """A named grid of string cells."""

    name: str
    rows: List[Row] = field(default_factory=list)


@dataclass
class Workbook:
    """An ordered sequence of sheets."""

    sheets: List[Sheet] = field(default_factory=list)

    def sheet_by_name(self, name: str) -> Optional[Sheet]:
        """
        Find a sheet by name, ignoring case.

        Args:
            name: Sheet name

        Returns:
            The first matching sheet or None
        """
        wanted = name.casefold()
        for sheet in self.sheets:
            if sheet.name.casefold() == wanted:
                return sheet
        return None

    def sort_sheets(self, order: Iterable[str]) -> None:
        """
        Reorder sheets in place.

        Sheets named in ``order`` (ignoring case) come first, in that order;
        the others follow sorted by lower-cased name.

        Args:
            order: Preferred sheet names
        """
        lookup: Dict[str, int] = {}
        for position, name in enumerate(order):
            lookup.setdefault(name.casefold(), position)

        def sort_key(sheet: Sheet):
            key = sheet.name.casefold()
            if key in lookup:
                return (0, lookup[key], "")
            return (1, 0, key)

        self.sheets.sort(key=sort_key)
