"""
Models module for the in-memory workbook representation.
"""

from .workbook import Row, Sheet, Workbook

__all__ = [
    "Row",
    "Sheet",
    "Workbook",
]
