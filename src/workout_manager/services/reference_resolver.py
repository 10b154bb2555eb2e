"""
Reference resolver for formula templates.

Formula templates are written relative to the cell that holds them:

    $cellref(R,C)  -> the cell R rows down and C columns right, e.g. 'A4'
    $colref(C)     -> the column letter C columns right, e.g. 'B'

Resolution needs the cell's final position, so it runs as a last pass over
a complete table. Only columns A..Z are guaranteed; larger offsets yield
multi-letter columns that the report never uses.

Every cell is resolved, user text included. A tag pointing above row 1,
left of column A or past the last sheet column is left as written.
"""

import re
from typing import Match

from openpyxl.utils import get_column_letter

from workout_manager.models import Table

CELLREF_PATTERN = re.compile(r'\$cellref\((-?\d+),(-?\d+)\)')
COLREF_PATTERN = re.compile(r'\$colref\((-?\d+)\)')


def column_letter(col: int) -> str:
    """0-based column index -> letter ('A' for 0, 'H' for 7)."""
    return get_column_letter(col + 1)


def _cellref(match: Match, r: int, c: int) -> str:
    row = r + int(match.group(1))
    if row < 0:
        return match.group(0)
    try:
        return f"{column_letter(c + int(match.group(2)))}{row + 1}"
    except ValueError:
        return match.group(0)


def _colref(match: Match, c: int) -> str:
    try:
        return column_letter(c + int(match.group(1)))
    except ValueError:
        return match.group(0)


def resolve_cell(cell: str, r: int, c: int) -> str:
    """Rewrite every placeholder tag in one cell located at row r, column c (0-based)."""
    cell = CELLREF_PATTERN.sub(lambda m: _cellref(m, r, c), cell)
    return COLREF_PATTERN.sub(lambda m: _colref(m, c), cell)


def resolve(table: Table) -> Table:
    """Return a copy of the table with every placeholder tag resolved."""
    return [
        [resolve_cell(cell, r, c) for c, cell in enumerate(row)]
        for r, row in enumerate(table)
    ]
