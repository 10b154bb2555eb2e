"""Data models for the workout report table."""
from enum import Enum
from typing import List

from openpyxl.utils import get_column_letter
from pydantic import BaseModel, Field

# Every report row has exactly this many cells (columns A:H)
COLUMN_COUNT = 8

HEADER_ROW = ['Date', 'Sets', 'Exercise', 'Weights', 'Reps', 'Rep Avg', 'Rep Tot', 'Hr/Rest Set:Ex']

Table = List[List[str]]


class FormatStyle(str, Enum):
    """Visual styles the renderer knows how to apply"""
    BOLD = "bold"                  # workout summary rows
    BLACK_HEADER = "black_header"  # column header row
    LIGHT_HEADER = "light_header"  # week rows


class FormatRange(BaseModel):
    """
    A style applied to a block of cells.

    Rows and columns are 0-based and inclusive, matching table indices.
    """
    style: FormatStyle
    row_start: int = Field(..., ge=0)
    row_end: int = Field(..., ge=0)
    col_start: int = Field(default=0, ge=0)
    col_end: int = Field(default=COLUMN_COUNT - 1, ge=0)

    @property
    def a1_range(self) -> str:
        """'A1:H1' style reference for this range."""
        return (
            f"{get_column_letter(self.col_start + 1)}{self.row_start + 1}:"
            f"{get_column_letter(self.col_end + 1)}{self.row_end + 1}"
        )


class WorkoutReport(BaseModel):
    """A finished report: table rows plus the format plan to render them with"""
    rows: Table = Field(default_factory=list)
    format_plan: List[FormatRange] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)
