"""Export service for writing workout reports into xlsx worksheets."""
import io
import logging
import re
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.worksheet.worksheet import Worksheet

from workout_manager.models import COLUMN_COUNT, FormatRange, FormatStyle, WorkoutReport

logger = logging.getLogger(__name__)

# Rows below the report that are cleared of stale content from a previous run
CLEAR_MARGIN_ROWS = 100

BLACK = "FF000000"
WHITE = "FFFFFFFF"
LIGHT_GREY = "FFD9D9D9"

# Plain integer or decimal literals are written as numbers so sheet SUMs count them
NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?")


def cell_value(value: str) -> Union[str, int, float, None]:
    """Worksheet value for a report cell: None for empty, numbers for numeric literals."""
    if value == "":
        return None
    match = NUMBER_PATTERN.fullmatch(value)
    if match is None:
        return value
    return float(value) if match.group(1) else int(value)


class ExportService:
    """Service for rendering reports to worksheets."""

    @staticmethod
    def read_cell_value(ws: Worksheet, coordinate: str) -> str:
        """Cell value as a string ('' for empty cells)."""
        value = ws[coordinate].value
        return "" if value is None else str(value)

    @staticmethod
    def read_cell_note(ws: Worksheet, coordinate: str) -> str:
        """Cell note (comment) text ('' when the cell has none)."""
        comment = ws[coordinate].comment
        return comment.text if comment is not None else ""

    @staticmethod
    def write_table(ws: Worksheet, report: WorkoutReport) -> None:
        """
        Write a resolved report to the sheet starting at A1.

        Existing content in columns A:H is cleared down to CLEAR_MARGIN_ROWS
        rows past the end of the report, then the format plan is applied.
        """
        row_count = report.row_count
        for row in ws.iter_rows(
            min_row=1,
            max_row=row_count + CLEAR_MARGIN_ROWS,
            min_col=1,
            max_col=COLUMN_COUNT,
        ):
            for cell in row:
                cell.value = None
                cell.style = "Normal"

        for r, values in enumerate(report.rows, start=1):
            for c, value in enumerate(values[:COLUMN_COUNT], start=1):
                ws.cell(row=r, column=c, value=cell_value(value))

        for fmt in report.format_plan:
            ExportService.apply_format(ws, fmt)

        logger.info(f"Wrote {row_count} rows to sheet '{ws.title}'")

    @staticmethod
    def apply_format(ws: Worksheet, fmt: FormatRange) -> None:
        """Apply one format plan entry to its cell range."""
        if fmt.style == FormatStyle.BLACK_HEADER:
            font = Font(bold=True, color=WHITE)
            fill = PatternFill(fill_type="solid", start_color=BLACK, end_color=BLACK)
        elif fmt.style == FormatStyle.LIGHT_HEADER:
            font = Font(bold=True)
            fill = PatternFill(fill_type="solid", start_color=LIGHT_GREY, end_color=LIGHT_GREY)
        else:
            font = Font(bold=True)
            fill = None

        for row in ws[fmt.a1_range]:
            for cell in row:
                cell.font = font
                if fill is not None:
                    cell.fill = fill

    @staticmethod
    def render_workbook(report: WorkoutReport, title: Optional[str] = None) -> bytes:
        """Render a report into a new single-sheet xlsx file."""
        wb = Workbook()
        ws = wb.active
        ws.title = title or "Workouts"
        ExportService.write_table(ws, report)
        return ExportService.save_workbook(wb)

    @staticmethod
    def save_workbook(wb: Workbook) -> bytes:
        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
