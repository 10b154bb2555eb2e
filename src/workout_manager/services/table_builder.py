"""
Table builder: workout notation document -> templated report table.

A document is a sequence of blocks separated by blank lines. Every block is
parsed on its own and contributes rows:

- workout: a bold summary row, one row per exercise set, one empty row
- week:    a single light-header row with weekly totals
- unknown: nothing

Formula cells are emitted as templates with relative placeholder tags
(see reference_resolver); call resolve() on the finished rows.
"""

import re
import logging
from typing import List, Optional

from workout_manager.models import (
    COLUMN_COUNT,
    HEADER_ROW,
    FormatRange,
    FormatStyle,
    WorkoutReport,
)
from workout_manager.parsers.entry_parser import EntryParser
from workout_manager.parsers.models import WeekMarker, WorkoutLog
from workout_manager.utils import format_short_date

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = re.compile(r'\n\s*\n')

# Sum from the row below down to the row before the next blank cell in this column
SUM_UNTIL_BLANK = (
    '=sum('
    '$cellref(1,0):INDEX('
    '$cellref(1,0):$cellref(100,0),'
    'MATCH(TRUE,($cellref(1,0):$cellref(100,0)=""),0)'
    ')'
    ')'
)

REP_AVERAGE = '=iferror(round(average(split($cellref(0,-1)," ")), 2))'
REP_TOTAL = '=iferror(sum(split($cellref(0,-2)," ")))'


def week_total(label_offset: int) -> str:
    """
    Half the sum of this column from the row below down to the next week row.

    The week label column is found label_offset columns to the right (a
    negative offset). Summary rows repeat their blocks' totals, hence /2.
    """
    return (
        '=sum('
        '$cellref(1,0):INDEX('
        '$cellref(1,0):$colref(0),'
        f'IFERROR(MATCH("Week*",$cellref(1,{label_offset}):$colref({label_offset}),0)-1, 1000)'
        ')'
        ')/2'
    )


WEEK_SETS_TOTAL = week_total(-1)
WEEK_REPS_TOTAL = week_total(-6)


def split_blocks(document_text: str) -> List[str]:
    """Split a document on runs of blank lines, dropping empty fragments."""
    return [block for block in BLOCK_SEPARATOR.split(document_text) if block]


class TableBuilder:
    """Builds the templated report table and its format plan"""

    def __init__(self):
        self.entry_parser = EntryParser()
        self.rows: List[List[str]] = []
        self.format_plan: List[FormatRange] = []

    @property
    def warnings(self) -> List[str]:
        return self.entry_parser.warnings

    def build(self, document_text: str) -> WorkoutReport:
        self.rows = []
        self.format_plan = []

        self._append(HEADER_ROW, FormatStyle.BLACK_HEADER)

        blocks = split_blocks(document_text)
        for block in blocks:
            entry = self.entry_parser.parse(block.strip())
            if isinstance(entry, WorkoutLog):
                self._append_workout(entry)
            elif isinstance(entry, WeekMarker):
                self._append_week(entry)

        logger.info(f"Built report table: {len(blocks)} blocks, {len(self.rows)} rows")
        return WorkoutReport(rows=self.rows, format_plan=self.format_plan)

    def _append(self, row: List[str], style: Optional[FormatStyle] = None):
        if style is not None:
            index = len(self.rows)
            self.format_plan.append(FormatRange(
                style=style,
                row_start=index,
                row_end=index,
                col_start=0,
                col_end=COLUMN_COUNT - 1,
            ))
        self.rows.append(list(row))

    def _append_workout(self, workout: WorkoutLog):
        details = workout.details
        self._append(
            [
                format_short_date(details.date),
                SUM_UNTIL_BLANK,
                details.name,
                '', '', '',
                SUM_UNTIL_BLANK,
                details.hour,
            ],
            FormatStyle.BOLD,
        )
        for exercise in workout.sets:
            self._append([
                '',
                exercise.sets,
                exercise.name,
                exercise.weight,
                exercise.reps,
                REP_AVERAGE,
                REP_TOTAL,
                exercise.rest,
            ])
        self._append([''] * COLUMN_COUNT)

    def _append_week(self, week: WeekMarker):
        self._append(
            [week.name, WEEK_SETS_TOTAL, '', '', '', '', WEEK_REPS_TOTAL, ''],
            FormatStyle.LIGHT_HEADER,
        )


def build_table(document_text: str) -> WorkoutReport:
    """Build the templated (unresolved) report for a document."""
    return TableBuilder().build(document_text)
