"""
Workout (v2) Parser

Parses the per-entry metadata dialect:

    workout, 1/11 7p, (sw1: pull ups, 1 biceps), (garmin=id_or_url, key=val)
    . 4, pull up, body, 7 4 3 4, 45s
    . 4, hammer, 2x25lb, 16 12 8 10, 30s

Header columns are split on commas outside parentheses. Set lines are
positional: sets, name, weight[, reps[, rest]].
"""

import logging
from typing import Dict, List

from .base import BaseParser
from .models import ExerciseSet, UnknownEntry, WorkoutDetails, WorkoutEntry, WorkoutLog
from workout_manager.utils import split_outside_parens, strip_letters

logger = logging.getLogger(__name__)

KEYWORD = 'workout'

# Header metadata key -> WorkoutDetails field
META_FIELDS = {
    'sets': 'global_set_count',
    'rst': 'global_rest_time',
    'dur': 'duration',
    'worktime': 'work_time',
    'garmin': 'external_link',
}


def strip_parens(text: str) -> str:
    """Remove one leading '(' and one trailing ')'."""
    if text.startswith('('):
        text = text[1:]
    if text.endswith(')'):
        text = text[:-1]
    return text


def parse_key_values(text: str) -> Dict[str, str]:
    """'(garmin=hey, other=hi)' -> {'garmin': 'hey', 'other': 'hi'}"""
    result = {}
    for item in strip_parens(text.strip()).split(','):
        if not item.strip():
            continue
        pieces = item.strip().split('=')
        key = pieces[0].strip()
        value = pieces[1].strip() if len(pieces) > 1 else ''
        result[key] = value
    return result


class WorkoutV2Parser(BaseParser):
    """Parser for 'workout, ...' blocks"""

    def can_parse(self, header: str) -> bool:
        return header[:len(KEYWORD)] == KEYWORD

    def parse(self, header: str, body: List[str]) -> WorkoutEntry:
        """
        Decode a v2 block.

        A header with no comma-separated columns yields UnknownEntry with a
        warning rather than a workout with empty details.
        """
        columns = split_outside_parens(header)
        if len(columns) < 2:
            self.add_warning(f"'{KEYWORD}' header without date or name: {header!r}")
            return UnknownEntry()

        details = self._parse_header(columns)
        sets = [
            self._parse_set_line(line, details)
            for line in self.set_lines(body)
        ]
        return WorkoutLog(dialect="v2", details=details, sets=sets)

    def _parse_header(self, columns: List[str]) -> WorkoutDetails:
        date_hour = self.field(columns, 1).split()
        metadata = parse_key_values(columns[3]) if len(columns) > 3 else {}

        return WorkoutDetails(
            date=date_hour[0] if date_hour else '',
            hour=date_hour[1] if len(date_hour) > 1 else '',
            name=strip_parens(self.field(columns, 2)),
            metadata=metadata,
            **{attr: metadata.get(key, '') for key, attr in META_FIELDS.items()},
        )

    def _parse_set_line(self, line: str, details: WorkoutDetails) -> ExerciseSet:
        fields = line.split(',')
        if len(fields) < 3:
            self.add_warning(f"Set line without name or weight: {line!r}")

        return ExerciseSet(
            sets=self.inherit(strip_letters(self.field(fields, 0)), details.global_set_count),
            name=self.field(fields, 1),
            weight=self.field(fields, 2),
            reps=self.field(fields, 3),
            rest=self.inherit(self.field(fields, 4), details.global_rest_time),
        )
