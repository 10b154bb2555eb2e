"""
Workouts (v1) Parser

Parses the first block dialect, which carries only global values in
its header:

    workouts 4x rst:30s
    - pull up, 5 3 2 2
    - 3x db ovh press 2x20lb, 20 12 12 10

- The set count ("4x") must be the first token after the keyword
- "rst:<time>" may appear in any later position
- Each set line is "[<N>x ]<name>[ <weight>lb|kg], <reps>"
- Rest always comes from the header
"""

import re
import logging
from typing import List, Tuple

from .base import BaseParser
from .models import ExerciseSet, UnknownEntry, WorkoutDetails, WorkoutEntry, WorkoutLog
from workout_manager.utils import split_at_last, strip_letters

logger = logging.getLogger(__name__)

KEYWORD = 'workouts'
REST_PREFIX = 'rst:'
WEIGHT_SUFFIXES = ('lb', 'kg')

# "4x bench" -> leading set count
SET_COUNT_PATTERN = re.compile(r'^\d{1,2}x')


class WorkoutsV1Parser(BaseParser):
    """Parser for 'workouts ...' blocks"""

    def can_parse(self, header: str) -> bool:
        return header[:len(KEYWORD)] == KEYWORD

    def parse(self, header: str, body: List[str]) -> WorkoutEntry:
        """
        Decode a v1 block.

        A bare "workouts" header carries neither set count nor rest and
        yields UnknownEntry with a warning rather than a workout with empty
        details, so it renders no rows.
        """
        tokens = header.split()
        if len(tokens) < 2:
            self.add_warning(f"'{KEYWORD}' header without set count or rest: {header!r}")
            return UnknownEntry()

        details = self._parse_header(tokens)
        sets = [
            self._parse_set_line(line, details)
            for line in self.set_lines(body)
        ]
        return WorkoutLog(dialect="v1", details=details, sets=sets)

    def _parse_header(self, tokens: List[str]) -> WorkoutDetails:
        """Extract the global set count (token 1 only) and rest time (any token)."""
        global_set_count = ''
        global_rest_time = ''
        for position, token in enumerate(tokens[1:], start=1):
            if position == 1 and token.endswith('x'):
                global_set_count = strip_letters(token)
            elif token.startswith(REST_PREFIX):
                global_rest_time = token[len(REST_PREFIX):]
        return WorkoutDetails(
            global_set_count=global_set_count,
            global_rest_time=global_rest_time,
        )

    def _parse_set_line(self, line: str, details: WorkoutDetails) -> ExerciseSet:
        fields = line.split(',')
        if len(fields) < 2:
            self.add_warning(f"Set line without reps: {line!r}")

        name, weight = self._extract_weight(self.field(fields, 0))
        sets, name = self._extract_set_count(name)

        return ExerciseSet(
            name=name,
            sets=self.inherit(sets, details.global_set_count),
            reps=self.field(fields, 1),
            weight=weight,
            rest=details.global_rest_time,
        )

    def _extract_weight(self, name_part: str) -> Tuple[str, str]:
        """'db ovh press 2x20lb' -> ('db ovh press', '2x20lb')"""
        if not name_part.endswith(WEIGHT_SUFFIXES):
            return name_part, ''
        pieces = split_at_last(name_part, ' ')
        if len(pieces) < 2:
            self.add_warning(f"Weight without exercise name: {name_part!r}")
            return name_part, ''
        return pieces[0].strip(), pieces[1].strip()

    def _extract_set_count(self, name_part: str) -> Tuple[str, str]:
        """'3x db ovh press' -> ('3', 'db ovh press')"""
        if not SET_COUNT_PATTERN.match(name_part):
            return '', name_part
        pieces = name_part.split(None, 1)
        sets = strip_letters(pieces[0].strip())
        name = pieces[1].strip() if len(pieces) > 1 else ''
        return sets, name
