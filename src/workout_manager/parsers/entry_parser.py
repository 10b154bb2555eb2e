"""
Entry Parser

Classifies a workout block by its header line and hands it to the
matching dialect parser. Dialects are tried in precedence order:

1. 'workouts' (v1, plural)
2. 'workout'  (v2, singular)
3. anything mentioning 'week'
4. otherwise the block is unknown
"""

import logging
from typing import List

from .base import BaseParser
from .models import UnknownEntry, WorkoutEntry
from .v1_parser import WorkoutsV1Parser
from .v2_parser import WorkoutV2Parser
from .week_parser import WeekMarkerParser

logger = logging.getLogger(__name__)


class EntryParser:
    """Parses one block of the workout notation into a WorkoutEntry"""

    def __init__(self):
        self.parsers: List[BaseParser] = [
            WorkoutsV1Parser(),
            WorkoutV2Parser(),
            WeekMarkerParser(),
        ]
        self.warnings: List[str] = []

    def parse(self, block_text: str) -> WorkoutEntry:
        lines = block_text.split('\n')
        header, body = lines[0], lines[1:]

        for parser in self.parsers:
            if parser.can_parse(header):
                parser.warnings = []
                entry = parser.parse(header, body)
                self.warnings.extend(parser.warnings)
                return entry

        if header.strip():
            self.warnings.append(f"Unrecognized block header: {header!r}")
            logger.warning(f"Unrecognized block header: {header!r}")
        return UnknownEntry()


def parse_entry(block_text: str) -> WorkoutEntry:
    """Parse a single block with a fresh parser."""
    return EntryParser().parse(block_text)
