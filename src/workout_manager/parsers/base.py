"""
Base Parser

Abstract base class for the block dialect parsers, plus the body-line
helpers every dialect shares.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from .models import WorkoutEntry

logger = logging.getLogger(__name__)

# Every set line starts with one of these
SET_LINE_MARKERS = ('-', '.')


class BaseParser(ABC):
    """Abstract base class for block parsers"""

    def __init__(self):
        self.warnings: List[str] = []

    @abstractmethod
    def can_parse(self, header: str) -> bool:
        """
        Check if this parser handles a block with the given header line.

        Args:
            header: First line of the block

        Returns:
            True if this parser can handle the block
        """
        pass

    @abstractmethod
    def parse(self, header: str, body: List[str]) -> WorkoutEntry:
        """
        Decode one block.

        Args:
            header: First line of the block
            body: Remaining lines of the block

        Returns:
            The decoded entry; never raises for malformed input
        """
        pass

    @staticmethod
    def is_set_line(line: str) -> bool:
        """Set lines start with '-' or '.'; everything else is ignored."""
        return line[:1] in SET_LINE_MARKERS

    @staticmethod
    def strip_marker(line: str) -> str:
        """Drop the leading marker and any whitespace after it."""
        return line[1:].lstrip()

    @staticmethod
    def field(fields: List[str], index: int) -> str:
        """Trimmed field at index, or '' when the line is too short."""
        return fields[index].strip() if index < len(fields) else ''

    @staticmethod
    def inherit(explicit: Optional[str], fallback: str) -> str:
        """Effective value of a per-line field: explicit if non-empty, else the entry's global."""
        return explicit or fallback

    def set_lines(self, body: List[str]) -> List[str]:
        """Set lines of a block body with their markers stripped."""
        return [self.strip_marker(line) for line in body if self.is_set_line(line)]

    def add_warning(self, warning: str):
        """Record a lenient-parse warning (never raised)"""
        self.warnings.append(warning)
        logger.warning(f"Parser warning: {warning}")
