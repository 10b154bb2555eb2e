"""Week marker parser ("Week 3", "-- week --", ...)."""

import re
from typing import List

from .base import BaseParser
from .models import WeekMarker, WorkoutEntry

WEEK_NUMBER_PATTERN = re.compile(r'week\s([1-6])')


class WeekMarkerParser(BaseParser):
    """Parser for any header that mentions 'week'"""

    def can_parse(self, header: str) -> bool:
        return 'week' in header.lower()

    def parse(self, header: str, body: List[str]) -> WorkoutEntry:
        match = WEEK_NUMBER_PATTERN.search(header.lower())
        return WeekMarker(name=f"Week {match.group(1)}" if match else "Week")
