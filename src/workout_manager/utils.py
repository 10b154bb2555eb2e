"""Utility functions."""
import re
from datetime import datetime
from typing import List, Optional

_LETTERS = re.compile(r'[a-zA-Z]')

DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%y", "%Y-%m-%d", "%b %d %Y", "%B %d %Y")
YEARLESS_DATE_FORMATS = ("%m/%d", "%m-%d", "%b %d", "%B %d")
_LEAP_YEAR = 2000

NOW_FORMATS = {
    "short": "%b %d",
    "date": "%Y-%m-%d",
    "datetime": "%Y-%m-%d %H:%M",
    "stamp": "%m/%d/%Y %H:%M:%S",
}


def strip_letters(s: str) -> str:
    """Remove every ASCII letter from a string ('4x' -> '4')."""
    return _LETTERS.sub('', s)


def split_at_last(s: str, sep: str) -> List[str]:
    """Split at the last occurrence of sep; a single-item list if sep is absent."""
    idx = s.rfind(sep)
    if idx == -1:
        return [s]
    return [s[:idx], s[idx + len(sep):]]


def split_outside_parens(s: str, sep: str = ',') -> List[str]:
    """
    Split on sep only where it is not enclosed in parentheses.

    'workout, 1/11 7p, (a, b)' -> ['workout', ' 1/11 7p', ' (a, b)']

    An unbalanced ')' never drives the depth below zero.
    """
    parts = []
    current = []
    depth = 0
    for ch in s:
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth = max(depth - 1, 0)
        if ch == sep and depth == 0:
            parts.append(''.join(current))
            current = []
        else:
            current.append(ch)
    parts.append(''.join(current))
    return parts


def format_short_date(date_str: Optional[str]) -> str:
    """
    Render a calendar date as '{abbreviated month} {day}' ('1/11' -> 'Jan 11').

    Empty or unparseable input is returned unchanged.
    """
    if not date_str:
        return ''
    text = date_str.strip()
    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
            break
        except ValueError:
            continue
    else:
        # Yearless dates are read in a leap year so '2/29' is accepted
        for fmt in YEARLESS_DATE_FORMATS:
            try:
                parsed = datetime.strptime(f"{text} {_LEAP_YEAR}", f"{fmt} %Y")
                break
            except ValueError:
                continue
        else:
            return date_str
    return f"{parsed:%b} {parsed.day}"


def now_formatted(style: str = "stamp", now: Optional[datetime] = None) -> str:
    """Current local time in one of the NOW_FORMATS styles (unknown styles fall back to 'stamp')."""
    now = now or datetime.now()
    return now.strftime(NOW_FORMATS.get(style, NOW_FORMATS["stamp"]))
