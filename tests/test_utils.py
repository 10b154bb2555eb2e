"""Unit tests for utility functions."""
from datetime import datetime

import pytest

from workout_manager.utils import (
    format_short_date,
    now_formatted,
    split_at_last,
    split_outside_parens,
    strip_letters,
)


class TestSplitOutsideParens:
    """Paren-depth-aware comma splitting."""

    def test_commas_inside_parens_do_not_split(self):
        header = "workout, 1/11 7p, (sw1: pull ups, 1 biceps), (garmin=hey, other=hi)"
        assert split_outside_parens(header) == [
            "workout",
            " 1/11 7p",
            " (sw1: pull ups, 1 biceps)",
            " (garmin=hey, other=hi)",
        ]

    def test_nested_parens(self):
        assert split_outside_parens("a, (b, (c, d), e), f") == ["a", " (b, (c, d), e)", " f"]

    def test_no_separator(self):
        assert split_outside_parens("workout") == ["workout"]

    def test_unbalanced_close_paren(self):
        assert split_outside_parens("a), b") == ["a)", " b"]


class TestSmallHelpers:

    @pytest.mark.parametrize(
        "raw,expected",
        [("4x", "4"), ("10X", "10"), ("sets", ""), ("2x20lb", "220"), ("", "")],
    )
    def test_strip_letters(self, raw, expected):
        assert strip_letters(raw) == expected

    def test_split_at_last(self):
        assert split_at_last("db ovh press 2x20lb", " ") == ["db ovh press", "2x20lb"]
        assert split_at_last("20lb", " ") == ["20lb"]


class TestFormatShortDate:

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1/11", "Jan 11"),
            ("12/3", "Dec 3"),
            ("2025-03-07", "Mar 7"),
            ("7/4/2024", "Jul 4"),
        ],
    )
    def test_formats_month_and_day(self, raw, expected):
        assert format_short_date(raw) == expected

    def test_empty_date(self):
        assert format_short_date("") == ""

    def test_unparseable_date_is_passed_through(self):
        assert format_short_date("someday") == "someday"


class TestNowFormatted:

    def test_known_styles(self):
        now = datetime(2025, 1, 11, 19, 5, 30)
        assert now_formatted("date", now) == "2025-01-11"
        assert now_formatted("datetime", now) == "2025-01-11 19:05"
        assert now_formatted("stamp", now) == "01/11/2025 19:05:30"

    def test_unknown_style_falls_back_to_stamp(self):
        now = datetime(2025, 1, 11, 19, 5, 30)
        assert now_formatted("nope", now) == now_formatted("stamp", now)
