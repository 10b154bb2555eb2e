"""Unit tests for placeholder tag resolution."""
import pytest

from workout_manager.services.populate_service import PopulateService
from workout_manager.services.reference_resolver import column_letter, resolve, resolve_cell


class TestResolveCell:

    @pytest.mark.parametrize("c,expected", [(0, "A"), (1, "B"), (7, "H"), (25, "Z")])
    def test_colref_zero_is_own_column(self, c, expected):
        assert resolve_cell("$colref(0)", 0, c) == expected

    def test_cellref_one_row_down(self):
        assert resolve_cell("$cellref(1,0)", 2, 0) == "A4"

    def test_cellref_same_row_columns_left(self):
        assert resolve_cell("$cellref(0,-2)", 5, 6) == "E6"

    def test_colref_negative_offset(self):
        assert resolve_cell("$colref(-6)", 3, 6) == "A"

    def test_every_occurrence_is_resolved(self):
        cell = "=sum($cellref(1,0):$cellref(100,0))+$colref(0)"
        assert resolve_cell(cell, 1, 1) == "=sum(B3:B102)+B"

    def test_tag_free_cell_passes_through(self):
        assert resolve_cell("pull up", 4, 2) == "pull up"
        assert resolve_cell("", 4, 2) == ""

    def test_tags_with_spaces_are_not_tags(self):
        assert resolve_cell("$cellref(1, 0)", 0, 0) == "$cellref(1, 0)"


def test_column_letter():
    assert column_letter(0) == "A"
    assert column_letter(7) == "H"


def test_resolve_uses_each_cell_position():
    table = [
        ["$cellref(0,0)", "$cellref(0,0)"],
        ["$cellref(0,0)", "$colref(-1)"],
    ]
    assert resolve(table) == [["A1", "B1"], ["A2", "A"]]


def test_resolve_does_not_mutate_input():
    table = [["$colref(0)"]]
    resolve(table)
    assert table == [["$colref(0)"]]


class TestOutOfRangeTags:
    """Tags in user text that point off the sheet are left as written."""

    def test_colref_left_of_column_a(self):
        assert resolve_cell("$colref(-5) curl", 2, 2) == "$colref(-5) curl"

    def test_cellref_left_of_column_a(self):
        assert resolve_cell("$cellref(0,-9)", 4, 2) == "$cellref(0,-9)"

    def test_cellref_above_row_one(self):
        assert resolve_cell("$cellref(-3,0)", 1, 0) == "$cellref(-3,0)"

    def test_malformed_offsets_are_not_tags(self):
        assert resolve_cell("$colref(1-2)", 0, 0) == "$colref(1-2)"
        assert resolve_cell("$cellref(--1,0)", 0, 0) == "$cellref(--1,0)"

    def test_valid_tags_beside_bad_ones_still_resolve(self):
        assert resolve_cell("$colref(-5) $colref(0)", 0, 2) == "$colref(-5) C"

    def test_user_text_with_bad_tag_does_not_abort_report(self):
        report, _ = PopulateService.build_report("workouts 3x\n- $colref(-5) curl, 10 10")
        assert report.rows[2][2] == "$colref(-5) curl"
        assert report.rows[2][5] == '=iferror(round(average(split(E3," ")), 2))'
