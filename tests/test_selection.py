"""Unit tests for the selection model and the click state machine."""

from datetime import date

import pytest

from selection import (
    DateFields,
    SelectionRange,
    SelectionState,
    apply_click,
    read_selection,
    selection_state,
    trip_length_days,
    write_selection,
)

pytestmark = pytest.mark.unit


class TestReadSelection:
    """Deriving the range from raw field text."""

    def test_empty_fields(self):
        assert read_selection(DateFields()) == SelectionRange(None, None)

    def test_ordered_pair(self):
        fields = DateFields("2026-03-10", "2026-03-15")
        assert read_selection(fields) == SelectionRange(date(2026, 3, 10), date(2026, 3, 15))

    def test_reversed_pair_is_swapped_but_fields_untouched(self):
        fields = DateFields("2026-03-15", "2026-03-10")
        assert read_selection(fields) == SelectionRange(date(2026, 3, 10), date(2026, 3, 15))
        assert fields.start_text == "2026-03-15"
        assert fields.end_text == "2026-03-10"

    def test_unparseable_text_reads_as_absent(self):
        assert read_selection(DateFields("2026-02-30", "2026-03-15")) == SelectionRange(None, date(2026, 3, 15))
        assert read_selection(DateFields("2026-03-10", "soon")) == SelectionRange(date(2026, 3, 10), None)

    @pytest.mark.parametrize("a,b", [
        ("2026-01-01", "2025-12-31"),
        ("2024-02-29", "2024-02-28"),
        ("2026-05-05", "2026-05-05"),
    ])
    def test_never_exposes_end_before_start(self, a, b):
        start, end = read_selection(DateFields(a, b))
        assert start <= end


class TestWriteSelection:
    """Writing the range back to the fields."""

    def test_writes_iso_text(self):
        fields = DateFields("x", "y")
        write_selection(fields, SelectionRange(date(2026, 3, 10), date(2026, 3, 15)))
        assert (fields.start_text, fields.end_text) == ("2026-03-10", "2026-03-15")

    def test_absent_clears_field(self):
        fields = DateFields("2026-03-10", "2026-03-15")
        write_selection(fields, SelectionRange(date(2026, 3, 12), None))
        assert (fields.start_text, fields.end_text) == ("2026-03-12", "")


class TestStateMachine:
    """Transitions driven by day clicks."""

    def test_states(self):
        assert selection_state(SelectionRange(None, None)) is SelectionState.EMPTY
        assert selection_state(SelectionRange(None, date(2026, 1, 1))) is SelectionState.EMPTY
        assert selection_state(SelectionRange(date(2026, 1, 1), None)) is SelectionState.PARTIAL
        assert selection_state(SelectionRange(date(2026, 1, 1), date(2026, 1, 2))) is SelectionState.COMPLETE

    def test_click_sequence(self):
        sel = SelectionRange()
        sel = apply_click(sel, date(2026, 3, 10))
        assert sel == SelectionRange(date(2026, 3, 10), None)
        sel = apply_click(sel, date(2026, 3, 15))
        assert sel == SelectionRange(date(2026, 3, 10), date(2026, 3, 15))
        sel = apply_click(sel, date(2026, 3, 12))
        assert sel == SelectionRange(date(2026, 3, 12), None)
        sel = apply_click(sel, date(2026, 3, 12))
        assert sel == SelectionRange(date(2026, 3, 12), date(2026, 3, 12))
        assert selection_state(sel) is SelectionState.COMPLETE

    def test_reversed_click_order(self):
        sel = apply_click(SelectionRange(), date(2026, 5, 20))
        sel = apply_click(sel, date(2026, 5, 18))
        assert sel == SelectionRange(date(2026, 5, 18), date(2026, 5, 20))

    def test_click_with_end_only_starts_fresh(self):
        sel = apply_click(SelectionRange(None, date(2026, 5, 20)), date(2026, 5, 1))
        assert sel == SelectionRange(date(2026, 5, 1), None)


class TestTripLength:
    """Inclusive day count."""

    def test_complete_range(self):
        assert trip_length_days(SelectionRange(date(2026, 3, 10), date(2026, 3, 15))) == 6

    def test_one_day_range(self):
        d = date(2026, 3, 12)
        assert trip_length_days(SelectionRange(d, d)) == 1

    def test_incomplete_range(self):
        assert trip_length_days(SelectionRange(date(2026, 3, 10), None)) is None
        assert trip_length_days(SelectionRange()) is None
