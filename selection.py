"""Start/end selection derived from the two date fields, and click handling."""

from __future__ import annotations

import enum
import logging
from datetime import date
from typing import NamedTuple

from calendar_date import format_date, parse_date

logger = logging.getLogger(__name__)


class SelectionRange(NamedTuple):
    start: date | None = None
    end: date | None = None


class SelectionState(enum.Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


class DateFields:
    """In-memory pair of raw date-field values.

    Anything exposing ``start_text`` and ``end_text`` attributes can be used
    in its place (the tkinter window wraps its entry variables this way).
    """

    __slots__ = ("start_text", "end_text")

    def __init__(self, start_text: str = "", end_text: str = "") -> None:
        self.start_text = start_text
        self.end_text = end_text

    def __repr__(self) -> str:
        return f"DateFields({self.start_text!r}, {self.end_text!r})"


def read_selection(fields) -> SelectionRange:
    """Parse both fields into an ordered range. Never writes to *fields*.

    Unparseable text reads as an absent date.
    """
    start = parse_date(fields.start_text)
    end = parse_date(fields.end_text)
    if start is not None and end is not None and end < start:
        start, end = end, start
    return SelectionRange(start, end)


def write_selection(fields, selection: SelectionRange) -> None:
    start, end = selection
    fields.start_text = format_date(start) if start is not None else ""
    fields.end_text = format_date(end) if end is not None else ""


def selection_state(selection: SelectionRange) -> SelectionState:
    if selection.start is None:
        return SelectionState.EMPTY
    if selection.end is None:
        return SelectionState.PARTIAL
    return SelectionState.COMPLETE


def apply_click(selection: SelectionRange, clicked: date) -> SelectionRange:
    """Return the selection that results from clicking *clicked*.

    Empty or complete selections restart with *clicked* as the only start.
    A partial selection is completed, earlier date first; clicking the
    start again gives a one-day range.
    """
    state = selection_state(selection)
    if state is not SelectionState.PARTIAL:
        result = SelectionRange(clicked, None)
    elif clicked < selection.start:
        result = SelectionRange(clicked, selection.start)
    else:
        result = SelectionRange(selection.start, clicked)
    logger.debug("Click %s: %s -> %s", clicked, state.value,
                 selection_state(result).value)
    return result


def trip_length_days(selection: SelectionRange) -> int | None:
    """Inclusive number of days in a complete range, else None."""
    start, end = selection
    if start is None or end is None:
        return None
    return (end - start).days + 1
