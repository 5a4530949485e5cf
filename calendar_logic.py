"""Pure month-grid calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from calendar_date import month_anchor
from selection import SelectionRange

# Column 0 of every grid. Uses the calendar module numbering (Monday == 0).
WEEK_START = calendar.SUNDAY


@dataclass(frozen=True)
class DayCell:
    """One grid slot: a real day with its markers, or a leading blank."""
    date: date | None = None
    is_today: bool = False
    is_range_start: bool = False
    is_range_end: bool = False
    is_in_range: bool = False
    is_single_selected: bool = False

    @property
    def is_blank(self) -> bool:
        return self.date is None


BLANK = DayCell()


def leading_blanks(anchor: date, week_start: int = WEEK_START) -> int:
    """Number of empty slots before the 1st of *anchor*'s month."""
    return (month_anchor(anchor).weekday() - week_start) % 7


def day_cell(d: date, selection: SelectionRange, today: date) -> DayCell:
    """Compute the marker flags for a single real day."""
    start, end = selection
    return DayCell(
        date=d,
        is_today=d == today,
        is_range_start=start is not None and d == start,
        is_range_end=end is not None and d == end,
        is_in_range=(start is not None and end is not None and start < d < end),
        is_single_selected=(
            start is not None and d == start and (end is None or end == start)
        ),
    )


def month_cells(anchor: date, selection: SelectionRange, today: date,
                week_start: int = WEEK_START) -> list[DayCell]:
    """Return the cells of *anchor*'s month, preceded by leading blanks.

    The day of *anchor* is ignored. The result is not padded at the end;
    use grid_rows() to lay it out in weeks.
    """
    first = month_anchor(anchor)
    _, n_days = calendar.monthrange(first.year, first.month)
    cells = [BLANK] * leading_blanks(first, week_start)
    for day in range(1, n_days + 1):
        cells.append(day_cell(first.replace(day=day), selection, today))
    return cells


def grid_rows(cells: list[DayCell]) -> list[list[DayCell]]:
    """Chunk cells into week rows of 7, padding the last row with blanks."""
    rows: list[list[DayCell]] = []
    for i in range(0, len(cells), 7):
        row = list(cells[i:i + 7])
        row.extend([BLANK] * (7 - len(row)))
        rows.append(row)
    return rows


def weekday_labels(week_start: int = WEEK_START) -> list[str]:
    """Locale-formatted weekday abbreviations in column order."""
    return [calendar.day_abbr[(week_start + i) % 7] for i in range(7)]


def month_label(anchor: date) -> str:
    """Return e.g. ``"April 2026"`` in the current locale."""
    return f"{calendar.month_name[anchor.month]} {anchor.year}"
