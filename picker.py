"""Two-month picker controller: owns the month cursor and builds render models."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from calendar_date import add_months, month_anchor, parse_date
from calendar_logic import (
    WEEK_START,
    DayCell,
    month_cells,
    month_label,
    weekday_labels,
)
from selection import SelectionRange, apply_click, read_selection, write_selection

logger = logging.getLogger(__name__)

# Both displayed months must stay within date.min..date.max
FIRST_CURSOR = date.min
LAST_CURSOR = date(date.max.year, 11, 1)


class Direction(enum.Enum):
    PREV = "prev"
    NEXT = "next"


@dataclass(frozen=True)
class MonthView:
    anchor: date
    label: str
    cells: tuple[DayCell, ...]


@dataclass(frozen=True)
class RenderModel:
    """Everything a presentation layer needs to draw the picker."""
    months: tuple[MonthView, MonthView]
    weekday_labels: tuple[str, ...]
    selection: SelectionRange
    today: date


def build_render_model(cursor: date, selection: SelectionRange, today: date,
                       week_start: int = WEEK_START) -> RenderModel:
    """Build the model for *cursor*'s month and the one after it."""
    cursor = clamp_cursor(cursor)
    months = []
    for anchor in (month_anchor(cursor), add_months(cursor, 1)):
        cells = month_cells(anchor, selection, today, week_start)
        months.append(MonthView(anchor, month_label(anchor), tuple(cells)))
    return RenderModel(
        months=tuple(months),
        weekday_labels=tuple(weekday_labels(week_start)),
        selection=selection,
        today=today,
    )


def clamp_cursor(d: date) -> date:
    """Return *d*'s month, limited to the range where two months can be shown."""
    return min(max(month_anchor(d), FIRST_CURSOR), LAST_CURSOR)


class PickerController:
    """Wires navigation and day clicks to the two date fields.

    *fields* is any object with ``start_text``/``end_text`` attributes.
    *today* is called on every render so the today marker follows the clock.
    Every entry point rebuilds the whole model, hands it to *on_render* if
    set, and returns it.
    """

    def __init__(
        self,
        fields,
        today: Callable[[], date] = date.today,
        week_start: int = WEEK_START,
        on_render: Callable[[RenderModel], None] | None = None,
    ) -> None:
        self.fields = fields
        self._today = today
        self.week_start = week_start
        self.on_render = on_render
        self._cursor: date | None = None

    @property
    def cursor(self) -> date | None:
        return self._cursor

    @property
    def selection(self) -> SelectionRange:
        return read_selection(self.fields)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------
    def navigate(self, direction: Direction | str) -> RenderModel:
        step = -1 if Direction(direction) is Direction.PREV else 1
        if self._cursor is None:
            self._reset_cursor(self.selection)
        if (step < 0 and self._cursor <= FIRST_CURSOR) or \
                (step > 0 and self._cursor >= LAST_CURSOR):
            logger.debug("Cursor %s is at the edge of the calendar", self._cursor)
        else:
            self._cursor = add_months(self._cursor, step)
            logger.debug("Navigated %+d month to %s", step, self._cursor)
        return self.render()

    def resync(self, prefer_selected_month: bool) -> RenderModel:
        selection = self.selection
        if prefer_selected_month or self._cursor is None:
            self._reset_cursor(selection)
        return self._render(selection)

    def on_day_click(self, date_text: str) -> RenderModel | None:
        clicked = parse_date(date_text)
        if clicked is None:
            logger.debug("Ignoring click with unparseable date %r", date_text)
            return None
        write_selection(self.fields, apply_click(self.selection, clicked))
        return self.resync(False)

    def go_today(self) -> RenderModel:
        self._cursor = clamp_cursor(self._today())
        return self.render()

    def render(self) -> RenderModel:
        return self._render(self.selection)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _reset_cursor(self, selection: SelectionRange) -> None:
        self._cursor = clamp_cursor(selection.start or self._today())

    def _render(self, selection: SelectionRange) -> RenderModel:
        if self._cursor is None:
            self._reset_cursor(selection)
        model = build_render_model(
            self._cursor, selection, self._today(), self.week_start,
        )
        if self.on_render is not None:
            self.on_render(model)
        return model
