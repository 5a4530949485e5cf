"""Two-month date range picker window (tkinter) with start/end entry fields."""

import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from PIL import ImageTk

from calendar_date import format_date
from calendar_logic import DayCell, grid_rows
from icon_gen import create_icon_image
from picker import Direction, PickerController, RenderModel
from selection import SelectionRange, trip_length_days
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"


class _VarFields:
    """Expose two tk.StringVar objects as the picker's date fields."""

    __slots__ = ("_start", "_end")

    def __init__(self, start: tk.StringVar, end: tk.StringVar) -> None:
        self._start = start
        self._end = end

    @property
    def start_text(self) -> str:
        return self._start.get()

    @start_text.setter
    def start_text(self, value: str) -> None:
        self._start.set(value)

    @property
    def end_text(self) -> str:
        return self._end.get()

    @end_text.setter
    def end_text(self, value: str) -> None:
        self._end.set(value)


class _MonthPanel:
    """Pre-allocated widget pool for a single month (header + 6 weeks max)."""

    __slots__ = ("frame", "header", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict, on_click) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.header = tk.Label(
            self.frame, font=fonts["header"], bg=HEADER_BG, fg="#333333",
        )
        self.header.grid(row=0, column=0, columnspan=7, sticky="we", pady=(0, 2))

        self.day_headers: list[tk.Label] = []
        for col in range(7):
            lbl = tk.Label(
                self.frame, font=fonts["bold"], bg=GRID_BG, fg="#333333", width=3,
            )
            lbl.grid(row=1, column=col)
            self.day_headers.append(lbl)

        self.day_cells: list[list[tk.Label]] = []
        for r in range(6):  # max 6 weeks
            row_cells: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(
                    self.frame, font=fonts["normal"], bg=GRID_BG, width=3,
                )
                cell.grid(row=r + 2, column=c, padx=1, pady=1)
                # Bound once; the handler looks the date up by widget id
                cell.bind("<Button-1>", on_click)
                row_cells.append(cell)
            self.day_cells.append(row_cells)


def cell_colors(cell: DayCell) -> tuple[str, str]:
    """Return (background, foreground) for a day cell."""
    if cell.is_blank:
        return GRID_BG, "black"
    if cell.is_range_start or cell.is_range_end or cell.is_single_selected:
        return ACCENT, "white"
    if cell.is_in_range:
        return SEL_BG, "black"
    if cell.is_today:
        return GRID_BG, ACCENT
    return GRID_BG, "black"


def footer_text(selection: SelectionRange, today: date) -> str:
    """Summarise the selection, followed by today's date."""
    today_str = f"Today: {format_date(today)}"
    total_days = trip_length_days(selection)
    if total_days is None:
        if selection.start is not None:
            return f"From {format_date(selection.start)}, pick an end date     {today_str}"
        return today_str

    full_weeks, rem_days = divmod(total_days, 7)
    parts: list[str] = []
    if full_weeks:
        parts.append(f"{full_weeks} week{'s' if full_weeks != 1 else ''}")
    if rem_days:
        parts.append(f"{rem_days} day{'s' if rem_days != 1 else ''}")

    range_str = f"{format_date(selection.start)} → {format_date(selection.end)}"
    days_str = f"{total_days} day{'s' if total_days != 1 else ''}"
    return f"{range_str}:  {days_str}  ({', '.join(parts)})     {today_str}"


class DateRangeWindow:
    """Start/end date fields above a two-month range-selection calendar."""

    def __init__(self, start_text: str = "", end_text: str = "") -> None:
        self.root = tk.Tk()
        self.root.title("Trip Dates")
        self.root.configure(bg=GRID_BG)
        self._setup_fonts()

        settings = load_settings()
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        self.start_var = tk.StringVar(self.root, value=start_text)
        self.end_var = tk.StringVar(self.root, value=end_text)

        # Widget-to-date mapping (filled on every paint)
        self._widget_dates: dict[int, str] = {}
        self._panels: list[_MonthPanel] = []
        self._footer_label: tk.Label | None = None
        self._icon: ImageTk.PhotoImage | None = None
        self._icon_day: int | None = None
        self.result: tuple[str, str] = (start_text, end_text)
        self._closing = False

        self._build_shell()

        self.controller = PickerController(
            _VarFields(self.start_var, self.end_var),
            week_start=settings["week_start"],
            on_render=self.paint,
        )
        self.controller.resync(False)

        if self._saved_width is not None and self._saved_height is not None:
            self.root.geometry(f"{self._saved_width}x{self._saved_height}")
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    # ------------------------------------------------------------------
    # Build shell (once) — fields + nav bar + two month panels + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=6, pady=4)

        fields = tk.Frame(outer, bg=GRID_BG)
        fields.pack(fill="x", pady=(0, 6))
        for col, (label, var) in enumerate(
            (("Start date", self.start_var), ("End date", self.end_var))
        ):
            tk.Label(fields, text=label, font=self.font_bold, bg=GRID_BG).grid(
                row=0, column=col * 2, sticky="w", padx=(6, 4),
            )
            entry = tk.Entry(fields, textvariable=var, width=12, font=self.font_normal)
            entry.grid(row=0, column=col * 2 + 1, padx=(0, 6))
            entry.bind("<Return>", self._on_field_edit)
            entry.bind("<FocusOut>", self._on_field_edit)

        # Navigation row: ◀  Today  ▶
        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 2))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=GRID_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.controller.navigate(Direction.PREV))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=GRID_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.controller.navigate(Direction.NEXT))

        btn_today = tk.Label(
            nav, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side="top")
        btn_today.bind("<Button-1>", lambda _e: self.controller.go_today())

        months = tk.Frame(outer, bg=GRID_BG)
        months.pack()
        fonts = {
            "header": self.font_header, "bold": self.font_bold,
            "normal": self.font_normal,
        }
        for i in range(2):
            panel = _MonthPanel(months, fonts, self._on_cell_click)
            panel.frame.grid(row=0, column=i, padx=6, pady=2, sticky="n")
            self._panels.append(panel)

        self._footer_label = tk.Label(
            outer, font=self.font_footer, bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Paint a render model onto the pooled widgets
    # ------------------------------------------------------------------
    def paint(self, model: RenderModel) -> None:
        self._widget_dates.clear()
        for panel, month in zip(self._panels, model.months):
            panel.header.configure(text=month.label)
            for lbl, text in zip(panel.day_headers, model.weekday_labels):
                lbl.configure(text=text)
            rows = grid_rows(list(month.cells))
            for r in range(6):
                row = rows[r] if r < len(rows) else None
                for c in range(7):
                    widget = panel.day_cells[r][c]
                    cell = row[c] if row is not None else None
                    if cell is None or cell.is_blank:
                        widget.configure(text="", bg=GRID_BG, cursor="")
                        continue
                    bg, fg = cell_colors(cell)
                    widget.configure(
                        text=str(cell.date.day), bg=bg, fg=fg, cursor="hand2",
                        font=self.font_bold if cell.is_today else self.font_normal,
                    )
                    self._widget_dates[id(widget)] = format_date(cell.date)

        if self._footer_label:
            self._footer_label.configure(text=footer_text(model.selection, model.today))
        start = model.selection.start
        self._update_icon(start.day if start is not None else model.today.day)

    def _update_icon(self, day: int) -> None:
        if day == self._icon_day:
            return
        self._icon = ImageTk.PhotoImage(create_icon_image(day), master=self.root)
        self.root.iconphoto(False, self._icon)
        self._icon_day = day

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _on_cell_click(self, event: tk.Event) -> None:
        text = self._widget_dates.get(id(event.widget))
        if text is not None:
            self.controller.on_day_click(text)

    def _on_field_edit(self, _event: tk.Event) -> None:
        if self._closing:
            return
        self.controller.resync(True)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self.root.winfo_width()
        settings["window_height"] = self.root.winfo_height()
        save_settings(settings)

    def close(self) -> None:
        self._closing = True
        self.result = (self.start_var.get(), self.end_var.get())
        try:
            self._persist_size()
        except OSError:
            logger.warning("Could not save window size", exc_info=True)
        self.root.destroy()

    def run(self) -> None:
        self.root.mainloop()
