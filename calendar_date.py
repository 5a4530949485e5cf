"""ISO calendar-date parsing, formatting and month arithmetic."""

import logging
import re
from datetime import date

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_date(text: str | None) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` string.

    Returns None when the text does not match the pattern exactly or the
    numbers do not form a real date (``2023-02-29`` is rejected).
    """
    if not isinstance(text, str):
        return None
    m = _ISO_DATE.fullmatch(text)
    if not m:
        logger.debug("Rejected date text %r: pattern mismatch", text)
        return None
    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError:
        logger.debug("Rejected date text %r: not a calendar date", text)
        return None


def format_date(d: date) -> str:
    """Return the zero-padded ``YYYY-MM-DD`` form of *d*."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def compare_dates(a: date, b: date) -> int:
    """Return -1, 0 or 1 as *a* is before, equal to or after *b*."""
    return (a > b) - (a < b)


def month_anchor(d: date) -> date:
    """Return the first day of *d*'s month."""
    return d.replace(day=1)


def add_months(d: date, n: int) -> date:
    """Return the first of the month *n* months away from *d*'s month."""
    index = d.year * 12 + (d.month - 1) + n
    year, month0 = divmod(index, 12)
    return date(year, month0 + 1, 1)
