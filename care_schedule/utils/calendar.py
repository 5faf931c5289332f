"""Canonical date-window helpers for the care calendar.

Week boundaries are Sunday-Saturday. All helpers work at day granularity:
datetimes are truncated to their calendar day before any comparison.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from care_schedule.schedule.errors import InvalidCalendarDateError

DAYS_PER_WEEK = 7
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class MonthCell:
    """One cell of a month grid.

    Attributes:
        date: Calendar day shown in the cell
        is_current_month: False for padding days from adjacent months
    """

    date: date
    is_current_month: bool


def to_calendar_date(value: date | datetime | str) -> date:
    """Coerce a date-like value to a calendar day.

    Args:
        value: date, datetime (time-of-day dropped) or ISO "YYYY-MM-DD" string

    Returns:
        The calendar day

    Raises:
        InvalidCalendarDateError: If the value is not a readable calendar day
    """
    # datetime is a date subclass, so it must be checked first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        # fromisoformat also takes compact and ISO-week forms; only YYYY-MM-DD is allowed
        if not ISO_DATE_PATTERN.fullmatch(value):
            raise InvalidCalendarDateError(f"Malformed calendar date: {value!r}")
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise InvalidCalendarDateError(f"Malformed calendar date: {value!r}") from e
    raise InvalidCalendarDateError(f"Unsupported date-like value: {value!r}")


def sunday_weekday(d: date | datetime) -> int:
    """Return the weekday index with 0 = Sunday and 6 = Saturday."""
    return (to_calendar_date(d).weekday() + 1) % DAYS_PER_WEEK


def same_calendar_day(a: date | datetime, b: date | datetime) -> bool:
    """Compare two dates ignoring time-of-day."""
    return to_calendar_date(a) == to_calendar_date(b)


def start_of_week(d: date | datetime) -> date:
    """Return Sunday of the calendar week containing d."""
    day = to_calendar_date(d)
    return day - timedelta(days=sunday_weekday(day))


def end_of_week(d: date | datetime) -> date:
    """Return Saturday of the calendar week containing d."""
    return start_of_week(d) + timedelta(days=DAYS_PER_WEEK - 1)


def in_same_week(d: date | datetime, anchor: date | datetime) -> bool:
    """Return True if d falls in the Sunday-Saturday week containing anchor."""
    day = to_calendar_date(d)
    return start_of_week(anchor) <= day <= end_of_week(anchor)


def week_dates(d: date | datetime) -> list[date]:
    """Return the 7 days of the week containing d, Sunday first."""
    first = start_of_week(d)
    return [first + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def shift_months(d: date | datetime, months: int) -> date:
    """Move d by whole calendar months, clamping the day to the target month."""
    day = to_calendar_date(d)
    year = day.year + (day.month - 1 + months) // 12
    month = (day.month - 1 + months) % 12 + 1
    return date(year, month, min(day.day, days_in_month(year, month)))


def month_grid(d: date | datetime) -> list[MonthCell]:
    """Build the flat cell sequence for the month containing d.

    The month is left-padded with trailing days of the previous month so the
    1st lands in its weekday column, then right-padded with leading days of
    the next month until the length is a multiple of 7.

    Args:
        d: Any day in the month to render

    Returns:
        Cells ordered row by row, Sunday first
    """
    day = to_calendar_date(d)
    first = day.replace(day=1)
    length = days_in_month(first.year, first.month)

    cells = [
        MonthCell(date=first - timedelta(days=offset), is_current_month=False)
        for offset in range(sunday_weekday(first), 0, -1)
    ]
    cells.extend(
        MonthCell(date=first + timedelta(days=offset), is_current_month=True)
        for offset in range(length)
    )

    last = first + timedelta(days=length - 1)
    trailing = 0
    while len(cells) % DAYS_PER_WEEK != 0:
        trailing += 1
        cells.append(MonthCell(date=last + timedelta(days=trailing), is_current_month=False))

    return cells
