"""Upcoming special-event lookahead."""

from collections.abc import Iterable
from datetime import date, datetime

from care_schedule.schedule.errors import InvalidScheduleConfigError
from care_schedule.utils.calendar import to_calendar_date

DEFAULT_REMINDER_WINDOW_DAYS = 14


def is_reminder_window(
    today: date | datetime | str,
    special_event_dates: Iterable[date | datetime | str],
    window_days: int = DEFAULT_REMINDER_WINDOW_DAYS,
) -> date | None:
    """Find the event that should trigger a booking reminder.

    An event matches when it is strictly after today and at most window_days
    ahead. The first match in the given order wins, which is not necessarily
    the nearest event.

    Args:
        today: Current day; time-of-day is ignored
        special_event_dates: Event dates in configured order
        window_days: Lookahead in days (boundary inclusive)

    Returns:
        The first matching event date, or None
    """
    if window_days < 0:
        raise InvalidScheduleConfigError(f"window_days must be >= 0, got {window_days}")

    current = to_calendar_date(today)
    for event in special_event_dates:
        event_day = to_calendar_date(event)
        days_diff = (event_day - current).days
        if 0 < days_diff <= window_days:
            return event_day
    return None
