"""Treatment rule engine.

Derives the ordered entries for each slot of a calendar day. Evaluation order:

1. Special-event day: fixed override schedule, nothing else applies.
2. Base rules: morning Minoxidil (not Saturday), midday Red Light Therapy
   (Monday-Friday), evening Minoxidil then Hair Serum (not Saturday).
3. Weekday additions from the dispatch table, appended after the base
   entries. Wednesday's divider and shampoo go to the front of the morning.

The engine is stateless after construction and safe to share between callers.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING

from loguru import logger

from care_schedule.schedule import catalog
from care_schedule.schedule.enums import Weekday
from care_schedule.schedule.models import DaySchedule, Entry
from care_schedule.utils.calendar import (
    DAYS_PER_WEEK,
    in_same_week,
    sunday_weekday,
    to_calendar_date,
)

if TYPE_CHECKING:
    from care_schedule.config.settings import Settings

WEEKDAYS_WITH_LIGHT_THERAPY = frozenset(
    {Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY}
)


@dataclass
class _DayDraft:
    """Mutable slot lists while rules are applied."""

    day: date
    weekday: Weekday
    special_event_week: bool
    weeks_since_start: int
    morning: list[Entry] = field(default_factory=list)
    midday: list[Entry] = field(default_factory=list)
    evening: list[Entry] = field(default_factory=list)

    def freeze(self) -> DaySchedule:
        return DaySchedule(
            morning=tuple(self.morning),
            midday=tuple(self.midday),
            evening=tuple(self.evening),
        )


def _topical_evening(draft: _DayDraft) -> None:
    draft.evening.append(catalog.RU58841)


def _wednesday(draft: _DayDraft) -> None:
    draft.morning[:0] = [catalog.AFTER_GYM_DIVIDER, catalog.CAROLS_DAUGHTER_SHAMPOO]
    draft.evening.append(catalog.RU58841)


def _saturday(draft: _DayDraft) -> None:
    if draft.special_event_week:
        logger.debug(f"Special-event week rest day for {draft.day.isoformat()}")
        draft.morning.append(catalog.REST_DAY)
    else:
        draft.morning.extend([catalog.NIZORAL_SHAMPOO, catalog.MICRONEEDLING])

    # Even weeks get K18, odd weeks Deep Conditioning
    if draft.weeks_since_start % 2 == 0:
        draft.evening.append(catalog.K18_TREATMENT)
    else:
        draft.evening.append(catalog.DEEP_CONDITIONING)


DAY_SPECIFIC_RULES: dict[Weekday, Callable[[_DayDraft], None]] = {
    Weekday.TUESDAY: _topical_evening,
    Weekday.WEDNESDAY: _wednesday,
    Weekday.THURSDAY: _topical_evening,
    Weekday.SATURDAY: _saturday,
}


class ScheduleRuleEngine:
    """Computes the day schedule for any calendar date.

    Args:
        special_event_dates: Dates that get the override schedule. Order is kept.
        schedule_start_date: Anchor for the alternating Saturday hair mask
    """

    def __init__(
        self,
        special_event_dates: Iterable[date | datetime | str],
        schedule_start_date: date | datetime | str,
    ) -> None:
        self.special_event_dates: tuple[date, ...] = tuple(to_calendar_date(d) for d in special_event_dates)
        self.schedule_start_date: date = to_calendar_date(schedule_start_date)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ScheduleRuleEngine":
        """Build an engine from a Settings instance."""
        return cls(settings.special_event_dates, settings.schedule_start_date)

    def is_special_event_day(self, day: date | datetime | str) -> bool:
        target = to_calendar_date(day)
        return any(event == target for event in self.special_event_dates)

    def is_special_event_week(self, day: date | datetime | str) -> bool:
        """Return True if day shares a Sunday-Saturday week with any special event."""
        target = to_calendar_date(day)
        return any(in_same_week(target, event) for event in self.special_event_dates)

    def weeks_since_start(self, day: date | datetime | str) -> int:
        """Whole weeks elapsed since the schedule start (floored, negative before it)."""
        return (to_calendar_date(day) - self.schedule_start_date).days // DAYS_PER_WEEK

    def treatments_for(self, day: date | datetime | str) -> DaySchedule:
        """Compute the schedule for one day.

        Args:
            day: Calendar day (date, datetime or ISO string)

        Returns:
            DaySchedule with ordered morning, midday and evening entries

        Raises:
            InvalidCalendarDateError: If day is not a readable calendar day
        """
        target = to_calendar_date(day)
        weekday = Weekday(sunday_weekday(target))

        if self.is_special_event_day(target):
            logger.debug(f"Special-event override for {target.isoformat()}")
            return DaySchedule(morning=(catalog.PRP_TREATMENT,), evening=(catalog.GENTLE_CARE,))

        draft = _DayDraft(
            day=target,
            weekday=weekday,
            special_event_week=self.is_special_event_week(target),
            weeks_since_start=self.weeks_since_start(target),
        )

        if weekday != Weekday.SATURDAY:
            draft.morning.append(catalog.MINOXIDIL)

        if weekday in WEEKDAYS_WITH_LIGHT_THERAPY:
            draft.midday.append(catalog.RED_LIGHT_THERAPY)

        if weekday != Weekday.SATURDAY:
            draft.evening.extend([catalog.MINOXIDIL, catalog.HAIR_SERUM])

        rule = DAY_SPECIFIC_RULES.get(weekday)
        if rule is not None:
            rule(draft)

        return draft.freeze()


def treatments_for_date(
    day: date | datetime | str,
    special_event_dates: Iterable[date | datetime | str],
    schedule_start_date: date | datetime | str,
) -> DaySchedule:
    """Pure functional form of ScheduleRuleEngine.treatments_for."""
    return ScheduleRuleEngine(special_event_dates, schedule_start_date).treatments_for(day)
