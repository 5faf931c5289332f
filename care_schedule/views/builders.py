"""Build view payloads from the rule engine.

Each builder calls the engine once per visible day and packs the result for
display. Navigation moves the selected date by the step of the active view.
"""

from datetime import date, datetime, timedelta

from care_schedule.schedule.enums import TreatmentCategory
from care_schedule.schedule.models import ScheduleWindow
from care_schedule.schedule.rules import ScheduleRuleEngine
from care_schedule.utils.calendar import (
    DAYS_PER_WEEK,
    month_grid,
    shift_months,
    to_calendar_date,
    week_dates,
)
from care_schedule.views.schemas import (
    DayView,
    EntryView,
    LegendItem,
    MonthCellView,
    MonthView,
    ReminderBanner,
    ViewMode,
    WeekDayView,
    WeekView,
)

WEEK_PREVIEW_SIZE = 3
WEEKDAY_HEADERS = ["S", "M", "T", "W", "T", "F", "S"]
REMINDER_HEADLINE = "Time to book PRP!"

LEGEND = [
    LegendItem(category=TreatmentCategory.MINOXIDIL, label="Minoxidil"),
    LegendItem(category=TreatmentCategory.TOPICAL, label="RU58841"),
    LegendItem(category=TreatmentCategory.LIGHT_THERAPY, label="Red Light"),
    LegendItem(category=TreatmentCategory.MICRONEEDLING, label="Microneedling"),
    LegendItem(category=TreatmentCategory.CLARIFYING_SHAMPOO, label="Nizoral"),
    LegendItem(category=TreatmentCategory.GENTLE_SHAMPOO, label="Carol's Daughter"),
    LegendItem(category=TreatmentCategory.HAIR_MASK, label="Hair Mask"),
    LegendItem(category=TreatmentCategory.PROCEDURE, label="PRP"),
    LegendItem(category=TreatmentCategory.SERUM, label="Hair Serum"),
]


def _long_date(day: date) -> str:
    return f"{day:%A}, {day:%B} {day.day}"


def navigate(selected: date | datetime | str, mode: ViewMode, direction: int) -> date:
    """Move the selected date one step of the active view.

    Args:
        selected: Currently selected day
        mode: Active view (day, week or month)
        direction: Number of steps, negative to go back

    Returns:
        The new selected day
    """
    day = to_calendar_date(selected)
    if mode == ViewMode.DAY:
        return day + timedelta(days=direction)
    if mode == ViewMode.WEEK:
        return day + timedelta(days=direction * DAYS_PER_WEEK)
    return shift_months(day, direction)


def build_day_view(
    engine: ScheduleRuleEngine,
    selected: date | datetime | str,
    today: date | datetime | str,
    window: ScheduleWindow | None = None,
) -> DayView:
    day = to_calendar_date(selected)
    is_today = day == to_calendar_date(today)
    schedule = engine.treatments_for(day)

    return DayView(
        date=day,
        title="Today's Schedule" if is_today else _long_date(day),
        is_today=is_today,
        is_active=window.contains(day) if window is not None else True,
        morning=[EntryView.from_entry(entry) for entry in schedule.morning],
        midday=[EntryView.from_entry(entry) for entry in schedule.midday],
        evening=[EntryView.from_entry(entry) for entry in schedule.evening],
    )


def build_week_view(
    engine: ScheduleRuleEngine,
    selected: date | datetime | str,
    today: date | datetime | str,
) -> WeekView:
    current = to_calendar_date(today)
    days = []
    for day in week_dates(selected):
        treatments = engine.treatments_for(day).treatments()
        days.append(
            WeekDayView(
                date=day,
                weekday_label=f"{day:%a}",
                day_number=day.day,
                is_today=day == current,
                preview=[EntryView.from_entry(entry) for entry in treatments[:WEEK_PREVIEW_SIZE]],
                overflow=max(0, len(treatments) - WEEK_PREVIEW_SIZE),
            )
        )
    return WeekView(days=days)


def build_month_view(
    engine: ScheduleRuleEngine,
    selected: date | datetime | str,
    today: date | datetime | str,
) -> MonthView:
    day = to_calendar_date(selected)
    current = to_calendar_date(today)

    cells = [
        MonthCellView(
            date=cell.date,
            day_number=cell.date.day,
            is_current_month=cell.is_current_month,
            is_today=cell.date == current,
            has_special_event=cell.is_current_month and engine.is_special_event_day(cell.date),
            selectable=cell.is_current_month,
        )
        for cell in month_grid(day)
    ]

    return MonthView(
        year=day.year,
        month=day.month,
        title=f"{day:%B} {day.year}",
        weekday_headers=list(WEEKDAY_HEADERS),
        cells=cells,
    )


def build_reminder_banner(event_date: date | None) -> ReminderBanner | None:
    """Return the booking banner for an upcoming event, or None to suppress it."""
    if event_date is None:
        return None
    return ReminderBanner(
        event_date=event_date,
        headline=REMINDER_HEADLINE,
        detail=f"Next session: {event_date:%b} {event_date.day}",
    )
