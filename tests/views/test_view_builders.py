"""Tests for day, week and month view payloads."""

from datetime import date

import pytest

from care_schedule.schedule.enums import TreatmentCategory
from care_schedule.schedule.models import ScheduleWindow
from care_schedule.schedule.rules import ScheduleRuleEngine
from care_schedule.views.builders import (
    LEGEND,
    build_day_view,
    build_month_view,
    build_reminder_banner,
    build_week_view,
    navigate,
)
from care_schedule.views.schemas import ViewMode

WINDOW = ScheduleWindow(start=date(2025, 6, 23), end=date(2026, 6, 23))


class TestDayView:
    def test_today_title(self, engine: ScheduleRuleEngine) -> None:
        view = build_day_view(engine, date(2025, 7, 2), date(2025, 7, 2), WINDOW)
        assert view.title == "Today's Schedule"
        assert view.is_today

    def test_other_day_title(self, engine: ScheduleRuleEngine) -> None:
        view = build_day_view(engine, date(2025, 7, 2), date(2025, 7, 1), WINDOW)
        assert view.title == "Wednesday, July 2"
        assert not view.is_today

    def test_wednesday_entries(self, engine: ScheduleRuleEngine) -> None:
        view = build_day_view(engine, date(2025, 7, 2), date(2025, 7, 1), WINDOW)
        divider, shampoo, minoxidil = view.morning
        assert divider.kind == "divider"
        assert divider.label == "After Gym Session"
        assert divider.category is None
        assert shampoo.name == "Carol's Daughter Shampoo"
        assert shampoo.category == TreatmentCategory.GENTLE_SHAMPOO
        assert minoxidil.name == "Minoxidil"

    def test_sections_skip_empty_slots(self, engine: ScheduleRuleEngine) -> None:
        view = build_day_view(engine, date(2025, 8, 2), date(2025, 7, 1), WINDOW)
        assert [title for title, _ in view.sections()] == ["Morning", "Evening"]
        assert view.morning[0].name == "PRP Treatment"

    def test_active_window(self, engine: ScheduleRuleEngine) -> None:
        assert build_day_view(engine, date(2025, 6, 23), date(2025, 7, 1), WINDOW).is_active
        assert not build_day_view(engine, date(2026, 6, 23), date(2025, 7, 1), WINDOW).is_active
        assert not build_day_view(engine, date(2025, 6, 22), date(2025, 7, 1), WINDOW).is_active
        assert build_day_view(engine, date(2030, 1, 1), date(2025, 7, 1)).is_active


class TestWeekView:
    def test_seven_days_sunday_first(self, engine: ScheduleRuleEngine) -> None:
        view = build_week_view(engine, date(2025, 7, 2), date(2025, 7, 2))
        assert [d.weekday_label for d in view.days] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert view.days[0].date == date(2025, 6, 29)
        assert [d.is_today for d in view.days].index(True) == 3

    def test_preview_excludes_dividers_and_counts_overflow(self, engine: ScheduleRuleEngine) -> None:
        wednesday = build_week_view(engine, date(2025, 7, 2), date(2025, 7, 2)).days[3]
        assert [entry.name for entry in wednesday.preview] == [
            "Carol's Daughter Shampoo",
            "Minoxidil",
            "Red Light Therapy",
        ]
        assert wednesday.overflow == 3

    def test_sunday_has_no_overflow(self, engine: ScheduleRuleEngine) -> None:
        sunday = build_week_view(engine, date(2025, 7, 2), date(2025, 7, 2)).days[0]
        assert len(sunday.preview) == 3
        assert sunday.overflow == 0


class TestMonthView:
    def test_august_2025(self, engine: ScheduleRuleEngine) -> None:
        view = build_month_view(engine, date(2025, 8, 15), date(2025, 8, 20))
        assert view.title == "August 2025"
        assert view.weekday_headers == ["S", "M", "T", "W", "T", "F", "S"]
        assert len(view.cells) == 42
        assert sum(cell.is_current_month for cell in view.cells) == 31

        marked = [cell.date for cell in view.cells if cell.has_special_event]
        assert marked == [date(2025, 8, 2)]
        assert [cell.date for cell in view.cells if cell.is_today] == [date(2025, 8, 20)]

    def test_padding_cells_not_selectable_or_marked(self) -> None:
        # Event on a padding day (next month) must not be marked
        engine = ScheduleRuleEngine([date(2025, 9, 6)], date(2025, 6, 23))
        view = build_month_view(engine, date(2025, 8, 1), date(2025, 8, 1))
        padding = [cell for cell in view.cells if not cell.is_current_month]
        assert date(2025, 9, 6) in [cell.date for cell in padding]
        assert not any(cell.has_special_event or cell.selectable for cell in padding)


@pytest.mark.parametrize(
    ("mode", "direction", "expected"),
    [
        (ViewMode.DAY, 1, date(2025, 2, 1)),
        (ViewMode.DAY, -1, date(2025, 1, 30)),
        (ViewMode.WEEK, 1, date(2025, 2, 7)),
        (ViewMode.WEEK, -2, date(2025, 1, 17)),
        (ViewMode.MONTH, 1, date(2025, 2, 28)),
        (ViewMode.MONTH, -1, date(2024, 12, 31)),
    ],
)
def test_navigate(mode: ViewMode, direction: int, expected: date) -> None:
    assert navigate(date(2025, 1, 31), mode, direction) == expected


def test_reminder_banner() -> None:
    banner = build_reminder_banner(date(2025, 8, 2))
    assert banner is not None
    assert banner.headline == "Time to book PRP!"
    assert banner.detail == "Next session: Aug 2"
    assert build_reminder_banner(None) is None


def test_legend_categories_unique() -> None:
    categories = [item.category for item in LEGEND]
    assert len(categories) == len(set(categories)) == 9
