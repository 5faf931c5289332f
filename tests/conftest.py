"""Root conftest for all tests.

Shared fixtures use the real PRP calendar so expectations can be checked
against concrete dates.
"""

from datetime import date

import pytest

from care_schedule.schedule.rules import ScheduleRuleEngine

SCHEDULE_START = date(2025, 6, 23)  # Monday
PRP_DATES = [
    date(2025, 8, 2),
    date(2025, 9, 6),
    date(2025, 10, 11),
    date(2026, 3, 14),
]


@pytest.fixture
def prp_dates() -> list[date]:
    return list(PRP_DATES)


@pytest.fixture
def engine(prp_dates: list[date]) -> ScheduleRuleEngine:
    return ScheduleRuleEngine(prp_dates, SCHEDULE_START)


@pytest.fixture
def plain_engine() -> ScheduleRuleEngine:
    """Engine with no special events."""
    return ScheduleRuleEngine([], SCHEDULE_START)
