"""Structured view payloads consumed by the presentation layer.

No styling lives here: entries carry their category tag and the consumer
decides how to draw it.
"""

from __future__ import annotations

from datetime import date as date_type
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field

from care_schedule.schedule.enums import TreatmentCategory
from care_schedule.schedule.models import DividerEntry, Entry


class ViewMode(StrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class EntryView(BaseModel):
    """One entry in a slot: a treatment or a divider."""

    kind: Literal["treatment", "divider"]
    name: str | None = Field(default=None, description="Treatment name (treatments only)")
    label: str | None = Field(default=None, description="Divider text (dividers only)")
    category: TreatmentCategory | None = Field(default=None, description="Category tag (treatments only)")

    @classmethod
    def from_entry(cls, entry: Entry) -> EntryView:
        if isinstance(entry, DividerEntry):
            return cls(kind="divider", label=entry.label)
        return cls(kind="treatment", name=entry.name, category=entry.category)


class DayView(BaseModel):
    date: date_type
    title: str = Field(description="\"Today's Schedule\" or the long date")
    is_today: bool
    is_active: bool = Field(description="True when the date is inside the schedule window")
    morning: list[EntryView] = Field(default_factory=list)
    midday: list[EntryView] = Field(default_factory=list)
    evening: list[EntryView] = Field(default_factory=list)

    def sections(self) -> list[tuple[str, list[EntryView]]]:
        """Return non-empty (title, entries) pairs in Morning, Midday, Evening order."""
        named = [("Morning", self.morning), ("Midday", self.midday), ("Evening", self.evening)]
        return [(title, entries) for title, entries in named if entries]


class WeekDayView(BaseModel):
    date: date_type
    weekday_label: str = Field(description="Short weekday name, e.g. \"Sun\"")
    day_number: int
    is_today: bool
    preview: list[EntryView] = Field(description="First treatments of the day, dividers excluded")
    overflow: int = Field(ge=0, description="Treatments not shown in the preview")


class WeekView(BaseModel):
    days: list[WeekDayView]


class MonthCellView(BaseModel):
    date: date_type
    day_number: int
    is_current_month: bool
    is_today: bool
    has_special_event: bool = Field(description="Special event marker, current-month cells only")
    selectable: bool


class MonthView(BaseModel):
    year: int
    month: int
    title: str = Field(description="e.g. \"June 2025\"")
    weekday_headers: list[str]
    cells: list[MonthCellView]


class ReminderBanner(BaseModel):
    event_date: date_type
    headline: str
    detail: str


class LegendItem(BaseModel):
    category: TreatmentCategory
    label: str
