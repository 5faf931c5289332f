"""Core immutable data models for the care schedule.

This module defines the canonical data structures that represent:
- Slot entries (treatments and layout dividers)
- A full day schedule (morning, midday, evening)
- The window in which the schedule is active

All models are frozen (immutable) so a computed schedule can be shared
freely between views.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from care_schedule.schedule.enums import Slot, TreatmentCategory
from care_schedule.schedule.errors import InvalidScheduleConfigError


# -----------------------------
# Slot entries
# -----------------------------
@dataclass(frozen=True)
class TreatmentEntry:
    """A single treatment applied in a slot.

    Attributes:
        name: Display name of the treatment
        category: Category tag used for icon/color lookup
    """

    name: str
    category: TreatmentCategory
    kind: Literal["treatment"] = field(default="treatment", init=False)


@dataclass(frozen=True)
class DividerEntry:
    """Layout separator inside a slot. Not a treatment."""

    label: str
    kind: Literal["divider"] = field(default="divider", init=False)


Entry = TreatmentEntry | DividerEntry


# -----------------------------
# Day schedule
# -----------------------------
@dataclass(frozen=True)
class DaySchedule:
    """Ordered entries for each slot of one day.

    Order within a slot is display order and application order.
    """

    morning: tuple[Entry, ...] = ()
    midday: tuple[Entry, ...] = ()
    evening: tuple[Entry, ...] = ()

    def slot(self, slot: Slot) -> tuple[Entry, ...]:
        """Return the entries of one slot."""
        return getattr(self, slot.value)

    def treatments(self) -> list[TreatmentEntry]:
        """Return all treatments morning to evening, dividers removed."""
        return [
            entry
            for slot in Slot
            for entry in self.slot(slot)
            if isinstance(entry, TreatmentEntry)
        ]

    @property
    def is_empty(self) -> bool:
        return not (self.morning or self.midday or self.evening)


# -----------------------------
# Schedule window
# -----------------------------
@dataclass(frozen=True)
class ScheduleWindow:
    """Half-open range [start, end) in which the schedule is active.

    Informational only: the rule engine does not reject dates outside it.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise InvalidScheduleConfigError(
                f"Schedule window must end after it starts (start={self.start}, end={self.end})"
            )

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end
