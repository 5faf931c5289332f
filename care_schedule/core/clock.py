"""Clock abstraction for reading "now".

Production code reads the local wall clock; tests inject a FixedClock and
move it explicitly.
"""

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Local wall clock (naive, local-calendar semantics)."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, current: datetime) -> None:
        self._current = current

    def now(self) -> datetime:
        return self._current

    def set(self, current: datetime) -> None:
        self._current = current

    def advance(self, delta: timedelta) -> None:
        self._current += delta
