"""Periodic refresh of "now" and the reminder state.

A Ticker fires a callback on an interval. SchedulerTicker uses APScheduler in
a background thread; ManualTicker fires only when tick() is called so tests
can simulate time passing without waiting.
"""

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from datetime import date, datetime
from typing import Protocol

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from loguru import logger

from care_schedule.core.clock import Clock
from care_schedule.schedule.errors import InvalidScheduleConfigError, TickerError
from care_schedule.schedule.reminder import DEFAULT_REMINDER_WINDOW_DAYS, is_reminder_window
from care_schedule.utils.calendar import to_calendar_date

DEFAULT_REFRESH_INTERVAL_SECONDS = 60
REFRESH_JOB_ID = "reminder_refresh"


class Ticker(Protocol):
    @property
    def running(self) -> bool: ...

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class SchedulerTicker:
    """Ticker backed by an APScheduler background scheduler."""

    def __init__(self, interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS) -> None:
        if interval_seconds <= 0:
            raise InvalidScheduleConfigError(f"interval_seconds must be > 0, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self._scheduler: BackgroundScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    def start(self, callback: Callable[[], None]) -> None:
        if self._scheduler is not None:
            raise TickerError("Ticker is already running")

        scheduler = BackgroundScheduler()
        scheduler.add_job(
            callback,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=REFRESH_JOB_ID,
            name="Reminder refresh",
            replace_existing=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.info(f"[TICKER] Started refresh ticker (every {self.interval_seconds}s)")

    def stop(self) -> None:
        if self._scheduler is None:
            return
        self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("[TICKER] Stopped refresh ticker")


class ManualTicker:
    """Ticker driven by explicit tick() calls."""

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        if self._callback is not None:
            raise TickerError("Ticker is already running")
        self._callback = callback

    def stop(self) -> None:
        self._callback = None

    def tick(self, times: int = 1) -> None:
        """Fire the callback; a stopped ticker does nothing."""
        for _ in range(times):
            if self._callback is None:
                return
            self.ticks += 1
            self._callback()


ReminderListener = Callable[[date | None], None]


class ReminderMonitor:
    """Keeps "now" and the upcoming-event reminder current.

    Args:
        clock: Source of the current time
        special_event_dates: Event dates in configured order
        window_days: Reminder lookahead in days
    """

    def __init__(
        self,
        clock: Clock,
        special_event_dates: Iterable[date | datetime | str],
        window_days: int = DEFAULT_REMINDER_WINDOW_DAYS,
    ) -> None:
        if window_days < 0:
            raise InvalidScheduleConfigError(f"window_days must be >= 0, got {window_days}")
        self.clock = clock
        self.special_event_dates: tuple[date, ...] = tuple(to_calendar_date(d) for d in special_event_dates)
        self.window_days = window_days
        self.current_date: date = to_calendar_date(clock.now())
        self.upcoming_event: date | None = is_reminder_window(
            self.current_date, self.special_event_dates, self.window_days
        )
        self._listeners: list[ReminderListener] = []

    def subscribe(self, listener: ReminderListener) -> None:
        """Register a callback fired whenever the upcoming event changes."""
        self._listeners.append(listener)

    def refresh(self) -> date | None:
        """Re-read now from the clock and recompute the reminder.

        Returns:
            The upcoming event after the refresh, or None
        """
        self.current_date = to_calendar_date(self.clock.now())
        upcoming = is_reminder_window(self.current_date, self.special_event_dates, self.window_days)

        if upcoming != self.upcoming_event:
            logger.info(
                f"Reminder changed on {self.current_date.isoformat()}: "
                f"{self.upcoming_event} -> {upcoming}"
            )
            self.upcoming_event = upcoming
            for listener in self._listeners:
                # Runs on the scheduler thread; report failures through loguru and keep notifying
                try:
                    listener(upcoming)
                except Exception:
                    logger.exception(f"Reminder listener {listener!r} failed for upcoming={upcoming}")

        return upcoming

    @contextmanager
    def run(self, ticker: Ticker) -> Iterator["ReminderMonitor"]:
        """Refresh now, keep refreshing on every tick, stop the ticker on exit."""
        self.refresh()
        ticker.start(self.refresh)
        try:
            yield self
        finally:
            ticker.stop()
