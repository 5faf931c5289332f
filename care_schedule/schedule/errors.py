"""Domain-specific errors for the care schedule.

Engine operations are total over well-typed input; these errors mark
caller contract violations and configuration mistakes.
"""


class ScheduleError(Exception):
    """Base exception for all schedule errors."""

    pass


class InvalidCalendarDateError(ScheduleError):
    """Raised when a value cannot be read as a calendar day (wrong type, malformed ISO string)."""

    pass


class InvalidScheduleConfigError(ScheduleError):
    """Raised when injected configuration is invalid (e.g., window ends before it starts)."""

    pass


class TickerError(ScheduleError):
    """Raised when a ticker is misused (e.g., started twice)."""

    pass
