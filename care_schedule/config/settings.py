from datetime import date

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from care_schedule.schedule.models import ScheduleWindow

DEFAULT_SPECIAL_EVENT_DATES = [
    date(2025, 8, 2),
    date(2025, 9, 6),
    date(2025, 10, 11),
    date(2026, 3, 14),
]


class Settings(BaseSettings):
    schedule_start_date: date = Field(
        default=date(2025, 6, 23),
        validation_alias="CARE_SCHEDULE_START_DATE",
        description="Anchor for week counting (alternating Saturday hair mask)",
    )
    schedule_end_date: date = Field(
        default=date(2026, 6, 23),
        validation_alias="CARE_SCHEDULE_END_DATE",
        description="Exclusive end of the active schedule window",
    )
    special_event_dates: list[date] = Field(
        default_factory=lambda: list(DEFAULT_SPECIAL_EVENT_DATES),
        validation_alias="CARE_SPECIAL_EVENT_DATES",
        description="PRP appointment dates, JSON list; order is significant for reminders",
    )
    reminder_window_days: int = Field(default=14, validation_alias="CARE_REMINDER_WINDOW_DAYS")
    refresh_interval_seconds: float = Field(default=60, validation_alias="CARE_REFRESH_INTERVAL_SECONDS")
    log_level: str = Field(default="INFO", validation_alias="CARE_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid CARE_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("reminder_window_days")
    @classmethod
    def validate_reminder_window(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"CARE_REMINDER_WINDOW_DAYS must be >= 0, got {value}")
        return value

    @field_validator("refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"CARE_REFRESH_INTERVAL_SECONDS must be > 0, got {value}")
        return value

    @model_validator(mode="after")
    def validate_window(self) -> "Settings":
        """Validate that the schedule window ends after it starts."""
        if self.schedule_end_date <= self.schedule_start_date:
            raise ValueError(
                f"CARE_SCHEDULE_END_DATE ({self.schedule_end_date}) must be after "
                f"CARE_SCHEDULE_START_DATE ({self.schedule_start_date})"
            )
        if not self.special_event_dates:
            logger.warning("No special event dates configured. PRP reminders will never fire.")
        return self

    def schedule_window(self) -> ScheduleWindow:
        return ScheduleWindow(start=self.schedule_start_date, end=self.schedule_end_date)


settings = Settings()
