"""CLI for the care schedule.

Renders the day, week and month views in the terminal and shows the PRP
booking reminder. The `watch` command keeps the reminder current on a timer.
"""

import time
from datetime import date

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from care_schedule.config.settings import settings
from care_schedule.core.clock import SystemClock
from care_schedule.core.logger import setup_logger
from care_schedule.schedule.enums import TreatmentCategory
from care_schedule.schedule.errors import InvalidCalendarDateError, InvalidScheduleConfigError
from care_schedule.schedule.reminder import is_reminder_window
from care_schedule.schedule.rules import ScheduleRuleEngine
from care_schedule.schedule.ticker import ReminderMonitor, SchedulerTicker
from care_schedule.utils.calendar import DAYS_PER_WEEK, to_calendar_date
from care_schedule.views.builders import (
    LEGEND,
    build_day_view,
    build_month_view,
    build_reminder_banner,
    build_week_view,
)
from care_schedule.views.schemas import EntryView

# Initialize Rich console for output
console = Console()

app = typer.Typer(
    name="care-schedule",
    help="Hair care treatment schedule - day, week and month views",
    add_completion=False,
)

CATEGORY_STYLES: dict[TreatmentCategory, str] = {
    TreatmentCategory.MINOXIDIL: "blue",
    TreatmentCategory.TOPICAL: "slate_blue1",
    TreatmentCategory.LIGHT_THERAPY: "red",
    TreatmentCategory.SERUM: "yellow",
    TreatmentCategory.CLARIFYING_SHAMPOO: "green",
    TreatmentCategory.GENTLE_SHAMPOO: "cyan",
    TreatmentCategory.MICRONEEDLING: "dark_orange",
    TreatmentCategory.HAIR_MASK: "pink1",
    TreatmentCategory.PROCEDURE: "magenta",
    TreatmentCategory.REST: "magenta",
    TreatmentCategory.RECOVERY: "pink1",
}


def _engine() -> ScheduleRuleEngine:
    return ScheduleRuleEngine.from_settings(settings)


def _resolve_date(value: str | None) -> date:
    """Parse a --date option, defaulting to today. Exits with code 1 on bad input."""
    if value is None:
        return SystemClock().now().date()
    try:
        return to_calendar_date(value)
    except InvalidCalendarDateError as e:
        console.print(f"[bold red]✗ Invalid date:[/bold red] {value} (expected YYYY-MM-DD)")
        raise typer.Exit(code=1) from e


def _entry_text(entry: EntryView) -> Text:
    if entry.kind == "divider":
        return Text(f"── {entry.label} ──", style="dim")
    return Text(entry.name or "", style=CATEGORY_STYLES.get(entry.category, "white"))


def _print_banner(event_date: date | None) -> None:
    banner = build_reminder_banner(event_date)
    if banner is None:
        return
    console.print(
        Panel(
            Text(banner.headline, style="bold magenta"),
            subtitle=banner.detail,
            border_style="magenta",
        )
    )


def _report_reminder(event_date: date | None) -> None:
    """Print the banner, or an explicit all-clear once no PRP session is close."""
    if event_date is None:
        console.print(f"[green]No PRP session within {settings.reminder_window_days} days[/green]")
        return
    _print_banner(event_date)


def _today_banner(today: date) -> None:
    _print_banner(is_reminder_window(today, settings.special_event_dates, settings.reminder_window_days))


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    setup_logger(level="DEBUG" if debug else settings.log_level)


@app.command()
def day(date_str: str | None = typer.Option(None, "--date", "-d", help="Day to show (YYYY-MM-DD)")) -> None:
    """Show the schedule for one day."""
    selected = _resolve_date(date_str)
    today = SystemClock().now().date()
    view = build_day_view(_engine(), selected, today, settings.schedule_window())

    _today_banner(today)
    console.print(f"[bold]{view.title}[/bold]")
    if not view.is_active:
        console.print("[yellow]Outside the active schedule window[/yellow]")

    for title, entries in view.sections():
        console.print(f"\n[bold cyan]{title}[/bold cyan]")
        for entry in entries:
            console.print(Text("  ").append_text(_entry_text(entry)))


@app.command()
def week(date_str: str | None = typer.Option(None, "--date", "-d", help="Any day in the week (YYYY-MM-DD)")) -> None:
    """Show the Sunday-Saturday week containing a day."""
    selected = _resolve_date(date_str)
    today = SystemClock().now().date()
    view = build_week_view(_engine(), selected, today)

    _today_banner(today)
    for week_day in view.days:
        line = Text(f"{week_day.weekday_label} {week_day.day_number}  ", style="reverse" if week_day.is_today else "bold")
        line.append_text(Text(", ").join(_entry_text(entry) for entry in week_day.preview))
        if week_day.overflow:
            line.append(f" +{week_day.overflow}", style="dim")
        console.print(line, soft_wrap=True)


@app.command()
def month(date_str: str | None = typer.Option(None, "--date", "-d", help="Any day in the month (YYYY-MM-DD)")) -> None:
    """Show the month grid; PRP days are marked with *."""
    selected = _resolve_date(date_str)
    today = SystemClock().now().date()
    view = build_month_view(_engine(), selected, today)

    _today_banner(today)
    table = Table(title=view.title, show_header=True, header_style="bold")
    for header in view.weekday_headers:
        table.add_column(header, justify="right")

    for row_start in range(0, len(view.cells), DAYS_PER_WEEK):
        row = []
        for cell in view.cells[row_start : row_start + DAYS_PER_WEEK]:
            label = f"{cell.day_number}*" if cell.has_special_event else str(cell.day_number)
            style = "dim" if not cell.is_current_month else ("reverse" if cell.is_today else "")
            row.append(Text(label, style=style))
        table.add_row(*row)
    console.print(table)


@app.command()
def reminder(today_str: str | None = typer.Option(None, "--today", help="Evaluate as of this day (YYYY-MM-DD)")) -> None:
    """Check whether a PRP appointment is coming up."""
    today = _resolve_date(today_str)
    _report_reminder(is_reminder_window(today, settings.special_event_dates, settings.reminder_window_days))


@app.command()
def legend() -> None:
    """Show the treatment legend."""
    for item in LEGEND:
        console.print(Text("● ", style=CATEGORY_STYLES[item.category]).append(item.label))


@app.command()
def watch(
    interval: float = typer.Option(settings.refresh_interval_seconds, "--interval", "-i", help="Refresh interval in seconds"),
) -> None:
    """Keep the PRP reminder current until interrupted (Ctrl-C)."""
    try:
        ticker = SchedulerTicker(interval)
    except InvalidScheduleConfigError as e:
        console.print(f"[bold red]✗ Invalid interval:[/bold red] {interval:g} (must be greater than 0)")
        raise typer.Exit(code=1) from e

    monitor = ReminderMonitor(SystemClock(), settings.special_event_dates, settings.reminder_window_days)
    monitor.subscribe(_report_reminder)

    with monitor.run(ticker):
        _print_banner(monitor.upcoming_event)
        console.print(f"[dim]Watching for PRP reminders every {interval:g}s (Ctrl-C to stop)[/dim]")
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            logger.info("Watch interrupted")
