"""
Command-line interface for Weekendly.
Shows upcoming long weekends, holidays and weekend presets with Rich formatting.
"""

import json
import logging
from datetime import date
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from weekendly import __app_name__, __version__
from weekendly.cli.validators import (
    date_callback,
    non_negative_callback,
    validate_date_string,
    year_callback,
)
from weekendly.config import Settings, get_settings
from weekendly.exceptions import ConfigurationError
from weekendly.holidays.calendar import HolidayRecord
from weekendly.holidays.detector import LongWeekendSpan
from weekendly.holidays.service import HolidayService
from weekendly.utils.date_utils import date_range, format_iso_date, get_weekday_name
from weekendly.utils.logging_config import setup_logging
from weekendly.weekend_types import (
    describe_days_until,
    format_duration_text,
    get_default_days,
    urgency_for_days_until,
    weekend_type_for_span,
)

# Create Typer app
app = typer.Typer(
    name="weekendly",
    help="Weekendly - find long weekends and plan what to do with them",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)

URGENCY_STYLES = {"urgent": "bold red", "soon": "yellow", "upcoming": "green"}


# ============================================================================
# Utility Functions
# ============================================================================

def handle_error(e: Exception, message: str = "An error occurred"):
    """Handle errors with nice formatting."""
    console.print(f"\n[bold red]✗ {message}[/bold red]")
    console.print(f"[red]{type(e).__name__}: {str(e)}[/red]\n")
    logger.debug(message, exc_info=True)
    raise typer.Exit(code=1)


def info(message: str):
    """Print info message."""
    console.print(f"[blue]{message}[/blue]")


def load_settings() -> Settings:
    """
    Load settings, turning validation failures into a readable error.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    try:
        return get_settings()
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        raise ConfigurationError(
            field.upper(), first.get("msg", "a valid value"), str(first.get("input", ""))
        ) from e


def build_service(
    settings: Settings,
    from_date: Optional[str] = None,
    days_ahead: Optional[int] = None,
) -> HolidayService:
    """Create a service whose "today" is ``from_date`` when one is given."""
    reference = validate_date_string(from_date)
    return HolidayService(
        today_provider=(lambda: reference) if reference else None,
        default_days_ahead=settings.default_days_ahead if days_ahead is None else days_ahead,
        min_duration=settings.min_long_weekend_days,
    )


def _holiday_to_json(holiday: Optional[HolidayRecord]) -> Optional[dict]:
    return holiday.to_dict() if holiday else None


def _echo_json(data) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


# ============================================================================
# Version Callback
# ============================================================================

def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(Panel(
            f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]\n"
            f"Holiday-aware weekend planner",
            title="🗓 Weekendly",
            border_style="blue",
        ))
        raise typer.Exit()


# ============================================================================
# Main Callback
# ============================================================================

@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Weekendly CLI - holiday-aware weekend planner.

    Use 'weekendly COMMAND --help' for command-specific help.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        handle_error(e, "Invalid configuration")

    setup_logging(
        level="DEBUG" if verbose or settings.debug else settings.log_level,
        json_format=settings.json_logs,
        log_file=settings.log_file,
    )


# ============================================================================
# LONG-WEEKENDS Command
# ============================================================================

def _render_long_weekends(weekends: List[LongWeekendSpan]) -> None:
    table = Table(show_header=True, header_style="bold magenta", title="Upcoming Long Weekends")
    table.add_column("Holiday", style="cyan", no_wrap=True)
    table.add_column("Dates", style="green", no_wrap=True)
    table.add_column("Length", justify="right")
    table.add_column("When", no_wrap=True)
    table.add_column("Perfect for")

    for weekend in weekends:
        urgency = urgency_for_days_until(weekend.days_until)
        table.add_row(
            weekend.trigger_holiday.name if weekend.trigger_holiday else "-",
            f"{format_iso_date(weekend.start_date)} → {format_iso_date(weekend.end_date)}",
            f"{format_duration_text(weekend.duration)} ({weekend.type.value})",
            f"[{URGENCY_STYLES[urgency]}]{describe_days_until(weekend.days_until)}[/]",
            "\n".join(f"• {s}" for s in weekend.suggestions[:3]),
        )

    console.print(table)


@app.command("long-weekends")
def long_weekends(
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Number of long weekends to show (default from settings)",
    ),
    from_date: Optional[str] = typer.Option(
        None,
        "--from",
        callback=date_callback,
        help="Start scanning from this date (YYYY-MM-DD, default: today)",
    ),
    days_ahead: Optional[int] = typer.Option(
        None,
        "--days-ahead",
        help="Scan horizon in days (default from settings)",
    ),
    format: str = typer.Option(
        "table",
        help="Output format: 'table' or 'json'",
    ),
):
    """
    Show upcoming long weekends (3+ consecutive days off) with suggestions.

    Examples:
        weekendly long-weekends                            # Next 3 within 90 days
        weekendly long-weekends --limit 5 --days-ahead 180
        weekendly long-weekends --from 2025-08-01 --format json
    """
    try:
        settings = load_settings()
        if limit is None:
            limit = settings.default_suggestion_limit
        non_negative_callback(limit)
        if days_ahead is not None:
            non_negative_callback(days_ahead)

        service = build_service(settings, from_date, days_ahead)
        weekends = service.get_upcoming_long_weekends_with_suggestions(limit)
    except typer.BadParameter:
        raise
    except Exception as e:
        handle_error(e, "Failed to detect long weekends")

    if format == "json":
        _echo_json([weekend.to_dict() for weekend in weekends])
        return

    if not weekends:
        info(f"No long weekends in the next {service.default_days_ahead} days.")
        return

    _render_long_weekends(weekends)


# ============================================================================
# Holiday lookups
# ============================================================================

@app.command("next-holiday")
def next_holiday(
    from_date: Optional[str] = typer.Option(
        None,
        "--from",
        callback=date_callback,
        help="Reference date (YYYY-MM-DD, default: today)",
    ),
    format: str = typer.Option("table", help="Output format: 'table' or 'json'"),
):
    """
    Show the next public holiday after today.
    """
    service = build_service(load_settings(), from_date)
    holiday = service.get_next_holiday()

    if format == "json":
        _echo_json(_holiday_to_json(holiday))
        return

    if holiday is None:
        info("No upcoming holidays in the calendar.")
        return

    days = (holiday.date - service.today()).days
    console.print(Panel(
        f"[bold cyan]{holiday.name}[/bold cyan] ({holiday.category.value})\n"
        f"{get_weekday_name(holiday.date)}, {holiday.iso_date} - {describe_days_until(days)}",
        title="Next Holiday",
        border_style="blue",
    ))


@app.command("holiday")
def holiday(
    day: str = typer.Argument(..., help="Date to look up (YYYY-MM-DD)"),
    format: str = typer.Option("table", help="Output format: 'table' or 'json'"),
):
    """
    Check whether a date is a public holiday.
    """
    check_date = validate_date_string(day)
    service = build_service(load_settings())
    record = service.get_holiday_info(check_date)

    if format == "json":
        _echo_json(_holiday_to_json(record))
        return

    if record is None:
        info(f"{day} ({get_weekday_name(check_date)}) is not a public holiday.")
        return

    console.print(
        f"[bold green]✓ {day} is {record.name}[/bold green] ({record.category.value}, "
        f"{get_weekday_name(check_date)})"
    )


@app.command("holidays")
def holidays(
    year: Optional[int] = typer.Option(
        None,
        "--year",
        callback=year_callback,
        help="Calendar year (default: current year)",
    ),
    format: str = typer.Option("table", help="Output format: 'table' or 'json'"),
):
    """
    List the public holidays of a year in date order.
    """
    service = build_service(load_settings())
    year = year or date.today().year
    records = sorted(service.get_holidays_for_year(year), key=lambda h: h.date)

    if format == "json":
        _echo_json([record.to_dict() for record in records])
        return

    if not records:
        info(f"No holidays listed for {year}.")
        return

    table = Table(show_header=True, header_style="bold magenta", title=f"Holidays {year}")
    table.add_column("Date", style="green", no_wrap=True)
    table.add_column("Day", no_wrap=True)
    table.add_column("Holiday", style="cyan")
    table.add_column("Type")

    for record in records:
        table.add_row(
            record.iso_date, get_weekday_name(record.date), record.name, record.category.value
        )

    console.print(table)


# ============================================================================
# PLAN Command - map a long weekend onto a weekend preset
# ============================================================================

@app.command("plan")
def plan(
    day: str = typer.Argument(..., help="Any date inside the long weekend (YYYY-MM-DD)"),
    format: str = typer.Option("table", help="Output format: 'table' or 'json'"),
):
    """
    Show which weekend preset fits the long weekend around a date.

    Examples:
        weekendly plan 2025-08-15     # Independence Day weekend -> 'long' preset
    """
    check_date = validate_date_string(day)
    service = build_service(load_settings())

    weekend = None
    if service.is_day_off(check_date):
        span = service.detector.calculate_long_weekend(check_date)
        if span.duration >= service.detector.min_duration:
            trigger = next(
                (
                    record
                    for record in map(
                        service.get_holiday_info, date_range(span.start_date, span.end_date)
                    )
                    if record is not None
                ),
                None,
            )
            # A weekend with no holiday in it is not a long weekend
            if trigger is not None:
                weekend = span.with_trigger(trigger)

    if weekend is None:
        result = {"date": day, "longWeekend": None, "weekendType": "regular",
                  "days": get_default_days("regular")}
    else:
        weekend_type = weekend_type_for_span(weekend)
        result = {
            "date": day,
            "longWeekend": weekend.to_dict(),
            "weekendType": weekend_type.value,
            "days": get_default_days(weekend_type),
        }

    if format == "json":
        _echo_json(result)
        return

    if weekend is None:
        info(f"{day} is not part of a long weekend; planning a regular weekend.")
    else:
        console.print(
            f"[bold green]{format_duration_text(weekend.duration)} weekend[/bold green] "
            f"{format_iso_date(weekend.start_date)} → {format_iso_date(weekend.end_date)}"
        )
    console.print(f"Preset: [cyan]{result['weekendType']}[/cyan] ({', '.join(result['days'])})")


# ============================================================================
# CONFIG Command
# ============================================================================

@app.command("config")
def config_show():
    """
    Display current configuration.
    """
    settings = load_settings()

    table = Table(show_header=True, header_style="bold magenta", title="Current Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("App Name", settings.app_name)
    table.add_row("Version", settings.app_version)
    table.add_row("Environment", settings.environment)
    table.add_row("Debug", str(settings.debug))
    table.add_row("Log Level", settings.log_level)
    table.add_row("Log File", settings.log_file or "-")
    table.add_row("Scan Horizon (days)", str(settings.default_days_ahead))
    table.add_row("Long Weekends Shown", str(settings.default_suggestion_limit))
    table.add_row("Min Long Weekend (days)", str(settings.min_long_weekend_days))

    console.print(table)


if __name__ == "__main__":
    app()
