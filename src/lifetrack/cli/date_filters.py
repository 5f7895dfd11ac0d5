"""CLI helpers for date parsing and date range resolution."""

from datetime import date
from decimal import Decimal

import click

from lifetrack.utils.amount_parser import parse_amount
from lifetrack.utils.date_parser import get_date_range, parse_date

PERIOD_CHOICES = ["this-week", "this-month", "this-year", "last-week", "last-month"]


def parse_date_or_exit(ctx, value: str, label: str = "date") -> date:
    """Parse a CLI date argument, or exit with a CLI error."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx, value: str, label: str = "amount") -> Decimal:
    """Parse a CLI amount argument, or exit with a CLI error."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label} format: {e}", err=True)
        ctx.exit(1)


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from a period name or explicit dates."""
    if period and (start_date or end_date):
        click.echo(
            "Error: --period cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if period:
        return get_date_range(period)

    start = parse_date_or_exit(ctx, start_date, "start date") if start_date else None
    end = parse_date_or_exit(ctx, end_date, "end date") if end_date else None

    if start is not None and end is not None and start > end:
        click.echo(f"Error: Start date {start} is after end date {end}.", err=True)
        ctx.exit(1)

    return start, end


def date_range_options(command):
    """Attach --start-date, --end-date and --period options to a command."""
    command = click.option(
        "--period",
        type=click.Choice(PERIOD_CHOICES, case_sensitive=False),
        help="Named period (cannot be combined with explicit dates)",
    )(command)
    command = click.option(
        "--end-date", help="End date (YYYY-MM-DD or relative like 'today')"
    )(command)
    command = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')"
    )(command)
    return command
