"""Daily log commands."""

import click
from lifetrack.cli.date_filters import parse_date_or_exit
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.cli.user_resolution import resolve_user_or_exit
from lifetrack.domain.daily_log import DailyLogService
from lifetrack.domain.entities import DailyLog, Mood
from lifetrack.domain.errors import DomainError

MOOD_CHOICES = [mood.value for mood in Mood]


def _print_log(log: DailyLog) -> None:
    click.echo(f"Daily log {log.id} for {log.date}")
    click.echo(f"  Mood:         {log.mood.value}")
    if log.energy_level is not None:
        click.echo(f"  Energy:       {log.energy_level}/10")
    if log.productivity is not None:
        click.echo(f"  Productivity: {log.productivity}/10")
    if log.sleep_hours is not None:
        click.echo(f"  Sleep:        {log.sleep_hours}h")
    if log.important_events:
        click.echo("  Events:")
        for event in log.important_events:
            click.echo(f"    - {event}")
    if log.goals:
        click.echo("  Goals:")
        for goal in log.goals:
            click.echo(f"    - {goal}")
    if log.note:
        click.echo(f"  Note:         {log.note}")
    if log.reflection:
        click.echo(f"  Reflection:   {log.reflection}")


@click.group()
def log_group():
    """Manage daily mood and productivity logs."""
    pass


@log_group.command("add")
@click.option("--date", "date_str", default="today", help="Log date (default: today)")
@click.option("--mood", type=click.Choice(MOOD_CHOICES, case_sensitive=False), default=Mood.NEUTRAL.value, help="Mood (default: Neutral)")
@click.option("--energy", type=int, help="Energy level from 1 to 10")
@click.option("--productivity", type=int, help="Productivity from 1 to 10")
@click.option("--sleep", help="Hours slept (0 to 24)")
@click.option("--event", "events", multiple=True, help="Important event (repeatable)")
@click.option("--goal", "goals", multiple=True, help="Goal (repeatable)")
@click.option("--note", help="Free-form note")
@click.option("--reflection", help="End of day reflection")
@click.pass_context
def add_log(
    ctx,
    date_str: str,
    mood: str,
    energy: int | None,
    productivity: int | None,
    sleep: str | None,
    events: tuple[str, ...],
    goals: tuple[str, ...],
    note: str | None,
    reflection: str | None,
):
    """Create the daily log for a date. Each date has at most one log."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    log_date = parse_date_or_exit(ctx, date_str)

    try:
        log_id = DailyLogService(db).create_daily_log(
            user_id,
            log_date,
            mood=mood,
            energy_level=energy,
            productivity=productivity,
            sleep_hours=sleep,
            important_events=list(events),
            goals=list(goals),
            note=note,
            reflection=reflection,
        )
        click.echo(f"Created daily log for {log_date} (ID: {log_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@log_group.command("list")
@click.option("--limit", type=int, help="Show only the most recent N logs")
@click.pass_context
def list_logs(ctx, limit: int | None):
    """List daily logs, newest first."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    logs = DailyLogService(db).list_daily_logs(user_id, limit=limit)
    if not logs:
        click.echo("No daily logs found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Mood':<10} {'Energy':>6} {'Prod.':>6} {'Sleep':>6}")
    click.echo("-" * 51)
    for log in logs:
        energy = "" if log.energy_level is None else str(log.energy_level)
        productivity = "" if log.productivity is None else str(log.productivity)
        sleep = "" if log.sleep_hours is None else str(log.sleep_hours)
        click.echo(
            f"{log.id:<6} {log.date.isoformat():<12} {log.mood.value:<10} "
            f"{energy:>6} {productivity:>6} {sleep:>6}"
        )


@log_group.command("show")
@click.option("--date", "date_str", default="today", help="Log date (default: today)")
@click.pass_context
def show_log(ctx, date_str: str):
    """Show the daily log for a date."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    log_date = parse_date_or_exit(ctx, date_str)

    try:
        _print_log(DailyLogService(db).require_log_by_date(user_id, log_date))
    except DomainError as e:
        handle_domain_error(ctx, e)


@log_group.command("delete")
@click.argument("log_id", type=int)
@click.pass_context
def delete_log(ctx, log_id: int):
    """Delete a daily log."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        DailyLogService(db).delete_daily_log(user_id, log_id)
        click.echo(f"Deleted daily log {log_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register daily log commands with main CLI."""
    cli.add_command(log_group, name="log")
