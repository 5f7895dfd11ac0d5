"""Note commands."""

import click
from lifetrack.cli.date_filters import (
    date_range_options,
    parse_date_or_exit,
    resolve_cli_date_range,
)
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.cli.user_resolution import resolve_user_or_exit
from lifetrack.domain.errors import DomainError
from lifetrack.domain.note import NoteService


@click.group()
def note_group():
    """Manage dated notes."""
    pass


@note_group.command("add")
@click.argument("text")
@click.option("--date", "date_str", default="today", help="Note date (default: today)")
@click.pass_context
def add_note(ctx, text: str, date_str: str):
    """Add a note."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    note_date = parse_date_or_exit(ctx, date_str)

    try:
        note_id = NoteService(db).create_note(user_id, note_date, text)
        click.echo(f"Added note for {note_date} (ID: {note_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@note_group.command("list")
@date_range_options
@click.pass_context
def list_notes(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """List notes, newest first."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    notes = NoteService(db).list_notes(user_id, start_date=start, end_date=end)
    if not notes:
        click.echo("No notes found.")
        return

    for note in notes:
        click.echo(f"{note.id}: [{note.date}] {note.note}")


@note_group.command("delete")
@click.argument("note_id", type=int)
@click.pass_context
def delete_note(ctx, note_id: int):
    """Delete a note."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        NoteService(db).delete_note(user_id, note_id)
        click.echo(f"Deleted note {note_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register note commands with main CLI."""
    cli.add_command(note_group, name="note")
