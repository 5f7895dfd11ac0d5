"""Main CLI entry point."""

import logging

import click
from lifetrack.database.factories import DB_PATH_ENV, create_sqlite_database

# Import and register all commands at module level
from lifetrack.cli.commands import (
    user,
    income,
    expense,
    fixed,
    meal,
    log,
    note,
    dashboard,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LIFETRACK_DB_PATH environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--user",
    "user_ref",
    help="User email or ID the command acts for (or set LIFETRACK_USER)",
    envvar="LIFETRACK_USER",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user_ref: str | None, verbose: bool):
    """Lifetrack - personal finance and lifestyle tracker.

    Record income, expenses, fixed expenses, meal plans, daily logs and
    notes, and view them through dashboard summaries.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )
    ctx.ensure_object(dict)
    ctx.obj["user"] = user_ref

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
user.register_commands(cli)
income.register_commands(cli)
expense.register_commands(cli)
fixed.register_commands(cli)
meal.register_commands(cli)
log.register_commands(cli)
note.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
