"""CLI helpers for resolving the acting user."""

from __future__ import annotations

import click
from lifetrack.domain.user import UserService
from lifetrack.utils.user_resolver import resolve_user


def resolve_user_or_exit(ctx: click.Context) -> int:
    """Resolve the --user option to a user ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    user = ctx.obj.get("user")
    if not user:
        click.echo(
            "Error: No user selected. Pass --user or set LIFETRACK_USER.", err=True
        )
        ctx.exit(1)

    try:
        return resolve_user(UserService(ctx.obj["db"]), user)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
