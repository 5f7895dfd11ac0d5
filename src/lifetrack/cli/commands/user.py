"""User management commands."""

import click
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.domain.errors import DomainError
from lifetrack.domain.user import UserService


@click.group()
def user_group():
    """Manage users."""
    pass


@user_group.command("add")
@click.argument("name")
@click.argument("email")
@click.pass_context
def add_user(ctx, name: str, email: str):
    """Register a new user."""
    db = ctx.obj["db"]
    service = UserService(db)

    try:
        user_id = service.create_user(name=name, email=email)
        click.echo(f"Created user '{name}' <{email.lower()}> (ID: {user_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@user_group.command("list")
@click.pass_context
def list_users(ctx):
    """List all users."""
    db = ctx.obj["db"]
    service = UserService(db)

    users = service.list_users()
    if not users:
        click.echo("No users found. Use 'user add' to create one.")
        return

    click.echo("\nUsers:")
    for user in users:
        click.echo(f"  {user.id}: {user.name} <{user.email}>")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
