"""Expense management commands."""

import click
from lifetrack.cli.date_filters import (
    date_range_options,
    parse_amount_or_exit,
    parse_date_or_exit,
    resolve_cli_date_range,
)
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.cli.user_resolution import resolve_user_or_exit
from lifetrack.domain.errors import DomainError
from lifetrack.domain.expense import ExpenseService


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("add")
@click.option("--amount", required=True, help="Amount spent (e.g., 12.50)")
@click.option("--title", required=True, help="Short title")
@click.option("--category", required=True, help="Category (e.g., 'Food')")
@click.option("--date", "date_str", default="today", help="Date of the expense (default: today)")
@click.option("--icon", help="Optional icon")
@click.option("--description", help="Optional description")
@click.pass_context
def add_expense(
    ctx,
    amount: str,
    title: str,
    category: str,
    date_str: str,
    icon: str | None,
    description: str | None,
):
    """Record an expense."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    expense_amount = parse_amount_or_exit(ctx, amount)
    expense_date = parse_date_or_exit(ctx, date_str)

    try:
        expense_id = ExpenseService(db).create_expense(
            user_id=user_id,
            amount=expense_amount,
            date=expense_date,
            title=title,
            category=category,
            icon=icon,
            description=description,
        )
        click.echo(f"Recorded expense '{title}' of ${expense_amount:,.2f} (ID: {expense_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@expense_group.command("list")
@date_range_options
@click.option("--category", help="Only show this category")
@click.pass_context
def list_expenses(
    ctx, start_date: str | None, end_date: str | None, period: str | None, category: str | None
):
    """List expenses, newest first."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    expenses = ExpenseService(db).list_expenses(user_id, start_date=start, end_date=end)
    if category:
        expenses = [e for e in expenses if e.category.lower() == category.lower()]
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Title':<25} {'Category':<15} {'Amount':>12}")
    click.echo("-" * 73)
    for expense in expenses:
        click.echo(
            f"{expense.id:<6} {expense.date.isoformat():<12} {expense.title[:25]:<25} "
            f"{expense.category[:15]:<15} {f'${expense.amount:,.2f}':>12}"
        )
    click.echo(f"\nTotal: ${sum(expense.amount for expense in expenses):,.2f}")


@expense_group.command("update")
@click.argument("expense_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--title", help="New title")
@click.option("--category", help="New category")
@click.option("--date", "date_str", help="New date")
@click.option("--icon", help="New icon")
@click.option("--description", help="New description")
@click.pass_context
def update_expense(
    ctx,
    expense_id: int,
    amount: str | None,
    title: str | None,
    category: str | None,
    date_str: str | None,
    icon: str | None,
    description: str | None,
):
    """Update an expense. Only the given fields change."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    new_amount = parse_amount_or_exit(ctx, amount) if amount is not None else None
    new_date = parse_date_or_exit(ctx, date_str) if date_str is not None else None

    try:
        ExpenseService(db).update_expense(
            user_id,
            expense_id,
            amount=new_amount,
            date=new_date,
            title=title,
            category=category,
            icon=icon,
            description=description,
        )
        click.echo(f"Updated expense {expense_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        ExpenseService(db).delete_expense(user_id, expense_id)
        click.echo(f"Deleted expense {expense_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
