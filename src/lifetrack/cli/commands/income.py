"""Income management commands."""

import click
from lifetrack.cli.date_filters import (
    date_range_options,
    parse_amount_or_exit,
    parse_date_or_exit,
    resolve_cli_date_range,
)
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.cli.user_resolution import resolve_user_or_exit
from lifetrack.domain.entities import IncomeCategory
from lifetrack.domain.errors import DomainError
from lifetrack.domain.income import IncomeService

CATEGORY_CHOICES = [category.value for category in IncomeCategory]


@click.group()
def income_group():
    """Manage income records."""
    pass


@income_group.command("add")
@click.option("--amount", required=True, help="Amount received (e.g., 1500 or $1,500.00)")
@click.option("--source", required=True, help="Income source (e.g., 'Salary')")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    default=IncomeCategory.ACTIVE.value,
    help="Income category (default: Active)",
)
@click.option("--date", "date_str", default="today", help="Date received (default: today)")
@click.option("--icon", help="Optional icon")
@click.pass_context
def add_income(ctx, amount: str, source: str, category: str, date_str: str, icon: str | None):
    """Record income.

    Examples:
        lifetrack --user me@example.com income add --amount 1500 --source Salary
        lifetrack income add --amount 200 --source Dividends --category Investment --date yesterday
    """
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    income_amount = parse_amount_or_exit(ctx, amount)
    income_date = parse_date_or_exit(ctx, date_str)

    try:
        income_id = IncomeService(db).create_income(
            user_id=user_id,
            amount=income_amount,
            date=income_date,
            source=source,
            category=category,
            icon=icon,
        )
        click.echo(f"Recorded income of ${income_amount:,.2f} from '{source}' (ID: {income_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@income_group.command("list")
@date_range_options
@click.pass_context
def list_incomes(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """List income records, newest first."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    incomes = IncomeService(db).list_incomes(user_id, start_date=start, end_date=end)
    if not incomes:
        click.echo("No income found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Source':<25} {'Category':<12} {'Amount':>12}")
    click.echo("-" * 70)
    for income in incomes:
        click.echo(
            f"{income.id:<6} {income.date.isoformat():<12} {income.source[:25]:<25} "
            f"{income.category.value:<12} {f'${income.amount:,.2f}':>12}"
        )
    click.echo(f"\nTotal: ${sum(income.amount for income in incomes):,.2f}")


@income_group.command("update")
@click.argument("income_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--source", help="New source")
@click.option("--category", type=click.Choice(CATEGORY_CHOICES, case_sensitive=False), help="New category")
@click.option("--date", "date_str", help="New date")
@click.option("--icon", help="New icon")
@click.pass_context
def update_income(
    ctx,
    income_id: int,
    amount: str | None,
    source: str | None,
    category: str | None,
    date_str: str | None,
    icon: str | None,
):
    """Update an income record. Only the given fields change."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    new_amount = parse_amount_or_exit(ctx, amount) if amount is not None else None
    new_date = parse_date_or_exit(ctx, date_str) if date_str is not None else None

    try:
        IncomeService(db).update_income(
            user_id,
            income_id,
            amount=new_amount,
            date=new_date,
            source=source,
            category=category,
            icon=icon,
        )
        click.echo(f"Updated income {income_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@income_group.command("delete")
@click.argument("income_id", type=int)
@click.pass_context
def delete_income(ctx, income_id: int):
    """Delete an income record."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        IncomeService(db).delete_income(user_id, income_id)
        click.echo(f"Deleted income {income_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register income commands with main CLI."""
    cli.add_command(income_group, name="income")
