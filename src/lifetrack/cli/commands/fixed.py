"""Fixed expense commands."""

import click
from lifetrack.cli.date_filters import parse_date_or_exit
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.cli.user_resolution import resolve_user_or_exit
from lifetrack.domain.entities import PeriodType
from lifetrack.domain.errors import DomainError
from lifetrack.domain.fixed_expense import FixedExpenseService
from lifetrack.utils.amount_parser import parse_amount

PERIOD_CHOICES = [period.value for period in PeriodType]


def parse_item(value: str) -> dict:
    """Parse an item given as ``name:unit_price[:quantity]``.

    Raises:
        ValueError: If the item is malformed
    """
    parts = [part.strip() for part in value.split(":")]
    if len(parts) not in (2, 3) or not parts[0]:
        raise ValueError(f"Invalid item '{value}'. Expected 'name:unit_price[:quantity]'")

    item = {"name": parts[0], "unit_price": parse_amount(parts[1])}
    if len(parts) == 3:
        item["quantity"] = parse_amount(parts[2])
    return item


def _parse_items_or_exit(ctx, values: tuple[str, ...]) -> list[dict]:
    try:
        return [parse_item(value) for value in values]
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.group()
def fixed_group():
    """Manage fixed (recurring) expenses."""
    pass


@fixed_group.command("add")
@click.option("--category", required=True, help="Category (e.g., 'Groceries')")
@click.option(
    "--period-type",
    type=click.Choice(PERIOD_CHOICES, case_sensitive=False),
    default=PeriodType.MONTHLY.value,
    help="Weekly or Monthly (default: Monthly)",
)
@click.option("--start", "start_str", required=True, help="First day of the period")
@click.option("--end", "end_str", required=True, help="Last day of the period")
@click.option(
    "--item",
    "items",
    multiple=True,
    help="Line item as 'name:unit_price[:quantity]' (repeatable)",
)
@click.pass_context
def add_fixed_expense(
    ctx,
    category: str,
    period_type: str,
    start_str: str,
    end_str: str,
    items: tuple[str, ...],
):
    """Create a fixed expense from line items.

    The total is the sum of quantity times unit price over the items.

    Examples:
        lifetrack fixed add --category Groceries --period-type Weekly \\
            --start "this week" --end 2024-01-14 --item "Milk:2.50:4" --item "Bread:3"
    """
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    period_start = parse_date_or_exit(ctx, start_str, "start date")
    period_end = parse_date_or_exit(ctx, end_str, "end date")
    parsed_items = _parse_items_or_exit(ctx, items)

    service = FixedExpenseService(db)
    try:
        fixed_id = service.create_fixed_expense(
            user_id=user_id,
            category=category,
            period_type=period_type,
            period_start=period_start,
            period_end=period_end,
            items=parsed_items,
        )
        fixed = service.get_fixed_expense(user_id, fixed_id)
        click.echo(
            f"Created {fixed.period_type.value.lower()} fixed expense '{category}' "
            f"totaling ${fixed.total_amount:,.2f} (ID: {fixed_id})"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@fixed_group.command("list")
@click.option(
    "--period-type",
    type=click.Choice(PERIOD_CHOICES, case_sensitive=False),
    help="Only show this period type",
)
@click.option("--verbose", "-v", is_flag=True, help="Show line items")
@click.pass_context
def list_fixed_expenses(ctx, period_type: str | None, verbose: bool):
    """List fixed expenses, latest period first."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    fixed_expenses = FixedExpenseService(db).list_fixed_expenses(
        user_id, period_type=period_type
    )
    if not fixed_expenses:
        click.echo("No fixed expenses found.")
        return

    for fixed in fixed_expenses:
        click.echo(
            f"{fixed.id}: {fixed.category} ({fixed.period_type.value}, "
            f"{fixed.period_start} to {fixed.period_end}) ${fixed.total_amount:,.2f}"
        )
        if verbose:
            for item in fixed.items:
                click.echo(
                    f"    {item.name}: {item.quantity} x ${item.unit_price:,.2f}"
                    f" = ${item.total_price:,.2f}"
                )


@fixed_group.command("update")
@click.argument("fixed_id", type=int)
@click.option("--category", help="New category")
@click.option("--period-type", type=click.Choice(PERIOD_CHOICES, case_sensitive=False), help="New period type")
@click.option("--start", "start_str", help="New first day of the period")
@click.option("--end", "end_str", help="New last day of the period")
@click.option("--item", "items", multiple=True, help="Replace all items ('name:unit_price[:quantity]')")
@click.pass_context
def update_fixed_expense(
    ctx,
    fixed_id: int,
    category: str | None,
    period_type: str | None,
    start_str: str | None,
    end_str: str | None,
    items: tuple[str, ...],
):
    """Update a fixed expense. Passing --item replaces every item."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    period_start = parse_date_or_exit(ctx, start_str, "start date") if start_str else None
    period_end = parse_date_or_exit(ctx, end_str, "end date") if end_str else None
    parsed_items = _parse_items_or_exit(ctx, items) if items else None

    try:
        FixedExpenseService(db).update_fixed_expense(
            user_id,
            fixed_id,
            category=category,
            period_type=period_type,
            period_start=period_start,
            period_end=period_end,
            items=parsed_items,
        )
        click.echo(f"Updated fixed expense {fixed_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@fixed_group.command("delete")
@click.argument("fixed_id", type=int)
@click.pass_context
def delete_fixed_expense(ctx, fixed_id: int):
    """Delete a fixed expense and its items."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        FixedExpenseService(db).delete_fixed_expense(user_id, fixed_id)
        click.echo(f"Deleted fixed expense {fixed_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register fixed expense commands with main CLI."""
    cli.add_command(fixed_group, name="fixed")
