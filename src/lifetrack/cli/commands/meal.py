"""Meal plan commands."""

import json

import click
from lifetrack.cli.date_filters import (
    date_range_options,
    parse_date_or_exit,
    resolve_cli_date_range,
)
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.cli.user_resolution import resolve_user_or_exit
from lifetrack.domain.errors import DomainError
from lifetrack.domain.meal_plan import MealPlanService
from lifetrack.utils.amount_parser import parse_amount


def parse_meal(value: str) -> dict:
    """Parse a meal given as ``Type:Name[:cost[:calories]]``.

    Raises:
        ValueError: If the meal is malformed
    """
    parts = [part.strip() for part in value.split(":")]
    if not 2 <= len(parts) <= 4:
        raise ValueError(f"Invalid meal '{value}'. Expected 'Type:Name[:cost[:calories]]'")

    meal = {"type": parts[0], "name": parts[1]}
    if len(parts) >= 3 and parts[2]:
        meal["cost"] = parse_amount(parts[2])
    if len(parts) == 4 and parts[3]:
        try:
            meal["calories"] = int(parts[3])
        except ValueError:
            raise ValueError(f"Invalid calories '{parts[3]}' in meal '{value}'")
    return meal


def _parse_meals_or_exit(ctx, values: tuple[str, ...]) -> list[dict]:
    try:
        return [parse_meal(value) for value in values]
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.group()
def meal_group():
    """Manage meal plans."""
    pass


@meal_group.command("add")
@click.option("--date", "date_str", default="today", help="Plan date (default: today)")
@click.option(
    "--meal",
    "meals",
    multiple=True,
    help="Meal as 'Type:Name[:cost[:calories]]', e.g. 'Lunch:Salad:8.50:450' (repeatable)",
)
@click.pass_context
def add_meal_plan(ctx, date_str: str, meals: tuple[str, ...]):
    """Create a meal plan. Totals are summed from the meals."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    plan_date = parse_date_or_exit(ctx, date_str)
    parsed_meals = _parse_meals_or_exit(ctx, meals)

    service = MealPlanService(db)
    try:
        plan_id = service.create_meal_plan(user_id=user_id, date=plan_date, meals=parsed_meals)
        plan = service.get_meal_plan(user_id, plan_id)
        click.echo(
            f"Created meal plan for {plan_date} with {len(plan.meals)} meal(s), "
            f"${plan.total_cost:,.2f}, {plan.total_calories} kcal (ID: {plan_id})"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@meal_group.command("list")
@date_range_options
@click.pass_context
def list_meal_plans(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """List meal plans, oldest first."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    plans = MealPlanService(db).list_meal_plans(user_id, start_date=start, end_date=end)
    if not plans:
        click.echo("No meal plans found.")
        return

    for plan in plans:
        click.echo(
            f"{plan.id}: {plan.date} ${plan.total_cost:,.2f} {plan.total_calories} kcal"
        )
        for meal in plan.meals:
            cost = f" ${meal.cost:,.2f}" if meal.cost is not None else ""
            click.echo(f"    {meal.type.value}: {meal.name}{cost}")


@meal_group.command("stats")
@click.option("--json", "as_json", is_flag=True, help="Print the stats as JSON")
@click.pass_context
def meal_stats(ctx, as_json: bool):
    """Show meal totals and per-plan averages."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        stats = MealPlanService(db).get_meal_stats(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(json.dumps(stats.to_dict(), indent=2))
        return

    click.echo(f"Meal plans:       {stats.total_plans}")
    click.echo(f"Meals:            {stats.total_meals}")
    click.echo(f"Total cost:       ${stats.total_cost:,.2f}")
    click.echo(f"Total calories:   {stats.total_calories}")
    click.echo(f"Average cost:     ${stats.average_cost:,.2f}")
    click.echo(f"Average calories: {stats.average_calories:,.0f}")


@meal_group.command("delete")
@click.argument("plan_id", type=int)
@click.pass_context
def delete_meal_plan(ctx, plan_id: int):
    """Delete a meal plan."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        MealPlanService(db).delete_meal_plan(user_id, plan_id)
        click.echo(f"Deleted meal plan {plan_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register meal plan commands with main CLI."""
    cli.add_command(meal_group, name="meal")
