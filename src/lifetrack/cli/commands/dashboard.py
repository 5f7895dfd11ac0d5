"""Dashboard, chart, quick stats and weekly progress commands."""

import json

import click
from lifetrack.cli.error_handling import handle_domain_error
from lifetrack.cli.user_resolution import resolve_user_or_exit
from lifetrack.domain.dashboard import DashboardService
from lifetrack.domain.entities import GroupTotal, PeriodTotals, TrendPeriod
from lifetrack.domain.errors import DomainError


def _money(value) -> str:
    return f"${value:,.2f}"


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2))


def _echo_totals(label: str, totals: PeriodTotals) -> None:
    click.echo(
        f"{label:<12} {_money(totals.income):>14} {_money(totals.expenses):>14} "
        f"{_money(totals.balance):>14}"
    )


def _echo_groups(title: str, groups: tuple[GroupTotal, ...]) -> None:
    click.echo(f"\n{title}:")
    if not groups:
        click.echo("  (none)")
        return
    for group in groups:
        click.echo(f"  {group.key:<40} {_money(group.total):>14}")


@click.command("dashboard")
@click.option("--json", "as_json", is_flag=True, help="Print the dashboard as JSON")
@click.pass_context
def dashboard(ctx, as_json: bool):
    """Show totals, recent activity and top categories."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        data = DashboardService(db).get_dashboard(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        _echo_json(data.to_dict())
        return

    click.echo(f"{'Period':<12} {'Income':>14} {'Expenses':>14} {'Balance':>14}")
    click.echo("-" * 57)
    _echo_totals("All time", data.summary)
    _echo_totals("Today", data.daily)
    _echo_totals("This week", data.weekly)
    _echo_totals("This month", data.monthly)

    _echo_groups("Top expense categories", data.top_expense_categories)
    _echo_groups("Top income sources", data.top_income_sources)

    activities = data.recent_activities
    click.echo("\nRecent daily logs:")
    if not activities.daily_logs:
        click.echo("  (none)")
    for log in activities.daily_logs:
        click.echo(f"  {log.date}  {log.mood.value}")

    click.echo("\nToday's meals:")
    meals = [meal for plan in activities.today_meals for meal in plan.meals]
    if not meals:
        click.echo("  (none)")
    for meal in meals:
        click.echo(f"  {meal.type.value}: {meal.name}")
    click.echo(f"\nMeal plans this week: {activities.weekly_meal_count}")


@click.command("charts")
@click.option(
    "--period",
    type=click.Choice([period.value for period in TrendPeriod], case_sensitive=False),
    default=TrendPeriod.MONTH.value,
    help="Chart window (default: month)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the chart data as JSON")
@click.pass_context
def charts(ctx, period: str, as_json: bool):
    """Show daily income and expense trends with breakdowns."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        data = DashboardService(db).get_charts(user_id, period)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        _echo_json(data.to_dict())
        return

    click.echo(f"Charts for {data.period.value}: {data.start_date} to {data.end_date}")

    income_by_day = {point.date: point.amount for point in data.income_trend}
    expense_by_day = {point.date: point.amount for point in data.expense_trend}
    days = sorted(set(income_by_day) | set(expense_by_day))
    click.echo(f"\n{'Date':<12} {'Income':>14} {'Expenses':>14}")
    click.echo("-" * 42)
    for day in days:
        click.echo(
            f"{day.isoformat():<12} {_money(income_by_day.get(day, 0)):>14} "
            f"{_money(expense_by_day.get(day, 0)):>14}"
        )

    _echo_groups("Income by source", data.income_by_source)
    _echo_groups("Expenses by category", data.expenses_by_category)


@click.command("stats")
@click.option("--json", "as_json", is_flag=True, help="Print the stats as JSON")
@click.pass_context
def stats(ctx, as_json: bool):
    """Show record counts."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        data = DashboardService(db).get_quick_stats(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        _echo_json(data.to_dict())
        return

    click.echo(f"Incomes:     {data.total_incomes} ({data.today_incomes} today)")
    click.echo(f"Expenses:    {data.total_expenses} ({data.today_expenses} today)")
    click.echo(f"Daily logs:  {data.total_daily_logs}")
    click.echo(f"Meal plans:  {data.total_meal_plans}")


@click.command("progress")
@click.option(
    "--current-week-only",
    is_flag=True,
    help="Only count weekly fixed expenses whose period overlaps this week",
)
@click.option("--json", "as_json", is_flag=True, help="Print the progress as JSON")
@click.pass_context
def progress(ctx, current_week_only: bool, as_json: bool):
    """Compare this week's income with weekly fixed expenses."""
    db = ctx.obj["db"]
    user_id = resolve_user_or_exit(ctx)

    try:
        data = DashboardService(db).get_weekly_progress(
            user_id, current_week_only=current_week_only
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        _echo_json(data.to_dict())
        return

    click.echo(f"Weekly income:          {_money(data.weekly_income)}")
    click.echo(f"Weekly fixed expenses:  {_money(data.fixed_weekly_expenses)}")
    click.echo(f"Remaining:              {_money(data.remaining_amount)}")
    click.echo(f"Covered:                {data.progress_percentage:.1f}%")
    click.echo(f"Status:                 {data.status.value}")


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(charts)
    cli.add_command(stats)
    cli.add_command(progress)
