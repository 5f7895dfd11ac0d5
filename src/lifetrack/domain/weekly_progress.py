"""Weekly progress: weekly income measured against weekly fixed expenses."""

from decimal import Decimal

from lifetrack.domain.entities import ProgressStatus, WeeklyProgress


def derive_status(remaining_amount: Decimal) -> ProgressStatus:
    """Label the remaining amount.

    Positive means income covers the obligations with money left over.
    """
    if remaining_amount > 0:
        return ProgressStatus.SURPLUS
    if remaining_amount < 0:
        return ProgressStatus.DEFICIT
    return ProgressStatus.NEUTRAL


def compute_progress_percentage(
    weekly_income: Decimal, fixed_weekly_expenses: Decimal
) -> float:
    """Share of fixed weekly expenses covered by weekly income, clamped to [0, 100].

    Returns 0 when there are no fixed weekly expenses.
    """
    if fixed_weekly_expenses <= 0:
        return 0.0
    percentage = float(weekly_income) / float(fixed_weekly_expenses) * 100
    return min(max(percentage, 0.0), 100.0)


def compute_weekly_progress(
    fixed_weekly_expenses: Decimal, weekly_income: Decimal
) -> WeeklyProgress:
    """Build the weekly progress result from the two weekly sums."""
    remaining_amount = weekly_income - fixed_weekly_expenses
    return WeeklyProgress(
        fixed_weekly_expenses=fixed_weekly_expenses,
        weekly_income=weekly_income,
        remaining_amount=remaining_amount,
        progress_percentage=compute_progress_percentage(
            weekly_income, fixed_weekly_expenses
        ),
        status=derive_status(remaining_amount),
    )
