"""Tests for weekly progress computation."""

from datetime import date
from decimal import Decimal

import pytest

from lifetrack.domain.entities import ProgressStatus
from lifetrack.domain.weekly_progress import (
    compute_progress_percentage,
    compute_weekly_progress,
    derive_status,
)

MONDAY = date(2024, 3, 11)


class TestComputeWeeklyProgress:
    def test_income_short_of_fixed_expenses(self):
        progress = compute_weekly_progress(Decimal("200"), Decimal("150"))

        assert progress.remaining_amount == Decimal("-50")
        assert progress.progress_percentage == 75.0
        assert progress.status == ProgressStatus.DEFICIT

    def test_no_fixed_expenses(self):
        progress = compute_weekly_progress(Decimal("0"), Decimal("80"))

        assert progress.progress_percentage == 0.0
        assert progress.remaining_amount == Decimal("80")
        assert progress.status == ProgressStatus.SURPLUS

    def test_percentage_is_clamped_to_100(self):
        progress = compute_weekly_progress(Decimal("50"), Decimal("150"))

        assert progress.progress_percentage == 100.0
        assert progress.status == ProgressStatus.SURPLUS

    def test_exact_cover_is_neutral(self):
        progress = compute_weekly_progress(Decimal("100"), Decimal("100"))

        assert progress.remaining_amount == Decimal("0")
        assert progress.progress_percentage == 100.0
        assert progress.status == ProgressStatus.NEUTRAL

    def test_nothing_at_all_is_neutral(self):
        progress = compute_weekly_progress(Decimal("0"), Decimal("0"))

        assert progress.progress_percentage == 0.0
        assert progress.status == ProgressStatus.NEUTRAL

    def test_to_dict(self):
        progress = compute_weekly_progress(Decimal("200"), Decimal("150"))

        assert progress.to_dict() == {
            "fixed_weekly_expenses": 200.0,
            "weekly_income": 150.0,
            "remaining_amount": -50.0,
            "progress_percentage": 75.0,
            "status": "deficit",
        }


@pytest.mark.parametrize(
    "remaining, expected",
    [
        (Decimal("0.01"), ProgressStatus.SURPLUS),
        (Decimal("-0.01"), ProgressStatus.DEFICIT),
        (Decimal("0"), ProgressStatus.NEUTRAL),
    ],
)
def test_derive_status(remaining, expected):
    assert derive_status(remaining) == expected


def test_compute_progress_percentage_never_negative():
    assert compute_progress_percentage(Decimal("0"), Decimal("10")) == 0.0


class TestDashboardWeeklyProgress:
    """Weekly progress read from the record store."""

    def _weekly(self, service, user_id, start, end, price):
        return service.create_fixed_expense(
            user_id=user_id,
            category="Groceries",
            period_type="Weekly",
            period_start=start,
            period_end=end,
            items=[{"name": "Basket", "unit_price": price}],
        )

    def test_deficit_from_records(
        self, dashboard_service, fixed_expense_service, income_service, user_id
    ):
        self._weekly(fixed_expense_service, user_id, MONDAY, date(2024, 3, 17), "200")
        income_service.create_income(user_id, "150", MONDAY, "Salary", "Active")

        progress = dashboard_service.get_weekly_progress(user_id)

        assert progress.fixed_weekly_expenses == Decimal("200")
        assert progress.weekly_income == Decimal("150")
        assert progress.remaining_amount == Decimal("-50")
        assert progress.progress_percentage == 75.0
        assert progress.status == ProgressStatus.DEFICIT

    def test_monthly_fixed_expenses_are_ignored(
        self, dashboard_service, fixed_expense_service, income_service, user_id
    ):
        fixed_expense_service.create_fixed_expense(
            user_id=user_id,
            category="Rent",
            period_type="Monthly",
            period_start=date(2024, 3, 1),
            period_end=date(2024, 3, 31),
            items=[{"name": "Rent", "unit_price": "900"}],
        )
        income_service.create_income(user_id, "80", MONDAY, "Salary", "Active")

        progress = dashboard_service.get_weekly_progress(user_id)

        assert progress.fixed_weekly_expenses == Decimal("0")
        assert progress.progress_percentage == 0.0
        assert progress.status == ProgressStatus.SURPLUS

    def test_income_before_this_week_is_excluded(
        self, dashboard_service, income_service, user_id
    ):
        income_service.create_income(user_id, "500", date(2024, 3, 10), "Salary", "Active")

        progress = dashboard_service.get_weekly_progress(user_id)

        assert progress.weekly_income == Decimal("0")

    def test_all_weekly_fixed_expenses_count_by_default(
        self, dashboard_service, fixed_expense_service, user_id
    ):
        self._weekly(fixed_expense_service, user_id, date(2024, 2, 5), date(2024, 2, 11), "40")
        self._weekly(fixed_expense_service, user_id, MONDAY, date(2024, 3, 17), "60")

        progress = dashboard_service.get_weekly_progress(user_id)

        assert progress.fixed_weekly_expenses == Decimal("100")

    def test_current_week_only(self, dashboard_service, fixed_expense_service, user_id):
        self._weekly(fixed_expense_service, user_id, date(2024, 2, 5), date(2024, 2, 11), "40")
        self._weekly(fixed_expense_service, user_id, MONDAY, date(2024, 3, 17), "60")
        # Overlaps the week by its last day only
        self._weekly(fixed_expense_service, user_id, date(2024, 3, 5), MONDAY, "5")

        progress = dashboard_service.get_weekly_progress(user_id, current_week_only=True)

        assert progress.fixed_weekly_expenses == Decimal("65")

    def test_other_users_are_excluded(
        self, dashboard_service, fixed_expense_service, income_service, user_id, other_user_id
    ):
        self._weekly(fixed_expense_service, other_user_id, MONDAY, date(2024, 3, 17), "200")
        income_service.create_income(other_user_id, "150", MONDAY, "Salary", "Active")

        progress = dashboard_service.get_weekly_progress(user_id)

        assert progress.fixed_weekly_expenses == Decimal("0")
        assert progress.weekly_income == Decimal("0")
        assert progress.status == ProgressStatus.NEUTRAL
