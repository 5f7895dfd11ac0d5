"""Meal plan domain service."""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Union

from lifetrack.database.base import Database
from lifetrack.domain.entities import Meal, MealPlan as MealPlanEntity, MealStats, MealType
from lifetrack.domain.errors import ValidationError
from lifetrack.domain.filters import RecordFilter, RecordKind
from lifetrack.domain.validation import (
    parse_choice,
    require_non_negative,
    require_owned_record,
    require_text,
    require_user,
    to_int,
)

MealInput = Union[Meal, Mapping[str, Any]]

CENTS = Decimal("0.01")


def build_meal(meal: MealInput) -> Meal:
    """Validate one meal given as an entity or a mapping."""
    if isinstance(meal, Meal):
        data = {
            "type": meal.type,
            "name": meal.name,
            "ingredients": meal.ingredients,
            "cost": meal.cost,
            "calories": meal.calories,
        }
    else:
        data = meal

    if data.get("type") is None:
        raise ValidationError("Meal type is required")

    cost = data.get("cost")
    calories = data.get("calories")
    if calories is not None:
        calories = to_int(calories, "calories")
        if calories < 0:
            raise ValidationError(f"Calories cannot be negative, got {calories}")

    return Meal(
        type=parse_choice(MealType, data["type"], "meal type"),
        name=require_text(data.get("name"), "Meal name"),
        ingredients=tuple(
            require_text(ingredient, "Ingredient")
            for ingredient in data.get("ingredients") or ()
        ),
        cost=None if cost is None else require_non_negative(cost, "Cost"),
        calories=calories,
    )


def total_cost(meals: Iterable[Meal]) -> Decimal:
    """Sum of meal costs, missing costs counting as 0."""
    return sum((meal.cost for meal in meals if meal.cost is not None), Decimal("0"))


def total_calories(meals: Iterable[Meal]) -> int:
    """Sum of meal calories, missing values counting as 0."""
    return sum(meal.calories for meal in meals if meal.calories is not None)


class MealPlanService:
    """Service for managing meal plans."""

    def __init__(self, db: Database):
        """Initialize meal plan service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_meal_plan(
        self,
        user_id: int,
        date: date,
        meals: Iterable[MealInput] = (),
        total_cost_override: Any = None,
        total_calories_override: Optional[int] = None,
    ) -> int:
        """Create a meal plan.

        Totals default to the sums over the meals unless given explicitly.

        Returns:
            Meal plan ID
        """
        require_user(self.db, user_id)
        built = [build_meal(meal) for meal in meals]

        cost = total_cost(built)
        if total_cost_override is not None:
            cost = require_non_negative(total_cost_override, "Total cost")
        calories = total_calories(built)
        if total_calories_override is not None:
            calories = to_int(
                require_non_negative(total_calories_override, "Total calories"),
                "total calories",
            )

        return self.db.create_meal_plan(
            user_id=user_id,
            date=date,
            meals=built,
            total_cost=cost,
            total_calories=calories,
        )

    def get_meal_plan(self, user_id: int, meal_plan_id: int) -> MealPlanEntity:
        """Get a meal plan owned by the user."""
        return require_owned_record(self.db, RecordKind.MEAL_PLAN, user_id, meal_plan_id)

    def list_meal_plans(
        self,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[MealPlanEntity]:
        """List meal plans in date order, oldest first."""
        return self.db.find_matching(
            user_id,
            RecordFilter(kind=RecordKind.MEAL_PLAN, start_date=start_date, end_date=end_date),
            newest_first=False,
        )

    def get_meal_plans_for_date(self, user_id: int, plan_date: date) -> list[MealPlanEntity]:
        """Meal plans dated on one calendar day."""
        return self.list_meal_plans(user_id, start_date=plan_date, end_date=plan_date)

    def get_meal_stats(self, user_id: int) -> MealStats:
        """Totals and per-plan averages over all of the user's meal plans.

        A user without meal plans gets all-zero stats.
        """
        plan_filter = RecordFilter(kind=RecordKind.MEAL_PLAN)
        plan_count = self.db.count_matching(user_id, plan_filter)
        if plan_count == 0:
            return MealStats(0, 0, Decimal("0.00"), 0, Decimal("0.00"), Decimal("0.00"))

        [(_, cost)] = self.db.group_sum(user_id, plan_filter)
        plans = self.db.find_matching(user_id, plan_filter)
        calories = sum(plan.total_calories for plan in plans)

        return MealStats(
            total_plans=plan_count,
            total_meals=sum(len(plan.meals) for plan in plans),
            total_cost=cost,
            total_calories=calories,
            average_cost=(cost / plan_count).quantize(CENTS),
            average_calories=(Decimal(calories) / plan_count).quantize(CENTS),
        )

    def update_meal_plan(
        self,
        user_id: int,
        meal_plan_id: int,
        date: Optional[date] = None,
        meals: Optional[Iterable[MealInput]] = None,
    ) -> None:
        """Update a meal plan. Replacing the meals recomputes both totals."""
        require_owned_record(self.db, RecordKind.MEAL_PLAN, user_id, meal_plan_id)

        changes: dict[str, Any] = {}
        if date is not None:
            changes["date"] = date
        if meals is not None:
            built = [build_meal(meal) for meal in meals]
            changes["meals"] = built
            changes["total_cost"] = total_cost(built)
            changes["total_calories"] = total_calories(built)

        if changes:
            self.db.update_meal_plan(meal_plan_id, changes)

    def delete_meal_plan(self, user_id: int, meal_plan_id: int) -> None:
        """Delete a meal plan owned by the user."""
        require_owned_record(self.db, RecordKind.MEAL_PLAN, user_id, meal_plan_id)
        self.db.delete_record(RecordKind.MEAL_PLAN, meal_plan_id)
