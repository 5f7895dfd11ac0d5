"""SQLAlchemy models for lifetrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    JSON,
    Column,
    Integer,
    String,
    Text,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class User(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Income(Base):
    """Income model."""

    __tablename__ = "incomes"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    source = Column(String, nullable=False)
    category = Column(String, nullable=False)
    icon = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    title = Column(String, nullable=False)
    category = Column(String, nullable=False)
    icon = Column(String, nullable=True)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class FixedExpense(Base):
    """Fixed (recurring) expense model."""

    __tablename__ = "fixed_expenses"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String, nullable=False)
    period_type = Column(String, nullable=False)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    total_amount = Column(Numeric(10, 2), default=0, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    items = relationship(
        "FixedExpenseItem",
        back_populates="fixed_expense",
        cascade="all, delete-orphan",
        order_by="FixedExpenseItem.position",
    )


class FixedExpenseItem(Base):
    """Line item of a fixed expense."""

    __tablename__ = "fixed_expense_items"

    id = Column(Integer, primary_key=True)
    fixed_expense_id = Column(Integer, ForeignKey("fixed_expenses.id"), nullable=False)
    position = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    quantity = Column(Numeric(10, 2), default=1, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)

    # Relationships
    fixed_expense = relationship("FixedExpense", back_populates="items")


class MealPlan(Base):
    """Meal plan model."""

    __tablename__ = "meal_plans"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    total_cost = Column(Numeric(10, 2), default=0, nullable=False)
    total_calories = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    meals = relationship(
        "Meal",
        back_populates="meal_plan",
        cascade="all, delete-orphan",
        order_by="Meal.position",
    )


class Meal(Base):
    """Single meal inside a meal plan."""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True)
    meal_plan_id = Column(Integer, ForeignKey("meal_plans.id"), nullable=False)
    position = Column(Integer, nullable=False)
    type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    ingredients = Column(JSON, default=list, nullable=False)
    cost = Column(Numeric(10, 2), nullable=True)
    calories = Column(Integer, nullable=True)

    # Relationships
    meal_plan = relationship("MealPlan", back_populates="meals")


class DailyLog(Base):
    """Daily mood and productivity log model."""

    __tablename__ = "daily_logs"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    mood = Column(String, default="Neutral", nullable=False)
    energy_level = Column(Integer, nullable=True)
    productivity = Column(Integer, nullable=True)
    sleep_hours = Column(Numeric(4, 2), nullable=True)
    important_events = Column(JSON, default=list, nullable=False)
    goals = Column(JSON, default=list, nullable=False)
    note = Column(Text, nullable=True)
    reflection = Column(Text, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # One log per calendar date per user
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_user_log_date"),)


class Note(Base):
    """Dated note model."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    note = Column(Text, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
