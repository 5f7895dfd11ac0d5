"""Input validation shared by the record services."""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, TypeVar

from lifetrack.database.base import Database
from lifetrack.domain.entities import IncomeCategory
from lifetrack.domain.errors import (
    NotFoundError,
    ValidationError,
    amount_not_positive,
    invalid_choice,
    out_of_range,
    record_not_found,
    too_long,
    user_not_found,
)
from lifetrack.domain.filters import KIND_LABELS, RecordKind

E = TypeVar("E", bound=Enum)


def to_decimal(value: Any, field: str) -> Decimal:
    """Convert a number or numeric string to Decimal."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"Invalid {field} '{value}'") from e


def to_int(value: Any, field: str) -> int:
    """Convert a whole number or numeric string to int."""
    number = to_decimal(value, field)
    if not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(f"Invalid {field} '{value}'")
    return int(number)


def require_positive_amount(amount: Any) -> Decimal:
    """Return the amount as Decimal, rejecting zero and negative values."""
    value = to_decimal(amount, "amount")
    if value <= 0:
        raise ValidationError(amount_not_positive(amount))
    return value


def require_non_negative(value: Any, field: str) -> Decimal:
    """Return the value as Decimal, rejecting negative values."""
    number = to_decimal(value, field)
    if number < 0:
        raise ValidationError(f"{field} cannot be negative, got {value}")
    return number


def parse_choice(enum_cls: type[E], value: Any, field: str) -> E:
    """Resolve a value to a member of ``enum_cls``, ignoring case."""
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    for member in enum_cls:
        if member.value.lower() == text.lower():
            return member
    raise ValidationError(invalid_choice(field, text, [m.value for m in enum_cls]))


def parse_income_category(value: Any) -> IncomeCategory:
    """Resolve an income category; "Active Income" and "Active" are equivalent."""
    if isinstance(value, IncomeCategory):
        return value
    text = str(value).strip()
    if text.lower().endswith(" income"):
        text = text[: -len(" income")]
    return parse_choice(IncomeCategory, text, "income category")


def require_text(value: Optional[str], field: str, limit: Optional[int] = None) -> str:
    """Return stripped text, rejecting empty values and values over ``limit``."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    text = str(value).strip()
    if limit is not None and len(text) > limit:
        raise ValidationError(too_long(field, limit))
    return text


def optional_text(value: Optional[str], field: str, limit: Optional[int] = None) -> Optional[str]:
    """Like require_text, but None and blank text become None."""
    if value is None or not str(value).strip():
        return None
    return require_text(value, field, limit)


def require_range(value: Any, field: str, low, high):
    """Return the value if it lies within [low, high]."""
    if value is None:
        return None
    if value < low or value > high:
        raise ValidationError(out_of_range(field, value, low, high))
    return value


def require_user(db: Database, user_id: int) -> None:
    """Raise NotFoundError if the user does not exist."""
    if db.get_user(user_id) is None:
        raise NotFoundError(user_not_found(user_id))


def require_owned_record(db: Database, kind: RecordKind, user_id: int, record_id: int):
    """Get a record owned by ``user_id``.

    Records of other users are reported as missing.
    """
    record = db.get_record(kind, record_id)
    if record is None or record.user_id != user_id:
        raise NotFoundError(record_not_found(KIND_LABELS[kind], record_id))
    return record
