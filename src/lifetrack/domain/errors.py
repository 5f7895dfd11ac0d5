"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested record does not exist or belongs to another user."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class RetrievalError(DomainError):
    """The record store could not answer a query."""


def record_not_found(kind: str, record_id: int) -> str:
    """Return message for a missing record."""
    return f"{kind} {record_id} not found"


def user_not_found(user_id: int) -> str:
    """Return message for missing user."""
    return f"User {user_id} not found"


def duplicate_user_email(email: str) -> str:
    """Return message for duplicate user email."""
    return f"User with email '{email}' already exists"


def duplicate_daily_log(log_date) -> str:
    """Return message when a daily log already exists for a date."""
    return f"Daily log already exists for {log_date}"


def invalid_choice(field: str, value: str, choices) -> str:
    """Return message for a value outside an enumerated set."""
    allowed = ", ".join(choices)
    return f"Invalid {field} '{value}'. Expected one of: {allowed}"


def amount_not_positive(amount) -> str:
    """Return message for a zero or negative amount."""
    return f"Amount must be greater than 0, got {amount}"


def out_of_range(field: str, value, low, high) -> str:
    """Return message for a number outside its allowed range."""
    return f"{field} must be between {low} and {high}, got {value}"


def too_long(field: str, limit: int) -> str:
    """Return message for text exceeding its length limit."""
    return f"{field} cannot exceed {limit} characters"
