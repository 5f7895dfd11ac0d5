"""Daily log domain service."""

from datetime import date
from typing import Any, Iterable, Optional

from lifetrack.database.base import Database
from lifetrack.domain.entities import DailyLog as DailyLogEntity, Mood
from lifetrack.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_daily_log,
)
from lifetrack.domain.filters import RecordFilter, RecordKind
from lifetrack.domain.validation import (
    optional_text,
    parse_choice,
    require_owned_record,
    require_range,
    require_text,
    require_user,
    to_decimal,
    to_int,
)

NOTE_LIMIT = 1000
REFLECTION_LIMIT = 1000
EVENT_LIMIT = 100
GOAL_LIMIT = 200


def _score(value: Any, field: str) -> Optional[int]:
    if value is None:
        return None
    return require_range(to_int(value, field.lower()), field, 1, 10)


def _texts(values: Optional[Iterable[str]], field: str, limit: int) -> list[str]:
    return [require_text(value, field, limit) for value in values or ()]


def clean_log_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Validate daily log fields, returning column values.

    Only keys present in ``fields`` are returned, so the result can be used
    both for creation and for partial updates.
    """
    cleaned: dict[str, Any] = {}
    for key, value in fields.items():
        if key == "mood":
            cleaned[key] = parse_choice(Mood, value or Mood.NEUTRAL, "mood")
        elif key == "energy_level":
            cleaned[key] = _score(value, "Energy level")
        elif key == "productivity":
            cleaned[key] = _score(value, "Productivity")
        elif key == "sleep_hours":
            cleaned[key] = (
                None if value is None
                else require_range(to_decimal(value, "sleep hours"), "Sleep hours", 0, 24)
            )
        elif key == "important_events":
            cleaned[key] = _texts(value, "Event description", EVENT_LIMIT)
        elif key == "goals":
            cleaned[key] = _texts(value, "Goal", GOAL_LIMIT)
        elif key == "note":
            cleaned[key] = optional_text(value, "Note", NOTE_LIMIT)
        elif key == "reflection":
            cleaned[key] = optional_text(value, "Reflection", REFLECTION_LIMIT)
        else:
            raise ValidationError(f"Unknown daily log field '{key}'")
    return cleaned


class DailyLogService:
    """Service for managing daily mood and productivity logs.

    A user has at most one log per calendar date.
    """

    def __init__(self, db: Database):
        """Initialize daily log service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_daily_log(self, user_id: int, log_date: date, **fields: Any) -> int:
        """Create the log for a date.

        Args:
            user_id: Owning user
            log_date: Calendar date of the log
            **fields: mood, energy_level, productivity, sleep_hours,
                important_events, goals, note, reflection

        Returns:
            Daily log ID

        Raises:
            ConflictError: If a log already exists for the date
            ValidationError: If a field is out of range
        """
        require_user(self.db, user_id)
        fields.setdefault("mood", Mood.NEUTRAL)
        cleaned = clean_log_fields(fields)

        if self.get_log_by_date(user_id, log_date) is not None:
            raise ConflictError(duplicate_daily_log(log_date))

        return self.db.create_daily_log(user_id=user_id, date=log_date, fields=cleaned)

    def get_daily_log(self, user_id: int, log_id: int) -> DailyLogEntity:
        """Get a daily log owned by the user."""
        return require_owned_record(self.db, RecordKind.DAILY_LOG, user_id, log_id)

    def get_log_by_date(self, user_id: int, log_date: date) -> Optional[DailyLogEntity]:
        """Get the log for a calendar date, or None."""
        logs = self.db.find_matching(
            user_id,
            RecordFilter(kind=RecordKind.DAILY_LOG, start_date=log_date, end_date=log_date),
            limit=1,
        )
        return logs[0] if logs else None

    def require_log_by_date(self, user_id: int, log_date: date) -> DailyLogEntity:
        """Get the log for a calendar date.

        Raises:
            NotFoundError: If there is no log for the date
        """
        log = self.get_log_by_date(user_id, log_date)
        if log is None:
            raise NotFoundError(f"Daily log not found for {log_date}")
        return log

    def list_daily_logs(
        self,
        user_id: int,
        limit: Optional[int] = None,
        newest_first: bool = True,
    ) -> list[DailyLogEntity]:
        """List daily logs sorted by date."""
        return self.db.find_matching(
            user_id,
            RecordFilter(kind=RecordKind.DAILY_LOG),
            newest_first=newest_first,
            limit=limit,
        )

    def update_daily_log(
        self, user_id: int, log_id: int, log_date: Optional[date] = None, **fields: Any
    ) -> None:
        """Update fields of a daily log.

        Raises:
            ConflictError: If moving the log onto a date that already has one
        """
        current = require_owned_record(self.db, RecordKind.DAILY_LOG, user_id, log_id)
        changes = clean_log_fields(fields)

        if log_date is not None and log_date != current.date:
            if self.get_log_by_date(user_id, log_date) is not None:
                raise ConflictError(duplicate_daily_log(log_date))
            changes["date"] = log_date

        if changes:
            self.db.update_daily_log(log_id, changes)

    def delete_daily_log(self, user_id: int, log_id: int) -> None:
        """Delete a daily log owned by the user."""
        require_owned_record(self.db, RecordKind.DAILY_LOG, user_id, log_id)
        self.db.delete_record(RecordKind.DAILY_LOG, log_id)
