"""Note domain service."""

from datetime import date
from typing import Optional

from lifetrack.database.base import Database
from lifetrack.domain.entities import Note as NoteEntity
from lifetrack.domain.filters import RecordFilter, RecordKind
from lifetrack.domain.validation import require_owned_record, require_text, require_user


class NoteService:
    """Service for managing dated notes."""

    def __init__(self, db: Database):
        """Initialize note service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_note(self, user_id: int, note_date: date, text: str) -> int:
        """Create a note. Returns note ID."""
        require_user(self.db, user_id)
        return self.db.create_note(
            user_id=user_id, date=note_date, note=require_text(text, "Note")
        )

    def list_notes(
        self,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[NoteEntity]:
        """List notes, newest first."""
        return self.db.find_matching(
            user_id,
            RecordFilter(kind=RecordKind.NOTE, start_date=start_date, end_date=end_date),
        )

    def delete_note(self, user_id: int, note_id: int) -> None:
        """Delete a note.

        Notes of other users are reported as missing.
        """
        require_owned_record(self.db, RecordKind.NOTE, user_id, note_id)
        self.db.delete_record(RecordKind.NOTE, note_id)
