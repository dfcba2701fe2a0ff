"""Note service - Business logic for notes and reminders"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Note
from .repository import NoteRepository
from .schemas import NoteCreate, NoteSummary, NoteUpdate

logger = logging.getLogger(__name__)


class NoteService:
    """Service layer for notes"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = NoteRepository()

    def list_notes(self, order: Optional[str] = None) -> list[Note]:
        return self.repo.list_notes(self.db, order)

    def filter_notes(
        self,
        customer_id: Optional[str] = None,
        completed: Optional[bool] = None,
        category: Optional[str] = None,
    ) -> list[Note]:
        return self.repo.filter_notes(self.db, customer_id, completed, category)

    def get_notes_by_customer(self, customer_id: str) -> list[Note]:
        return self.repo.get_notes_by_customer(self.db, customer_id)

    def summarize(self) -> NoteSummary:
        """Active vs completed counts for the notes header"""
        counts = self.repo.count_by_completion(self.db)
        return NoteSummary(active=counts.get(False, 0), completed=counts.get(True, 0))

    def get_note(self, note_id: str) -> Note:
        note = self.repo.get_note_by_public_id(self.db, note_id)
        if not note:
            raise HTTPException(status_code=404, detail="Note not found")
        return note

    def create_note(self, data: NoteCreate, today: str) -> Note:
        logger.info(f"📝 Creating {data.category} note")
        return self.repo.create_note(
            self.db, completed=False, created_date=today, **data.model_dump()
        )

    def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        note = self.get_note(note_id)
        return self.repo.update_note(self.db, note, **data.model_dump(exclude_unset=True))

    def delete_note(self, note_id: str) -> dict:
        note = self.get_note(note_id)
        self.repo.delete_note(self.db, note)
        return {"message": "Note deleted"}
