"""Note repository - Database operations for notes and reminders"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Note
from ...shared.constants import CREATED_DATE_DESC_ORDER


class NoteRepository:
    """Repository for note database operations"""

    @staticmethod
    def list_notes(db: Session, order: Optional[str]) -> list[Note]:
        query = db.query(Note)
        if order == CREATED_DATE_DESC_ORDER:
            query = query.order_by(Note.created_date.desc(), Note.id.desc())
        else:
            query = query.order_by(Note.created_date.asc(), Note.id.asc())
        return query.all()

    @staticmethod
    def filter_notes(
        db: Session,
        customer_id: Optional[str] = None,
        completed: Optional[bool] = None,
        category: Optional[str] = None,
    ) -> list[Note]:
        query = db.query(Note)
        if customer_id:
            query = query.filter(Note.customer_id == customer_id)
        if completed is not None:
            query = query.filter(Note.completed == completed)
        if category:
            query = query.filter(Note.category == category)
        return query.order_by(Note.id.asc()).all()

    @staticmethod
    def get_notes_by_customer(db: Session, customer_id: str) -> list[Note]:
        return (
            db.query(Note)
            .filter(Note.customer_id == customer_id)
            .order_by(Note.created_date.desc(), Note.id.desc())
            .all()
        )

    @staticmethod
    def count_by_completion(db: Session) -> dict[bool, int]:
        rows = db.query(Note.completed, func.count(Note.id)).group_by(Note.completed).all()
        return {bool(completed): count for completed, count in rows}

    @staticmethod
    def get_note_by_public_id(db: Session, public_id: str) -> Optional[Note]:
        return db.query(Note).filter(Note.public_id == public_id).first()

    @staticmethod
    def create_note(db: Session, **note_data) -> Note:
        note = Note(**note_data)
        db.add(note)
        db.commit()
        db.refresh(note)
        return note

    @staticmethod
    def update_note(db: Session, note: Note, **updates) -> Note:
        for key, value in updates.items():
            if hasattr(note, key):
                setattr(note, key, value)

        db.commit()
        db.refresh(note)
        return note

    @staticmethod
    def delete_note(db: Session, note: Note) -> None:
        db.delete(note)
        db.commit()
