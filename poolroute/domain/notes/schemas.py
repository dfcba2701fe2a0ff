"""Note domain schemas"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from ...models import Note
from ...shared.validators import require_value


class NoteCreate(BaseModel):
    """Schema for a new note; completed and created_date are set by the server"""

    title: str
    content: str
    category: str = "General"
    customer_id: Optional[str] = None
    priority: str = "medium"


class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    customer_id: Optional[str] = None
    priority: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("title", "content", "category", "priority", "completed", mode="before")
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        return require_value(v, info.field_name)


class NoteResponse(BaseModel):
    id: str
    title: str
    content: str
    category: str
    customer_id: Optional[str] = None
    priority: str
    completed: bool
    created_date: Optional[str] = None

    @classmethod
    def from_model(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.public_id,
            title=note.title,
            content=note.content,
            category=note.category,
            customer_id=note.customer_id,
            priority=note.priority,
            completed=bool(note.completed),
            created_date=note.created_date,
        )


class NoteSummary(BaseModel):
    active: int
    completed: int
