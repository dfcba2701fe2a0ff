"""Note router - FastAPI endpoints for notes and reminders"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import Identity, get_current_user
from ...database import get_db
from ...shared.calendar import current_time, today_string
from ...shared.schemas import RecordIdResponse
from .schemas import NoteCreate, NoteResponse, NoteSummary, NoteUpdate
from .service import NoteService

router = APIRouter(prefix="/notes", tags=["Notes"])


def get_note_service(db: Session = Depends(get_db)) -> NoteService:
    """Dependency injection for NoteService"""
    return NoteService(db)


@router.get("", response_model=list[NoteResponse])
async def list_notes(
    order: Optional[str] = Query(None, description='"-created_date" for newest first'),
    current_user: Identity = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    return [NoteResponse.from_model(n) for n in service.list_notes(order)]


@router.get("/filter", response_model=list[NoteResponse])
async def filter_notes(
    customer_id: Optional[str] = Query(None),
    completed: Optional[bool] = Query(None),
    category: Optional[str] = Query(None),
    current_user: Identity = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    notes = service.filter_notes(customer_id, completed, category)
    return [NoteResponse.from_model(n) for n in notes]


@router.get("/summary", response_model=NoteSummary)
async def summarize_notes(
    current_user: Identity = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    return service.summarize()


@router.get("/by-customer/{customer_id}", response_model=list[NoteResponse])
async def get_notes_by_customer(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    return [NoteResponse.from_model(n) for n in service.get_notes_by_customer(customer_id)]


@router.post("", response_model=RecordIdResponse)
async def create_note(
    data: NoteCreate,
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    service: NoteService = Depends(get_note_service),
):
    note = service.create_note(data, today_string(now))
    return RecordIdResponse(id=note.public_id)


@router.patch("/{note_id}", response_model=RecordIdResponse)
async def update_note(
    note_id: str,
    data: NoteUpdate,
    current_user: Identity = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    note = service.update_note(note_id, data)
    return RecordIdResponse(id=note.public_id)


@router.delete("/{note_id}")
async def delete_note(
    note_id: str,
    current_user: Identity = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    return service.delete_note(note_id)
