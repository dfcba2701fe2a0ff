"""Chemical usage router - FastAPI endpoints for extra chemical billing entries"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import Identity, get_current_user
from ...database import get_db
from ...shared.calendar import current_time, today_string
from ...shared.schemas import RecordIdResponse
from .schemas import ChemicalUsageCreate, ChemicalUsageResponse, ChemicalUsageUpdate
from .service import ChemicalUsageService

router = APIRouter(prefix="/chemical-usage", tags=["Chemical Usage"])


def get_chemical_usage_service(db: Session = Depends(get_db)) -> ChemicalUsageService:
    """Dependency injection for ChemicalUsageService"""
    return ChemicalUsageService(db)


@router.get("", response_model=list[ChemicalUsageResponse])
async def list_chemical_usage(
    order: Optional[str] = Query(None, description='"-created_date" for newest first'),
    limit: Optional[int] = Query(None, ge=0),
    current_user: Identity = Depends(get_current_user),
    service: ChemicalUsageService = Depends(get_chemical_usage_service),
):
    return [ChemicalUsageResponse.from_model(r) for r in service.list_records(order, limit)]


@router.get("/filter", response_model=list[ChemicalUsageResponse])
async def filter_chemical_usage(
    customer_id: Optional[str] = Query(None),
    current_user: Identity = Depends(get_current_user),
    service: ChemicalUsageService = Depends(get_chemical_usage_service),
):
    return [ChemicalUsageResponse.from_model(r) for r in service.filter_records(customer_id)]


@router.get("/by-customer/{customer_id}", response_model=list[ChemicalUsageResponse])
async def get_chemical_usage_by_customer(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    service: ChemicalUsageService = Depends(get_chemical_usage_service),
):
    records = service.get_records_by_customer(customer_id)
    return [ChemicalUsageResponse.from_model(r) for r in records]


@router.post("", response_model=RecordIdResponse)
async def create_chemical_usage(
    data: ChemicalUsageCreate,
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    service: ChemicalUsageService = Depends(get_chemical_usage_service),
):
    record = service.create_record(data, today_string(now))
    return RecordIdResponse(id=record.public_id)


@router.patch("/{record_id}", response_model=RecordIdResponse)
async def update_chemical_usage(
    record_id: str,
    data: ChemicalUsageUpdate,
    current_user: Identity = Depends(get_current_user),
    service: ChemicalUsageService = Depends(get_chemical_usage_service),
):
    record = service.update_record(record_id, data)
    return RecordIdResponse(id=record.public_id)


@router.delete("/{record_id}")
async def delete_chemical_usage(
    record_id: str,
    current_user: Identity = Depends(get_current_user),
    service: ChemicalUsageService = Depends(get_chemical_usage_service),
):
    return service.delete_record(record_id)
