"""Service log router - FastAPI endpoints for service logs"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import Identity, get_current_user
from ...database import get_db
from ...shared.schemas import RecordIdResponse
from .schemas import ServiceLogCreate, ServiceLogResponse, ServiceLogUpdate
from .service import ServiceLogService

router = APIRouter(prefix="/service-logs", tags=["Service Logs"])


def get_service_log_service(db: Session = Depends(get_db)) -> ServiceLogService:
    """Dependency injection for ServiceLogService"""
    return ServiceLogService(db)


@router.get("", response_model=list[ServiceLogResponse])
async def list_service_logs(
    order: Optional[str] = Query(None, description='"-service_date" for newest first'),
    limit: Optional[int] = Query(None, ge=0),
    current_user: Identity = Depends(get_current_user),
    service: ServiceLogService = Depends(get_service_log_service),
):
    return [ServiceLogResponse.from_model(log) for log in service.list_logs(order, limit)]


@router.get("/filter", response_model=list[ServiceLogResponse])
async def filter_service_logs(
    customer_id: Optional[str] = Query(None),
    service_date: Optional[str] = Query(None),
    current_user: Identity = Depends(get_current_user),
    service: ServiceLogService = Depends(get_service_log_service),
):
    logs = service.filter_logs(customer_id, service_date)
    return [ServiceLogResponse.from_model(log) for log in logs]


@router.get("/by-customer/{customer_id}", response_model=list[ServiceLogResponse])
async def get_service_logs_by_customer(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    service: ServiceLogService = Depends(get_service_log_service),
):
    return [ServiceLogResponse.from_model(log) for log in service.get_logs_by_customer(customer_id)]


@router.get("/by-date/{service_date}", response_model=list[ServiceLogResponse])
async def get_service_logs_by_date(
    service_date: str,
    current_user: Identity = Depends(get_current_user),
    service: ServiceLogService = Depends(get_service_log_service),
):
    return [ServiceLogResponse.from_model(log) for log in service.get_logs_by_date(service_date)]


@router.post("", response_model=RecordIdResponse)
async def create_service_log(
    data: ServiceLogCreate,
    current_user: Identity = Depends(get_current_user),
    service: ServiceLogService = Depends(get_service_log_service),
):
    log = service.create_log(data)
    return RecordIdResponse(id=log.public_id)


@router.patch("/{log_id}", response_model=RecordIdResponse)
async def update_service_log(
    log_id: str,
    data: ServiceLogUpdate,
    current_user: Identity = Depends(get_current_user),
    service: ServiceLogService = Depends(get_service_log_service),
):
    log = service.update_log(log_id, data)
    return RecordIdResponse(id=log.public_id)


@router.delete("/{log_id}")
async def delete_service_log(
    log_id: str,
    current_user: Identity = Depends(get_current_user),
    service: ServiceLogService = Depends(get_service_log_service),
):
    return service.delete_log(log_id)
