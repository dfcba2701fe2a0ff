"""Customer router - FastAPI endpoints for customer operations"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import Identity, get_current_user
from ...database import get_db
from ...shared.schemas import RecordIdResponse
from .schemas import CustomerCreate, CustomerResponse, CustomerUpdate
from .service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["Customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency injection for CustomerService"""
    return CustomerService(db)


@router.get("", response_model=list[CustomerResponse])
async def list_customers(
    current_user: Identity = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """Get all customers owned by the current user"""
    return [CustomerResponse.from_model(c) for c in service.get_customers(current_user)]


@router.get("/filter", response_model=list[CustomerResponse])
async def filter_customers(
    created_by: Optional[str] = Query(None),
    service_day: Optional[str] = Query(None),
    current_user: Identity = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """Filter customers by owner and service day"""
    customers = service.filter_customers(current_user, created_by, service_day)
    return [CustomerResponse.from_model(c) for c in customers]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    return CustomerResponse.from_model(service.get_customer(customer_id, current_user))


@router.post("", response_model=RecordIdResponse)
async def create_customer(
    data: CustomerCreate,
    current_user: Identity = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    customer = service.create_customer(data, current_user)
    return RecordIdResponse(id=customer.public_id)


@router.patch("/{customer_id}", response_model=RecordIdResponse)
async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    current_user: Identity = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    customer = service.update_customer(customer_id, data, current_user)
    return RecordIdResponse(id=customer.public_id)


@router.delete("/{customer_id}")
async def delete_customer(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer (service logs and chemical usage are kept)"""
    return service.delete_customer(customer_id, current_user)
