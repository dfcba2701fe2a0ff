"""Route Optimizer endpoints - manual visiting order within each service day"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..auth import Identity, get_current_user
from ..database import get_db
from ..domain.customers.repository import CustomerRepository
from ..domain.customers.schemas import CustomerResponse
from ..services.route_ordering import (
    IGNORED,
    MoveResult,
    RouteOrderingEngine,
    RouteOrderingError,
    count_by_service_day,
    search_route,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/route-order", tags=["Route Order"])

# Shared across requests so the one-move-per-session guard spans them
route_ordering_engine = RouteOrderingEngine()


def get_route_ordering_engine() -> RouteOrderingEngine:
    return route_ordering_engine


class MoveResponse(BaseModel):
    status: str  # moved, unchanged, ignored
    customer_id: str
    neighbour_id: Optional[str] = None


def sort_order_writer(db: Session):
    """
    Persist one sort_order value; each write commits on its own.
    The write blocks on the session, so gathered writes run one after the other.
    """

    async def write(customer_id: str, sort_order: int) -> None:
        CustomerRepository.set_sort_order(db, customer_id, sort_order)

    return write


@router.get("", response_model=list[CustomerResponse])
async def get_route_order(
    service_day: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
    engine: RouteOrderingEngine = Depends(get_route_ordering_engine),
):
    """
    Customers ordered by service day, then manual order; fills in missing orders first.
    search keeps customers whose name or address contains it, ignoring case.
    """
    customers = CustomerRepository.get_customers(db, current_user.owner)

    try:
        ordered = await engine.initialize(customers, sort_order_writer(db))
    except RouteOrderingError as e:
        logger.error(f"❌ Route order initialization failed for {current_user.owner}: {e}")
        raise HTTPException(status_code=500, detail="Failed to initialize route order") from e

    if service_day:
        ordered = [c for c in ordered if c.service_day == service_day]
    ordered = search_route(ordered, search)
    return [CustomerResponse.from_model(c) for c in ordered]


@router.get("/counts", response_model=dict[str, int])
async def get_route_counts(
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Number of customers on each service day, ignoring any search"""
    return count_by_service_day(CustomerRepository.get_customers(db, current_user.owner))


async def _move_customer(
    customer_id: str,
    step: int,
    identity: Identity,
    db: Session,
    engine: RouteOrderingEngine,
) -> MoveResult:
    if engine.is_moving(identity.subject):
        logger.info(f"⏳ Move of {customer_id} ignored: another move is pending")
        return MoveResult(status=IGNORED, customer_id=customer_id)

    customers = CustomerRepository.get_customers(db, identity.owner)
    customer = next((c for c in customers if c.public_id == customer_id), None)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")

    write = sort_order_writer(db)
    try:
        await engine.initialize(customers, write)
        if step < 0:
            return await engine.move_up(identity.subject, customer, customers, write)
        return await engine.move_down(identity.subject, customer, customers, write)
    except RouteOrderingError as e:
        logger.error(f"❌ Failed to move customer {customer_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to move customer") from e


@router.post("/{customer_id}/move-up", response_model=MoveResponse)
async def move_customer_up(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
    engine: RouteOrderingEngine = Depends(get_route_ordering_engine),
):
    """Swap the customer with the one visited just before it on the same day"""
    result = await _move_customer(customer_id, -1, current_user, db, engine)
    return MoveResponse(**vars(result))


@router.post("/{customer_id}/move-down", response_model=MoveResponse)
async def move_customer_down(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
    engine: RouteOrderingEngine = Depends(get_route_ordering_engine),
):
    """Swap the customer with the one visited just after it on the same day"""
    result = await _move_customer(customer_id, 1, current_user, db, engine)
    return MoveResponse(**vars(result))
