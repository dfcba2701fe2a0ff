"""Dashboard endpoints - today's route, customer detail and service history"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..auth import Identity, get_current_user
from ..config import RECORD_LIST_LIMIT
from ..database import get_db
from ..domain.customers.repository import CustomerRepository
from ..domain.customers.schemas import CustomerResponse
from ..domain.customers.service import CustomerService
from ..domain.service_logs.repository import ServiceLogRepository
from ..domain.service_logs.schemas import ServiceLogResponse
from ..services.aggregation import (
    build_customer_detail,
    build_daily_route,
    group_history,
)
from ..shared.calendar import current_time
from ..shared.constants import SERVICE_LOG_DESC_ORDER

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


class RouteStopResponse(BaseModel):
    customer: CustomerResponse
    completed: bool
    last_week_log: Optional[ServiceLogResponse] = None
    action_url: str


class MissedServiceResponse(BaseModel):
    customer: CustomerResponse
    scheduled_day: str
    action_url: str


class RouteStatsResponse(BaseModel):
    total: int
    completed: int
    pending: int


class DailyRouteResponse(BaseModel):
    date: str
    weekday: str
    stops: list[RouteStopResponse]
    missed: list[MissedServiceResponse]
    stats: RouteStatsResponse


class CustomerDetailResponse(BaseModel):
    customer: CustomerResponse
    logs: list[ServiceLogResponse]
    last_week_log: Optional[ServiceLogResponse] = None


class CustomerHistoryResponse(BaseModel):
    customer: CustomerResponse
    logs: list[ServiceLogResponse]


def _log_response(log) -> Optional[ServiceLogResponse]:
    return ServiceLogResponse.from_model(log) if log is not None else None


def recent_logs(db: Session) -> list:
    """The newest logs, as fetched for the dashboard and the reports"""
    return ServiceLogRepository.list_logs(db, SERVICE_LOG_DESC_ORDER, RECORD_LIST_LIMIT)


@router.get("/today", response_model=DailyRouteResponse)
async def get_daily_route(
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    db: Session = Depends(get_db),
):
    customers = CustomerRepository.get_customers(db, current_user.owner)
    route = build_daily_route(customers, recent_logs(db), now)

    return DailyRouteResponse(
        date=route.date,
        weekday=route.weekday,
        stops=[
            RouteStopResponse(
                customer=CustomerResponse.from_model(stop.customer),
                completed=stop.completed,
                last_week_log=_log_response(stop.last_week_log),
                action_url=stop.action_url,
            )
            for stop in route.stops
        ],
        missed=[
            MissedServiceResponse(
                customer=CustomerResponse.from_model(missed.customer),
                scheduled_day=missed.scheduled_day,
                action_url=missed.action_url,
            )
            for missed in route.missed
        ],
        stats=RouteStatsResponse(
            total=route.stats.total,
            completed=route.stats.completed,
            pending=route.stats.pending,
        ),
    )


@router.get("/customers/{customer_id}", response_model=CustomerDetailResponse)
async def get_customer_detail(
    customer_id: str,
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    db: Session = Depends(get_db),
):
    customer = CustomerService(db).get_customer(customer_id, current_user)
    logs = ServiceLogRepository.get_logs_by_customer(db, customer_id)
    detail = build_customer_detail(customer, logs, now)

    return CustomerDetailResponse(
        customer=CustomerResponse.from_model(detail.customer),
        logs=[ServiceLogResponse.from_model(log) for log in detail.logs],
        last_week_log=_log_response(detail.last_week_log),
    )


@router.get("/history", response_model=dict[str, list[CustomerHistoryResponse]])
async def get_history(
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    db: Session = Depends(get_db),
):
    """Last month of service logs per route day and customer"""
    customers = CustomerRepository.get_customers(db, current_user.owner)
    history = group_history(customers, recent_logs(db), now)

    return {
        day: [
            CustomerHistoryResponse(
                customer=CustomerResponse.from_model(entry.customer),
                logs=[ServiceLogResponse.from_model(log) for log in entry.logs],
            )
            for entry in entries
        ]
        for day, entries in history.items()
    }
