"""Report endpoints - weekly service report and monthly chemical usage"""

import logging
from datetime import date, datetime

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..auth import Identity, get_current_user
from ..config import RECORD_LIST_LIMIT
from ..database import get_db
from ..domain.chemical_usage.repository import ChemicalUsageRepository
from ..domain.chemical_usage.schemas import ChemicalUsageResponse
from ..domain.customers.repository import CustomerRepository
from ..domain.customers.schemas import CustomerResponse
from ..domain.service_logs.schemas import ServiceLogResponse
from ..services.report_html import render_chemical_usage_report, render_weekly_report
from ..services.reports import (
    ChemicalUsageReport,
    WeeklyReport,
    build_chemical_usage_report,
    build_weekly_report,
)
from ..shared.calendar import current_time
from ..shared.constants import CREATED_DATE_DESC_ORDER
from .dashboard import recent_logs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["Reports"])


class WeeklyReportRowResponse(BaseModel):
    customer: CustomerResponse
    log: ServiceLogResponse


class WeeklyReportSectionResponse(BaseModel):
    day: str
    count: int
    rows: list[WeeklyReportRowResponse]


class WeeklyReportResponse(BaseModel):
    week_start: date
    week_end: date
    total_serviced: int
    sections: list[WeeklyReportSectionResponse]


class ChemicalUsageSectionResponse(BaseModel):
    customer_id: str
    customer_name: str
    customer_address: str
    count: int
    records: list[ChemicalUsageResponse]


class ChemicalUsageReportResponse(BaseModel):
    month_start: date
    month_end: date
    total_entries: int
    sections: list[ChemicalUsageSectionResponse]


def _weekly_report(db: Session, identity: Identity, now: datetime, week_offset: int) -> WeeklyReport:
    customers = CustomerRepository.get_customers(db, identity.owner)
    return build_weekly_report(customers, recent_logs(db), now, week_offset)


def _chemical_usage_report(
    db: Session, identity: Identity, now: datetime, month_offset: int
) -> ChemicalUsageReport:
    customers = CustomerRepository.get_customers(db, identity.owner)
    records = ChemicalUsageRepository.list_records(db, CREATED_DATE_DESC_ORDER, RECORD_LIST_LIMIT)
    return build_chemical_usage_report(customers, records, now, month_offset)


@router.get("/weekly", response_model=WeeklyReportResponse)
async def get_weekly_report(
    week_offset: int = Query(0, description="0 is the current week, -1 the previous one"),
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    db: Session = Depends(get_db),
):
    report = _weekly_report(db, current_user, now, week_offset)
    return WeeklyReportResponse(
        week_start=report.window.start,
        week_end=report.window.end,
        total_serviced=report.total_serviced,
        sections=[
            WeeklyReportSectionResponse(
                day=section.day,
                count=section.count,
                rows=[
                    WeeklyReportRowResponse(
                        customer=CustomerResponse.from_model(row.customer),
                        log=ServiceLogResponse.from_model(row.log),
                    )
                    for row in section.rows
                ],
            )
            for section in report.sections
        ],
    )


@router.get("/weekly/print", response_class=HTMLResponse)
async def print_weekly_report(
    week_offset: int = Query(0),
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    db: Session = Depends(get_db),
):
    report = _weekly_report(db, current_user, now, week_offset)
    logger.info(f"🖨️ Weekly report rendered for {current_user.owner} ({report.window.start})")
    return HTMLResponse(content=render_weekly_report(report, now))


@router.get("/chemical-usage", response_model=ChemicalUsageReportResponse)
async def get_chemical_usage_report(
    month_offset: int = Query(0, description="0 is the current month, -1 the previous one"),
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    db: Session = Depends(get_db),
):
    report = _chemical_usage_report(db, current_user, now, month_offset)
    return ChemicalUsageReportResponse(
        month_start=report.window.start,
        month_end=report.window.end,
        total_entries=report.total_entries,
        sections=[
            ChemicalUsageSectionResponse(
                customer_id=section.customer_id,
                customer_name=section.customer_name,
                customer_address=section.customer_address,
                count=section.count,
                records=[ChemicalUsageResponse.from_model(r) for r in section.records],
            )
            for section in report.sections
        ],
    )


@router.get("/chemical-usage/print", response_class=HTMLResponse)
async def print_chemical_usage_report(
    month_offset: int = Query(0),
    current_user: Identity = Depends(get_current_user),
    now: datetime = Depends(current_time),
    db: Session = Depends(get_db),
):
    report = _chemical_usage_report(db, current_user, now, month_offset)
    logger.info(f"🖨️ Chemical usage report rendered for {current_user.owner} ({report.window.start})")
    return HTMLResponse(content=render_chemical_usage_report(report, now))
