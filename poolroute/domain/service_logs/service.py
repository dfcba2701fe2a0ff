"""Service log service - Business logic for service log operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import RECORD_LIST_LIMIT
from ...models import ServiceLog
from .repository import ServiceLogRepository
from .schemas import ServiceLogCreate, ServiceLogUpdate

logger = logging.getLogger(__name__)


class ServiceLogService:
    """Service layer for service logs"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceLogRepository()

    def list_logs(self, order: Optional[str] = None, limit: Optional[int] = None) -> list[ServiceLog]:
        return self.repo.list_logs(self.db, order, limit or RECORD_LIST_LIMIT)

    def filter_logs(
        self, customer_id: Optional[str] = None, service_date: Optional[str] = None
    ) -> list[ServiceLog]:
        return self.repo.filter_logs(self.db, customer_id, service_date)

    def get_logs_by_customer(self, customer_id: str) -> list[ServiceLog]:
        return self.repo.get_logs_by_customer(self.db, customer_id)

    def get_logs_by_date(self, service_date: str) -> list[ServiceLog]:
        return self.repo.get_logs_by_date(self.db, service_date)

    def get_log(self, log_id: str) -> ServiceLog:
        log = self.repo.get_log_by_public_id(self.db, log_id)
        if not log:
            raise HTTPException(status_code=404, detail="Service log not found")
        return log

    def create_log(self, data: ServiceLogCreate) -> ServiceLog:
        logger.info(f"📥 Recording service log for customer {data.customer_id} on {data.service_date}")
        return self.repo.create_log(self.db, **data.model_dump())

    def update_log(self, log_id: str, data: ServiceLogUpdate) -> ServiceLog:
        log = self.get_log(log_id)
        return self.repo.update_log(self.db, log, **data.model_dump(exclude_unset=True))

    def delete_log(self, log_id: str) -> dict:
        log = self.get_log(log_id)
        self.repo.delete_log(self.db, log)
        return {"message": "Service log deleted"}
