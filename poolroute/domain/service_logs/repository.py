"""Service log repository - Database operations for service logs"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ServiceLog
from ...shared.constants import SERVICE_LOG_DESC_ORDER


class ServiceLogRepository:
    """Repository for service log database operations"""

    @staticmethod
    def list_logs(db: Session, order: Optional[str], limit: int) -> list[ServiceLog]:
        """Logs by service date; descending only for the exact "-service_date" flag"""
        query = db.query(ServiceLog)
        if order == SERVICE_LOG_DESC_ORDER:
            query = query.order_by(ServiceLog.service_date.desc(), ServiceLog.id.desc())
        else:
            query = query.order_by(ServiceLog.service_date.asc(), ServiceLog.id.asc())
        return query.limit(limit).all()

    @staticmethod
    def filter_logs(
        db: Session,
        customer_id: Optional[str] = None,
        service_date: Optional[str] = None,
    ) -> list[ServiceLog]:
        query = db.query(ServiceLog)
        if customer_id:
            query = query.filter(ServiceLog.customer_id == customer_id)
        if service_date:
            query = query.filter(ServiceLog.service_date == service_date)
        return query.order_by(ServiceLog.id.asc()).all()

    @staticmethod
    def get_logs_by_customer(db: Session, customer_id: str) -> list[ServiceLog]:
        """A customer's logs, most recent service date first"""
        return (
            db.query(ServiceLog)
            .filter(ServiceLog.customer_id == customer_id)
            .order_by(ServiceLog.service_date.desc(), ServiceLog.id.desc())
            .all()
        )

    @staticmethod
    def get_logs_by_date(db: Session, service_date: str) -> list[ServiceLog]:
        return (
            db.query(ServiceLog)
            .filter(ServiceLog.service_date == service_date)
            .order_by(ServiceLog.id.asc())
            .all()
        )

    @staticmethod
    def get_log_by_public_id(db: Session, public_id: str) -> Optional[ServiceLog]:
        return db.query(ServiceLog).filter(ServiceLog.public_id == public_id).first()

    @staticmethod
    def create_log(db: Session, **log_data) -> ServiceLog:
        log = ServiceLog(**log_data)
        db.add(log)
        db.commit()
        db.refresh(log)
        return log

    @staticmethod
    def update_log(db: Session, log: ServiceLog, **updates) -> ServiceLog:
        for key, value in updates.items():
            if hasattr(log, key):
                setattr(log, key, value)

        db.commit()
        db.refresh(log)
        return log

    @staticmethod
    def delete_log(db: Session, log: ServiceLog) -> None:
        db.delete(log)
        db.commit()
