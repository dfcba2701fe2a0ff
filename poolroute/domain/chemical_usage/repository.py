"""Chemical usage repository - Database operations for chemical usage records"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ChemicalUsage
from ...shared.constants import CREATED_DATE_DESC_ORDER


class ChemicalUsageRepository:
    """Repository for chemical usage database operations"""

    @staticmethod
    def list_records(db: Session, order: Optional[str], limit: int) -> list[ChemicalUsage]:
        """Records by created date; descending only for the exact "-created_date" flag"""
        query = db.query(ChemicalUsage)
        if order == CREATED_DATE_DESC_ORDER:
            query = query.order_by(ChemicalUsage.created_date.desc(), ChemicalUsage.id.desc())
        else:
            query = query.order_by(ChemicalUsage.created_date.asc(), ChemicalUsage.id.asc())
        return query.limit(limit).all()

    @staticmethod
    def filter_records(db: Session, customer_id: Optional[str] = None) -> list[ChemicalUsage]:
        query = db.query(ChemicalUsage)
        if customer_id:
            query = query.filter(ChemicalUsage.customer_id == customer_id)
        return query.order_by(ChemicalUsage.id.asc()).all()

    @staticmethod
    def get_records_by_customer(db: Session, customer_id: str) -> list[ChemicalUsage]:
        return (
            db.query(ChemicalUsage)
            .filter(ChemicalUsage.customer_id == customer_id)
            .order_by(ChemicalUsage.created_date.desc(), ChemicalUsage.id.desc())
            .all()
        )

    @staticmethod
    def get_record_by_public_id(db: Session, public_id: str) -> Optional[ChemicalUsage]:
        return db.query(ChemicalUsage).filter(ChemicalUsage.public_id == public_id).first()

    @staticmethod
    def create_record(db: Session, **record_data) -> ChemicalUsage:
        record = ChemicalUsage(**record_data)
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    @staticmethod
    def update_record(db: Session, record: ChemicalUsage, **updates) -> ChemicalUsage:
        for key, value in updates.items():
            if hasattr(record, key):
                setattr(record, key, value)

        db.commit()
        db.refresh(record)
        return record

    @staticmethod
    def delete_record(db: Session, record: ChemicalUsage) -> None:
        db.delete(record)
        db.commit()
