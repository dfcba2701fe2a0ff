"""Chemical usage service - Business logic for chemical usage records"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import RECORD_LIST_LIMIT
from ...models import ChemicalUsage
from .repository import ChemicalUsageRepository
from .schemas import ChemicalUsageCreate, ChemicalUsageUpdate

logger = logging.getLogger(__name__)


class ChemicalUsageService:
    """Service layer for chemical usage records"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ChemicalUsageRepository()

    def list_records(
        self, order: Optional[str] = None, limit: Optional[int] = None
    ) -> list[ChemicalUsage]:
        return self.repo.list_records(self.db, order, limit or RECORD_LIST_LIMIT)

    def filter_records(self, customer_id: Optional[str] = None) -> list[ChemicalUsage]:
        return self.repo.filter_records(self.db, customer_id)

    def get_records_by_customer(self, customer_id: str) -> list[ChemicalUsage]:
        return self.repo.get_records_by_customer(self.db, customer_id)

    def get_record(self, record_id: str) -> ChemicalUsage:
        record = self.repo.get_record_by_public_id(self.db, record_id)
        if not record:
            raise HTTPException(status_code=404, detail="Chemical usage not found")
        return record

    def create_record(self, data: ChemicalUsageCreate, today: str) -> ChemicalUsage:
        """Create a record stamped with today's date"""
        logger.info(f"🧪 Recording {data.chemical_type} for customer {data.customer_id}")
        return self.repo.create_record(self.db, created_date=today, **data.model_dump())

    def update_record(self, record_id: str, data: ChemicalUsageUpdate) -> ChemicalUsage:
        record = self.get_record(record_id)
        return self.repo.update_record(self.db, record, **data.model_dump(exclude_unset=True))

    def delete_record(self, record_id: str) -> dict:
        record = self.get_record(record_id)
        self.repo.delete_record(self.db, record)
        return {"message": "Chemical usage deleted"}
