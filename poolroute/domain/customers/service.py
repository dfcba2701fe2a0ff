"""Customer service - Business logic for customer operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...auth import Identity
from ...models import Customer
from .repository import CustomerRepository
from .schemas import CustomerCreate, CustomerUpdate

logger = logging.getLogger(__name__)


class CustomerService:
    """Service layer for customer operations"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CustomerRepository()

    def get_customers(self, identity: Identity) -> list[Customer]:
        """All customers owned by the caller"""
        return self.repo.get_customers(self.db, identity.owner)

    def filter_customers(
        self,
        identity: Identity,
        created_by: Optional[str] = None,
        service_day: Optional[str] = None,
    ) -> list[Customer]:
        """Filter by owner (defaults to the caller) and service day"""
        return self.repo.get_customers(self.db, created_by or identity.owner, service_day)

    def get_customer(self, customer_id: str, identity: Identity) -> Customer:
        """Customer owned by the caller; another owner's customer is not found"""
        customer = self.repo.get_customer_by_public_id(self.db, customer_id, identity.owner)
        if not customer:
            raise HTTPException(status_code=404, detail="Customer not found")
        return customer

    def create_customer(self, data: CustomerCreate, identity: Identity) -> Customer:
        logger.info(f"📥 Creating customer for {identity.owner}")
        return self.repo.create_customer(self.db, identity.owner, **data.model_dump())

    def update_customer(self, customer_id: str, data: CustomerUpdate, identity: Identity) -> Customer:
        customer = self.get_customer(customer_id, identity)
        return self.repo.update_customer(self.db, customer, **data.model_dump(exclude_unset=True))

    def delete_customer(self, customer_id: str, identity: Identity) -> dict:
        customer = self.get_customer(customer_id, identity)
        self.repo.delete_customer(self.db, customer)
        logger.info(f"🗑️ Customer {customer_id} deleted")
        return {"message": "Customer deleted"}
