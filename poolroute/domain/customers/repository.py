"""Customer repository - Database operations for customers"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import Customer


class CustomerRepository:
    """Repository for customer database operations"""

    @staticmethod
    def get_customers(
        db: Session, created_by: str, service_day: Optional[str] = None
    ) -> list[Customer]:
        """Customers for an owner in arrival order, optionally for one service day"""
        query = db.query(Customer).filter(Customer.created_by == created_by)

        if service_day:
            query = query.filter(Customer.service_day == service_day)

        return query.order_by(Customer.id.asc()).all()

    @staticmethod
    def get_customer_by_public_id(
        db: Session, public_id: str, created_by: str
    ) -> Optional[Customer]:
        return (
            db.query(Customer)
            .filter(Customer.public_id == public_id, Customer.created_by == created_by)
            .first()
        )

    @staticmethod
    def get_customers_by_public_ids(db: Session, public_ids: list[str]) -> list[Customer]:
        if not public_ids:
            return []
        return (
            db.query(Customer)
            .filter(Customer.public_id.in_(public_ids))
            .order_by(Customer.id.asc())
            .all()
        )

    @staticmethod
    def create_customer(db: Session, created_by: str, **customer_data) -> Customer:
        customer = Customer(created_by=created_by, **customer_data)
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def update_customer(db: Session, customer: Customer, **updates) -> Customer:
        """Patch the given fields; None clears an optional field"""
        for key, value in updates.items():
            if hasattr(customer, key):
                setattr(customer, key, value)

        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def set_sort_order(db: Session, public_id: str, sort_order: int) -> None:
        """Single-field write used by the route ordering engine"""
        try:
            updated = (
                db.query(Customer)
                .filter(Customer.public_id == public_id)
                .update({Customer.sort_order: sort_order}, synchronize_session="fetch")
            )
            if not updated:
                raise LookupError(f"Customer {public_id} not found")
            db.commit()
        except (SQLAlchemyError, LookupError):
            db.rollback()
            raise

    @staticmethod
    def delete_customer(db: Session, customer: Customer) -> None:
        """Delete only the customer row; logs and usage records keep their reference"""
        db.delete(customer)
        db.commit()
