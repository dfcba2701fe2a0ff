import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.sql import func

from .database import Base


def generate_public_id():
    """Generate the opaque identifier exposed to API callers"""
    return str(uuid.uuid4())


class Customer(Base):
    __tablename__ = "customers"

    # Integer key doubles as arrival order for tie-breaking
    id = Column(Integer, primary_key=True, index=True)
    public_id = Column(
        String(36), unique=True, nullable=False, index=True, default=generate_public_id
    )
    full_name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=False)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    gate_code = Column(String(100), nullable=True)
    service_day = Column(String(20), nullable=False, index=True)  # Monday .. Saturday
    pool_gallons = Column(Float, nullable=True)
    pool_type = Column(String(20), nullable=False)  # Salt, Chlorine
    surface_type = Column(String(20), nullable=False)  # Plaster, Vinyl, Fiberglass, Tile
    sort_order = Column(Integer, nullable=True)  # Manual order within a service day
    created_by = Column(String(255), nullable=False, index=True)  # Owner identity

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class ServiceLog(Base):
    __tablename__ = "service_logs"

    id = Column(Integer, primary_key=True, index=True)
    public_id = Column(
        String(36), unique=True, nullable=False, index=True, default=generate_public_id
    )
    # Non-owning reference to Customer.public_id; no FK so customer deletes never cascade
    customer_id = Column(String(36), nullable=False, index=True)
    service_date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    status = Column(String(50), nullable=False)  # completed, pending, ...
    notes = Column(Text, nullable=True)
    ph = Column(String(20), nullable=False)  # low, good, high, critical
    chlorine = Column(String(20), nullable=False)
    alkalinity = Column(String(20), nullable=False)
    stabilizer = Column(String(20), nullable=False)
    salt = Column(Float, nullable=True)  # Only meaningful for salt pools

    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (Index("ix_service_logs_customer_date", "customer_id", "service_date"),)


class ChemicalUsage(Base):
    __tablename__ = "chemical_usage"

    id = Column(Integer, primary_key=True, index=True)
    public_id = Column(
        String(36), unique=True, nullable=False, index=True, default=generate_public_id
    )
    customer_id = Column(String(36), nullable=False, index=True)
    chemical_type = Column(String(100), nullable=False)
    quantity = Column(String(100), nullable=False)  # Free text, units embedded
    notes = Column(Text, nullable=True)
    created_date = Column(String(10), nullable=True, index=True)  # Server-assigned YYYY-MM-DD

    created_at = Column(DateTime, server_default=func.now())


class Note(Base):
    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    public_id = Column(
        String(36), unique=True, nullable=False, index=True, default=generate_public_id
    )
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)  # General, Customer, Equipment, ...
    customer_id = Column(String(36), nullable=True, index=True)
    priority = Column(String(20), nullable=False)  # low, medium, high
    completed = Column(Boolean, default=False, nullable=False, index=True)
    created_date = Column(String(10), nullable=True, index=True)

    created_at = Column(DateTime, server_default=func.now())
