"""Customer domain schemas - Pydantic models for request/response shapes"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from ...models import Customer
from ...shared.validators import require_value


class CustomerCreate(BaseModel):
    """Schema for creating a new customer"""

    full_name: str
    address: str
    phone: Optional[str] = None
    email: Optional[str] = None
    gate_code: Optional[str] = None
    service_day: str
    pool_gallons: Optional[float] = None
    pool_type: str
    surface_type: str
    sort_order: Optional[int] = None


class CustomerUpdate(BaseModel):
    """Schema for patching a customer; only fields sent are applied"""

    full_name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gate_code: Optional[str] = None
    service_day: Optional[str] = None
    pool_gallons: Optional[float] = None
    pool_type: Optional[str] = None
    surface_type: Optional[str] = None
    sort_order: Optional[int] = None

    @field_validator(
        "full_name", "address", "service_day", "pool_type", "surface_type", mode="before"
    )
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        return require_value(v, info.field_name)


class CustomerResponse(BaseModel):
    """Schema for customer response"""

    id: str
    full_name: str
    address: str
    phone: Optional[str] = None
    email: Optional[str] = None
    gate_code: Optional[str] = None
    service_day: str
    pool_gallons: Optional[float] = None
    pool_type: str
    surface_type: str
    sort_order: Optional[int] = None
    created_by: str

    @classmethod
    def from_model(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.public_id,
            full_name=customer.full_name,
            address=customer.address,
            phone=customer.phone,
            email=customer.email,
            gate_code=customer.gate_code,
            service_day=customer.service_day,
            pool_gallons=customer.pool_gallons,
            pool_type=customer.pool_type,
            surface_type=customer.surface_type,
            sort_order=customer.sort_order,
            created_by=customer.created_by,
        )
