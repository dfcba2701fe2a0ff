"""Service log domain schemas"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from ...models import ServiceLog
from ...shared.validators import require_value


class ServiceLogCreate(BaseModel):
    """Schema for recording a visit's chemical readings"""

    customer_id: str
    service_date: str  # YYYY-MM-DD
    status: str
    notes: Optional[str] = None
    ph: str
    chlorine: str
    alkalinity: str
    stabilizer: str
    salt: Optional[float] = None


class ServiceLogUpdate(BaseModel):
    customer_id: Optional[str] = None
    service_date: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    ph: Optional[str] = None
    chlorine: Optional[str] = None
    alkalinity: Optional[str] = None
    stabilizer: Optional[str] = None
    salt: Optional[float] = None

    @field_validator(
        "customer_id", "service_date", "status", "ph", "chlorine", "alkalinity", "stabilizer",
        mode="before",
    )
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        return require_value(v, info.field_name)


class ServiceLogResponse(BaseModel):
    id: str
    customer_id: str
    service_date: str
    status: str
    notes: Optional[str] = None
    ph: str
    chlorine: str
    alkalinity: str
    stabilizer: str
    salt: Optional[float] = None

    @classmethod
    def from_model(cls, log: ServiceLog) -> "ServiceLogResponse":
        return cls(
            id=log.public_id,
            customer_id=log.customer_id,
            service_date=log.service_date,
            status=log.status,
            notes=log.notes,
            ph=log.ph,
            chlorine=log.chlorine,
            alkalinity=log.alkalinity,
            stabilizer=log.stabilizer,
            salt=log.salt,
        )
