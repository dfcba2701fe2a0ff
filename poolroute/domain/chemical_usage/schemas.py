"""Chemical usage domain schemas"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from ...models import ChemicalUsage
from ...shared.validators import require_value


class ChemicalUsageCreate(BaseModel):
    """Schema for an extra-chemical entry; created_date is assigned by the server"""

    customer_id: str
    chemical_type: str
    quantity: str
    notes: Optional[str] = None


class ChemicalUsageUpdate(BaseModel):
    customer_id: Optional[str] = None
    chemical_type: Optional[str] = None
    quantity: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("customer_id", "chemical_type", "quantity", mode="before")
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        return require_value(v, info.field_name)


class ChemicalUsageResponse(BaseModel):
    id: str
    customer_id: str
    chemical_type: str
    quantity: str
    notes: Optional[str] = None
    created_date: Optional[str] = None

    @classmethod
    def from_model(cls, record: ChemicalUsage) -> "ChemicalUsageResponse":
        return cls(
            id=record.public_id,
            customer_id=record.customer_id,
            chemical_type=record.chemical_type,
            quantity=record.quantity,
            notes=record.notes,
            created_date=record.created_date,
        )
