from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import Optional
from crm_admin.schemas.common import check_not_blank, check_iso_date

class CustomerFields(BaseModel):
    @field_validator('name', 'email', 'phone', 'address', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('created_at', 'last_purchase', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class CustomerCreate(CustomerFields):
    name: str
    email: str
    phone: str
    address: str
    created_at: str
    last_purchase: Optional[str] = None
    total_spent: float = Field(0.0, ge=0)

class CustomerUpdate(CustomerFields):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[str] = None
    last_purchase: Optional[str] = None
    total_spent: Optional[float] = Field(None, ge=0)

class Customer(CustomerCreate):
    id: str
