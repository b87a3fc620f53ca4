from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import Optional
from crm_admin.schemas.common import check_not_blank, check_iso_date

class ReceiptFields(BaseModel):
    @field_validator('customer_id', 'customer_name', 'payment_method', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('date', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class ReceiptCreate(ReceiptFields):
    customer_id: str
    customer_name: str
    date: str
    amount: float = Field(..., ge=0)
    payment_method: str
    description: str = ""

class ReceiptUpdate(ReceiptFields):
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    date: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    payment_method: Optional[str] = None
    description: Optional[str] = None

class Receipt(ReceiptCreate):
    id: str
