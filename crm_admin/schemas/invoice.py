from enum import Enum
from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import List, Optional
from crm_admin.schemas.common import check_not_blank, check_iso_date

class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"

class InvoiceItem(BaseModel):
    # id is assigned by the store when omitted
    id: Optional[str] = None
    description: str = ""
    quantity: float = Field(1, ge=0)
    price: float = Field(0.0, ge=0)
    # amount is always recomputed from quantity and price
    amount: float = 0.0

class InvoiceItemUpdate(BaseModel):
    description: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)

class InvoiceFields(BaseModel):
    @field_validator('customer_id', 'customer_name', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('date', 'due_date', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class InvoiceCreate(InvoiceFields):
    customer_id: str
    customer_name: str
    date: str
    due_date: str
    items: List[InvoiceItem] = Field(default_factory=list)
    total_amount: float = 0.0
    status: InvoiceStatus = InvoiceStatus.DRAFT

class InvoiceUpdate(InvoiceFields):
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    items: Optional[List[InvoiceItem]] = None
    status: Optional[InvoiceStatus] = None

class Invoice(InvoiceCreate):
    id: str
