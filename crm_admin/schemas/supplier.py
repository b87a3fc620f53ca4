from pydantic import BaseModel, field_validator, ValidationInfo
from typing import Optional
from crm_admin.schemas.common import check_not_blank, check_iso_date

class SupplierFields(BaseModel):
    @field_validator('name', 'contact_person', 'email', 'phone', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('since', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class SupplierCreate(SupplierFields):
    name: str
    contact_person: str
    email: str
    phone: str
    address: str = ""
    category: str = ""
    since: str

class SupplierUpdate(SupplierFields):
    name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    category: Optional[str] = None
    since: Optional[str] = None

class Supplier(SupplierCreate):
    id: str
