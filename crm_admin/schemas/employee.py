from enum import Enum
from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import Optional
from crm_admin.schemas.common import check_not_blank, check_iso_date

class IdType(str, Enum):
    ID_CARD = "idCard"
    PASSPORT = "passport"
    DRIVER_LICENSE = "driverLicense"
    OTHER = "other"

class EmployeeFields(BaseModel):
    @field_validator('name', 'email', 'phone', 'id_no', 'position', 'department', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('hire_date', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class EmployeeCreate(EmployeeFields):
    name: str
    avatar: Optional[str] = None
    email: str
    phone: str
    id_type: IdType = IdType.ID_CARD
    id_no: str
    position: str
    department: str
    hire_date: str
    salary: float = Field(0.0, ge=0)

class EmployeeUpdate(EmployeeFields):
    name: Optional[str] = None
    avatar: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    id_type: Optional[IdType] = None
    id_no: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    hire_date: Optional[str] = None
    salary: Optional[float] = Field(None, ge=0)

class Employee(EmployeeCreate):
    id: str
