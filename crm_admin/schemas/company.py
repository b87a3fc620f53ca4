from enum import Enum
from pydantic import BaseModel, field_validator, ValidationInfo
from typing import Optional
from crm_admin.schemas.common import check_not_blank, check_iso_date

class CompanyStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

class ProjectStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    COMPLETED = "completed"

class CompanyFields(BaseModel):
    @field_validator('code', 'name', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('created_at', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class CompanyCreate(CompanyFields):
    code: str
    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    created_at: str
    status: CompanyStatus = CompanyStatus.ACTIVE

class CompanyUpdate(CompanyFields):
    code: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = None
    status: Optional[CompanyStatus] = None

class Company(CompanyCreate):
    id: str

class ProjectFields(BaseModel):
    @field_validator('code', 'name', 'company_id', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('start_date', 'end_date', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class ProjectCreate(ProjectFields):
    code: str
    name: str
    company_id: str
    company_name: str = ""
    start_date: str
    end_date: str
    status: ProjectStatus = ProjectStatus.ACTIVE
    description: str = ""

class ProjectUpdate(ProjectFields):
    code: Optional[str] = None
    name: Optional[str] = None
    company_id: Optional[str] = None
    company_name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[ProjectStatus] = None
    description: Optional[str] = None

class Project(ProjectCreate):
    id: str
