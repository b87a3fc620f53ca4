from enum import Enum
from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import List, Optional
from crm_admin.schemas.common import check_not_blank, check_iso_date

# Users, roles and access rights. Role permissions hold access right codes
# such as "invoice.read"; nothing checks them against the access right list.

class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

class AccountFields(BaseModel):
    @field_validator('username', 'email', 'name', 'code', 'module', 'action', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

    @field_validator('created_at', check_fields=False)
    @classmethod
    def validate_date(cls, v, info: ValidationInfo):
        return check_iso_date(v, info)

class UserCreate(AccountFields):
    username: str
    email: str
    phone: str = ""
    company_id: str = ""
    company_name: str = ""
    role_id: str = ""
    role_name: str = ""
    status: UserStatus = UserStatus.ACTIVE
    created_at: str

class UserUpdate(AccountFields):
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company_id: Optional[str] = None
    company_name: Optional[str] = None
    role_id: Optional[str] = None
    role_name: Optional[str] = None
    status: Optional[UserStatus] = None
    created_at: Optional[str] = None

class User(UserCreate):
    id: str

class UserRoleCreate(AccountFields):
    name: str
    code: str
    description: str = ""
    permissions: List[str] = Field(default_factory=list)
    created_at: str

class UserRoleUpdate(AccountFields):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[str]] = None
    created_at: Optional[str] = None

class UserRole(UserRoleCreate):
    id: str

class AccessRightCreate(AccountFields):
    name: str
    code: str
    description: str = ""
    module: str
    action: str
    created_at: str

class AccessRightUpdate(AccountFields):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    module: Optional[str] = None
    action: Optional[str] = None
    created_at: Optional[str] = None

class AccessRight(AccessRightCreate):
    id: str

class AccessRightGroup(BaseModel):
    module: str
    rights: List[AccessRight]
