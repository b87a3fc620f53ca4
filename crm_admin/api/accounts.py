from fastapi import APIRouter
from typing import List
from crm_admin.api.crud import build_crud_router
from crm_admin.core.services import user_service, user_role_service, access_right_service
from crm_admin.schemas.account import (
    User, UserCreate, UserUpdate,
    UserRole, UserRoleCreate, UserRoleUpdate,
    AccessRight, AccessRightCreate, AccessRightUpdate, AccessRightGroup,
)

users_router = build_crud_router("users", user_service, User, UserCreate, UserUpdate, status_field="status")
user_roles_router = build_crud_router("user-roles", user_role_service, UserRole, UserRoleCreate, UserRoleUpdate)

access_rights_router = APIRouter(prefix="/access-rights", tags=["access-rights"])

@access_rights_router.get("/grouped", response_model=List[AccessRightGroup])
async def get_grouped_access_rights():
    """Access rights grouped by module, in first-seen module order."""
    groups = await access_right_service.grouped_by_module()
    return [AccessRightGroup(module=module, rights=rights) for module, rights in groups.items()]

build_crud_router(
    "access-rights", access_right_service, AccessRight, AccessRightCreate, AccessRightUpdate,
    router=access_rights_router,
)
