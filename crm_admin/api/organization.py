from crm_admin.api.crud import build_crud_router
from crm_admin.core.services import company_service, project_service
from crm_admin.schemas.company import (
    Company, CompanyCreate, CompanyUpdate, Project, ProjectCreate, ProjectUpdate,
)

companies_router = build_crud_router(
    "companies", company_service, Company, CompanyCreate, CompanyUpdate, status_field="status"
)
projects_router = build_crud_router(
    "projects", project_service, Project, ProjectCreate, ProjectUpdate, status_field="status"
)
