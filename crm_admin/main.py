import logging
from fastapi import FastAPI
from crm_admin.core.config import settings
from crm_admin.core.middleware import AuditMiddleware
from crm_admin.db.memory import reset_store
from crm_admin.api import health, audit, contacts, invoices, receipts, feedback, organization, accounts, reports

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME)
app.add_middleware(AuditMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(audit.router)
app.include_router(contacts.employees_router)
app.include_router(contacts.customers_router)
app.include_router(contacts.suppliers_router)
app.include_router(invoices.router)
app.include_router(receipts.router)
app.include_router(feedback.router)
app.include_router(organization.companies_router)
app.include_router(organization.projects_router)
app.include_router(accounts.users_router)
app.include_router(accounts.user_roles_router)
app.include_router(accounts.access_rights_router)
app.include_router(reports.router)

# Seed once at import so every client sees the same data for the process lifetime
reset_store(settings.SEED_RANDOM)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
