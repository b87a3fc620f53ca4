from fastapi import APIRouter
from crm_admin.core.config import settings
from crm_admin.db.memory import APP_STATE

router = APIRouter()

@router.get("/health")
async def health():
    return {
        "status": "ok",
        "project": settings.PROJECT_NAME,
        "collections": {name: len(records) for name, records in APP_STATE.items()},
    }
