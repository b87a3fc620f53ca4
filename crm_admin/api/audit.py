from fastapi import APIRouter, Query
from typing import List, Optional
from crm_admin.core.audit import audit_repo
from crm_admin.schemas.audit import AuditLogEntry, AuditAction

router = APIRouter()

@router.get("/audit", response_model=List[AuditLogEntry])
async def list_audit_entries(action: Optional[AuditAction] = Query(None)):
    return audit_repo.get_all(action)
