from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
import uuid
from enum import Enum

class AuditStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"

class AuditAction(str, Enum):
    READ = "READ"
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    HEALTH_CHECK = "HEALTH_CHECK"
    PDF_DOWNLOAD = "PDF_DOWNLOAD"

class AuditLogEntry(BaseModel):
    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    endpoint: str
    method: str
    action_type: AuditAction
    actor: str = "system"
    input_hash: Optional[str] = None
    output_hash: Optional[str] = None
    status_code: Optional[int] = None
    status: AuditStatus
