from enum import Enum
from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import List, Optional
from crm_admin.schemas.common import check_not_blank

class FeedbackStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"

class FeedbackFields(BaseModel):
    @field_validator('title', 'description', check_fields=False)
    @classmethod
    def required(cls, v, info: ValidationInfo):
        return check_not_blank(v, info)

class FeedbackCreate(FeedbackFields):
    """Submitted feedback. created_at and status are stamped by the service."""
    title: str
    description: str
    images: List[str] = Field(default_factory=list)

class FeedbackUpdate(FeedbackFields):
    title: Optional[str] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    status: Optional[FeedbackStatus] = None

class Feedback(FeedbackCreate):
    id: str
    created_at: str
    status: FeedbackStatus = FeedbackStatus.PENDING
