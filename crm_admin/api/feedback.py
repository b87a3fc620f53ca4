from crm_admin.api.crud import build_crud_router
from crm_admin.core.services import feedback_service
from crm_admin.schemas.feedback import Feedback, FeedbackCreate, FeedbackUpdate

# Listing keeps the service order: newest feedback first
router = build_crud_router(
    "feedback", feedback_service, Feedback, FeedbackCreate, FeedbackUpdate, status_field="status"
)
