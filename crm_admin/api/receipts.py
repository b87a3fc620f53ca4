from crm_admin.api.crud import build_crud_router
from crm_admin.core.services import receipt_service
from crm_admin.schemas.receipt import Receipt, ReceiptCreate, ReceiptUpdate

router = build_crud_router("receipts", receipt_service, Receipt, ReceiptCreate, ReceiptUpdate)
