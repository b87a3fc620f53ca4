from datetime import date
from typing import Any, Dict, List, Tuple

from crm_admin.core.crud import InMemoryEntityService
from crm_admin.core.invoices import recompute_invoice
from crm_admin.schemas.employee import Employee
from crm_admin.schemas.customer import Customer
from crm_admin.schemas.supplier import Supplier
from crm_admin.schemas.invoice import Invoice
from crm_admin.schemas.receipt import Receipt
from crm_admin.schemas.feedback import Feedback, FeedbackStatus
from crm_admin.schemas.company import Company, Project
from crm_admin.schemas.account import User, UserRole, AccessRight

class InvoiceService(InMemoryEntityService[Invoice]):
    def prepare(self, record: Invoice) -> Invoice:
        return recompute_invoice(record)

class FeedbackService(InMemoryEntityService[Feedback]):
    def on_create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields["created_at"] = date.today().isoformat()
        fields["status"] = FeedbackStatus.PENDING
        return fields

    async def get_all(self) -> List[Feedback]:
        # Newest first; ISO dates sort lexicographically
        records = await super().get_all()
        return sorted(records, key=lambda fb: fb.created_at, reverse=True)

class AccessRightService(InMemoryEntityService[AccessRight]):
    async def grouped_by_module(self) -> Dict[str, List[AccessRight]]:
        groups: Dict[str, List[AccessRight]] = {}
        for right in await self.get_all():
            groups.setdefault(right.module, []).append(right)
        return groups

employee_service = InMemoryEntityService("employees", Employee)
customer_service = InMemoryEntityService("customers", Customer)
supplier_service = InMemoryEntityService("suppliers", Supplier)
invoice_service = InvoiceService("invoices", Invoice)
receipt_service = InMemoryEntityService("receipts", Receipt)
feedback_service = FeedbackService("feedback", Feedback)
company_service = InMemoryEntityService("companies", Company)
project_service = InMemoryEntityService("projects", Project)
user_service = InMemoryEntityService("users", User)
user_role_service = InMemoryEntityService("user_roles", UserRole)
access_right_service = AccessRightService("access_rights", AccessRight)

# Fields scanned by the free-text search of each listing
SEARCH_FIELDS: Dict[str, Tuple[str, ...]] = {
    "employees": ("name", "email", "position"),
    "customers": ("name", "email", "address"),
    "suppliers": ("name", "contact_person", "email", "category"),
    "invoices": ("customer_name", "id"),
    "receipts": ("customer_name", "id", "description", "payment_method"),
    "feedback": ("title", "description"),
    "companies": ("name", "code", "email"),
    "projects": ("name", "code", "company_name"),
    "users": ("username", "email", "company_name", "role_name"),
    "user_roles": ("name", "code", "description"),
    "access_rights": ("name", "code", "module", "action"),
}
