from fastapi import APIRouter, HTTPException, Body
from typing import Optional
import logging

from crm_admin.api.crud import build_crud_router
from crm_admin.core.invoices import add_item, update_item, remove_item
from crm_admin.core.services import invoice_service
from crm_admin.schemas.invoice import (
    Invoice, InvoiceCreate, InvoiceUpdate, InvoiceItem, InvoiceItemUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])

async def _load_invoice(invoice_id: str) -> Invoice:
    invoice = await invoice_service.get(invoice_id)
    if invoice is None:
        raise HTTPException(status_code=404, detail=f"invoices record '{invoice_id}' not found")
    return invoice

async def _store(invoice: Invoice) -> Invoice:
    stored = await invoice_service.replace(invoice)
    if stored is None:
        # Deleted while we were editing it
        raise HTTPException(status_code=404, detail=f"invoices record '{invoice.id}' not found")
    return stored

@router.post("/{invoice_id}/items", response_model=Invoice, status_code=201)
async def add_invoice_item(invoice_id: str, item: Optional[InvoiceItem] = Body(None)):
    """Append a line item. An empty body adds a blank line (quantity 1, price 0)."""
    invoice = await _load_invoice(invoice_id)
    return await _store(add_item(invoice, item))

@router.patch("/{invoice_id}/items/{item_id}", response_model=Invoice)
async def update_invoice_item(invoice_id: str, item_id: str, changes: InvoiceItemUpdate = Body(...)):
    invoice = await _load_invoice(invoice_id)
    updated = update_item(invoice, item_id, changes)
    if updated is None:
        logger.warning(f"Item {item_id} not found on invoice {invoice_id}")
        raise HTTPException(status_code=404, detail=f"Item '{item_id}' not found on invoice '{invoice_id}'")
    return await _store(updated)

@router.delete("/{invoice_id}/items/{item_id}", response_model=Invoice)
async def remove_invoice_item(invoice_id: str, item_id: str):
    invoice = await _load_invoice(invoice_id)
    updated = remove_item(invoice, item_id)
    if updated is None:
        logger.warning(f"Item {item_id} not found on invoice {invoice_id}")
        raise HTTPException(status_code=404, detail=f"Item '{item_id}' not found on invoice '{invoice_id}'")
    return await _store(updated)

build_crud_router(
    "invoices", invoice_service, Invoice, InvoiceCreate, InvoiceUpdate,
    status_field="status", router=router,
)
