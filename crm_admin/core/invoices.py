from typing import Optional
from crm_admin.db.memory import generate_id
from crm_admin.schemas.invoice import Invoice, InvoiceItem, InvoiceItemUpdate

# AUTHORITATIVE INVOICE TOTALS – DO NOT DUPLICATE
# Every path that stores an invoice goes through recompute_invoice, so
# amount == quantity * price and total_amount == sum(amount) always hold.

def line_amount(item: InvoiceItem) -> float:
    return item.quantity * item.price

def recompute_invoice(invoice: Invoice) -> Invoice:
    """Return a copy of the invoice with line amounts and total refreshed."""
    taken = {item.id for item in invoice.items if item.id}
    seen = set()
    items = []
    for item in invoice.items:
        item_id = item.id
        # Line ids must be unique within the invoice; repeats get a fresh one
        if not item_id or item_id in seen:
            item_id = generate_id(taken=taken)
            taken.add(item_id)
        seen.add(item_id)
        items.append(item.model_copy(update={"id": item_id, "amount": line_amount(item)}))
    total = sum(item.amount for item in items)
    return invoice.model_copy(update={"items": items, "total_amount": total})

def add_item(invoice: Invoice, item: Optional[InvoiceItem] = None) -> Invoice:
    """Append a line (blank by default) and recompute."""
    new_item = (item or InvoiceItem()).model_copy(update={"id": None})
    return recompute_invoice(invoice.model_copy(update={"items": invoice.items + [new_item]}))

def update_item(invoice: Invoice, item_id: str, changes: InvoiceItemUpdate) -> Optional[Invoice]:
    """Apply field changes to one line. None when the line does not exist."""
    fields = {k: v for k, v in changes.model_dump(exclude_unset=True).items() if v is not None}
    found = False
    items = []
    for item in invoice.items:
        if item.id == item_id:
            found = True
            item = item.model_copy(update=fields)
        items.append(item)
    if not found:
        return None
    return recompute_invoice(invoice.model_copy(update={"items": items}))

def remove_item(invoice: Invoice, item_id: str) -> Optional[Invoice]:
    items = [item for item in invoice.items if item.id != item_id]
    if len(items) == len(invoice.items):
        return None
    return recompute_invoice(invoice.model_copy(update={"items": items}))
