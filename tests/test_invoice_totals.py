import pytest
from crm_admin.core.invoices import add_item, line_amount, recompute_invoice, remove_item, update_item
from crm_admin.schemas.invoice import Invoice, InvoiceItem, InvoiceItemUpdate

def assert_totals_consistent(invoice: Invoice):
    for item in invoice.items:
        assert item.amount == pytest.approx(item.quantity * item.price)
    assert invoice.total_amount == pytest.approx(sum(item.amount for item in invoice.items))

@pytest.fixture
def invoice():
    return recompute_invoice(Invoice(
        id="inv1",
        customer_id="c1",
        customer_name="Customer 1",
        date="2024-01-01",
        due_date="2024-01-31",
        items=[
            InvoiceItem(id="a", description="Chair", quantity=4, price=25.0),
            InvoiceItem(id="b", description="Table", quantity=1, price=120.0),
        ],
    ))

def test_line_amount():
    assert line_amount(InvoiceItem(quantity=3, price=2.5)) == 7.5

def test_recompute_sets_amounts_and_total(invoice):
    assert [item.amount for item in invoice.items] == [100.0, 120.0]
    assert invoice.total_amount == 220.0

def test_recompute_assigns_missing_item_ids():
    inv = recompute_invoice(Invoice(
        id="x", customer_id="c", customer_name="C", date="2024-01-01", due_date="2024-01-02",
        items=[InvoiceItem(quantity=1, price=1.0), InvoiceItem(quantity=1, price=1.0)],
    ))
    ids = [item.id for item in inv.items]
    assert all(ids) and len(set(ids)) == 2

def test_add_blank_item_keeps_total(invoice):
    updated = add_item(invoice)
    assert len(updated.items) == 3
    assert updated.items[-1].quantity == 1
    assert updated.items[-1].price == 0
    assert updated.total_amount == 220.0
    assert_totals_consistent(updated)

def test_add_item_with_values(invoice):
    updated = add_item(invoice, InvoiceItem(description="Lamp", quantity=2, price=30.0))
    assert updated.total_amount == 280.0
    assert_totals_consistent(updated)

def test_every_edit_keeps_invariant(invoice):
    edits = [
        InvoiceItemUpdate(quantity=10),
        InvoiceItemUpdate(price=1.75),
        InvoiceItemUpdate(quantity=0),
        InvoiceItemUpdate(description="Renamed"),
    ]
    current = invoice
    for changes in edits:
        current = update_item(current, "a", changes)
        assert_totals_consistent(current)
    assert current.items[0].description == "Renamed"
    assert current.total_amount == 120.0

def test_update_unknown_item_returns_none(invoice):
    assert update_item(invoice, "nope", InvoiceItemUpdate(quantity=2)) is None

def test_remove_item(invoice):
    updated = remove_item(invoice, "b")
    assert [item.id for item in updated.items] == ["a"]
    assert updated.total_amount == 100.0

def test_remove_last_item_gives_zero_total(invoice):
    updated = remove_item(remove_item(invoice, "a"), "b")
    assert updated.items == []
    assert updated.total_amount == 0

def test_remove_unknown_item_returns_none(invoice):
    assert remove_item(invoice, "nope") is None

def test_edits_do_not_mutate_original(invoice):
    update_item(invoice, "a", InvoiceItemUpdate(quantity=99))
    assert invoice.items[0].quantity == 4
    assert invoice.total_amount == 220.0

def test_repeated_line_ids_are_made_unique():
    inv = recompute_invoice(Invoice(
        id="x", customer_id="c", customer_name="C", date="2024-01-01", due_date="2024-01-02",
        items=[
            InvoiceItem(id="dup", description="First", quantity=1, price=10.0),
            InvoiceItem(id="dup", description="Second", quantity=2, price=10.0),
        ],
    ))
    ids = [item.id for item in inv.items]
    assert ids[0] == "dup"
    assert len(set(ids)) == 2

    updated = update_item(inv, "dup", InvoiceItemUpdate(quantity=5))
    assert [item.quantity for item in updated.items] == [5, 2]

    remaining = remove_item(inv, "dup")
    assert [item.description for item in remaining.items] == ["Second"]
    assert remaining.total_amount == 20.0
