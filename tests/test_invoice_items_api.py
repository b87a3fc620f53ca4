import pytest
from fastapi.testclient import TestClient
from crm_admin.main import app
from crm_admin.db.memory import APP_STATE

client = TestClient(app)

def assert_totals_consistent(invoice):
    for item in invoice["items"]:
        assert item["amount"] == pytest.approx(item["quantity"] * item["price"])
    assert invoice["total_amount"] == pytest.approx(sum(item["amount"] for item in invoice["items"]))

@pytest.fixture
def invoice_id():
    response = client.post("/invoices", json={
        "customer_id": APP_STATE["customers"][0].id,
        "customer_name": APP_STATE["customers"][0].name,
        "date": "2024-04-01",
        "due_date": "2024-04-30",
        "items": [{"description": "Consulting", "quantity": 2, "price": 400}],
        "total_amount": 1,
        "status": "sent",
    })
    assert response.status_code == 201
    return response.json()["id"]

def test_seeded_invoices_are_consistent():
    for invoice in client.get("/invoices", params={"page_size": 100}).json()["items"]:
        assert_totals_consistent(invoice)

def test_create_recomputes_total(invoice_id):
    invoice = client.get(f"/invoices/{invoice_id}").json()
    assert invoice["total_amount"] == 800
    assert invoice["items"][0]["id"]

def test_item_edit_sequence(invoice_id):
    invoice = client.post(f"/invoices/{invoice_id}/items").json()
    assert len(invoice["items"]) == 2
    assert_totals_consistent(invoice)

    new_item_id = invoice["items"][1]["id"]
    invoice = client.patch(f"/invoices/{invoice_id}/items/{new_item_id}", json={"quantity": 3}).json()
    assert_totals_consistent(invoice)
    invoice = client.patch(f"/invoices/{invoice_id}/items/{new_item_id}", json={"price": 12.5}).json()
    assert_totals_consistent(invoice)
    assert invoice["total_amount"] == pytest.approx(837.5)

    first_item_id = invoice["items"][0]["id"]
    response = client.delete(f"/invoices/{invoice_id}/items/{first_item_id}")
    assert response.status_code == 200
    invoice = response.json()
    assert_totals_consistent(invoice)
    assert invoice["total_amount"] == pytest.approx(37.5)

    stored = next(inv for inv in APP_STATE["invoices"] if inv.id == invoice_id)
    assert stored.total_amount == pytest.approx(37.5)

def test_add_item_with_body(invoice_id):
    response = client.post(f"/invoices/{invoice_id}/items", json={"description": "Travel", "quantity": 1, "price": 99})
    assert response.status_code == 201
    assert response.json()["total_amount"] == 899

def test_patch_invoice_items_replaces_lines(invoice_id):
    invoice = client.patch(f"/invoices/{invoice_id}", json={
        "items": [{"description": "A", "quantity": 5, "price": 2}],
    }).json()
    assert invoice["total_amount"] == 10
    assert invoice["status"] == "sent"

def test_negative_quantity_rejected(invoice_id):
    item_id = client.get(f"/invoices/{invoice_id}").json()["items"][0]["id"]
    response = client.patch(f"/invoices/{invoice_id}/items/{item_id}", json={"quantity": -1})
    assert response.status_code == 422

def test_item_routes_404(invoice_id):
    assert client.post("/invoices/nope/items").status_code == 404
    assert client.patch(f"/invoices/{invoice_id}/items/nope", json={"quantity": 1}).status_code == 404
    assert client.delete(f"/invoices/{invoice_id}/items/nope").status_code == 404

def test_delete_one_of_two_lines_sharing_an_id():
    response = client.post("/invoices", json={
        "customer_id": "c1",
        "customer_name": "Customer 1",
        "date": "2024-04-01",
        "due_date": "2024-04-30",
        "items": [
            {"id": "x", "description": "One", "quantity": 1, "price": 10},
            {"id": "x", "description": "Two", "quantity": 1, "price": 20},
        ],
    })
    invoice = response.json()
    assert len({item["id"] for item in invoice["items"]}) == 2

    invoice = client.delete(f"/invoices/{invoice['id']}/items/x").json()
    assert len(invoice["items"]) == 1
    assert invoice["total_amount"] == 20
