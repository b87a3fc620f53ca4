import pytest
from fastapi.testclient import TestClient
from crm_admin.main import app
from crm_admin.core.audit import audit_repo
from crm_admin.db.memory import APP_STATE
from crm_admin.schemas.audit import AuditAction

client = TestClient(app)

def test_dashboard_stats_follow_store():
    response = client.get("/dashboard")
    assert response.status_code == 200
    data = response.json()

    stats = data["stats"]
    assert stats["customer_count"] == 15
    assert stats["pending_invoices"] == 6
    paid = sum(inv.total_amount for inv in APP_STATE["invoices"] if inv.status.value == "paid")
    received = sum(rec.amount for rec in APP_STATE["receipts"])
    assert stats["total_revenue"] == pytest.approx(paid + received, abs=0.01)
    assert stats["total_expenses"] == pytest.approx(sum(e.salary for e in APP_STATE["employees"]), abs=0.01)

    assert len(data["sales_trend"]) == 12
    assert data["invoice_status"] == {"draft": 3, "sent": 3, "paid": 3, "overdue": 3}

def test_dashboard_top_customers_sorted():
    top = client.get("/dashboard").json()["top_customers"]
    assert 0 < len(top) <= 5
    values = [c["value"] for c in top]
    assert values == sorted(values, reverse=True)

def test_dashboard_reflects_deletes():
    target = APP_STATE["customers"][0]
    client.delete(f"/customers/{target.id}")
    assert client.get("/dashboard").json()["stats"]["customer_count"] == 14

@pytest.mark.parametrize("period,rows,revenue", [
    ("monthly", 6, 486000),
    ("quarterly", 4, 824000),
    ("yearly", 12, 824000),
])
def test_report_periods(period, rows, revenue):
    response = client.get("/reports", params={"period": period})
    assert response.status_code == 200
    data = response.json()
    assert data["period"] == period
    assert len(data["rows"]) == rows
    assert data["totals"]["revenue"] == revenue
    assert data["totals"]["profit"] == sum(r["profit"] for r in data["rows"])
    assert "report_id" in data["meta"]
    assert len(data["customer_segments"]) == 4
    assert len(data["performance"]) == 6

def test_quarterly_rows_sum_months():
    q1 = client.get("/reports", params={"period": "quarterly"}).json()["rows"][0]
    assert q1 == {"name": "Q1", "revenue": 146000, "expenses": 80000, "profit": 66000}

def test_report_defaults_to_monthly():
    assert client.get("/reports").json()["period"] == "monthly"

def test_report_invalid_period():
    response = client.get("/reports", params={"period": "weekly"})
    assert response.status_code == 400
    assert "Invalid period" in response.json()["detail"]

def test_report_pdf():
    response = client.get("/reports/pdf", params={"period": "quarterly"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
    assert "Report_quarterly.pdf" in response.headers["content-disposition"]
    downloads = audit_repo.get_all(AuditAction.PDF_DOWNLOAD)
    assert len(downloads) == 1
    assert downloads[0].output_hash is not None

def test_report_pdf_invalid_period():
    assert client.get("/reports/pdf", params={"period": "daily"}).status_code == 400

def big_invoice(customer_id, customer_name):
    response = client.post("/invoices", json={
        "customer_id": customer_id,
        "customer_name": customer_name,
        "date": "2024-04-01",
        "due_date": "2024-04-30",
        "items": [{"description": "Fleet", "quantity": 1, "price": 1000000}],
    })
    assert response.status_code == 201

def test_top_customers_keyed_by_customer_id():
    first, second = APP_STATE["customers"][0], APP_STATE["customers"][1]
    client.patch(f"/customers/{second.id}", json={"name": first.name})
    big_invoice(first.id, first.name)
    big_invoice(second.id, first.name)

    top = client.get("/dashboard").json()["top_customers"]
    assert [c["name"] for c in top[:2]] == [first.name, first.name]
    assert all(1000000 <= c["value"] < 1100000 for c in top[:2])

def test_dashboard_loads_collections_concurrently(monkeypatch):
    import asyncio
    import time
    from crm_admin.core.analytics import build_dashboard
    from crm_admin.core.config import settings

    monkeypatch.setattr(settings, "MOCK_DELAY_MS", 100)
    started = time.perf_counter()
    asyncio.run(build_dashboard())
    elapsed = time.perf_counter() - started
    # Four sequential calls would take at least 0.4s
    assert 0.1 <= elapsed < 0.3
