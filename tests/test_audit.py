from fastapi.testclient import TestClient
from crm_admin.main import app
from crm_admin.core.audit import audit_repo
from crm_admin.db.memory import APP_STATE
from crm_admin.schemas.audit import AuditAction, AuditStatus

client = TestClient(app)

EMPTY_HASH = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

def last_entry(endpoint):
    return next(e for e in reversed(audit_repo.get_all()) if e.endpoint == endpoint)

def test_health_check_logged():
    client.get("/health")
    entry = last_entry("/health")
    assert entry.action_type == AuditAction.HEALTH_CHECK
    assert entry.status == AuditStatus.SUCCESS
    assert entry.input_hash == EMPTY_HASH
    assert entry.output_hash is not None

def test_actions_follow_http_method():
    target = APP_STATE["customers"][0]
    client.get("/customers")
    client.patch(f"/customers/{target.id}", json={"phone": "1"})
    client.delete(f"/customers/{target.id}")

    actions = [(e.method, e.action_type) for e in audit_repo.get_all()]
    assert ("GET", AuditAction.READ) in actions
    assert ("PATCH", AuditAction.UPDATE) in actions
    assert ("DELETE", AuditAction.DELETE) in actions

def test_create_logged_with_body_hash():
    client.post("/feedback", json={"title": "Hi", "description": "There"})
    entry = last_entry("/feedback")
    assert entry.action_type == AuditAction.CREATE
    assert entry.status_code == 201
    assert entry.input_hash != EMPTY_HASH

def test_not_found_logged_as_failure():
    client.get("/customers/missing")
    entry = last_entry("/customers/missing")
    assert entry.status == AuditStatus.FAILURE
    assert entry.status_code == 404

def test_audit_endpoint_filters_by_action():
    client.get("/health")
    client.post("/feedback", json={"title": "Hi", "description": "There"})
    response = client.get("/audit", params={"action": "CREATE"})
    assert response.status_code == 200
    entries = response.json()
    assert len(entries) == 1
    assert entries[0]["endpoint"] == "/feedback"

def test_audit_log_is_bounded():
    from crm_admin.core.audit import InMemoryAuditRepository
    from crm_admin.schemas.audit import AuditLogEntry

    repo = InMemoryAuditRepository(max_entries=3)
    for i in range(5):
        repo.save(AuditLogEntry(
            endpoint=f"/customers/{i}", method="GET",
            action_type=AuditAction.READ, status=AuditStatus.SUCCESS,
        ))
    assert [e.endpoint for e in repo.get_all()] == ["/customers/2", "/customers/3", "/customers/4"]
