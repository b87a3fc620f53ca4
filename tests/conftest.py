import os

# Must be set before crm_admin.core.config is imported
os.environ.setdefault("MOCK_DELAY_MS", "0")
os.environ.setdefault("SEED_RANDOM", "42")

import pytest
from crm_admin.core.audit import audit_repo
from crm_admin.db.memory import reset_store

@pytest.fixture(autouse=True)
def fresh_store():
    """Every test starts from the same seeded store and an empty audit log."""
    reset_store(42)
    audit_repo.clear()
    yield
