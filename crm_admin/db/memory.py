import random
import string
import logging
from typing import Dict, List, Any, Optional

logger = logging.getLogger(__name__)

ENTITIES = (
    "employees",
    "customers",
    "suppliers",
    "invoices",
    "receipts",
    "feedback",
    "companies",
    "projects",
    "users",
    "user_roles",
    "access_rights",
)

# AUTHORITATIVE GLOBAL STORE – DO NOT DUPLICATE
# Structure: { entity_name: [record, ...] }
# In-memory only, reseeded on every process start. Not guarded by a lock;
# callers run on a single event loop.
APP_STATE: Dict[str, List[Any]] = {name: [] for name in ENTITIES}

_ID_ALPHABET = string.digits + string.ascii_lowercase

def generate_id(rng: Optional[random.Random] = None, taken=()) -> str:
    """Random 9-character base-36 identifier, unique against `taken`."""
    rng = rng or random
    while True:
        candidate = "".join(rng.choice(_ID_ALPHABET) for _ in range(9))
        if candidate not in taken:
            return candidate

def reset_store(seed: Optional[int] = None) -> None:
    """Drop every record and reseed the mock collections in place."""
    from crm_admin.db.seed import build_seed_data

    data = build_seed_data(seed)
    for name in ENTITIES:
        # Replace contents, keep list identity for anyone holding a reference
        APP_STATE[name][:] = data[name]
    counts = {name: len(APP_STATE[name]) for name in ENTITIES}
    logger.info(f"Mock store seeded: {counts}")
