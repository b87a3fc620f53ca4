from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Optional
from crm_admin.core.config import settings
from crm_admin.schemas.audit import AuditLogEntry, AuditAction
import logging

logger = logging.getLogger(__name__)

class AuditRepository(ABC):
    @abstractmethod
    def save(self, entry: AuditLogEntry):
        pass

    @abstractmethod
    def get_all(self, action: Optional[AuditAction] = None) -> List[AuditLogEntry]:
        pass

    @abstractmethod
    def clear(self):
        pass

class InMemoryAuditRepository(AuditRepository):
    def __init__(self, max_entries: int = settings.MAX_AUDIT_ENTRIES):
        self._storage: Deque[AuditLogEntry] = deque(maxlen=max_entries)

    def save(self, entry: AuditLogEntry):
        # Append-only, bounded: the oldest entry falls off when full
        self._storage.append(entry)
        logger.info(f"Audit Logged: {entry.method} {entry.endpoint} {entry.action_type.value} {entry.status.value}")

    def get_all(self, action: Optional[AuditAction] = None) -> List[AuditLogEntry]:
        if action is None:
            return list(self._storage)
        return [entry for entry in self._storage if entry.action_type == action]

    def clear(self):
        self._storage.clear()

# Global Accessor
audit_repo = InMemoryAuditRepository()
