import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from crm_admin.core.config import settings
from crm_admin.db.memory import APP_STATE, generate_id

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

async def mock_delay(ms: Optional[int] = None) -> None:
    """Simulated network round trip before every store access."""
    delay = settings.MOCK_DELAY_MS if ms is None else ms
    if delay > 0:
        await asyncio.sleep(delay / 1000)

class EntityRepository(ABC, Generic[ModelT]):
    @abstractmethod
    async def get_all(self) -> List[ModelT]:
        pass

    @abstractmethod
    async def get(self, record_id: str) -> Optional[ModelT]:
        pass

    @abstractmethod
    async def create(self, data: BaseModel) -> ModelT:
        pass

    @abstractmethod
    async def update(self, record_id: str, changes: BaseModel) -> Optional[ModelT]:
        pass

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        pass

class InMemoryEntityService(EntityRepository[ModelT]):
    """
    CRUD over one APP_STATE collection.
    Missing records are not errors here: get/update return None, delete returns False.
    """

    def __init__(self, collection: str, model: Type[ModelT]):
        self.collection = collection
        self.model = model

    @property
    def _records(self) -> List[ModelT]:
        return APP_STATE[self.collection]

    def _index_of(self, record_id: str) -> int:
        # Re-searched after every delay, never cached across awaits
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1

    def _accepts_none(self, name: str) -> bool:
        field = self.model.model_fields.get(name)
        return field is not None and not field.is_required() and field.default is None

    def prepare(self, record: ModelT) -> ModelT:
        """Hook for derived fields before a record is stored."""
        return record

    def on_create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for server-stamped fields on new records."""
        return fields

    def build(self, fields: Dict[str, Any]) -> ModelT:
        return self.prepare(self.model(**fields))

    async def get_all(self) -> List[ModelT]:
        await mock_delay()
        return list(self._records)

    async def get(self, record_id: str) -> Optional[ModelT]:
        await mock_delay()
        index = self._index_of(record_id)
        return self._records[index] if index != -1 else None

    async def create(self, data: BaseModel) -> ModelT:
        await mock_delay()
        taken = {record.id for record in self._records}
        fields = self.on_create(data.model_dump())
        fields["id"] = generate_id(taken=taken)
        record = self.build(fields)
        self._records.append(record)
        logger.info(f"Created {self.collection} record {record.id}")
        return record

    async def update(self, record_id: str, changes: BaseModel) -> Optional[ModelT]:
        await mock_delay()
        index = self._index_of(record_id)
        if index == -1:
            logger.info(f"Update skipped, {self.collection} record {record_id} not found")
            return None
        # Shallow merge: only fields the caller actually sent
        patch = {
            name: value
            for name, value in changes.model_dump(exclude_unset=True).items()
            if name != "id" and (value is not None or self._accepts_none(name))
        }
        merged = {**self._records[index].model_dump(), **patch}
        record = self.build(merged)
        self._records[index] = record
        logger.info(f"Updated {self.collection} record {record_id}: {sorted(patch)}")
        return record

    async def delete(self, record_id: str) -> bool:
        await mock_delay()
        index = self._index_of(record_id)
        if index == -1:
            logger.info(f"Delete skipped, {self.collection} record {record_id} not found")
            return False
        del self._records[index]
        logger.info(f"Deleted {self.collection} record {record_id}")
        return True

    async def replace(self, record: ModelT) -> Optional[ModelT]:
        """Store a fully built record over the one with the same id."""
        await mock_delay()
        index = self._index_of(record.id)
        if index == -1:
            return None
        stored = self.prepare(record)
        self._records[index] = stored
        logger.info(f"Replaced {self.collection} record {record.id}")
        return stored
