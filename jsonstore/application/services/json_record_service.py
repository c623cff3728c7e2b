"""Application service (use case) for JSON record operations."""

import logging

from jsonstore.application.interfaces import JsonRecordRepository
from jsonstore.application.schemas import JsonRecordWrite
from jsonstore.domain.entities import JsonRecord, JsonRecordSummary
from jsonstore.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class JsonRecordService:
    """Orchestrates record CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: JsonRecordRepository):
        self._repository = repository

    async def list_records(self) -> list[JsonRecordSummary]:
        return await self._repository.list_summaries()

    async def get_record(self, record_id: str) -> JsonRecord:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("Record", record_id)
        return record

    async def create_record(self, payload: JsonRecordWrite) -> JsonRecord:
        record = JsonRecord(data=payload.data)
        await self._repository.create(record)
        logger.info("Created record %s", record.id)
        return await self.get_record(record.id)

    async def update_record(self, record_id: str, payload: JsonRecordWrite) -> JsonRecord:
        record = await self.get_record(record_id)
        record.replace_data(payload.data)
        await self._repository.update(record)
        logger.info("Updated record %s", record_id)
        return await self.get_record(record_id)

    async def delete_record(self, record_id: str) -> None:
        deleted = await self._repository.delete(record_id)
        if not deleted:
            raise EntityNotFoundError("Record", record_id)
        logger.info("Deleted record %s", record_id)
