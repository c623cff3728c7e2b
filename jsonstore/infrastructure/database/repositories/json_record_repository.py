"""Concrete repository implementation for JsonRecord backed by SQLAlchemy."""

import json
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from jsonstore.application.interfaces import JsonRecordRepository
from jsonstore.domain.entities import JsonRecord, JsonRecordSummary
from jsonstore.domain.exceptions import EntityNotFoundError
from jsonstore.infrastructure.database.models import JsonRecordModel


def _as_utc(value: datetime) -> datetime:
    """SQLite hands timestamps back naive; everything is stored in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLAlchemyJsonRecordRepository(JsonRecordRepository):
    """Implements the JsonRecordRepository port using SQLAlchemy async sessions.

    Every write is committed before the method returns, so a mutation is
    durable as soon as the service call completes.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: JsonRecordModel) -> JsonRecord:
        """Map ORM model → domain entity, decoding the stored JSON text."""
        return JsonRecord(
            id=model.id,
            data=json.loads(model.data),
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    async def get_by_id(self, record_id: str) -> JsonRecord | None:
        result = await self._session.get(JsonRecordModel, record_id)
        return self._to_entity(result) if result else None

    async def list_summaries(self) -> list[JsonRecordSummary]:
        stmt = select(
            JsonRecordModel.id,
            JsonRecordModel.created_at,
            JsonRecordModel.updated_at,
        ).order_by(JsonRecordModel.updated_at.desc())
        result = await self._session.execute(stmt)
        return [
            JsonRecordSummary(
                id=row.id,
                created_at=_as_utc(row.created_at),
                updated_at=_as_utc(row.updated_at),
            )
            for row in result.all()
        ]

    async def create(self, record: JsonRecord) -> None:
        model = JsonRecordModel(
            id=record.id,
            data=json.dumps(record.data, allow_nan=False),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self._session.add(model)
        await self._session.commit()

    async def update(self, record: JsonRecord) -> None:
        model = await self._session.get(JsonRecordModel, record.id)
        if model is None:
            raise EntityNotFoundError("Record", record.id)
        model.data = json.dumps(record.data, allow_nan=False)
        model.updated_at = record.updated_at
        await self._session.commit()

    async def delete(self, record_id: str) -> bool:
        result = await self._session.execute(
            delete(JsonRecordModel).where(JsonRecordModel.id == record_id)
        )
        await self._session.commit()
        return result.rowcount > 0
